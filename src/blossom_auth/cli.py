"""blossom-auth: print a signed Blossom authorization token.

Commands:
    blossom-auth upload -f <path>             authorize uploading a file
    blossom-auth get (-x <sha256> | -s <url>) authorize fetching a blob
    blossom-auth list                         authorize listing blobs
    blossom-auth delete -x <sha256>           authorize deleting a blob
    blossom-auth mirror (-x <sha256> | -s <url>)

Fault flags (--fake-file-hash, --invalid-kind, --forge-signature) produce
tokens a server is expected to reject.
"""

import logging
from typing import Optional

import click

from .auth_token import encode_token
from .errors import BlossomAuthError
from .event import build_authorization
from .faults import Fault
from .keys import load_key_pair
from .tags import Action

logger = logging.getLogger(__name__)

description_option = click.option("-d", "--description", default=None,
                                  help="Description (put into content field in event).")
fake_hash_option = click.option("--fake-file-hash", is_flag=True,
                                help="Put a random sha256 hash in the x tag of the event.")
invalid_kind_option = click.option("--invalid-kind", is_flag=True,
                                   help="Set an incorrect kind in the authorization event.")


@click.group()
@click.option("-p", "--private-key", envvar="BLOSSOM_PRIVATE_KEY", default=None,
              help="Nostr private key (hex or nsec). A new key pair is generated if omitted.")
@click.option("--forge-signature", is_flag=True,
              help="Replace the event signature with an invalid one.")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
@click.pass_context
def cli(ctx: click.Context, private_key: Optional[str], forge_signature: bool, verbose: bool) -> None:
    """Generate Blossom authorization tokens (kind 24242 Nostr events)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"private_key": private_key, "forge_signature": forge_signature}


def _run(ctx: click.Context, action: Action, description: Optional[str], *,
         fake_file_hash: bool = False, invalid_kind: bool = False,
         file_path: Optional[str] = None, file_hash: Optional[str] = None,
         server_url: Optional[str] = None) -> None:
    faults = Fault.from_flags(forged_hash=fake_file_hash, invalid_kind=invalid_kind,
                              forged_signature=ctx.obj["forge_signature"])
    try:
        if not ctx.obj["private_key"]:
            click.echo("Generating new keypair")
        key_pair = load_key_pair(ctx.obj["private_key"])
        click.echo("=== Private key ===")
        click.echo(key_pair.nsec)
        click.echo(key_pair.private_hex)
        click.echo("=== Public key ===")
        click.echo(key_pair.npub)
        click.echo(key_pair.public_hex)

        event = build_authorization(action, key_pair, description, file_path=file_path,
                                    file_hash=file_hash, server_url=server_url, faults=faults)
        token = encode_token(event)
    except BlossomAuthError as e:
        logger.debug("Aborting %s", action.value, exc_info=True)
        raise click.ClickException(str(e)) from e

    for size in event.tag_values("size"):
        click.echo(size)
    click.echo()
    click.echo("=== Event JSON: ===")
    click.echo(event.to_json(compact=False))
    click.echo()
    click.echo(token)


@cli.command()
@description_option
@click.option("-f", "--file-path", required=True, help="Path to file that is to be uploaded.")
@fake_hash_option
@invalid_kind_option
@click.pass_context
def upload(ctx, description, file_path, fake_file_hash, invalid_kind):
    """Authorize uploading a file."""
    _run(ctx, Action.UPLOAD, description, file_path=file_path,
         fake_file_hash=fake_file_hash, invalid_kind=invalid_kind)


@cli.command()
@description_option
@click.option("-x", "--file-hash", default=None, help="SHA256 hash of the file that should be fetched.")
@click.option("-s", "--server-url", default=None, help="Server the authorization is scoped to.")
@fake_hash_option
@invalid_kind_option
@click.pass_context
def get(ctx, description, file_hash, server_url, fake_file_hash, invalid_kind):
    """Authorize fetching a blob by hash, or from a server."""
    _run(ctx, Action.GET, description, file_hash=file_hash, server_url=server_url,
         fake_file_hash=fake_file_hash, invalid_kind=invalid_kind)


@cli.command(name="list")
@description_option
@invalid_kind_option
@click.pass_context
def list_(ctx, description, invalid_kind):
    """Authorize listing blobs."""
    _run(ctx, Action.LIST, description, invalid_kind=invalid_kind)


@cli.command()
@description_option
@click.option("-x", "--file-hash", required=True, help="SHA256 hash of the file that will be deleted.")
@fake_hash_option
@invalid_kind_option
@click.pass_context
def delete(ctx, description, file_hash, fake_file_hash, invalid_kind):
    """Authorize deleting a blob."""
    _run(ctx, Action.DELETE, description, file_hash=file_hash,
         fake_file_hash=fake_file_hash, invalid_kind=invalid_kind)


@cli.command()
@description_option
@click.option("-x", "--file-hash", default=None, help="SHA256 hash of the blob to mirror.")
@click.option("-s", "--server-url", default=None, help="Server the authorization is scoped to.")
@fake_hash_option
@invalid_kind_option
@click.pass_context
def mirror(ctx, description, file_hash, server_url, fake_file_hash, invalid_kind):
    """Authorize mirroring a blob from another server."""
    _run(ctx, Action.MIRROR, description, file_hash=file_hash, server_url=server_url,
         fake_file_hash=fake_file_hash, invalid_kind=invalid_kind)


def main() -> None:
    cli(prog_name="blossom-auth")
