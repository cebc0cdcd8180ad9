"""Key pairs and signing primitives for authorization events.

Keys and their NIP-19 encodings come from pynostr; BIP-340 Schnorr signing
and verification go through coincurve, the secp256k1 binding pynostr uses.
"""

import hashlib
import logging
from dataclasses import dataclass
from typing import Optional

import coincurve
from pynostr.key import PrivateKey

from .errors import InvalidKeyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPair:
    """An actor's signing key and the public identity derived from it."""
    private_key: PrivateKey

    @property
    def private_hex(self) -> str:
        return self.private_key.hex()

    @property
    def nsec(self) -> str:
        return self.private_key.bech32()

    @property
    def public_hex(self) -> str:
        return derive_identity(self.private_key)

    @property
    def npub(self) -> str:
        return self.private_key.public_key.bech32()


def generate_key_pair() -> KeyPair:
    return KeyPair(PrivateKey())


def parse_private_key(text: str) -> KeyPair:
    """Parse a secret key given as 64-char hex or NIP-19 ``nsec1...``.

    :raises InvalidKeyError: If the text is not a valid secp256k1 secret key.
    """
    text = (text or "").strip()
    if text.startswith("nsec1"):
        try:
            return KeyPair(PrivateKey.from_nsec(text))
        except Exception as e:
            raise InvalidKeyError(f"Invalid nsec format: {e}") from e

    if len(text) != 64:
        raise InvalidKeyError("Unsupported private key format. Expected nsec or 64-char hex string.")
    try:
        raw = bytes.fromhex(text)
    except ValueError as e:
        raise InvalidKeyError("Private key is not valid hex") from e
    try:
        # rejects 0 and values >= the curve order
        coincurve.PrivateKey(raw)
    except ValueError as e:
        raise InvalidKeyError(f"Private key is out of range: {e}") from e
    return KeyPair(PrivateKey(raw))


def load_key_pair(private_key: Optional[str] = None) -> KeyPair:
    """Parse ``private_key`` when given, otherwise generate a fresh key pair."""
    if private_key:
        return parse_private_key(private_key)
    logger.info("No private key supplied, generating a new key pair")
    return generate_key_pair()


def derive_identity(private_key: PrivateKey) -> str:
    """Return the x-only public key of ``private_key`` as lowercase hex."""
    return private_key.public_key.hex()


def digest(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def sign(key_pair: KeyPair, identifier: str) -> str:
    """Schnorr-sign a 32-byte event identifier (hex) and return the signature hex."""
    sk = coincurve.PrivateKey(bytes.fromhex(key_pair.private_hex))
    return sk.sign_schnorr(bytes.fromhex(identifier)).hex()


def verify(public_hex: str, identifier: str, signature: str) -> bool:
    """Check a Schnorr signature over ``identifier``. Malformed input is simply invalid."""
    try:
        pk = coincurve.PublicKeyXOnly(bytes.fromhex(public_hex))
        return pk.verify(bytes.fromhex(signature), bytes.fromhex(identifier))
    except ValueError:
        return False
