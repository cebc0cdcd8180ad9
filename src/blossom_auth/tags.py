"""Claims (tags) attached to Blossom authorization events, per action."""

import enum
import logging
from typing import List, Optional

from .errors import UsageError
from .faults import Fault
from .utils.file_hash import file_size, random_sha256, sha256_file

logger = logging.getLogger(__name__)

DEFAULT_EXPIRATION_SECONDS = 3600

Tag = List[str]


class Action(str, enum.Enum):
    UPLOAD = "upload"
    GET = "get"
    LIST = "list"
    DELETE = "delete"
    MIRROR = "mirror"


def action_tag(action: Action) -> Tag:
    return ["t", Action(action).value]


def expiration_tag(created_at: int) -> Tag:
    return ["expiration", str(int(created_at) + DEFAULT_EXPIRATION_SECONDS)]


def hash_tag(sha256: str) -> Tag:
    return ["x", sha256]


def server_tag(server_url: str) -> Tag:
    return ["server", server_url]


def size_tag(size: int) -> Tag:
    return ["size", str(size)]


def _forged_hash() -> str:
    logger.warning("Fault injection: replacing blob hash with a random one")
    return random_sha256()


def _blob_hash(sha256: str, faults: Fault) -> str:
    return _forged_hash() if Fault.FORGED_HASH in faults else sha256


def _hash_or_server_tag(action: Action, file_hash: Optional[str], server_url: Optional[str],
                        faults: Fault) -> Tag:
    if file_hash:
        return hash_tag(_blob_hash(file_hash, faults))
    if server_url:
        # passed through unvalidated
        return server_tag(server_url)
    raise UsageError(f"{action.value}: file hash or server URL is required but was not provided")


def build_tags(action: Action, created_at: int, *, file_path: Optional[str] = None,
               file_hash: Optional[str] = None, server_url: Optional[str] = None,
               faults: Fault = Fault.NONE) -> List[Tag]:
    """Build the ordered claim list for ``action``.

    :param action: One of upload, get, list, delete, mirror.
    :param created_at: Event creation time; the expiration claim is one hour later.
    :param file_path: Blob to hash (upload).
    :param file_hash: Known blob hash (get, delete, mirror).
    :param server_url: Server reference used when no hash is given (get, mirror).
    :param faults: Active fault modes; only ``FORGED_HASH`` matters here.
    :return: List of tags, action marker first.
    :raises UsageError: If a required input for the action is missing.
    :raises FileHashError: If the upload file cannot be read. The size claim
        needs the file even when ``FORGED_HASH`` replaces its digest.
    """
    action = Action(action)
    tags = [action_tag(action), expiration_tag(created_at)]

    if action is Action.UPLOAD:
        if not file_path:
            raise UsageError("upload: file path is required")
        size = file_size(file_path)
        if Fault.FORGED_HASH in faults:
            sha256 = _forged_hash()
        else:
            sha256 = sha256_file(file_path)
        tags.append(hash_tag(sha256))
        tags.append(size_tag(size))
    elif action in (Action.GET, Action.MIRROR):
        tags.append(_hash_or_server_tag(action, file_hash, server_url, faults))
    elif action is Action.DELETE:
        if not file_hash:
            raise UsageError("delete: file hash is required")
        tags.append(hash_tag(_blob_hash(file_hash, faults)))

    logger.debug("Built %d tags for %s", len(tags), action.value)
    return tags
