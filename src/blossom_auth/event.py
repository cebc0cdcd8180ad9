"""Authorization event (kind 24242) assembly and canonical serialization."""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from . import keys
from .errors import EncodingError
from .faults import Fault, forge_signature, select_kind
from .keys import KeyPair
from .tags import Action, DEFAULT_EXPIRATION_SECONDS, Tag, build_tags

logger = logging.getLogger(__name__)

EVENT_FIELDS = ("id", "pubkey", "created_at", "kind", "tags", "content", "sig")


def canonical_bytes(pubkey: str, created_at: int, kind: int, tags: Sequence[Sequence[str]], content: str) -> bytes:
    """Serialize the signable tuple ``[0, pubkey, created_at, kind, tags, content]``.

    Compact separators and no ASCII escaping, as NIP-01 requires: two
    implementations must produce identical bytes because the event id is
    the SHA-256 of this output.
    """
    try:
        data = json.dumps([0, pubkey, created_at, kind, tags, content],
                          separators=(',', ':'), ensure_ascii=False)
        return data.encode('utf-8')
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Cannot serialize event: {e}") from e


@dataclass(frozen=True)
class AuthorizationEvent:
    """A signed Blossom authorization event."""
    pubkey: str
    created_at: int
    kind: int
    tags: Tuple[Tuple[str, ...], ...] = ()
    content: str = ""
    id: str = ""
    sig: str = ""

    def __post_init__(self):
        # detach from the caller's lists so id and sig keep matching the content
        object.__setattr__(self, "tags", tuple(tuple(t) for t in self.tags))

    def serialize(self) -> bytes:
        return canonical_bytes(self.pubkey, self.created_at, self.kind, self.tags, self.content)

    def compute_id(self) -> str:
        """Recompute the identifier from the event's current fields."""
        return keys.digest(self.serialize())

    def tag_values(self, name: str) -> List[str]:
        """Return the first value of every tag called ``name``."""
        return [t[1] for t in self.tags if len(t) > 1 and t[0] == name]

    @property
    def expiration(self) -> Optional[int]:
        values = self.tag_values("expiration")
        return int(values[0]) if values else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "pubkey": self.pubkey,
            "created_at": self.created_at,
            "kind": self.kind,
            "tags": [list(t) for t in self.tags],
            "content": self.content,
            "sig": self.sig,
        }

    def to_json(self, compact: bool = True) -> str:
        try:
            if compact:
                return json.dumps(self.to_dict(), separators=(',', ':'), ensure_ascii=False)
            return json.dumps(self.to_dict(), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Cannot serialize event: {e}") from e

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthorizationEvent":
        """Build an event from its JSON object, checking field presence and types only."""
        if not isinstance(data, dict):
            raise EncodingError("Event must be a JSON object")
        missing = [f for f in EVENT_FIELDS if f not in data]
        if missing:
            raise EncodingError(f"Event is missing fields: {', '.join(missing)}")
        tags = data["tags"]
        if not isinstance(tags, list) or not all(
                isinstance(t, list) and all(isinstance(v, str) for v in t) for t in tags):
            raise EncodingError("Event tags must be a list of string lists")
        for name, typ in (("id", str), ("pubkey", str), ("content", str), ("sig", str),
                          ("created_at", int), ("kind", int)):
            if not isinstance(data[name], typ) or isinstance(data[name], bool):
                raise EncodingError(f"Event field {name!r} must be {typ.__name__}")
        return cls(pubkey=data["pubkey"], created_at=data["created_at"], kind=data["kind"],
                   tags=tags, content=data["content"], id=data["id"], sig=data["sig"])


def assemble_event(key_pair: KeyPair, tags: List[Tag], content: str, *,
                   faults: Fault = Fault.NONE, created_at: Optional[int] = None) -> AuthorizationEvent:
    """Bind identity, time, kind, tags and content into a signed event.

    :param key_pair: Signing key of the actor.
    :param tags: Claims from :func:`blossom_auth.tags.build_tags`.
    :param content: Human readable description, part of the signed payload.
    :param faults: ``INVALID_KIND`` changes the kind before signing;
        ``FORGED_SIGNATURE`` overwrites ``sig`` afterwards.
    :param created_at: Unix seconds; defaults to now.
    :return: The signed (or deliberately mis-signed) event.
    """
    if created_at is None:
        created_at = int(time.time())
    pubkey = key_pair.public_hex
    kind = select_kind(faults)

    event_id = keys.digest(canonical_bytes(pubkey, created_at, kind, tags, content))
    event = AuthorizationEvent(pubkey=pubkey, created_at=created_at, kind=kind, tags=tags,
                               content=content, id=event_id, sig=keys.sign(key_pair, event_id))
    logger.debug("Signed event %s (kind %d) for %s", event_id, kind, pubkey)

    if Fault.FORGED_SIGNATURE in faults:
        event = forge_signature(event)
    return event


def build_authorization(action: Action, key_pair: KeyPair, content: Optional[str] = None, *,
                        file_path: Optional[str] = None, file_hash: Optional[str] = None,
                        server_url: Optional[str] = None, faults: Fault = Fault.NONE,
                        now: Optional[int] = None) -> AuthorizationEvent:
    """Run the whole pipeline: claims, assembly, fault injection.

    The expiration claim and ``created_at`` share one clock reading, so the
    event always expires :data:`DEFAULT_EXPIRATION_SECONDS` after creation.
    """
    action = Action(action)
    created_at = int(time.time()) if now is None else int(now)
    tags = build_tags(action, created_at, file_path=file_path, file_hash=file_hash,
                      server_url=server_url, faults=faults)
    if content is None:
        content = f"{action.value.capitalize()} Blob"
    event = assemble_event(key_pair, tags, content, faults=faults, created_at=created_at)
    logger.info("Built %s authorization %s, expires at %d", action.value, event.id,
                created_at + DEFAULT_EXPIRATION_SECONDS)
    return event
