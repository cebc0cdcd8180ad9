"""Fault injection for negative testing of Blossom servers.

Each mode produces a token a conformant server must reject:

- ``FORGED_HASH``: the ``x`` claim holds random hex instead of the blob digest.
  Applied while the tags are built, so id and signature stay consistent.
- ``INVALID_KIND``: the event uses kind 20202 instead of 24242.
  Applied at assembly, so id and signature stay consistent.
- ``FORGED_SIGNATURE``: ``sig`` is overwritten after signing with a fixed,
  well-formed value that never verifies. The id is not recomputed.
"""

import dataclasses
import enum
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .event import AuthorizationEvent

logger = logging.getLogger(__name__)

AUTH_KIND = 24242  # BUD-01 authorization event
INVALID_AUTH_KIND = 20202

# x = 0 is not on secp256k1, so this never verifies against any key
FORGED_SIGNATURE = "00" * 64


class Fault(enum.Flag):
    NONE = 0
    FORGED_HASH = enum.auto()
    INVALID_KIND = enum.auto()
    FORGED_SIGNATURE = enum.auto()

    @classmethod
    def from_flags(cls, forged_hash: bool = False, invalid_kind: bool = False,
                   forged_signature: bool = False) -> "Fault":
        faults = cls.NONE
        if forged_hash:
            faults |= cls.FORGED_HASH
        if invalid_kind:
            faults |= cls.INVALID_KIND
        if forged_signature:
            faults |= cls.FORGED_SIGNATURE
        return faults


def select_kind(faults: Fault) -> int:
    if Fault.INVALID_KIND in faults:
        logger.warning("Fault injection: using invalid kind %d", INVALID_AUTH_KIND)
        return INVALID_AUTH_KIND
    return AUTH_KIND


def forge_signature(event: "AuthorizationEvent") -> "AuthorizationEvent":
    """Return a copy of ``event`` carrying the forged signature; ``id`` is left as is."""
    logger.warning("Fault injection: replacing signature of event %s", event.id)
    return dataclasses.replace(event, sig=FORGED_SIGNATURE)
