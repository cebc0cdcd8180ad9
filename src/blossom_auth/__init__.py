"""Signed authorization tokens for Blossom servers, with fault injection."""

from .auth_token import TOKEN_SCHEME, authorization_header, decode_token, encode_token
from .errors import BlossomAuthError, EncodingError, FileHashError, InvalidKeyError, UsageError
from .event import AuthorizationEvent, assemble_event, build_authorization, canonical_bytes
from .faults import AUTH_KIND, FORGED_SIGNATURE, INVALID_AUTH_KIND, Fault
from .keys import KeyPair, generate_key_pair, load_key_pair, parse_private_key
from .tags import DEFAULT_EXPIRATION_SECONDS, Action, build_tags

__all__ = [
    "Action",
    "AUTH_KIND",
    "AuthorizationEvent",
    "BlossomAuthError",
    "DEFAULT_EXPIRATION_SECONDS",
    "EncodingError",
    "Fault",
    "FileHashError",
    "FORGED_SIGNATURE",
    "INVALID_AUTH_KIND",
    "InvalidKeyError",
    "KeyPair",
    "TOKEN_SCHEME",
    "UsageError",
    "assemble_event",
    "authorization_header",
    "build_authorization",
    "build_tags",
    "canonical_bytes",
    "decode_token",
    "encode_token",
    "generate_key_pair",
    "load_key_pair",
    "parse_private_key",
]
