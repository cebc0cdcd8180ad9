"""Bearer token encoding: ``Nostr <base64 of event JSON>``."""

import base64
import binascii
import json
from typing import Dict

from .errors import EncodingError
from .event import AuthorizationEvent

TOKEN_SCHEME = "Nostr"


def encode_token(event: AuthorizationEvent) -> str:
    """Encode ``event`` as an Authorization header value.

    The payload is the compact event JSON, UTF-8, standard base64 with padding.
    """
    try:
        payload = base64.b64encode(event.to_json().encode('utf-8')).decode('ascii')
    except UnicodeError as e:
        raise EncodingError(f"Cannot encode event: {e}") from e
    return f"{TOKEN_SCHEME} {payload}"


def decode_token(token: str) -> AuthorizationEvent:
    """Parse a token produced by :func:`encode_token` back into an event.

    Only the shape is checked; id and signature are not verified.
    """
    scheme, _, payload = token.strip().partition(' ')
    if scheme != TOKEN_SCHEME or not payload:
        raise EncodingError(f"Token must look like '{TOKEN_SCHEME} <base64>'")
    try:
        data = json.loads(base64.b64decode(payload, validate=True).decode('utf-8'))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise EncodingError(f"Invalid token payload: {e}") from e
    return AuthorizationEvent.from_dict(data)


def authorization_header(event: AuthorizationEvent) -> Dict[str, str]:
    return {"Authorization": encode_token(event)}
