"""Tests for the bearer token format."""

import base64
import json

import pytest

from blossom_auth import keys
from blossom_auth.auth_token import authorization_header, decode_token, encode_token
from blossom_auth.errors import EncodingError
from blossom_auth.event import EVENT_FIELDS, build_authorization
from blossom_auth.faults import Fault

from conftest import NOW

HASH = 'c' * 64


def test_token_is_scheme_and_base64_json(key_pair):
    event = build_authorization('get', key_pair, file_hash=HASH, now=NOW)
    token = encode_token(event)
    scheme, payload = token.split(' ')

    assert scheme == 'Nostr'
    assert json.loads(base64.b64decode(payload, validate=True)) == event.to_dict()


def test_decoded_token_verifies(key_pair, blob_file):
    event = build_authorization('upload', key_pair, 'résumé upload', file_path=blob_file)
    decoded = decode_token(encode_token(event))

    assert decoded.compute_id() == decoded.id
    assert keys.verify(decoded.pubkey, decoded.id, decoded.sig)


@pytest.mark.faults
@pytest.mark.parametrize('faults', [
    Fault.FORGED_HASH,
    Fault.INVALID_KIND,
    Fault.FORGED_SIGNATURE,
    Fault.FORGED_HASH | Fault.INVALID_KIND | Fault.FORGED_SIGNATURE,
])
def test_faulted_tokens_keep_their_shape(key_pair, faults):
    token = encode_token(build_authorization('delete', key_pair, file_hash=HASH, faults=faults))
    data = json.loads(base64.b64decode(token.split(' ', 1)[1]))

    assert set(data) == set(EVENT_FIELDS)
    assert decode_token(token).to_dict() == data


@pytest.mark.parametrize('token', [
    'Bearer abc',
    'Nostr',
    'Nostr !!!not-base64!!!',
    'Nostr ' + base64.b64encode(b'not json').decode(),
    'Nostr ' + base64.b64encode(b'[1, 2]').decode(),
])
def test_decode_rejects_malformed_tokens(token):
    with pytest.raises(EncodingError):
        decode_token(token)


def test_authorization_header(key_pair):
    event = build_authorization('list', key_pair, now=NOW)

    assert authorization_header(event) == {'Authorization': encode_token(event)}
