"""Tests for per-action claim construction."""

import re

import pytest

from blossom_auth.errors import FileHashError, UsageError
from blossom_auth.faults import Fault
from blossom_auth.tags import Action, build_tags

from conftest import BLOB, BLOB_SHA256, NOW

HASH = 'a' * 64
SERVER = 'https://cdn.example.com'


def kinds(tags):
    return [t[0] for t in tags]


def test_upload_tags(blob_file):
    tags = build_tags(Action.UPLOAD, NOW, file_path=blob_file)

    assert tags == [
        ['t', 'upload'],
        ['expiration', str(NOW + 3600)],
        ['x', BLOB_SHA256],
        ['size', str(len(BLOB))],
    ]


def test_upload_requires_readable_file(tmp_path):
    with pytest.raises(UsageError):
        build_tags(Action.UPLOAD, NOW)
    with pytest.raises(FileHashError):
        build_tags(Action.UPLOAD, NOW, file_path=str(tmp_path / 'missing.bin'))


def test_list_has_only_action_and_expiration():
    assert build_tags('list', NOW) == [['t', 'list'], ['expiration', str(NOW + 3600)]]


def test_delete_tags():
    assert build_tags(Action.DELETE, NOW, file_hash=HASH) == [
        ['t', 'delete'], ['expiration', str(NOW + 3600)], ['x', HASH],
    ]


def test_delete_requires_hash():
    with pytest.raises(UsageError):
        build_tags(Action.DELETE, NOW)


@pytest.mark.parametrize('action', [Action.GET, Action.MIRROR])
def test_hash_or_server(action):
    assert build_tags(action, NOW, file_hash=HASH)[2] == ['x', HASH]
    assert build_tags(action, NOW, server_url=SERVER)[2] == ['server', SERVER]
    # hash wins when both are given
    both = build_tags(action, NOW, file_hash=HASH, server_url=SERVER)
    assert kinds(both) == ['t', 'expiration', 'x']


@pytest.mark.parametrize('action', [Action.GET, Action.MIRROR])
def test_hash_or_server_required(action):
    with pytest.raises(UsageError, match='file hash or server URL is required'):
        build_tags(action, NOW)


def test_server_url_is_not_validated():
    tags = build_tags(Action.GET, NOW, server_url='not a url')

    assert tags[2] == ['server', 'not a url']


@pytest.mark.parametrize('action,kwargs', [
    (Action.UPLOAD, {}),
    (Action.GET, {'file_hash': HASH}),
    (Action.LIST, {}),
    (Action.DELETE, {'file_hash': HASH}),
    (Action.MIRROR, {'server_url': SERVER}),
])
def test_no_duplicate_claims(action, kwargs, blob_file):
    if action is Action.UPLOAD:
        kwargs = {'file_path': blob_file}
    tags = build_tags(action, NOW, **kwargs)

    assert len(set(kinds(tags))) == len(tags)
    assert tags[0] == ['t', action.value]


@pytest.mark.faults
def test_forged_hash_on_upload(blob_file):
    tags = build_tags(Action.UPLOAD, NOW, file_path=blob_file, faults=Fault.FORGED_HASH)
    forged = tags[2][1]

    assert re.fullmatch(r'[0-9a-f]{64}', forged)
    assert forged != BLOB_SHA256
    assert tags[3] == ['size', str(len(BLOB))]


@pytest.mark.faults
@pytest.mark.parametrize('action', [Action.GET, Action.DELETE, Action.MIRROR])
def test_forged_hash_replaces_given_hash(action):
    tags = build_tags(action, NOW, file_hash=HASH, faults=Fault.FORGED_HASH)

    assert tags[2][0] == 'x'
    assert tags[2][1] != HASH
    assert re.fullmatch(r'[0-9a-f]{64}', tags[2][1])


@pytest.mark.faults
def test_forged_hash_leaves_server_claim():
    tags = build_tags(Action.GET, NOW, server_url=SERVER, faults=Fault.FORGED_HASH)

    assert tags[2] == ['server', SERVER]


def test_unknown_action():
    with pytest.raises(ValueError):
        build_tags('media', NOW)


@pytest.mark.faults
def test_forged_hash_upload_still_needs_the_file(tmp_path):
    with pytest.raises(FileHashError):
        build_tags(Action.UPLOAD, NOW, file_path=str(tmp_path / 'missing.bin'),
                   faults=Fault.FORGED_HASH)
