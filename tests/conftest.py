"""Test configuration and shared fixtures."""
import hashlib

import pytest

from blossom_auth.keys import parse_private_key

# secret scalar 1: its public key is the x coordinate of the secp256k1 generator
TEST_PRIVATE_KEY = '00' * 31 + '01'
TEST_PUBLIC_KEY = '79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'

NOW = 1_700_000_000

BLOB = b'blossom test blob\n' * 4096
BLOB_SHA256 = hashlib.sha256(BLOB).hexdigest()


@pytest.fixture
def key_pair():
    return parse_private_key(TEST_PRIVATE_KEY)


@pytest.fixture
def blob_file(tmp_path):
    """Write a multi-chunk test blob and return its path."""
    path = tmp_path / 'blob.bin'
    path.write_bytes(BLOB)
    return str(path)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "faults: token deliberately invalid, checks a server would reject it"
    )
