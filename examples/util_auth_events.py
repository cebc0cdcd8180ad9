"""Utility: Authentication event details

Demonstrates building an auth event and reading back what the token carries.
"""
from datetime import datetime

from blossom_auth import Action, build_authorization, decode_token, encode_token, load_key_pair
from blossom_auth import keys

PRIVATE_KEY = None  # hex or nsec; None generates a throwaway key
SHA256 = 'b1674191a88ec5cdd733e4240a81803105dc412d6c6708d53ab94fc248f4f553'

key_pair = load_key_pair(PRIVATE_KEY)
event = build_authorization(Action.GET, key_pair, "Get Blob", file_hash=SHA256)
token = encode_token(event)

print("Event details:")
print(f"  Kind: {event.kind}")
print(f"  Public key: {event.pubkey}")
print(f"  Timestamp: {event.created_at}")
print(f"  ID: {event.id}")
print(f"  Signature: {event.sig[:16]}... (truncated)")

print("\nTags (authorization scope):")
for tag in event.tags:
    print(f"  {tag[0]}: {tag[1]}")

print(f"\nExpiration: {datetime.fromtimestamp(event.expiration)}")

print("\n=== Auth in HTTP Header ===")
print(f"Authorization: {token[:40]}...")
print(f"Header is {len(token)} bytes")

print("\n=== Auth Event Verification ===")
decoded = decode_token(token)
print(f"ID matches content: {decoded.compute_id() == decoded.id}")
print(f"Signature valid: {keys.verify(decoded.pubkey, decoded.id, decoded.sig)}")
