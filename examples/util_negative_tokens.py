"""Utility: Tokens a server must reject

Builds one token per fault mode. Send each to a Blossom server and check it
refuses the request instead of accepting it.
"""
from blossom_auth import Action, Fault, build_authorization, encode_token, load_key_pair
from blossom_auth import keys

SHA256 = 'b1674191a88ec5cdd733e4240a81803105dc412d6c6708d53ab94fc248f4f553'

key_pair = load_key_pair()

for faults in (Fault.NONE, Fault.FORGED_HASH, Fault.INVALID_KIND, Fault.FORGED_SIGNATURE):
    event = build_authorization(Action.DELETE, key_pair, file_hash=SHA256, faults=faults)
    print(f"=== {faults.name} ===")
    print(f"  x: {event.tag_values('x')[0]}")
    print(f"  kind: {event.kind}")
    print(f"  signature valid: {keys.verify(event.pubkey, event.id, event.sig)}")
    print(f"  {encode_token(event)}")
