#!/usr/bin/env python3
"""Example: secp256k1 (Ethereum/Bitcoin) signing and public key recovery."""

import hashlib

from curvekeys import Curve, PrivateKey, PublicKeyType, recover_pubkey

digest = hashlib.sha256(b"Hello, Ethereum").digest()

with PrivateKey(bytearray(31) + bytearray([1])) as key:
    compressed = key.public_key(PublicKeyType.SECP256K1)
    extended = key.public_key(PublicKeyType.SECP256K1_EXTENDED)
    signature = key.sign(digest, Curve.SECP256K1)

print("Public key (33 bytes compressed):", compressed.to_bytes().hex())
print("Public key (65 bytes uncompressed):", extended.to_bytes().hex()[:32] + "...")
print("Signature (r || s || v):", signature.hex()[:32] + "...")

r = int.from_bytes(signature[:32], "big")
s = int.from_bytes(signature[32:64], "big")
recovered = recover_pubkey(digest, r, s, signature[64])
print("Recovered matches:", recovered == extended.to_bytes())
print("Verify:", compressed.verify(signature, digest))
