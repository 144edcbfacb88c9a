#!/usr/bin/env python3
"""Example: StarkEx signing with the curve-agnostic PrivateKey."""

from curvekeys import Curve, PrivateKey, PublicKeyType, StarkSignature

secret = bytearray.fromhex("058ab7989d625b1a690400dcbe6e070627adedceff7bd196e58d4791026a8afe")
digest = bytes.fromhex("06fea80189363a786037ed3e7ba546dad0ef7de49fccae0e31eb658b7dd4ea76")

with PrivateKey(secret) as key:
    stark_key = key.public_key(PublicKeyType.STARKEX)
    signature = key.sign(digest, Curve.STARKEX)

print("Stark key:", stark_key.to_bytes().hex())
parsed = StarkSignature.from_bytes(signature)
print("r:", parsed.r_bytes().hex())
print("s:", parsed.s_bytes().hex())
print("Verify:", stark_key.verify(signature, digest))
print("Secret wiped:", not any(secret))
