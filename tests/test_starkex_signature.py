"""Tests for the 64-byte STARK signature codec."""

from __future__ import annotations

import pytest

from curvekeys import Curve, InvalidSignature, PrivateKey, StarkSignature
from curvekeys.curves import stark

SECRET = bytes.fromhex("058ab7989d625b1a690400dcbe6e070627adedceff7bd196e58d4791026a8afe")
DIGEST = bytes.fromhex("06fea80189363a786037ed3e7ba546dad0ef7de49fccae0e31eb658b7dd4ea76")
# leading zero byte in each half keeps both below the field prime
ENCODED = b"\x00" + bytes(range(1, 32)) + b"\x00" + bytes(range(33, 64))


def test_serialize_is_fixed_width() -> None:
    sig = StarkSignature(r=1, s=2)
    encoded = sig.to_bytes()
    assert len(encoded) == 64
    assert len(sig) == 64
    assert encoded == bytes(31) + b"\x01" + bytes(31) + b"\x02"


def test_r_and_s_accessors_are_halves() -> None:
    sig = StarkSignature(r=0xABCDEF, s=stark.FIELD_PRIME - 1)
    encoded = sig.to_bytes()
    assert sig.r_bytes() == encoded[:32]
    assert sig.s_bytes() == encoded[32:]


def test_parse_round_trip() -> None:
    encoded = ENCODED
    sig = StarkSignature.from_bytes(encoded)
    assert sig.r == int.from_bytes(encoded[:32], "big")
    assert sig.s == int.from_bytes(encoded[32:], "big")
    assert sig.to_bytes() == encoded
    assert StarkSignature.from_bytes(sig.to_bytes()) == sig


def test_parse_accepts_memoryview() -> None:
    encoded = ENCODED
    assert StarkSignature.from_bytes(memoryview(encoded)).to_bytes() == encoded


@pytest.mark.parametrize("length", [0, 32, 63, 65, 128])
def test_parse_rejects_wrong_length(length: int) -> None:
    with pytest.raises(InvalidSignature):
        StarkSignature.from_bytes(bytes(length))


def test_parse_rejects_out_of_field_r() -> None:
    bad = stark.FIELD_PRIME.to_bytes(32, "big") + bytes(31) + b"\x01"
    with pytest.raises(InvalidSignature):
        StarkSignature.from_bytes(bad)


def test_parse_rejects_out_of_field_s() -> None:
    bad = bytes(31) + b"\x01" + b"\xff" * 32
    with pytest.raises(InvalidSignature):
        StarkSignature.from_bytes(bad)


def test_parse_does_not_verify() -> None:
    """Zero components are valid field elements; parse and verify are independent."""
    sig = StarkSignature.from_bytes(bytes(64))
    assert (sig.r, sig.s) == (0, 0)


def test_signed_bytes_round_trip() -> None:
    key = PrivateKey(SECRET)
    encoded = key.sign(DIGEST, Curve.STARKEX)
    sig = StarkSignature.from_bytes(encoded)
    assert sig.to_bytes() == encoded
    assert sig.r_bytes() == encoded[:32]
    assert sig.s_bytes() == encoded[32:]
