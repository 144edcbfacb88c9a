"""Minimal pytest tests for the curve functions."""

import hashlib

import pytest

from curvekeys import (
    private_to_stark_key,
    privkey_to_pubkey,
    recover_pubkey,
    sign_recoverable,
    stark_sign,
    stark_verify,
)
from curvekeys.curves import secp256k1, stark

PRIV = bytes(31) + bytes([1])
MSG_HASH = hashlib.sha256(b"message to sign").digest()

STARK_PRIV = 0x03C1E9550E66958296D11B60F8E8E7A7AD990D07FA65D5F7652C4A6C87D4E3CC
STARK_MSG = 0x0397E76D1667C4454BFB83514E120583AF836F8E32A516765497823EB85E7A6C


def test_privkey_to_pubkey() -> None:
    pub = privkey_to_pubkey(PRIV)
    assert len(pub) == 65
    assert pub[0] == 0x04


def test_privkey_to_pubkey_rejects_out_of_range() -> None:
    with pytest.raises(ValueError):
        privkey_to_pubkey(bytes(32))
    with pytest.raises(ValueError):
        privkey_to_pubkey(secp256k1.ORDER.to_bytes(32, "big"))
    with pytest.raises(ValueError):
        privkey_to_pubkey(bytes(31))


def test_sign_recoverable() -> None:
    r, s, v = sign_recoverable(PRIV, MSG_HASH)
    assert isinstance(r, int) and isinstance(s, int) and isinstance(v, int)
    assert v in (27, 28)
    assert s <= secp256k1.ORDER // 2


def test_sign_recoverable_deterministic() -> None:
    assert sign_recoverable(PRIV, MSG_HASH) == sign_recoverable(PRIV, MSG_HASH)


def test_recover_pubkey_matches_signer() -> None:
    priv = hashlib.sha256(b"some secret").digest()
    r, s, v = sign_recoverable(priv, MSG_HASH)
    assert recover_pubkey(MSG_HASH, r, s, v - 27) == privkey_to_pubkey(priv)
    assert recover_pubkey(MSG_HASH, r, s, v - 27, compressed=True) == privkey_to_pubkey(
        priv, compressed=True
    )


def test_ecdsa_verify() -> None:
    pub = privkey_to_pubkey(PRIV, compressed=True)
    r, s, _ = sign_recoverable(PRIV, MSG_HASH)
    assert secp256k1.ecdsa_verify(MSG_HASH, r, s, pub) is True
    assert secp256k1.ecdsa_verify(MSG_HASH, r, secp256k1.ORDER - s, pub) is True
    assert secp256k1.ecdsa_verify(bytes(32), r, s, pub) is False
    assert secp256k1.ecdsa_verify(MSG_HASH, r, s, privkey_to_pubkey(bytes(31) + b"\x02")) is False
    assert secp256k1.ecdsa_verify(MSG_HASH, 0, s, pub) is False
    assert secp256k1.ecdsa_verify(MSG_HASH, r, s, b"\x02" + bytes(32)) is False


def test_decode_pubkey_round_trip() -> None:
    uncompressed = privkey_to_pubkey(PRIV)
    compressed = privkey_to_pubkey(PRIV, compressed=True)
    assert secp256k1.decode_pubkey(uncompressed) == secp256k1.decode_pubkey(compressed)
    with pytest.raises(ValueError):
        secp256k1.decode_pubkey(uncompressed[:-1] + bytes([uncompressed[-1] ^ 1]))


def test_stark_key_on_curve() -> None:
    x = private_to_stark_key(STARK_PRIV)
    assert 0 < x < stark.FIELD_PRIME
    y = stark.get_y_coordinate(x)
    assert y is not None
    assert stark.is_on_curve(x, y)


def test_stark_sign_verify() -> None:
    r, s = stark_sign(STARK_PRIV, STARK_MSG)
    assert 1 <= r < stark.ELEMENT_UPPER_BOUND
    assert 1 <= s < stark.ELEMENT_UPPER_BOUND
    stark_key = private_to_stark_key(STARK_PRIV)
    assert stark_verify(stark_key, STARK_MSG, r, s) is True


def test_stark_sign_deterministic() -> None:
    assert stark_sign(STARK_PRIV, STARK_MSG) == stark_sign(STARK_PRIV, STARK_MSG)
    assert stark_sign(STARK_PRIV, STARK_MSG) != stark_sign(STARK_PRIV, STARK_MSG + 1)


def test_stark_verify_rejects_tampered() -> None:
    r, s = stark_sign(STARK_PRIV, STARK_MSG)
    stark_key = private_to_stark_key(STARK_PRIV)
    assert stark_verify(stark_key, STARK_MSG + 1, r, s) is False
    assert stark_verify(stark_key, STARK_MSG, r, s + 1) is False
    assert stark_verify(private_to_stark_key(STARK_PRIV + 1), STARK_MSG, r, s) is False
    assert stark_verify(stark_key, stark.ELEMENT_UPPER_BOUND, r, s) is False
    assert stark_verify(stark_key, STARK_MSG, 0, s) is False


def test_stark_sign_rejects_large_hash() -> None:
    with pytest.raises(ValueError):
        stark_sign(STARK_PRIV, stark.ELEMENT_UPPER_BOUND)
