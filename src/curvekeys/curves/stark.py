"""
STARK curve (StarkEx / Starknet): stark keys, ECDSA sign and verify over the 252-bit STARK field.
Pure Python; y^2 = x^3 + alpha*x + beta over p = 2^251 + 17*2^192 + 1.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..hashes import rfc6979

logger = logging.getLogger(__name__)

FIELD_PRIME = 2**251 + 17 * 2**192 + 1
EC_ORDER = 0x0800000000000010FFFFFFFFFFFFFFFFB781126DCAE7B2321E66A241ADC64D2F
# r, s and message hashes must fit in 251 bits
ELEMENT_UPPER_BOUND = 2**251

_P = FIELD_PRIME
_N = EC_ORDER
_ALPHA = 1
_BETA = 0x06F21413EFBE40DE150E596D72F7A8C5609AD26C15C915C1F4CDFCB99CEE9E89
_G = (
    0x01EF15C18599971B7BECED415A40F0C7DEACFD9B0D1819E03D723D8BC943CFCA,
    0x005668060AA49730B7BE4801DF46EC62DE53ECD11ABE43A32873000C36E8DC1F,
)

# Affine point; None is the point at infinity
_Point = Optional[tuple[int, int]]


def _inv(x: int, m: int) -> int:
    """Inverse modulo a prime m (Fermat)."""
    return pow(x, m - 2, m)


def _point_add(a: _Point, b: _Point) -> _Point:
    if a is None:
        return b
    if b is None:
        return a
    if a[0] == b[0]:
        if a[1] != b[1] or a[1] == 0:
            return None
        lam = (3 * a[0] * a[0] + _ALPHA) * _inv(2 * a[1], _P) % _P
    else:
        lam = (b[1] - a[1]) * _inv(b[0] - a[0], _P) % _P
    x = (lam * lam - a[0] - b[0]) % _P
    y = (lam * (a[0] - x) - a[1]) % _P
    return (x, y)


def _point_neg(a: _Point) -> _Point:
    if a is None:
        return None
    return (a[0], (-a[1]) % _P)


def _point_mul(k: int, a: _Point) -> _Point:
    """Scalar multiplication k*a by double-and-add (k reduced mod the group order)."""
    k %= _N
    result: _Point = None
    while k:
        if k & 1:
            result = _point_add(result, a)
        a = _point_add(a, a)
        k >>= 1
    return result


def _sqrt_mod_p(a: int) -> Optional[int]:
    """Square root modulo p (Tonelli-Shanks, since p = 1 mod 4); None for non-residues."""
    a %= _P
    if a == 0:
        return 0
    if pow(a, (_P - 1) // 2, _P) != 1:
        return None
    q, m = _P - 1, 0
    while q % 2 == 0:
        q //= 2
        m += 1
    z = 2
    while pow(z, (_P - 1) // 2, _P) != _P - 1:
        z += 1
    c = pow(z, q, _P)
    x = pow(a, (q + 1) // 2, _P)
    t = pow(a, q, _P)
    while t != 1:
        i, t2 = 0, t
        while t2 != 1:
            t2 = t2 * t2 % _P
            i += 1
        b = pow(c, 1 << (m - i - 1), _P)
        x = x * b % _P
        c = b * b % _P
        t = t * c % _P
        m = i
    return x


def is_on_curve(x: int, y: int) -> bool:
    """Return True iff (x, y) satisfies the STARK curve equation."""
    if not (0 <= x < _P and 0 <= y < _P):
        return False
    return (y * y - (x * x * x + _ALPHA * x + _BETA)) % _P == 0


def get_y_coordinate(x: int) -> Optional[int]:
    """One of the two y values for x on the curve, or None if x is not on it."""
    if not 0 <= x < _P:
        return None
    return _sqrt_mod_p(x * x * x + _ALPHA * x + _BETA)


def field_element_from_bytes(data: bytes) -> int:
    """
    Parse a 32-byte big-endian field element.

    Raises:
        ValueError: if data is not 32 bytes or the value is not below the field prime.
    """
    if len(data) != 32:
        raise ValueError("field element must be 32 bytes")
    value = int.from_bytes(data, "big")
    if value >= _P:
        raise ValueError("field element out of range")
    return value


def private_to_stark_key(priv_key: int) -> int:
    """
    Stark key (x-coordinate of priv_key * G) for a private key.

    Raises:
        ValueError: if priv_key is a multiple of the group order.
    """
    point = _point_mul(priv_key, _G)
    if point is None:
        raise ValueError("private key is a multiple of the curve order")
    return point[0]


def _hash_octets(msg_hash: int) -> bytes:
    # A hash one nibble short of 32 bytes is shifted up so that RFC 6979's
    # truncation to 252 bits gives back every bit of it.
    if 1 <= msg_hash.bit_length() % 8 <= 4 and msg_hash.bit_length() >= 248:
        msg_hash *= 16
    return msg_hash.to_bytes((msg_hash.bit_length() + 7) // 8, "big")


def generate_k(priv_key: int, msg_hash: int, seed: Optional[int] = None) -> int:
    """
    RFC 6979 nonce for STARK signing, as derived by cairo-lang and starknet-crypto.

    Args:
        priv_key: Private key.
        msg_hash: Message hash, 0 <= msg_hash < 2^251.
        seed: Retry counter, passed as RFC 6979 extra data (None on the first attempt).

    Returns:
        Nonce k in [1, n).
    """
    extra_entropy = b"" if seed is None else seed.to_bytes((seed.bit_length() + 7) // 8, "big")
    return rfc6979.generate_k(_N, priv_key, _hash_octets(msg_hash), extra_entropy=extra_entropy)


def stark_sign(priv_key: int, msg_hash: int) -> tuple[int, int]:
    """
    STARK ECDSA signature of a message hash with RFC 6979 nonces.

    A nonce whose r or s falls outside [1, 2^251) is replaced by one derived with the
    next seed (1, 2, ...), so the result is deterministic for a given (priv_key, msg_hash)
    and matches starknet-crypto.

    Args:
        priv_key: Private key (field element, not a multiple of the group order).
        msg_hash: Message hash, 0 <= msg_hash < 2^251.

    Returns:
        (r, s).
    """
    if not 0 <= msg_hash < ELEMENT_UPPER_BOUND:
        raise ValueError("msg_hash must be below 2^251")
    d = priv_key % _N
    if d == 0:
        raise ValueError("private key is a multiple of the curve order")
    seed: Optional[int] = None
    while True:
        k = generate_k(priv_key, msg_hash, seed)
        seed = 1 if seed is None else seed + 1
        point = _point_mul(k, _G)
        assert point is not None
        r = point[0]
        if not 1 <= r < ELEMENT_UPPER_BOUND:
            logger.debug("stark_sign: nonce gives unusable r, reseeding")
            continue
        s = (msg_hash + r * d) * _inv(k, _N) % _N
        if not 1 <= s < ELEMENT_UPPER_BOUND:
            logger.debug("stark_sign: nonce gives unusable s, reseeding")
            continue
        return (r, s)


def stark_verify(stark_key: int, msg_hash: int, r: int, s: int) -> bool:
    """
    Verify a STARK ECDSA signature against an x-only stark key.

    Both points sharing the key's x-coordinate are tried, since the key carries no y.

    Args:
        stark_key: Public key x-coordinate.
        msg_hash: Signed message hash, below 2^251.
        r, s: Signature components.

    Returns:
        True iff the signature is valid.
    """
    if not 0 <= msg_hash < ELEMENT_UPPER_BOUND:
        return False
    if not (1 <= r < ELEMENT_UPPER_BOUND and 1 <= s < _N):
        return False
    y = get_y_coordinate(stark_key)
    if y is None:
        return False
    w = _inv(s, _N)
    z_g = _point_mul(msg_hash * w, _G)
    r_q = _point_mul(r * w, (stark_key, y))
    for candidate in (_point_add(z_g, r_q), _point_add(z_g, _point_neg(r_q))):
        if candidate is not None and candidate[0] == r:
            return True
    return False


__all__: tuple[str, ...] = (
    "EC_ORDER",
    "ELEMENT_UPPER_BOUND",
    "FIELD_PRIME",
    "field_element_from_bytes",
    "generate_k",
    "get_y_coordinate",
    "is_on_curve",
    "private_to_stark_key",
    "stark_sign",
    "stark_verify",
)
