"""
RFC 6979 deterministic nonce generation (HMAC-DRBG). Pure Python using stdlib hmac/hashlib.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Any, Callable, Iterator

_HashFunc = Callable[..., Any]


def _bits2int(data: bytes, qlen: int) -> int:
    """Leftmost qlen bits of data as a big-endian integer. RFC 6979 2.3.2."""
    x = int.from_bytes(data, "big")
    blen = len(data) * 8
    if blen > qlen:
        x >>= blen - qlen
    return x


def _int2octets(x: int, rolen: int) -> bytes:
    return x.to_bytes(rolen, "big")


def _bits2octets(data: bytes, order: int, rolen: int) -> bytes:
    """bits2int(data) reduced once modulo order, as rolen bytes. RFC 6979 2.3.4."""
    z1 = _bits2int(data, order.bit_length())
    z2 = z1 - order
    if z2 < 0:
        z2 = z1
    return _int2octets(z2, rolen)


def iter_k(
    order: int,
    secret: int,
    msg_hash: bytes,
    hash_func: _HashFunc = hashlib.sha256,
    extra_entropy: bytes = b"",
) -> Iterator[int]:
    """
    Yield RFC 6979 nonce candidates in [1, order) for (secret, msg_hash). RFC 6979 3.2.

    The first value is the RFC nonce; later values are the retry sequence from step h.3,
    for signers that must reject a nonce (e.g. r or s out of range).

    Args:
        order: Group order q.
        secret: Private scalar x, 0 < x < q.
        msg_hash: Message hash h1 (any length; truncated to q's bit length).
        hash_func: Hash constructor for HMAC (default SHA-256).
        extra_entropy: Optional additional data k' appended to the seed (RFC 6979 3.6).

    Yields:
        Candidate nonces k.
    """
    qlen = order.bit_length()
    rolen = (qlen + 7) // 8
    holen = hash_func().digest_size
    seed = (
        _int2octets(secret, rolen)
        + _bits2octets(msg_hash, order, rolen)
        + extra_entropy
    )

    def _mac(key: bytes, data: bytes) -> bytes:
        return hmac.new(key, data, hash_func).digest()

    v = b"\x01" * holen
    k = b"\x00" * holen
    k = _mac(k, v + b"\x00" + seed)
    v = _mac(k, v)
    k = _mac(k, v + b"\x01" + seed)
    v = _mac(k, v)
    while True:
        t = b""
        while len(t) < rolen:
            v = _mac(k, v)
            t += v
        candidate = _bits2int(t, qlen)
        if 1 <= candidate < order:
            yield candidate
        k = _mac(k, v + b"\x00")
        v = _mac(k, v)


def generate_k(
    order: int,
    secret: int,
    msg_hash: bytes,
    hash_func: _HashFunc = hashlib.sha256,
    extra_entropy: bytes = b"",
) -> int:
    """
    Deterministic nonce k for (secret, msg_hash). RFC 6979 3.2.

    Args:
        order: Group order q.
        secret: Private scalar x, 0 < x < q.
        msg_hash: Message hash h1.
        hash_func: Hash constructor for HMAC (default SHA-256).
        extra_entropy: Optional additional data k'.

    Returns:
        Nonce k in [1, q).
    """
    return next(iter_k(order, secret, msg_hash, hash_func, extra_entropy))


__all__: tuple[str, ...] = ("generate_k", "iter_k")
