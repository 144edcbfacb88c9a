"""
secp256k1 (Bitcoin/Ethereum curve): public keys, deterministic ECDSA sign/verify, public key recovery.
"""

from __future__ import annotations

from ..hashes import iter_k

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

ORDER = _N


def _mod_inv(a: int, n: int) -> int:
    """Modular inverse via extended gcd."""
    a %= n
    t, r = 0, n
    new_t, new_r = 1, a
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise ValueError("no inverse")
    return t % n


def _point_add(px: int, py: int, qx: int, qy: int) -> tuple[int, int]:
    """Add two points in affine coords; (0, 0) is the identity (not on the curve)."""
    if (px, py) == (0, 0):
        return (qx, qy)
    if (qx, qy) == (0, 0):
        return (px, py)
    if px == qx:
        if py != qy or py == 0:
            return (0, 0)
        lam = (3 * px * px) * _mod_inv(2 * py, _P) % _P
    else:
        lam = (qy - py) * _mod_inv(qx - px, _P) % _P
    rx = (lam * lam - px - qx) % _P
    ry = (lam * (px - rx) - py) % _P
    return (rx, ry)


def _point_mul(d: int, x: int, y: int) -> tuple[int, int]:
    """Scalar multiplication d * (x, y) by double-and-add."""
    d = d % _N
    rx, ry = 0, 0
    while d:
        if d & 1:
            rx, ry = _point_add(rx, ry, x, y)
        x, y = _point_add(x, y, x, y)
        d >>= 1
    return (rx, ry)


def _lift_x(x: int, odd: int) -> tuple[int, int]:
    """Point with the given x and y parity. p = 3 (mod 4), so sqrt is a single pow."""
    if not 0 <= x < _P:
        raise ValueError("x out of range")
    rhs = (x * x * x + 7) % _P
    y = pow(rhs, (_P + 1) // 4, _P)
    if (y * y) % _P != rhs:
        raise ValueError("x is not on the curve")
    if (y & 1) != odd:
        y = _P - y
    return (x, y)


def encode_pubkey(x: int, y: int, compressed: bool = True) -> bytes:
    """SEC1 encoding: 0x02/0x03 || x (33 bytes) or 0x04 || x || y (65 bytes)."""
    if compressed:
        return bytes([0x02 | (y & 1)]) + x.to_bytes(32, "big")
    return bytes([0x04]) + x.to_bytes(32, "big") + y.to_bytes(32, "big")


def decode_pubkey(pubkey: bytes) -> tuple[int, int]:
    """
    Decode a SEC1 public key (33-byte compressed or 65-byte uncompressed) to affine (x, y).

    Raises:
        ValueError: if the encoding is malformed or the point is not on the curve.
    """
    if len(pubkey) == 33 and pubkey[0] in (0x02, 0x03):
        return _lift_x(int.from_bytes(pubkey[1:], "big"), pubkey[0] & 1)
    if len(pubkey) == 65 and pubkey[0] == 0x04:
        x = int.from_bytes(pubkey[1:33], "big")
        y = int.from_bytes(pubkey[33:], "big")
        if x >= _P or y >= _P or (y * y - x * x * x - 7) % _P != 0:
            raise ValueError("point is not on the curve")
        return (x, y)
    raise ValueError("pubkey must be 33 bytes (compressed) or 65 bytes (uncompressed)")


def privkey_to_scalar(privkey: bytes) -> int:
    """
    Parse a 32-byte big-endian private key into a scalar d with 0 < d < n.

    Raises:
        ValueError: on a wrong length or a scalar outside [1, n).
    """
    if len(privkey) != 32:
        raise ValueError("privkey must be 32 bytes")
    d = int.from_bytes(privkey, "big")
    if d == 0 or d >= _N:
        raise ValueError("invalid privkey")
    return d


def scalar_to_pubkey(d: int, compressed: bool = True) -> bytes:
    """Public key d * G in SEC1 form."""
    x, y = _point_mul(d, _Gx, _Gy)
    return encode_pubkey(x, y, compressed)


def privkey_to_pubkey(privkey: bytes, compressed: bool = False) -> bytes:
    """
    Derive the public key from a 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key.
        compressed: Return the 33-byte compressed form instead of 65-byte uncompressed.

    Returns:
        SEC1-encoded public key.
    """
    return scalar_to_pubkey(privkey_to_scalar(privkey), compressed)


def ecdsa_sign(d: int, msg_hash: bytes) -> tuple[int, int, int]:
    """
    ECDSA sign a 32-byte hash with scalar d, RFC 6979 nonce, low-S normalised.

    Args:
        d: Private scalar, 0 < d < n.
        msg_hash: 32-byte message hash.

    Returns:
        (r, s, recid) with s <= n/2 and recid in 0..3.
    """
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    z = int.from_bytes(msg_hash, "big")
    for k in iter_k(_N, d, msg_hash):
        kx, ky = _point_mul(k, _Gx, _Gy)
        r = kx % _N
        if r == 0:
            continue
        s = _mod_inv(k, _N) * (z + r * d) % _N
        if s == 0:
            continue
        recid = (ky & 1) | (2 if kx >= _N else 0)
        if s > _N // 2:
            s = _N - s
            recid ^= 1
        return (r, s, recid)
    raise AssertionError("unreachable: iter_k is infinite")


def sign_recoverable(privkey: bytes, msg_hash: bytes) -> tuple[int, int, int]:
    """
    ECDSA sign with recovery id; returns (r, s, v) with v in {27, 28} (Ethereum style).

    Args:
        privkey: 32-byte private key.
        msg_hash: 32-byte message hash to sign.

    Returns:
        (r, s, v) where v is 27 + recovery id.
    """
    r, s, recid = ecdsa_sign(privkey_to_scalar(privkey), msg_hash)
    return (r, s, 27 + recid)


def ecdsa_verify(msg_hash: bytes, r: int, s: int, pubkey: bytes) -> bool:
    """
    Verify an ECDSA signature over a 32-byte hash. High-S signatures are accepted.

    Args:
        msg_hash: 32-byte message hash.
        r, s: Signature scalars.
        pubkey: SEC1 public key (compressed or uncompressed).

    Returns:
        True iff the signature is valid.
    """
    if len(msg_hash) != 32 or not (0 < r < _N and 0 < s < _N):
        return False
    try:
        qx, qy = decode_pubkey(pubkey)
    except ValueError:
        return False
    z = int.from_bytes(msg_hash, "big")
    w = _mod_inv(s, _N)
    gx, gy = _point_mul(z * w % _N, _Gx, _Gy)
    px, py = _point_mul(r * w % _N, qx, qy)
    x, y = _point_add(gx, gy, px, py)
    if (x, y) == (0, 0):
        return False
    return x % _N == r


def _recover_point(msg_hash: bytes, r: int, s: int, recid: int) -> tuple[int, int]:
    """Recover Q from (r, s, recid). recid bit 1 selects x = r + n, bit 0 the y parity of R."""
    if not (0 < r < _N and 0 < s < _N) or not 0 <= recid <= 3:
        raise ValueError("invalid signature")
    x = r + _N if recid & 2 else r
    if x >= _P:
        raise ValueError("recid 2/3 but r+n >= p")
    rx, ry = _lift_x(x, recid & 1)
    r_inv = _mod_inv(r, _N)
    z = int.from_bytes(msg_hash, "big") % _N
    gx, gy = _point_mul((-z * r_inv) % _N, _Gx, _Gy)
    px, py = _point_mul((s * r_inv) % _N, rx, ry)
    q = _point_add(gx, gy, px, py)
    if q == (0, 0):
        raise ValueError("recovered point at infinity")
    return q


def recover_pubkey(
    msg_hash: bytes, r: int, s: int, recid: int, compressed: bool = False
) -> bytes:
    """
    Recover the public key from an ECDSA signature (msg_hash, r, s, recid).

    Args:
        msg_hash: 32-byte message hash that was signed.
        r, s: Signature components (scalars).
        recid: Recovery id (0-3).
        compressed: Return the 33-byte compressed form.

    Returns:
        SEC1-encoded public key.
    """
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    qx, qy = _recover_point(msg_hash, r, s, recid)
    return encode_pubkey(qx, qy, compressed)


__all__: tuple[str, ...] = (
    "ORDER",
    "decode_pubkey",
    "ecdsa_sign",
    "ecdsa_verify",
    "encode_pubkey",
    "privkey_to_pubkey",
    "privkey_to_scalar",
    "recover_pubkey",
    "scalar_to_pubkey",
    "sign_recoverable",
)
