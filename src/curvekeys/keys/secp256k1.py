"""
secp256k1 keys and the 65-byte recoverable signature (r || s || v).
"""

from __future__ import annotations

from dataclasses import dataclass

from ..curves import secp256k1
from ..errors import InvalidPublicKey, InvalidSecretKey, InvalidSignature, InvalidSignMessage
from .traits import SigningKey


@dataclass(frozen=True)
class Signature:
    """A recoverable ECDSA signature; ``v`` is the recovery id (0-3), not 27/28."""

    r: int
    s: int
    v: int

    LEN = 65

    def __len__(self) -> int:
        return self.LEN

    def to_bytes(self) -> bytes:
        return self.r.to_bytes(32, "big") + self.s.to_bytes(32, "big") + bytes([self.v])

    @classmethod
    def from_bytes(cls, data: bytes) -> Signature:
        if len(data) != cls.LEN:
            raise InvalidSignature(f"signature must be {cls.LEN} bytes, got {len(data)}")
        r = int.from_bytes(data[0:32], "big")
        s = int.from_bytes(data[32:64], "big")
        v = data[64]
        if not (0 < r < secp256k1.ORDER and 0 < s < secp256k1.ORDER):
            raise InvalidSignature("r and s must be in [1, n)")
        if v > 3:
            raise InvalidSignature("recovery id must be in 0..3")
        return cls(r, s, v)


@dataclass(frozen=True)
class PublicKey:
    """An affine secp256k1 point with compressed and uncompressed SEC1 encodings."""

    x: int
    y: int

    COMPRESSED_LEN = 33
    UNCOMPRESSED_LEN = 65

    def compressed(self) -> bytes:
        return secp256k1.encode_pubkey(self.x, self.y, compressed=True)

    def uncompressed(self) -> bytes:
        return secp256k1.encode_pubkey(self.x, self.y, compressed=False)

    to_bytes = compressed

    @classmethod
    def from_bytes(cls, data: bytes) -> PublicKey:
        try:
            return cls(*secp256k1.decode_pubkey(bytes(data)))
        except ValueError as exc:
            raise InvalidPublicKey(str(exc)) from exc

    @classmethod
    def recover(cls, signature: Signature, hash: bytes) -> PublicKey:
        """
        Raises:
            InvalidSignature: if no public key can be recovered.
        """
        try:
            pubkey = secp256k1.recover_pubkey(hash, signature.r, signature.s, signature.v)
        except ValueError as exc:
            raise InvalidSignature(str(exc)) from exc
        return cls.from_bytes(pubkey)

    def verify(self, signature: Signature, hash: bytes) -> bool:
        return secp256k1.ecdsa_verify(hash, signature.r, signature.s, self.uncompressed())


class PrivateKey(SigningKey[bytes]):
    """A secp256k1 private key: a scalar in [1, n)."""

    def __init__(self, secret: int) -> None:
        self._secret = secret

    def __repr__(self) -> str:
        return "secp256k1.PrivateKey(<hidden>)"

    @classmethod
    def from_bytes(cls, data: bytes) -> PrivateKey:
        try:
            return cls(secp256k1.privkey_to_scalar(data))
        except ValueError as exc:
            raise InvalidSecretKey(str(exc)) from exc

    @classmethod
    def signing_hash(cls, data: bytes) -> bytes:
        if len(data) != 32:
            raise InvalidSignMessage(f"hash must be 32 bytes, got {len(data)}")
        return bytes(data)

    def sign(self, hash: bytes) -> Signature:
        r, s, v = secp256k1.ecdsa_sign(self._secret, hash)
        return Signature(r, s, v)

    def public(self) -> PublicKey:
        return PublicKey.from_bytes(secp256k1.scalar_to_pubkey(self._secret, compressed=False))


__all__: tuple[str, ...] = ("PrivateKey", "PublicKey", "Signature")
