"""
Curve-agnostic public keys: a tagged union over ``PublicKeyType``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from ..errors import InvalidPublicKey, KeypairError
from . import secp256k1, starkex
from .curve import Curve


class PublicKeyType(enum.Enum):
    """Public key variant: the curve plus the encoding."""

    SECP256K1 = "secp256k1"
    SECP256K1_EXTENDED = "secp256k1Extended"
    STARKEX = "starkex"

    @property
    def curve(self) -> Curve:
        if self is PublicKeyType.SECP256K1 or self is PublicKeyType.SECP256K1_EXTENDED:
            return Curve.SECP256K1
        if self is PublicKeyType.STARKEX:
            return Curve.STARKEX
        raise ValueError(f"unsupported public key type: {self!r}")


BackendPublicKey = Union[secp256k1.PublicKey, starkex.PublicKey]


@dataclass(frozen=True)
class PublicKey:
    """
    A derived public key tagged with its type.

    ``to_bytes`` returns the encoding the tag implies: 33-byte compressed SEC1 for
    ``SECP256K1``, 65-byte uncompressed SEC1 for ``SECP256K1_EXTENDED`` and the 32-byte
    stark key for ``STARKEX``.
    """

    ty: PublicKeyType
    key: BackendPublicKey

    def __post_init__(self) -> None:
        expected = starkex.PublicKey if self.ty.curve is Curve.STARKEX else secp256k1.PublicKey
        if not isinstance(self.key, expected):
            raise ValueError(f"{self.ty.value} public key needs {expected.__module__}.PublicKey")

    def as_secp256k1(self) -> secp256k1.PublicKey:
        """The secp256k1 key behind a ``SECP256K1``/``SECP256K1_EXTENDED`` public key."""
        if not isinstance(self.key, secp256k1.PublicKey):
            raise ValueError(f"not a secp256k1 public key: {self.ty!r}")
        return self.key

    def as_starkex(self) -> starkex.PublicKey:
        """The stark key behind a ``STARKEX`` public key."""
        if not isinstance(self.key, starkex.PublicKey):
            raise ValueError(f"not a starkex public key: {self.ty!r}")
        return self.key

    def to_bytes(self) -> bytes:
        if self.ty is PublicKeyType.SECP256K1:
            return self.as_secp256k1().compressed()
        if self.ty is PublicKeyType.SECP256K1_EXTENDED:
            return self.as_secp256k1().uncompressed()
        if self.ty is PublicKeyType.STARKEX:
            return self.as_starkex().to_bytes()
        raise ValueError(f"unsupported public key type: {self.ty!r}")

    @classmethod
    def from_bytes(cls, data: bytes, ty: PublicKeyType) -> PublicKey:
        """
        Parse a public key of the given type.

        Raises:
            InvalidPublicKey: if data is not a valid encoding for ``ty``.
        """
        if ty is PublicKeyType.SECP256K1 or ty is PublicKeyType.SECP256K1_EXTENDED:
            expected = (
                secp256k1.PublicKey.COMPRESSED_LEN
                if ty is PublicKeyType.SECP256K1
                else secp256k1.PublicKey.UNCOMPRESSED_LEN
            )
            if len(data) != expected:
                raise InvalidPublicKey(
                    f"{ty.value} public key must be {expected} bytes, got {len(data)}"
                )
            return cls(ty, secp256k1.PublicKey.from_bytes(data))
        if ty is PublicKeyType.STARKEX:
            return cls(ty, starkex.PublicKey.from_bytes(data))
        raise ValueError(f"unsupported public key type: {ty!r}")

    def verify(self, signature: bytes, digest: bytes) -> bool:
        """
        Verify signature bytes (as produced by ``PrivateKey.sign``) over a digest.

        Malformed signatures or digests give False rather than an error.
        """
        try:
            if self.ty.curve is Curve.SECP256K1:
                sig = secp256k1.Signature.from_bytes(signature)
                return self.as_secp256k1().verify(sig, secp256k1.PrivateKey.signing_hash(digest))
            if self.ty.curve is Curve.STARKEX:
                stark_sig = starkex.Signature.from_bytes(signature)
                return self.as_starkex().verify(stark_sig, starkex.PrivateKey.signing_hash(digest))
        except KeypairError:
            return False
        raise ValueError(f"unsupported public key type: {self.ty!r}")


__all__: tuple[str, ...] = ("BackendPublicKey", "PublicKey", "PublicKeyType")
