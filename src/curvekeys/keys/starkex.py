"""
StarkEx keys and the fixed 64-byte STARK signature codec (r || s, big-endian).
"""

from __future__ import annotations

from dataclasses import dataclass

from ..curves import stark
from ..errors import InvalidPublicKey, InvalidSecretKey, InvalidSignature, InvalidSignMessage
from .traits import SigningKey

_R_RANGE = slice(0, 32)
_S_RANGE = slice(32, 64)


@dataclass(frozen=True)
class Signature:
    """A STARK signature: two field elements ``r`` and ``s``."""

    r: int
    s: int

    LEN = 64

    def __len__(self) -> int:
        return self.LEN

    def r_bytes(self) -> bytes:
        """r as 32 big-endian bytes."""
        return self.r.to_bytes(32, "big")

    def s_bytes(self) -> bytes:
        """s as 32 big-endian bytes."""
        return self.s.to_bytes(32, "big")

    def to_bytes(self) -> bytes:
        """Fixed-width encoding: 32-byte r followed by 32-byte s."""
        return self.r_bytes() + self.s_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> Signature:
        """
        Parse a 64-byte signature. Only field-element range is checked, not validity.

        Raises:
            InvalidSignature: if data is not 64 bytes or either half is not a field element.
        """
        if len(data) != cls.LEN:
            raise InvalidSignature(f"signature must be {cls.LEN} bytes, got {len(data)}")
        try:
            r = stark.field_element_from_bytes(bytes(data[_R_RANGE]))
            s = stark.field_element_from_bytes(bytes(data[_S_RANGE]))
        except ValueError as exc:
            raise InvalidSignature(str(exc)) from exc
        return cls(r, s)


@dataclass(frozen=True)
class PublicKey:
    """A stark key: the x-coordinate of the public point."""

    x: int

    LEN = 32

    def to_bytes(self) -> bytes:
        return self.x.to_bytes(self.LEN, "big")

    @classmethod
    def from_bytes(cls, data: bytes) -> PublicKey:
        try:
            x = stark.field_element_from_bytes(bytes(data))
        except ValueError as exc:
            raise InvalidPublicKey(str(exc)) from exc
        if stark.get_y_coordinate(x) is None:
            raise InvalidPublicKey("stark key is not on the curve")
        return cls(x)

    def verify(self, signature: Signature, hash: int) -> bool:
        return stark.stark_verify(self.x, hash, signature.r, signature.s)


class PrivateKey(SigningKey[int]):
    """A StarkEx private key. Any field element is accepted; the curve decides the rest."""

    def __init__(self, secret: int) -> None:
        self._secret = secret

    def __repr__(self) -> str:
        return "starkex.PrivateKey(<hidden>)"

    @classmethod
    def from_bytes(cls, data: bytes) -> PrivateKey:
        """
        Raises:
            InvalidSecretKey: if data is not a 32-byte field element.
        """
        try:
            return cls(stark.field_element_from_bytes(data))
        except ValueError as exc:
            raise InvalidSecretKey(str(exc)) from exc

    @classmethod
    def signing_hash(cls, data: bytes) -> int:
        """A 32-byte big-endian hash below 2^251."""
        if len(data) != 32:
            raise InvalidSignMessage(f"hash must be 32 bytes, got {len(data)}")
        value = int.from_bytes(data, "big")
        if value >= stark.ELEMENT_UPPER_BOUND:
            raise InvalidSignMessage("hash must be below 2^251")
        return value

    def sign(self, hash: int) -> Signature:
        if not 0 <= hash < stark.ELEMENT_UPPER_BOUND:
            raise InvalidSignMessage("hash must be below 2^251")
        try:
            r, s = stark.stark_sign(self._secret, hash)
        except ValueError as exc:
            raise InvalidSecretKey(str(exc)) from exc
        return Signature(r, s)

    def public(self) -> PublicKey:
        try:
            return PublicKey(stark.private_to_stark_key(self._secret))
        except ValueError as exc:
            raise InvalidSecretKey(str(exc)) from exc


__all__: tuple[str, ...] = ("PrivateKey", "PublicKey", "Signature")
