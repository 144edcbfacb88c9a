"""
Capability contracts that curve-specific key types implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar

HashT = TypeVar("HashT")


class ToBytes(Protocol):
    """A value with a fixed-width byte export."""

    def to_bytes(self) -> bytes: ...


class VerifyingKey(ToBytes, Protocol):
    def verify(self, signature: Any, hash: Any) -> bool: ...


class SigningKey(ABC, Generic[HashT]):
    """
    A curve-specific private key that signs digests.

    ``signing_hash`` turns raw digest bytes into the representation this curve signs
    and raises ``InvalidSignMessage`` when they do not fit, so a bad message is reported
    separately from a bad key.
    """

    @classmethod
    @abstractmethod
    def signing_hash(cls, data: bytes) -> HashT:
        """Convert raw digest bytes into this curve's signing hash."""

    @abstractmethod
    def sign(self, hash: HashT) -> ToBytes:
        """Sign an already converted hash."""

    @abstractmethod
    def public(self) -> VerifyingKey:
        """Derive the matching public key."""

    def sign_digest(self, data: bytes) -> ToBytes:
        return self.sign(self.signing_hash(data))


__all__: tuple[str, ...] = ("SigningKey", "ToBytes", "VerifyingKey")
