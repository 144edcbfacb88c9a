"""Errors raised by the key layer. All are ``ValueError`` subclasses."""

from __future__ import annotations


class KeypairError(ValueError):
    """Base class for key, message and signature errors."""


class InvalidSecretKey(KeypairError):
    """Secret bytes have the wrong length, are all zero, or are rejected by a curve."""


class InvalidSignMessage(KeypairError):
    """Digest bytes do not fit the curve's signing-hash representation."""


class InvalidSignature(KeypairError):
    """Signature bytes have the wrong length or an out-of-range component."""


class InvalidPublicKey(KeypairError):
    """Public key bytes do not decode to a point on the curve."""


__all__: tuple[str, ...] = (
    "InvalidPublicKey",
    "InvalidSecretKey",
    "InvalidSignMessage",
    "InvalidSignature",
    "KeypairError",
)
