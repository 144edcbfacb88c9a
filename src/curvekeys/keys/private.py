"""
Curve-agnostic private key.

``PrivateKey`` owns the raw secret in a ``bytearray`` and overwrites it with zeros when
closed, when its context manager exits, or when the object is garbage collected. Every
``sign``/``public_key`` call rebuilds the curve-specific key from those bytes; nothing
curve-specific is cached between calls.
"""

from __future__ import annotations

import logging
import weakref
from types import TracebackType
from typing import Optional, Type, Union

from ..errors import InvalidSecretKey
from . import secp256k1, starkex
from .curve import Curve
from .public import BackendPublicKey, PublicKey, PublicKeyType
from .traits import SigningKey

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def _wipe(buf: bytearray) -> None:
    # Index assignment keeps working while read-only views of buf are alive.
    for i in range(len(buf)):
        buf[i] = 0


class PrivateKey:
    """
    A 32-byte secret usable with any supported curve.

    The input is copied once into a buffer only the key references. A ``bytearray``
    argument is moved: it is zeroed right after the copy, whether or not the secret
    passes validation. The key's own buffer is zeroed when the key is closed.

    Example::

        with PrivateKey(bytearray(secret)) as key:
            signature = key.sign(digest, Curve.STARKEX)
            stark_key = key.public_key(PublicKeyType.STARKEX).to_bytes()
    """

    SIZE = 32
    _KEY_RANGE = slice(0, SIZE)

    def __init__(self, data: BytesLike) -> None:
        # memoryview() rejects objects that are not bytes-like with a TypeError
        owned = bytearray(memoryview(data))
        if isinstance(data, bytearray):
            _wipe(data)
        if not self.is_valid_general(owned):
            _wipe(owned)
            raise InvalidSecretKey("secret key must be 32 bytes and not all zero")
        self._bytes = owned
        self._finalizer = weakref.finalize(self, _wipe, owned)

    def __repr__(self) -> str:
        state = "closed" if self.closed else "hidden"
        return f"PrivateKey(<{state}>)"

    def __enter__(self) -> PrivateKey:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def close(self) -> None:
        """Overwrite the secret with zeros. Safe to call more than once."""
        self._finalizer()

    def key(self) -> memoryview:
        """
        Read-only view of the 32-byte key window.

        Raises:
            ValueError: if the key is closed.
        """
        if self.closed:
            raise ValueError("private key is closed")
        assert len(self._bytes) >= self.SIZE, "'PrivateKey._bytes' has an unexpected length"
        return memoryview(self._bytes)[self._KEY_RANGE].toreadonly()

    @classmethod
    def is_valid_general(cls, data: BytesLike) -> bool:
        """Check the secret without a curve: 32 bytes, not all zero."""
        if len(data) != cls.SIZE:
            return False
        return any(data)

    @classmethod
    def is_valid(cls, data: BytesLike, curve: Curve) -> bool:
        """Check the secret is valid in general and accepted by ``curve``."""
        if not cls.is_valid_general(data):
            return False
        with memoryview(data) as view:
            key = view[cls._KEY_RANGE]
            try:
                if curve is Curve.SECP256K1:
                    secp256k1.PrivateKey.from_bytes(key)
                elif curve is Curve.STARKEX:
                    starkex.PrivateKey.from_bytes(key)
                else:
                    raise ValueError(f"unsupported curve: {curve!r}")
            except InvalidSecretKey:
                return False
            finally:
                key.release()
        return True

    def sign(self, digest: BytesLike, curve: Curve) -> bytes:
        """
        Sign a digest with the given curve.

        Args:
            digest: Message digest; 32 bytes for both supported curves (STARK also
                requires it to be below 2^251).
            curve: Curve to sign with.

        Returns:
            Serialized signature: 65 bytes (r || s || v) for secp256k1, 64 bytes
            (r || s) for STARK.

        Raises:
            InvalidSecretKey: if the curve rejects this key.
            InvalidSignMessage: if the digest does not fit the curve.
        """
        if curve is Curve.SECP256K1:
            signature = self._sign_with(self._to_secp256k1_privkey(), digest)
        elif curve is Curve.STARKEX:
            signature = self._sign_with(self._to_starkex_privkey(), digest)
        else:
            raise ValueError(f"unsupported curve: {curve!r}")
        logger.debug("signed with %s: %d-byte signature", curve.value, len(signature))
        return signature

    def public_key(self, ty: PublicKeyType) -> PublicKey:
        """
        Derive the public key of the given type.

        Raises:
            InvalidSecretKey: if the curve rejects this key.
        """
        if ty is PublicKeyType.SECP256K1:
            key: BackendPublicKey = self._to_secp256k1_privkey().public()
        elif ty is PublicKeyType.SECP256K1_EXTENDED:
            key = self._to_secp256k1_privkey().public()
        elif ty is PublicKeyType.STARKEX:
            key = self._to_starkex_privkey().public()
        else:
            raise ValueError(f"unsupported public key type: {ty!r}")
        logger.debug("derived %s public key", ty.value)
        return PublicKey(ty, key)

    @staticmethod
    def _sign_with(signing_key: SigningKey, digest: BytesLike) -> bytes:
        hash_to_sign = signing_key.signing_hash(digest)
        return signing_key.sign(hash_to_sign).to_bytes()

    def _to_secp256k1_privkey(self) -> secp256k1.PrivateKey:
        with self.key() as key:
            return secp256k1.PrivateKey.from_bytes(key)

    def _to_starkex_privkey(self) -> starkex.PrivateKey:
        with self.key() as key:
            return starkex.PrivateKey.from_bytes(key)


__all__: tuple[str, ...] = ("PrivateKey",)
