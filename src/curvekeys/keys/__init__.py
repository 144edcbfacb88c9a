"""Key types: curve-agnostic ``PrivateKey`` and ``PublicKey`` plus per-curve backends."""

from . import secp256k1, starkex
from .curve import Curve
from .private import PrivateKey
from .public import PublicKey, PublicKeyType
from .traits import SigningKey

__all__: tuple[str, ...] = (
    "Curve",
    "PrivateKey",
    "PublicKey",
    "PublicKeyType",
    "SigningKey",
    "secp256k1",
    "starkex",
)
