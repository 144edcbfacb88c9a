"""
Curve-agnostic private keys for multi-chain wallets: secp256k1 and the STARK curve.
Pure Python; sign 32-byte digests and derive public keys without curve-specific types.
"""

import logging

from .__about__ import __version__
from .curves import (
    private_to_stark_key,
    privkey_to_pubkey,
    recover_pubkey,
    sign_recoverable,
    stark_sign,
    stark_verify,
)
from .errors import (
    InvalidPublicKey,
    InvalidSecretKey,
    InvalidSignature,
    InvalidSignMessage,
    KeypairError,
)
from .hashes import generate_k
from .keys import Curve, PrivateKey, PublicKey, PublicKeyType, SigningKey
from .keys.starkex import Signature as StarkSignature

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Keys
    "Curve",
    "PrivateKey",
    "PublicKey",
    "PublicKeyType",
    "SigningKey",
    "StarkSignature",
    # Errors
    "InvalidPublicKey",
    "InvalidSecretKey",
    "InvalidSignMessage",
    "InvalidSignature",
    "KeypairError",
    # Hashes
    "generate_k",
    # Curves: secp256k1 (Ethereum / Bitcoin)
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
    # Curves: STARK (StarkEx / Starknet)
    "private_to_stark_key",
    "stark_sign",
    "stark_verify",
)
