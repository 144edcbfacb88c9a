"""Elliptic-curve crypto: secp256k1 (Ethereum/Bitcoin), STARK curve (StarkEx/Starknet)."""

from .secp256k1 import privkey_to_pubkey, recover_pubkey, sign_recoverable
from .stark import private_to_stark_key, stark_sign, stark_verify

__all__: tuple[str, ...] = (
    "private_to_stark_key",
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
    "stark_sign",
    "stark_verify",
)
