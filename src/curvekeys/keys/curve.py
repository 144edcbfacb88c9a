"""Supported elliptic curves."""

from __future__ import annotations

import enum


class Curve(enum.Enum):
    """Closed set of curves a ``PrivateKey`` can sign with."""

    SECP256K1 = "secp256k1"
    STARKEX = "starkex"


__all__: tuple[str, ...] = ("Curve",)
