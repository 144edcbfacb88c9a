"""Hash-based helpers: RFC 6979 deterministic nonces."""

from .rfc6979 import generate_k, iter_k

__all__: tuple[str, ...] = ("generate_k", "iter_k")
