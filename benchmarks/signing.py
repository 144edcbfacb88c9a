"""
Benchmark PrivateKey.sign / PrivateKey.public_key per curve.
Reports time per call and peak memory (tracemalloc) per run.

Run from repo root:

  PYTHONPATH=src python benchmarks/signing.py

Or after pip install -e .:

  python benchmarks/signing.py
"""

from __future__ import annotations

import os
import sys
import time
import tracemalloc

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from curvekeys import Curve, PrivateKey, PublicKeyType

N_TIME = 50
N_MEM = 20
SECRET = bytes.fromhex(
    "058ab7989d625b1a690400dcbe6e070627adedceff7bd196e58d4791026a8afe"
)
DIGEST = bytes.fromhex(
    "06fea80189363a786037ed3e7ba546dad0ef7de49fccae0e31eb658b7dd4ea76"
)


def _time_per_call(fn, *args, n: int = N_TIME, **kwargs) -> float:
    for _ in range(3):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def _peak_kb(fn, *args, n: int = N_MEM, **kwargs) -> float:
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(*args, **kwargs)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def main() -> None:
    key = PrivateKey(SECRET)
    print("Benchmark: PrivateKey (pure Python curves)")
    print(f"  n = {N_TIME} (time), {N_MEM} (memory)")
    print()

    print("  --- sign ---")
    for curve in Curve:
        t = _time_per_call(key.sign, DIGEST, curve) * 1000
        m = _peak_kb(key.sign, DIGEST, curve)
        print(f"  {curve.value:<20} {t:.3f} ms  peak {m:.2f} KiB")
    print()

    print("  --- public_key ---")
    for ty in PublicKeyType:
        t = _time_per_call(key.public_key, ty) * 1000
        print(f"  {ty.value:<20} {t:.3f} ms")

    key.close()


if __name__ == "__main__":
    main()
