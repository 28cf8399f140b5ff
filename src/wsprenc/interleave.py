from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .constants import INTERLEAVE_SCAN, WSPR_SYMBOL_COUNT


def bit_reverse8(j: int) -> int:
    rev = 0
    for k in range(8):
        if (j >> k) & 1:
            rev |= 1 << (7 - k)
    return rev


def _build_order() -> NDArray[np.int64]:
    # Destination slot for the i-th encoder output bit
    order = [r for r in (bit_reverse8(j) for j in range(INTERLEAVE_SCAN)) if r < WSPR_SYMBOL_COUNT]
    return np.array(order[:WSPR_SYMBOL_COUNT], dtype=np.int64)


INTERLEAVE_ORDER = _build_order()
INTERLEAVE_ORDER.setflags(write=False)


def interleave(bits: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Scatter bit i to position bitrev8(j), for the j-th index whose reversal is < 162."""
    bits = np.asarray(bits, dtype=np.uint8)
    if bits.shape != (WSPR_SYMBOL_COUNT,):
        raise ValueError(f"interleave expects {WSPR_SYMBOL_COUNT} bits, got shape {bits.shape}")
    out = np.empty(WSPR_SYMBOL_COUNT, dtype=np.uint8)
    out[INTERLEAVE_ORDER] = bits
    return out


def deinterleave(bits: NDArray[np.uint8]) -> NDArray[np.uint8]:
    bits = np.asarray(bits, dtype=np.uint8)
    if bits.shape != (WSPR_SYMBOL_COUNT,):
        raise ValueError(f"deinterleave expects {WSPR_SYMBOL_COUNT} bits, got shape {bits.shape}")
    return bits[INTERLEAVE_ORDER].copy()
