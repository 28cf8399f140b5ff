from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .constants import SYNC_VECTOR, WSPR_SYMBOL_COUNT

SYNC = np.array(SYNC_VECTOR, dtype=np.uint8)
SYNC.setflags(write=False)


def merge_sync_vector(bits: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Combine interleaved parity bits with the sync vector: tone = sync + 2*bit (0..3)."""
    bits = np.asarray(bits, dtype=np.uint8)
    if bits.shape != (WSPR_SYMBOL_COUNT,):
        raise ValueError(f"expected {WSPR_SYMBOL_COUNT} bits, got shape {bits.shape}")
    return (SYNC + 2 * (bits & 1)).astype(np.uint8)
