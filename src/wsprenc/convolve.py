from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .constants import CONV_POLY_0, CONV_POLY_1, REGISTER_MASK, WSPR_SYMBOL_COUNT


def parity32(x: int) -> int:
    return bin(x & REGISTER_MASK).count("1") & 1


def convolve(data: bytes, nbits: int = WSPR_SYMBOL_COUNT) -> NDArray[np.uint8]:
    """
    Rate-1/2, K=32 convolutional encoder.

    Input bits are taken MSB-first from `data`. Each bit is shifted into two
    32-bit registers and yields two parity bits, (reg0 & POLY_0) then
    (reg1 & POLY_1). Encoding stops as soon as `nbits` outputs exist, which
    for WSPR is 81 input bits: the 50 payload bits plus 31 flush zeros.
    """
    bits_in = np.unpackbits(np.frombuffer(bytes(data), dtype=np.uint8), bitorder="big")
    needed = (nbits + 1) // 2
    if bits_in.size < needed:
        raise ValueError(f"need at least {needed} input bits for {nbits} outputs, got {bits_in.size}")
    out = np.zeros(nbits, dtype=np.uint8)
    reg_0 = 0
    reg_1 = 0
    k = 0
    for bit in bits_in:
        reg_0 = ((reg_0 << 1) | int(bit)) & REGISTER_MASK
        reg_1 = ((reg_1 << 1) | int(bit)) & REGISTER_MASK
        out[k] = parity32(reg_0 & CONV_POLY_0)
        k += 1
        if k >= nbits:
            break
        out[k] = parity32(reg_1 & CONV_POLY_1)
        k += 1
        if k >= nbits:
            break
    return out
