from __future__ import annotations

"""
Core WSPR protocol constants.

Values follow the published WSPR channel format (K1JT) and match the output
of the reference `wsprcode` encoder bit for bit.
"""

# Frame layout
WSPR_SYMBOL_COUNT = 162      # channel symbols per transmission
WSPR_MESSAGE_BYTES = 11      # source-encoded payload incl. zero tail
LOCPOW_FIELD_BITS = 22
LOCPOW_FIELD_MASK = (1 << LOCPOW_FIELD_BITS) - 1

# Convolutional code (r=1/2, K=32)
CONV_POLY_0 = 0xF2D05351
CONV_POLY_1 = 0xE4613C47
REGISTER_MASK = 0xFFFFFFFF

# Interleaver scans the full 8-bit index space
INTERLEAVE_SCAN = 255

# Message field offsets
POWER_OFFSET = 64
SUFFIX_BASE = 27232
PREFIX_SPLIT = 32768
LOCATOR_FALLBACK = "AA00"

# Call-sign hash
HASH_SEED = 0xDEADBEEF
HASH_INITVAL = 146
HASH_MIN_LEN = 3
HASH_MAX_LEN = 10

# Maximum raw call-sign length accepted by the normalizer
MAX_RAW_CALLSIGN = 10
MAX_PREFIX_LEN = 3
MAX_SUFFIX_CODE = 135  # 36 + 99, largest two-digit suffix

# Synchronization vector, one bit per channel symbol
SYNC_VECTOR = (
    1, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1, 1, 1, 0, 0, 0, 1, 0, 0,
    1, 0, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 1, 0, 0,
    0, 0, 0, 0, 1, 0, 1, 1, 0, 0, 1, 1, 0, 1, 0, 0, 0, 1, 1, 0, 1,
    0, 0, 0, 0, 1, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 0, 1, 0, 0, 1, 0,
    1, 1, 0, 0, 0, 1, 1, 0, 1, 0, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1,
    0, 0, 1, 0, 0, 1, 1, 1, 0, 1, 1, 0, 0, 1, 1, 0, 1, 0, 0, 0, 1,
    1, 1, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0,
    1, 1, 0, 1, 0, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0,
)

assert len(SYNC_VECTOR) == WSPR_SYMBOL_COUNT
