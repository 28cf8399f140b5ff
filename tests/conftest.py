import pytest


def _sym(text: str) -> list[int]:
    return [int(t) for t in text.split()]


# Published WSPR reference vector for "K1ABC FN42 37"
K1ABC_FN42_37 = _sym("""
    3 3 0 0 2 0 0 0 1 0 2 0 1 3 1 2 2 2 1 0 0 3 2 3 1 3 3
    2 2 0 2 0 0 0 3 2 0 1 2 3 2 2 0 0 2 2 3 2 1 1 0 2 3 3
    2 1 0 2 2 1 3 2 1 2 2 2 0 3 3 0 3 0 3 0 1 2 1 0 2 1 2
    0 3 2 1 3 2 0 0 3 3 2 3 0 3 2 2 0 3 0 2 0 2 0 1 0 2 3
    0 2 1 1 1 2 3 3 0 2 3 1 2 1 2 2 2 1 3 3 2 0 0 0 0 1 0
    3 2 0 1 3 2 2 2 2 2 0 2 3 3 2 3 2 3 3 2 0 0 3 1 2 2 2
""")

G4ABC_IO91_10 = _sym("""
    3 3 2 0 0 0 2 2 1 2 0 2 3 3 3 0 2 0 1 0 2 1 0 1 1 3 1
    2 0 2 2 2 0 0 1 0 0 1 2 3 0 2 2 2 2 2 1 0 1 1 2 0 3 1
    2 3 0 2 0 3 3 2 1 0 2 0 0 3 3 0 1 0 3 2 1 2 3 2 0 1 2
    2 1 2 3 3 0 0 2 3 3 0 3 2 1 2 2 0 1 2 0 2 2 2 3 2 0 3
    2 0 1 3 1 2 1 1 2 0 1 3 2 1 0 0 2 1 3 1 2 2 2 0 0 3 0
    1 2 2 3 3 0 2 0 2 2 2 2 3 1 2 3 0 1 1 0 2 2 3 1 2 2 0
""")

TYPE2_SUFFIX_P = _sym("""
    3 1 0 2 2 0 0 0 1 0 2 2 1 1 1 0 2 0 1 0 0 1 2 1 1 1 3
    2 2 2 0 2 0 0 3 0 0 1 2 1 2 2 0 2 2 2 3 0 1 3 0 0 3 3
    0 1 0 0 0 1 3 2 3 2 2 2 0 1 3 0 3 2 3 0 1 2 1 0 0 3 2
    2 3 2 1 3 0 2 0 1 1 2 3 2 3 0 2 2 3 0 2 0 0 0 1 0 2 3
    0 2 1 3 1 2 3 3 0 0 1 1 2 3 0 0 2 1 3 3 2 0 0 0 0 3 0
    1 2 0 1 3 2 0 0 2 2 0 2 3 3 0 1 2 3 1 2 2 0 3 3 0 2 0
""")

TYPE2_PREFIX_PJ4 = _sym("""
    3 1 0 2 2 0 0 0 1 0 2 2 1 3 1 0 2 0 1 0 0 1 2 3 1 3 1
    2 2 0 2 2 0 2 3 0 0 3 0 3 2 2 0 2 2 0 1 0 1 3 0 0 3 1
    0 1 0 0 0 3 3 2 3 2 2 2 0 1 3 0 1 0 3 0 1 2 1 0 0 3 2
    0 3 2 1 1 2 2 0 3 3 2 3 0 3 0 2 2 3 0 2 2 0 2 1 0 2 3
    0 0 1 3 1 0 3 1 0 0 3 1 2 3 0 0 2 1 3 3 2 0 0 0 0 1 0
    1 2 0 1 1 2 2 2 2 2 2 2 1 3 2 3 2 3 1 0 2 0 1 1 0 2 2
""")

TYPE2_PREFIX_NYM = _sym("""
    3 3 0 2 2 0 2 2 1 2 2 2 1 3 1 0 2 2 1 2 0 3 2 1 1 1 3
    2 2 0 2 0 0 0 3 0 0 3 0 3 2 0 0 0 2 2 3 0 1 1 0 2 3 1
    0 1 0 0 0 1 3 2 3 0 2 2 0 3 3 2 1 2 3 0 1 2 1 0 2 1 2
    2 3 2 1 3 0 2 0 3 1 0 3 2 3 2 2 2 3 0 2 2 0 0 1 0 2 1
    0 0 3 1 1 0 3 1 0 0 3 3 2 1 2 2 2 3 1 1 2 2 0 2 0 1 0
    3 2 0 1 3 2 0 0 2 2 0 2 1 3 2 3 0 3 1 2 0 0 3 1 2 2 0
""")

TYPE2_PREFIX_NYN = _sym("""
    3 1 0 0 2 0 0 2 1 2 2 0 1 3 1 0 2 0 1 2 0 3 2 3 1 1 1
    2 2 0 0 2 0 2 3 2 0 1 0 3 2 0 0 0 2 0 1 0 1 1 0 2 3 1
    0 1 0 0 0 1 3 2 3 2 2 2 0 3 3 0 3 0 3 2 1 0 1 2 2 3 2
    0 3 0 1 3 2 2 0 1 3 2 3 0 1 0 2 2 3 0 2 0 2 2 1 0 2 1
    0 0 3 3 1 0 3 3 0 0 1 1 2 1 0 2 2 1 1 3 2 2 0 0 0 1 2
    3 2 0 1 3 2 0 0 2 2 0 2 3 3 2 1 2 3 1 0 2 0 3 3 0 2 0
""")

TYPE3_FN42MP_SUFFIX_P = _sym("""
    3 1 0 2 2 0 0 0 3 0 0 2 3 3 3 2 2 2 3 2 0 3 2 1 1 3 1
    2 0 0 2 2 2 0 1 2 0 1 0 3 2 2 0 0 0 0 1 0 1 1 2 0 3 1
    2 1 2 0 2 1 1 0 1 0 0 2 2 1 1 2 1 0 3 0 3 2 1 0 0 1 0
    0 1 0 3 3 0 0 2 3 3 2 1 0 3 2 2 0 3 2 0 0 0 0 3 0 2 3
    2 2 1 3 3 0 1 3 0 2 3 1 0 3 2 2 0 1 1 1 2 2 0 2 2 1 0
    3 2 0 3 3 0 2 2 0 2 0 0 3 1 2 3 0 1 3 0 2 2 1 1 2 0 2
""")

TYPE3_FN42MP_PREFIX_PJ4 = _sym("""
    3 3 0 0 2 0 2 2 3 0 0 2 3 1 1 2 2 0 3 0 0 1 0 3 1 1 3
    2 0 0 2 2 2 0 1 2 0 3 0 3 2 2 0 0 0 2 3 0 1 1 2 0 3 3
    2 1 2 2 2 3 1 0 3 0 0 2 2 1 1 0 3 0 3 0 3 2 1 2 2 1 0
    2 1 0 3 1 0 0 2 3 1 2 1 0 3 2 2 0 3 2 0 0 2 2 3 2 2 3
    2 2 3 3 3 0 1 3 0 2 3 1 0 3 0 2 0 1 1 1 2 0 0 2 2 3 2
    1 2 0 3 1 0 2 0 0 2 0 0 3 1 0 3 0 1 1 2 0 2 1 3 2 0 0
""")


@pytest.fixture
def golden():
    """Pinned 162-symbol streams keyed by message."""
    return {
        "K1ABC FN42 37": K1ABC_FN42_37,
        "G4ABC IO91 10": G4ABC_IO91_10,
        "K1ABC/P 37": TYPE2_SUFFIX_P,
        "PJ4/K1ABC 37": TYPE2_PREFIX_PJ4,
        "NYM/K1ABC 37": TYPE2_PREFIX_NYM,
        "NYN/K1ABC 37": TYPE2_PREFIX_NYN,
        "<K1ABC/P> FN42MP 37": TYPE3_FN42MP_SUFFIX_P,
        "<PJ4/K1ABC> FN42MP 37": TYPE3_FN42MP_PREFIX_PJ4,
    }
