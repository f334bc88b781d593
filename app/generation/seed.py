"""Deterministic seed derivation for paginated generation.

A page is regenerated from ``(session_id, page_number)`` alone, so the seed
must be a pure function of those two values.
"""

RECORD_SEED_STRIDE = 1000

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def session_suffix(session_id: str) -> str:
    """Random component of a session id (text after the last underscore)."""
    return session_id.rsplit("_", 1)[-1]


def rolling_hash(text: str) -> int:
    """Polynomial hash ``h = h * 31 + ord(ch)`` wrapped to signed 32-bit."""
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & _INT32_MASK
    if h & _INT32_SIGN:
        h -= 1 << 32
    return h


def derive_seed(session_id: str, page_number: int) -> int:
    """Seed for one page of a session; always non-negative."""
    return abs(rolling_hash(f"{session_suffix(session_id)}{page_number}"))


def record_seed(page_seed: int, index: int) -> int:
    """Seed for the ``index``-th record (0-based) of a page."""
    return page_seed + index * RECORD_SEED_STRIDE


__all__ = ["RECORD_SEED_STRIDE", "session_suffix", "rolling_hash", "derive_seed", "record_seed"]
