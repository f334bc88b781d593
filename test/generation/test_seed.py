#!/usr/bin/env python3
"""Tests for page and record seed derivation"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from app.generation.seed import (
    RECORD_SEED_STRIDE,
    derive_seed,
    record_seed,
    rolling_hash,
    session_suffix,
)


def test_session_suffix_is_text_after_last_underscore():
    assert session_suffix("session_1700000000000_k3j9x2abc") == "k3j9x2abc"
    assert session_suffix("nounderscore") == "nounderscore"


def test_rolling_hash_small_inputs():
    assert rolling_hash("") == 0
    assert rolling_hash("a") == 97
    assert rolling_hash("ab") == 97 * 31 + 98


def test_rolling_hash_matches_known_32bit_value():
    """Same polynomial as the classic 32-bit string hash"""
    assert rolling_hash("hello") == 99162322


def test_rolling_hash_wraps_to_signed_32bit():
    value = rolling_hash("x" * 200)
    assert -(2**31) <= value < 2**31


def test_derive_seed_is_deterministic_and_non_negative():
    sid = "session_1700000000000_abcdefghi"
    for page in (1, 2, 3, 250, 10000):
        seed = derive_seed(sid, page)
        assert seed == derive_seed(sid, page)
        assert seed >= 0


def test_derive_seed_uses_suffix_and_page_only():
    assert derive_seed("session_1_abcdefghi", 3) == derive_seed("session_2_abcdefghi", 3)
    assert derive_seed("session_1_abcdefghi", 3) == abs(rolling_hash("abcdefghi3"))


def test_derive_seed_differs_between_pages():
    sid = "session_1700000000000_abcdefghi"
    seeds = {derive_seed(sid, page) for page in range(1, 101)}
    assert len(seeds) == 100


def test_record_seed_stride():
    assert record_seed(42, 0) == 42
    assert record_seed(42, 1) == 42 + RECORD_SEED_STRIDE
    assert record_seed(42, 7) == 42 + 7 * RECORD_SEED_STRIDE
