#!/usr/bin/env python3
"""Tests for uniform field-length normalization and emoji cleanup"""

import random
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from app.generation.normalizer import (
    PAD_ALPHABET,
    clean_value,
    contains_emoji,
    normalize,
    sample_schema,
    schema_from_record,
    strip_emoji,
)
from app.validation.models import GenerationConfig


def test_normalize_truncates_exactly():
    schema = {"firstName": 5}
    assert normalize("Christopher", "firstName", schema, random.Random(1)) == "Chris"


def test_normalize_pads_with_alphanumerics():
    schema = {"firstName": 10}
    value = normalize("Ann", "firstName", schema, random.Random(1))
    assert len(value) == 10
    assert value.startswith("Ann")
    assert all(ch in PAD_ALPHABET for ch in value[3:])


def test_normalize_padding_is_reproducible_with_same_rng_seed():
    schema = {"city": 20}
    first = normalize("Oslo", "city", schema, random.Random(42))
    second = normalize("Oslo", "city", schema, random.Random(42))
    assert first == second


def test_normalize_leaves_exact_length_values_alone():
    assert normalize("abcde", "firstName", {"firstName": 5}, random.Random(0)) == "abcde"


def test_normalize_skips_unlisted_and_none_tags():
    rng = random.Random(0)
    schema = {"uuid": None, "firstName": 4}
    uid = "123e4567-e89b-12d3-a456-426614174000"
    assert normalize(uid, "uuid", schema, rng) == uid
    assert normalize("Paris", "city", schema, rng) == "Paris"
    assert normalize("Paris", "city", None, rng) == "Paris"


def test_schema_from_record_first_occurrence_wins():
    record = {
        "uuid_1": "123e4567-e89b-12d3-a456-426614174000",
        "firstName_2": "Ann",
        "age_3": 42,
        "nested_object_1": {"firstName_1": "Bartholomew", "boolean_2": True},
    }
    schema = schema_from_record(record)
    assert schema["uuid"] is None
    assert schema["firstName"] == 3
    assert schema["age"] is None
    assert schema["boolean"] is None


def test_schema_from_record_unknown_tag_maps_to_none():
    assert schema_from_record({"mystery_1": "value"}) == {"mystery": None}


def test_sample_schema_covers_every_generated_type():
    config = GenerationConfig(num_fields=12, num_objects=1, num_nesting=1, nested_fields=3)
    schema = sample_schema(config, datetime(2024, 1, 1))
    assert schema["uuid"] is None
    assert isinstance(schema["firstName"], int)
    assert schema["age"] is None


def test_strip_emoji_removes_emoji_and_trims():
    assert strip_emoji("hello \U0001F600") == "hello"
    assert strip_emoji(12) == 12
    assert contains_emoji("sun ☀")
    assert not contains_emoji("plain text")


def test_clean_value_keeps_emoji_fields():
    smile = "\U0001F600"
    assert clean_value("emoji_48", smile) == smile
    assert clean_value("bio_8", f"nice {smile}") == "nice"
    assert clean_value("age_7", 30) == 30
