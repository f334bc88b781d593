#!/usr/bin/env python3
"""Tests for the field-type catalog and value generation"""

import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest
from faker import Faker

from app.generation.catalog import (
    CATALOG,
    FIELD_TAGS,
    FIELD_TYPES,
    ValueKind,
    field_name,
    field_type_at,
    tag_from_field_name,
)
from app.generation.value_generator import ValueGenerator, get_faker

ANCHOR = datetime(2024, 5, 1, 12, 0, 0)


def test_uuid_is_first_field_type():
    assert FIELD_TYPES[0].tag == "uuid"


def test_tags_are_unique():
    assert len(FIELD_TAGS) == len(set(FIELD_TAGS))
    assert len(CATALOG) == len(FIELD_TYPES)


def test_field_type_at_wraps_around():
    n = len(FIELD_TYPES)
    assert field_type_at(0) is FIELD_TYPES[0]
    assert field_type_at(n) is FIELD_TYPES[0]
    assert field_type_at(n + 3) is FIELD_TYPES[3]


def test_field_name_round_trip_for_camel_case_tags():
    assert field_name("firstName", 2) == "firstName_2"
    assert tag_from_field_name("firstName_2") == "firstName"
    assert tag_from_field_name("creditCardCVV_120") == "creditCardCVV"


def test_identifier_types_preserve_length():
    assert CATALOG["uuid"].preserve_length
    assert CATALOG["nanoid"].preserve_length
    assert not CATALOG["uuid"].normalizable
    assert not CATALOG["nanoid"].normalizable


def test_non_string_types_are_not_normalizable():
    for tag in ("age", "salary", "latitude", "longitude", "price", "rating", "port", "number", "boolean"):
        assert not CATALOG[tag].is_string, tag
        assert not CATALOG[tag].normalizable, tag


@pytest.mark.parametrize("field", FIELD_TYPES, ids=lambda f: f.tag)
def test_every_generator_returns_its_declared_kind(field):
    fake = Faker("en_US")
    fake.seed_instance(1234)
    value = field.generate(fake, ANCHOR)
    expected = {
        ValueKind.STRING: str,
        ValueKind.INTEGER: int,
        ValueKind.FLOAT: float,
        ValueKind.BOOLEAN: bool,
    }[field.kind]
    assert isinstance(value, expected)
    if field.kind == ValueKind.INTEGER:
        assert not isinstance(value, bool)


def test_uuid_and_nanoid_have_natural_lengths():
    fake = Faker("en_US")
    fake.seed_instance(7)
    assert len(CATALOG["uuid"].generate(fake, ANCHOR)) == 36
    assert len(CATALOG["nanoid"].generate(fake, ANCHOR)) == 21


def test_relative_dates_follow_the_anchor():
    fake = Faker("en_US")
    fake.seed_instance(3)
    future = CATALOG["futureDate"].generate(fake, ANCHOR)
    recent = CATALOG["recentDate"].generate(fake, ANCHOR)
    assert future > ANCHOR.date().isoformat()
    assert recent <= ANCHOR.date().isoformat()
    stamp = CATALOG["date"].generate(fake, ANCHOR)
    assert stamp.endswith("Z")
    assert stamp[:10] in ("2024-04-30", "2024-05-01")


def test_seeded_generator_is_reproducible():
    generator = ValueGenerator(Faker("en_US"))
    generator.seed(99)
    first = [generator.generate(tag, ANCHOR) for tag in FIELD_TAGS]
    generator.seed(99)
    second = [generator.generate(tag, ANCHOR) for tag in FIELD_TAGS]
    assert first == second


def test_unknown_tag_falls_back_to_a_word():
    generator = ValueGenerator(Faker("en_US"))
    generator.seed(1)
    value = generator.generate("notARealType", ANCHOR)
    assert isinstance(value, str) and value


def test_get_faker_is_per_thread():
    import threading

    main = get_faker()
    assert get_faker() is main

    seen = []
    thread = threading.Thread(target=lambda: seen.append(get_faker()))
    thread.start()
    thread.join()
    assert seen and seen[0] is not main
