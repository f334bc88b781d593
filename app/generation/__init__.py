"""Fake record generation: field catalog, seeding, assembly and length normalization."""

from app.generation.assembler import Record, RecordAssembler
from app.generation.catalog import CATALOG, FIELD_TAGS, FIELD_TYPES, FieldType, ValueKind
from app.generation.normalizer import LengthSchema, normalize, sample_schema
from app.generation.seed import derive_seed, record_seed
from app.generation.value_generator import ValueGenerator

__all__ = [
    "Record",
    "RecordAssembler",
    "CATALOG",
    "FIELD_TAGS",
    "FIELD_TYPES",
    "FieldType",
    "ValueKind",
    "LengthSchema",
    "normalize",
    "sample_schema",
    "derive_seed",
    "record_seed",
    "ValueGenerator",
]
