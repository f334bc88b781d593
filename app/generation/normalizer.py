"""Uniform field-length support.

A length schema maps field-type tags to a target character length. It is
sampled once per session from one naturally generated record; afterwards
every string value of a participating type is padded or truncated to exactly
that length. ``None`` in the schema means "never normalize" and is used for
identifier types and for non-string types.
"""

import random
import re
import string
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

from app.generation.catalog import CATALOG, tag_from_field_name

if TYPE_CHECKING:
    from app.generation.assembler import RecordAssembler
    from app.validation.models import GenerationConfig

LengthSchema = Dict[str, Optional[int]]

PAD_ALPHABET = string.ascii_letters + string.digits

EMOJI_FIELD_PREFIX = "emoji"

_EMOJI_RE = re.compile(
    "[\U0001F600-\U0001F64F"
    "\U0001F300-\U0001F5FF"
    "\U0001F680-\U0001F6FF"
    "\U0001F1E0-\U0001F1FF"
    "\u2600-\u26FF"
    "\u2700-\u27BF"
    "\U0001F900-\U0001F9FF"
    "\U0001F018-\U0001F270"
    "\u238C-\u2454"
    "\u20D0-\u20FF]"
)


def contains_emoji(value: Any) -> bool:
    return isinstance(value, str) and _EMOJI_RE.search(value) is not None


def strip_emoji(value: Any) -> Any:
    """Remove emoji code points from strings; other values pass through."""
    if not isinstance(value, str):
        return value
    return _EMOJI_RE.sub("", value).strip()


def clean_value(name: str, value: Any) -> Any:
    """Strip emoji from every field except the ``emoji_*`` ones."""
    if name.lower().startswith(EMOJI_FIELD_PREFIX):
        return value
    if contains_emoji(value):
        return strip_emoji(value)
    return value


def normalize(value: Any, tag: str, schema: Optional[LengthSchema], rng: random.Random) -> Any:
    """Coerce ``value`` to the schema length for ``tag``.

    Values of tags that are absent from the schema or mapped to ``None`` are
    returned unchanged. Truncation is exact; padding appends characters from
    ``PAD_ALPHABET`` drawn from ``rng``.
    """
    if not schema:
        return value
    target = schema.get(tag)
    if target is None:
        return value

    text = str(value)
    if len(text) > target:
        return text[:target]
    if len(text) < target:
        padding = "".join(rng.choice(PAD_ALPHABET) for _ in range(target - len(text)))
        return text + padding
    return text


def schema_from_record(record: Dict[str, Any], schema: Optional[LengthSchema] = None) -> LengthSchema:
    """Walk a record and record each field type's natural length.

    The first occurrence of a type wins. Types that are not normalizable map
    to ``None``; so do tags missing from the catalog.
    """
    if schema is None:
        schema = {}
    for name, value in record.items():
        if isinstance(value, dict):
            schema_from_record(value, schema)
            continue
        tag = tag_from_field_name(name)
        if tag in schema:
            continue
        field = CATALOG.get(tag)
        if field is None or not field.normalizable:
            schema[tag] = None
        else:
            schema[tag] = len(str(value))
    return schema


def sample_schema(
    config: "GenerationConfig",
    anchor: datetime,
    assembler: Optional["RecordAssembler"] = None,
) -> LengthSchema:
    """Sample one natural record and derive the session's length schema."""
    if assembler is None:
        from app.generation.assembler import RecordAssembler

        assembler = RecordAssembler()
    sample = assembler.assemble(config, use_uniform_length=False, seed=None, anchor=anchor)
    return schema_from_record(sample)


__all__ = [
    "LengthSchema",
    "PAD_ALPHABET",
    "contains_emoji",
    "strip_emoji",
    "clean_value",
    "normalize",
    "schema_from_record",
    "sample_schema",
]
