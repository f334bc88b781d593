"""Record assembly.

Fields are named ``{tag}_{ordinal}`` and take their types from the catalog in
order, wrapping around when an object has more fields than the catalog has
types. Nested objects are named ``nested_object_{n}``.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.generation.catalog import field_name, field_type_at
from app.generation.normalizer import LengthSchema, clean_value, normalize
from app.generation.seed import record_seed
from app.generation.value_generator import ValueGenerator
from app.logger import Logger, session_logger
from app.validation.models import GenerationConfig

Record = Dict[str, Any]


def utc_now() -> datetime:
    """Naive UTC timestamp used as the default date anchor."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class RecordAssembler:
    """Builds records from a GenerationConfig.

    Stateless apart from the logger: schema, seed and anchor are passed on
    every call, and values come from the calling thread's Faker instance.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self.logger: Logger = logger or session_logger

    def assemble(
        self,
        config: GenerationConfig,
        use_uniform_length: bool = False,
        seed: Optional[int] = None,
        schema: Optional[LengthSchema] = None,
        anchor: Optional[datetime] = None,
    ) -> Record:
        """Build one record.

        The thread's generator is reseeded with ``seed`` before the first
        value is drawn, so equal arguments give equal records.
        """
        generator = ValueGenerator.for_current_thread(self.logger)
        generator.seed(seed)
        active_schema = schema if use_uniform_length else None
        return self._build_object(
            generator,
            config.num_fields,
            config.num_objects,
            config.num_nesting,
            config.nested_fields,
            active_schema,
            anchor or utc_now(),
        )

    def generate_records(
        self,
        config: GenerationConfig,
        count: int,
        page_seed: Optional[int] = None,
        schema: Optional[LengthSchema] = None,
        anchor: Optional[datetime] = None,
    ) -> List[Record]:
        """Build ``count`` records.

        With a ``page_seed`` each record gets its own sub-seed, so records
        differ from one another while the page as a whole is reproducible.
        """
        anchor = anchor or utc_now()
        records = []
        for index in range(count):
            seed = record_seed(page_seed, index) if page_seed is not None else None
            records.append(
                self.assemble(
                    config,
                    use_uniform_length=config.uniform_field_length,
                    seed=seed,
                    schema=schema,
                    anchor=anchor,
                )
            )
        return records

    def _build_object(
        self,
        generator: ValueGenerator,
        num_fields: int,
        num_objects: int,
        depth: int,
        nested_fields: int,
        schema: Optional[LengthSchema],
        anchor: datetime,
    ) -> Record:
        record = self._build_flat(generator, num_fields, schema, anchor)
        if depth > 0:
            for index in range(num_objects):
                name = f"nested_object_{index + 1}"
                if depth > 1:
                    record[name] = self._build_object(
                        generator, nested_fields, num_objects, depth - 1, nested_fields, schema, anchor
                    )
                else:
                    record[name] = self._build_flat(generator, nested_fields, schema, anchor)
        return record

    def _build_flat(
        self,
        generator: ValueGenerator,
        num_fields: int,
        schema: Optional[LengthSchema],
        anchor: datetime,
    ) -> Record:
        record: Record = {}
        for index in range(num_fields):
            tag = field_type_at(index).tag
            name = field_name(tag, index + 1)
            value = clean_value(name, generator.generate(tag, anchor))
            if schema:
                value = normalize(value, tag, schema, generator.rng)
            record[name] = value
        return record
