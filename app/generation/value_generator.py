"""Faker-backed value generation.

Each thread owns its own Faker instance. A caller seeds it and then draws a
whole record without yielding the thread, so seed-then-draw sequences from
concurrent requests never interleave on one random source.
"""

import threading
from datetime import datetime
from typing import Any, Optional

from faker import Faker

from app.generation.catalog import CATALOG
from app.logger import Logger, session_logger

DEFAULT_LOCALE = "en_US"

_local = threading.local()


def get_faker() -> Faker:
    """Return the calling thread's Faker instance, creating it on first use."""
    fake = getattr(_local, "faker", None)
    if fake is None:
        fake = Faker(DEFAULT_LOCALE)
        _local.faker = fake
    return fake


class ValueGenerator:
    """Produces one realistic value per field-type tag.

    Wraps a single Faker instance; not safe to share between threads. Use
    ``ValueGenerator.for_current_thread()`` to get one bound to the calling
    thread's instance.
    """

    def __init__(self, faker: Faker, logger: Optional[Logger] = None):
        self.faker = faker
        self.logger: Logger = logger or session_logger

    @classmethod
    def for_current_thread(cls, logger: Optional[Logger] = None) -> "ValueGenerator":
        return cls(get_faker(), logger=logger)

    @property
    def rng(self):
        """The random.Random behind the Faker instance."""
        return self.faker.random

    def seed(self, seed: Optional[int]) -> None:
        """Reseed the underlying Faker instance.

        ``None`` reseeds from OS entropy so unseeded draws do not continue a
        previous request's sequence.
        """
        self.faker.seed_instance(seed)

    def generate(self, tag: str, anchor: datetime) -> Any:
        field = CATALOG.get(tag)
        if field is None:
            self.logger.debug("Unknown field type, using fallback value", field_type=tag)
            return self.faker.word()
        return field.generate(self.faker, anchor)
