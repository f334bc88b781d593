"""datagen: configurable fake data generator with deterministic pagination."""

__version__ = "1.0.0"
