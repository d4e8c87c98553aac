"""Pulls pieces together to hand out a ready Snowflake ID generator.

Importing the package reads no environment; only ``create_generator`` does.

This module provides:
- create_generator: a function to get a Generator considering a dev/prod environment
- Generator: the ID generator itself
- decode_id: a function to split an ID back into its fields
"""

import logging

from .ids import Generator
from .utils.decode import IdParts, decode_id
from .utils.errors import ClockMovedBackwardError, InvalidConfigurationError
from .utils.logging import setup_logging

__all__ = [
    "ClockMovedBackwardError",
    "Generator",
    "IdParts",
    "InvalidConfigurationError",
    "create_generator",
    "decode_id",
]


def create_generator(config_name="development"):
    """Initializes a Generator with worker and datacenter IDs taken from config.

    Raises:
        KeyError: config_name is not a known environment
        ValueError: a configured ID is not an integer
        InvalidConfigurationError: a configured ID is out of range
    """
    from .config import load_config

    settings = load_config(config_name)

    setup_logging(settings)

    generator = Generator(worker_id=settings.WORKER_ID, datacenter_id=settings.DATACENTER_ID)
    logging.getLogger(__name__).info(
        "ID generator ready: worker %d, datacenter %d",
        generator.worker_id,
        generator.datacenter_id,
    )
    return generator
