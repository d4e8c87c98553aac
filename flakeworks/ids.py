"""A module for handling unique ID generation.

This module provides:
- Generator: a class that spits out unique, time-ordered 64-bit IDs
"""

import logging
from collections.abc import Callable
from threading import Lock
from time import time

from .constants import (
    DATACENTER_ID_BITS,
    DATACENTER_ID_SHIFT,
    EPOCH,
    MAX_DATACENTER_ID,
    MAX_WORKER_ID,
    NEVER_GENERATED,
    SEQUENCE_BITS,
    SEQUENCE_MASK,
    TIMESTAMP_LEFT_SHIFT,
    WORKER_ID_BITS,
    WORKER_ID_SHIFT,
)
from .utils.errors import ClockMovedBackwardError, InvalidConfigurationError


def current_millis() -> int:
    """Reads the wall clock in milliseconds since the Unix epoch."""
    return int(time() * 1000)


class Generator:
    """A class that spits out unique IDs.

    An ID packs, from the most significant bit down, a zero sign bit,
    41 bits of milliseconds since ``EPOCH``, 5 bits of datacenter ID,
    5 bits of worker ID and a 12-bit per-millisecond sequence.

    One instance is safe to share between threads.
    """

    def __init__(self, worker_id: int, datacenter_id: int, clock: Callable[[], int] | None = None):
        """Checks the identifiers and sets reference variables for enforcing uniqueness.

        Args:
            worker_id (int): The worker ID, inside [0;31]
            datacenter_id (int): The datacenter ID, inside [0;31]
            clock (Callable[[], int] | None): Returns the current time in milliseconds.
                Defaults to the system clock

        Raises:
            InvalidConfigurationError: worker_id or datacenter_id is out of range
        """
        if not 0 <= worker_id <= MAX_WORKER_ID:
            raise InvalidConfigurationError("worker_id", worker_id, 0, MAX_WORKER_ID)
        if not 0 <= datacenter_id <= MAX_DATACENTER_ID:
            raise InvalidConfigurationError("datacenter_id", datacenter_id, 0, MAX_DATACENTER_ID)

        self._worker_id = worker_id
        self._datacenter_id = datacenter_id
        self._clock = clock if clock is not None else current_millis
        self._last_timestamp = NEVER_GENERATED
        self._sequence = 0
        self.lock = Lock()
        self.logger = logging.getLogger(__name__)

    @property
    def worker_id(self) -> int:
        return self._worker_id

    @property
    def datacenter_id(self) -> int:
        return self._datacenter_id

    @property
    def last_timestamp(self) -> int:
        """Millisecond of the last issued ID, or -1 if none was issued yet."""
        return self._last_timestamp

    @property
    def sequence(self) -> int:
        return self._sequence

    def next_id(self) -> int:
        """Generates a 64-bit Snowflake ID.

        Returns:
            int: The ID

        Raises:
            ClockMovedBackwardError: The clock reads earlier than the last issued ID
        """
        with self.lock:
            timestamp = self._clock()
            if timestamp < self._last_timestamp:
                offset = self._last_timestamp - timestamp
                self.logger.warning(
                    "Clock moved backwards by %d ms, refusing to generate IDs until %d",
                    offset,
                    self._last_timestamp,
                )
                raise ClockMovedBackwardError(self._last_timestamp, offset)

            if timestamp == self._last_timestamp:
                self._sequence = (self._sequence + 1) & SEQUENCE_MASK
                if self._sequence == 0:
                    self.logger.debug("Sequence exhausted at %d, waiting for next millisecond", timestamp)
                    timestamp = self._til_next_millis()
            else:
                self._sequence = 0

            self._last_timestamp = timestamp

            return (
                ((timestamp - EPOCH) << TIMESTAMP_LEFT_SHIFT)
                | (self._datacenter_id << DATACENTER_ID_SHIFT)
                | (self._worker_id << WORKER_ID_SHIFT)
                | self._sequence
            )

    def _til_next_millis(self) -> int:
        # caller holds the lock
        timestamp = self._clock()
        while timestamp <= self._last_timestamp:
            timestamp = self._clock()
        return timestamp

    def __str__(self) -> str:
        return (
            f"timestamp left shift {TIMESTAMP_LEFT_SHIFT}, datacenter id bits {DATACENTER_ID_BITS}, "
            f"worker id bits {WORKER_ID_BITS}, sequence bits {SEQUENCE_BITS}, "
            f"worker id {self._worker_id}, datacenter id {self._datacenter_id}"
        )

    def __repr__(self) -> str:
        return f"Generator(worker_id={self._worker_id}, datacenter_id={self._datacenter_id})"
