"""Takes generated IDs apart.

This module provides:
- IdParts: a named tuple of the fields packed into an ID
- decode_id: a function to split an ID back into its fields
"""

from datetime import UTC, datetime
from typing import NamedTuple

from ..constants import (
    DATACENTER_ID_SHIFT,
    EPOCH,
    MAX_DATACENTER_ID,
    MAX_ID,
    MAX_WORKER_ID,
    SEQUENCE_MASK,
    TIMESTAMP_LEFT_SHIFT,
    TIMESTAMP_MASK,
    WORKER_ID_SHIFT,
)


class IdParts(NamedTuple):
    """Fields of a decoded ID. ``timestamp`` is in Unix milliseconds."""

    timestamp: int
    datacenter_id: int
    worker_id: int
    sequence: int

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp / 1000, tz=UTC)


def decode_id(value: int, epoch: int = EPOCH) -> IdParts:
    """Splits an ID into timestamp, datacenter ID, worker ID and sequence.

    Args:
        value (int): The ID to decode
        epoch (int): The epoch the ID was generated against, in milliseconds
    Returns:
        IdParts: The decoded fields.

    Raises:
        TypeError: value is not an integer
        ValueError: value does not fit into a non-negative 64-bit integer
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("value must be an integer")
    if not 0 <= value <= MAX_ID:
        raise ValueError("value must be inside [0;2^63)")
    return IdParts(
        timestamp=((value >> TIMESTAMP_LEFT_SHIFT) & TIMESTAMP_MASK) + epoch,
        datacenter_id=(value >> DATACENTER_ID_SHIFT) & MAX_DATACENTER_ID,
        worker_id=(value >> WORKER_ID_SHIFT) & MAX_WORKER_ID,
        sequence=value & SEQUENCE_MASK,
    )
