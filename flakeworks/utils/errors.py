"""Errors tailored for this project.

This module provides:
- InvalidConfigurationError: An error if a worker or datacenter ID is out of range
- ClockMovedBackwardError: An error if the clock reads earlier than the last issued ID
"""


class InvalidConfigurationError(ValueError):
    """A worker or datacenter ID is outside its allowed range."""

    def __init__(self, field: str, value: int, minimum: int, maximum: int):
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{field} can't be greater than {maximum} or less than {minimum}, got {value}"
        )


class ClockMovedBackwardError(RuntimeError):
    """The system clock went back past the last timestamp an ID was issued for."""

    def __init__(self, last_timestamp: int, offset: int):
        self.last_timestamp = last_timestamp
        self.offset = offset
        super().__init__(
            f"Clock moved backwards. Rejecting requests until {last_timestamp}. "
            f"Refusing to generate id for {offset} milliseconds"
        )
