"""Errors raised by the one-time pad core.

Dropped characters and unknown codes are not errors: normalization and
decoding degrade silently instead.
"""


class PadError(Exception):
    """Base class for one-time pad errors."""


class InsufficientKeyLength(PadError, ValueError):
    """The key is shorter than the sequence it is paired with."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Key too short: need {required} values, got {available}"
        )


class ParseError(PadError, ValueError):
    """A numeric group could not be parsed as an integer."""

    def __init__(self, token: str, position: int):
        self.token = token
        self.position = position
        super().__init__(f"Invalid group {token!r} at position {position}")
