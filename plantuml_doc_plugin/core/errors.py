"""Errors raised while validating raw option values."""

from typing import Any


class InvalidRawValue(ValueError):
    """A raw value was supplied for an option but does not fit its domain.

    Raised by ``Option.parse`` and always recovered by ``Option.read_back``,
    which falls back to the option's default.
    """

    def __init__(self, key: str, raw: Any, reason: str):
        self.key = key
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid value {raw!r} for option '{key}': {reason}")
