"""Typed plugin options.

An option is a named, defaulted and validated configuration value. Each
option declares itself to a settings store (``register``) and later pulls
the raw value the store ingested for its key (``read_back``). Raw values
that do not fit the option's domain never propagate as errors: the option
keeps its default instead.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, TypeVar

from .errors import InvalidRawValue
from .store import SettingsStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Option(ABC, Generic[T]):
    """Base class of all plugin options.

    Args:
        key: Identifier used to look the option up in the settings store
        help_text: Human readable description of the accepted values
        default: Value used until a valid raw value is read back
    """

    def __init__(self, key: str, help_text: str, default: T):
        self.key = key
        self.help_text = help_text
        self.default = default
        self._value = default

    @property
    def value(self) -> T:
        """The resolved value (the default until ``read_back`` finds a valid one)."""
        return self._value

    def register(self, store: SettingsStore) -> None:
        """Declare the option to the settings store."""
        store.declare(self.key, self.help_text, self.default)

    def read_back(self, store: SettingsStore) -> T:
        """Resolve the option from the raw value held by the store.

        An absent raw value keeps the default. An invalid raw value is
        logged and replaced by the default.

        Returns:
            The resolved value
        """
        raw = store.lookup(self.key)
        if raw is None:
            self._value = self.default
            return self._value

        try:
            self._value = self.parse(raw)
        except InvalidRawValue as e:
            logger.warning("%s; using default %r", e, self.default)
            self._value = self.default
        else:
            logger.debug("Option '%s' resolved to %r", self.key, self._value)
        return self._value

    @abstractmethod
    def parse(self, raw: Any) -> T:
        """Convert a raw store value into a member of the option's domain.

        Raises:
            InvalidRawValue: If the raw value is outside the domain
        """

    def describe(self) -> str:
        """Return a one line help entry for the option."""
        return f"{self.key}: {self.help_text} (default: {self.default!r})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, value={self._value!r})"


class EnumOption(Option[T]):
    """Option choosing one member out of a closed set of lowercase tokens.

    The default does not have to be reachable through ``token_map``; such a
    default stands for "let the renderer decide".
    """

    def __init__(self, key: str, help_text: str, default: T, token_map: Mapping[str, T]):
        super().__init__(key, help_text, default)
        self.token_map = dict(token_map)

    @property
    def tokens(self) -> list[str]:
        """Accepted tokens in declared order."""
        return list(self.token_map)

    def parse(self, raw: Any) -> T:
        if not isinstance(raw, str):
            raise InvalidRawValue(self.key, raw, "expected a string")
        try:
            return self.token_map[raw.lower()]
        except KeyError:
            raise InvalidRawValue(
                self.key, raw, f"expected one of {'|'.join(self.token_map)}"
            ) from None


class BooleanOption(Option[bool]):
    """Option accepting the literals ``true`` and ``false``."""

    def parse(self, raw: Any) -> bool:
        # Typed stores may already hand over a bool
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str):
            token = raw.lower()
            if token == "true":
                return True
            if token == "false":
                return False
        raise InvalidRawValue(self.key, raw, "expected true or false")


class NumberOption(Option[int | float]):
    """Option accepting a finite number within inclusive bounds.

    Out of range values are rejected, not clamped. The default itself may
    lie outside the bounds when it is used as an "unset" sentinel. With
    ``integer`` set, numbers with a fractional part are rejected as well.
    """

    def __init__(
        self,
        key: str,
        help_text: str,
        default: int | float,
        min_value: float = -math.inf,
        max_value: float = math.inf,
        integer: bool = False,
    ):
        if min_value > max_value:
            raise ValueError(
                f"Option '{key}': min_value {min_value} is greater than max_value {max_value}"
            )
        super().__init__(key, help_text, default)
        self.min_value = min_value
        self.max_value = max_value
        self.integer = integer

    def parse(self, raw: Any) -> int | float:
        if isinstance(raw, bool):
            raise InvalidRawValue(self.key, raw, "expected a number")

        if isinstance(raw, (int, float)):
            number = raw
        elif isinstance(raw, str):
            number = _parse_number_literal(raw)
            if number is None:
                raise InvalidRawValue(self.key, raw, "expected a number")
        else:
            raise InvalidRawValue(self.key, raw, "expected a number")

        if isinstance(number, float):
            if not math.isfinite(number):
                raise InvalidRawValue(self.key, raw, "expected a finite number")
            if number.is_integer():
                number = int(number)
            elif self.integer:
                raise InvalidRawValue(self.key, raw, "expected an integer")

        if not self.min_value <= number <= self.max_value:
            raise InvalidRawValue(
                self.key, raw, f"expected a value between {self.min_value} and {self.max_value}"
            )
        return number


class StringOption(Option[str]):
    """Option accepting any string verbatim. The empty string means "unset"."""

    def parse(self, raw: Any) -> str:
        if not isinstance(raw, str):
            raise InvalidRawValue(self.key, raw, "expected a string")
        return raw


def _parse_number_literal(text: str) -> int | float | None:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None
