"""Settings stores the plugin options are declared to and read back from."""

from dataclasses import dataclass
from typing import Any, Mapping, Protocol


class SettingsStore(Protocol):
    """Contract of the host tool's settings store."""

    def declare(self, key: str, help_text: str, default: Any) -> None:
        ...

    def lookup(self, key: str) -> Any | None:
        """Return the raw value ingested for ``key`` or None if none was supplied."""
        ...


@dataclass(frozen=True)
class Declaration:
    """A setting declared to a store."""
    key: str
    help_text: str
    default: Any


class MemorySettingsStore:
    """Dictionary backed settings store.

    Options are declared first; raw values are ingested afterwards from a
    config file, the host tool or a test.
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._declarations: dict[str, Declaration] = {}
        self._values: dict[str, Any] = dict(values or {})

    def declare(self, key: str, help_text: str, default: Any) -> None:
        self._declarations[key] = Declaration(key, help_text, default)

    def lookup(self, key: str) -> Any | None:
        return self._values.get(key)

    def set_value(self, key: str, raw: Any) -> None:
        self._values[key] = raw

    def update(self, values: Mapping[str, Any]) -> None:
        self._values.update(values)

    @property
    def declarations(self) -> list[Declaration]:
        """Declarations in the order they were made."""
        return list(self._declarations.values())

    def is_declared(self, key: str) -> bool:
        return key in self._declarations

    def undeclared_keys(self) -> list[str]:
        """Ingested keys no option declared, usually typos in a config file."""
        return [key for key in self._values if key not in self._declarations]

    def help_text(self) -> str:
        """Render one help line per declaration."""
        lines = []
        for declaration in self._declarations.values():
            lines.append(
                f"  --{declaration.key}  {declaration.help_text} "
                f"(default: {declaration.default!r})"
            )
        return "\n".join(lines)
