"""Query parameter collection that silently skips empty values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from urllib.parse import urlencode


@dataclass
class URLParams:
    """Multi-valued query parameters; empty, zero and false values are dropped."""

    values: dict[str, list[str]] = field(default_factory=dict)

    def _add(self, name: str, value: str) -> None:
        self.values.setdefault(name, []).append(value)

    def maybe_add(self, name: str, value: str) -> None:
        """Add ``name=value`` unless the value is empty."""
        if value:
            self._add(name, value)

    def maybe_add_int(self, name: str, value: int) -> None:
        """Add ``name=value`` unless the value is zero."""
        if value != 0:
            self._add(name, str(value))

    def maybe_add_bool(self, name: str, value: bool) -> None:
        """Add ``name=true`` if the value is true."""
        if value:
            self._add(name, "true")

    def maybe_add_many(self, name: str, values: Iterable[str] | None) -> None:
        """Add each non-empty value under ``name``."""
        for value in values or ():
            self.maybe_add(name, value)

    def encode(self) -> str:
        """Encode as a query string, with keys in sorted order."""
        return urlencode(
            [(name, value) for name in sorted(self.values) for value in self.values[name]]
        )