"""Reading ARIA response records and rendering them as text.

ARIA's endpoint families disagree on how a record is spelled. The same
patient can come back as ``{"patientId": "123"}`` or as
``{"PatientId": {"Value": "123"}}``. Record hides that: keys are matched
case-insensitively and ``{"Value": ...}`` wrappers are unwrapped, so each
output column names one canonical field (plus an alias where ARIA uses a
different name altogether, like ``Birthdate`` for ``dateOfBirth``).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any


def unwrap(value: Any) -> Any:
    """Return the inner value of a ``{"Value": x}`` wrapper, else value itself."""
    if isinstance(value, Mapping) and "Value" in value:
        return value["Value"]
    return value


def is_blank(value: Any) -> bool:
    return value is None or value == "" or value == []


class Record(Mapping[str, Any]):
    """Case-insensitive, unwrapped view of one response record."""

    def __init__(self, raw: Any) -> None:
        items = raw.items() if isinstance(raw, Mapping) else ()
        self._data = {str(key).lower(): unwrap(value) for key, value in items}

    def __getitem__(self, key: str) -> Any:
        return self._data[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def first(self, *keys: str) -> Any:
        """Value of the first key that is present and not blank, else None."""
        for key in keys:
            value = self._data.get(key.lower())
            if not is_blank(value):
                return value
        return None


@dataclass(frozen=True)
class Column:
    """One ``Label: value`` line of a rendered record."""

    label: str
    value: Callable[[Record], Any]
    default: str = "N/A"
    fmt: str = "{}"

    def render(self, record: Record) -> str:
        value = self.value(record)
        if is_blank(value):
            value = self.default
        return f"{self.label}: {self.fmt.format(value)}"


def field(label: str, *keys: str, default: str = "N/A", fmt: str = "{}") -> Column:
    """Column showing the first non-blank of ``keys`` (aliases in order)."""
    return Column(label, lambda record: record.first(*keys), default=default, fmt=fmt)


def flag(label: str, *keys: str) -> Column:
    """Yes/No column for a boolean field; anything missing counts as No."""
    return Column(label, lambda record: "Yes" if record.first(*keys) else "No")


def joined(label: str, *keys: str, sep: str = " ", default: str = "N/A") -> Column:
    """Column joining several fields, skipping the blank ones."""

    def value(record: Record) -> str:
        return sep.join(str(record.first(key)) for key in keys if not is_blank(record.first(key)))

    return Column(label, value, default=default)


def computed(label: str, func: Callable[[Record], Any], default: str = "N/A") -> Column:
    return Column(label, func, default=default)


def render_block(record: Any, columns: tuple[Column, ...]) -> str:
    """Render one record as a blank line, its columns, then ``---``."""
    view = record if isinstance(record, Record) else Record(record)
    lines = ["", *(column.render(view) for column in columns), "---"]
    return "\n".join(lines)
