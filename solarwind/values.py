"""
Value coercion layer for solarwind.

NOAA solar wind products are JSON arrays of arrays whose cells are a mix of
strings, integers and nulls. Before any typed logic runs, every cell is
classified into one of three immutable variants:

- ``Text``: a JSON string (NOAA sends most readings as strings, e.g. "-4.47").
- ``Integer``: a JSON integer (e.g. plasma temperature 117208).
- ``Absent``: a JSON null. NOAA routinely omits readings this way.

Each variant exposes typed accessors with a fixed policy:

============  ===================  ==============  ============
accessor      Text                 Integer         Absent
============  ===================  ==============  ============
as_integer    parsed or None       value           0
as_float      parsed or None       widened         0.0
as_text       itself               str(value)      ""
as_timestamp  parsed or raises     raises          raises
============  ===================  ==============  ============

Missing numeric readings therefore resolve to zero, while a missing or
non-textual time tag is always an error.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from solarwind.exceptions import InvalidFormatError

# Layout of NOAA time tags, spelled the way NOAA documents it.
TIMESTAMP_FORMAT = "yyyy-MM-dd HH:mm:ss.SSS"

_STRPTIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
_TIMESTAMP_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}\.[0-9]{3}"
)
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_integer(text: str) -> int | None:
    """Parse a base-10 integer literal; ``None`` if it is not one or overflows int64."""
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def _parse_float(text: str) -> float | None:
    """Parse a decimal or scientific float literal; ``None`` otherwise."""
    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    return float(text)


class CellValue(ABC):
    """A classified JSON cell. See the module docstring for the coercion policy."""

    __slots__ = ()

    @property
    @abstractmethod
    def raw(self) -> str | int | None:
        """The JSON value this cell was classified from."""

    @abstractmethod
    def as_integer(self) -> int | None:
        ...

    @abstractmethod
    def as_float(self) -> float | None:
        ...

    @abstractmethod
    def as_text(self) -> str:
        ...

    @abstractmethod
    def as_timestamp(self) -> datetime:
        ...


@dataclass(frozen=True)
class Text(CellValue):
    """A JSON string cell."""

    value: str

    @property
    def raw(self) -> str:
        return self.value

    def as_integer(self) -> int | None:
        return _parse_integer(self.value)

    def as_float(self) -> float | None:
        return _parse_float(self.value)

    def as_text(self) -> str:
        return self.value

    def as_timestamp(self) -> datetime:
        """Parse a NOAA time tag (``yyyy-MM-dd HH:mm:ss.SSS``) as a UTC datetime.

        The layout is matched exactly: four-digit year, two-digit fields and
        three-digit milliseconds, no offset suffix.

        Raises:
            InvalidFormatError: If the text does not follow the layout or
                names an impossible date (e.g. month 13).
        """
        parsed: datetime | None = None
        if _TIMESTAMP_PATTERN.fullmatch(self.value):
            try:
                parsed = datetime.strptime(self.value, _STRPTIME_FORMAT)
            except ValueError:
                parsed = None
        if parsed is None:
            raise InvalidFormatError(
                "Unable to parse date into expected format. "
                f"Expected format {TIMESTAMP_FORMAT}, got {self.value}."
            )
        return parsed.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class Integer(CellValue):
    """A JSON integer cell (always within int64)."""

    value: int

    @property
    def raw(self) -> int:
        return self.value

    def as_integer(self) -> int:
        return self.value

    def as_float(self) -> float:
        return float(self.value)

    def as_text(self) -> str:
        return str(self.value)

    def as_timestamp(self) -> datetime:
        raise InvalidFormatError(
            f"Attempted to construct a date from an integer. Int value: {self.value}."
        )


@dataclass(frozen=True)
class Absent(CellValue):
    """A JSON null cell."""

    @property
    def raw(self) -> None:
        return None

    def as_integer(self) -> int:
        return 0

    def as_float(self) -> float:
        return 0.0

    def as_text(self) -> str:
        return ""

    def as_timestamp(self) -> datetime:
        raise InvalidFormatError("Attempted to construct a date from a JSON null.")


ABSENT = Absent()


def classify(element: Any) -> CellValue:
    """Classify one decoded JSON scalar into a ``CellValue``.

    ``str`` becomes ``Text``, ``None`` becomes ``Absent``, and an integer
    becomes ``Integer``. A float is accepted only when it is integer-valued
    (``5.0`` from a JSON ``5.0`` literal), matching how NOAA's integer
    columns can be serialised.

    Raises:
        InvalidFormatError: For booleans, fractional numbers, objects,
            arrays and integers outside the int64 range.
    """
    if element is None:
        return ABSENT
    if isinstance(element, str):
        return Text(element)
    # bool is a subclass of int; a JSON true/false is never a reading.
    if isinstance(element, int) and not isinstance(element, bool):
        if _INT64_MIN <= element <= _INT64_MAX:
            return Integer(element)
    elif isinstance(element, float) and element.is_integer():
        if _INT64_MIN <= element <= _INT64_MAX:
            return Integer(int(element))
    raise InvalidFormatError(f"Unsupported value type in JSON: {element!r}.")


def classify_table(document: list[list[Any]]) -> list[list[CellValue]]:
    """Classify every cell of every row, header included.

    Raises:
        InvalidFormatError: On the first unsupported cell, or if a row is
            not a JSON array.
    """
    table: list[list[CellValue]] = []
    for row in document:
        if not isinstance(row, list):
            raise InvalidFormatError(f"Unsupported value type in JSON: {row!r}.")
        table.append([classify(element) for element in row])
    return table


def format_timestamp(value: datetime) -> str:
    """Render a datetime in the NOAA time tag layout (UTC, milliseconds).

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}."
        f"{value.microsecond // 1000:03d}"
    )
