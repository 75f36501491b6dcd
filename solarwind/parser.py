"""
Row parser for NOAA solar wind tables.

One generic parser serves every product: the product descriptor supplies the
expected field count and the type of each column, and the record type
supplies the constructor. Rows must already be classified into
``CellValue`` objects (see ``values.classify_table``) and must not include
the header row.

Parsing is all-or-nothing. The first malformed row raises
``InvalidFormatError`` and no records are returned for the batch.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from operator import methodcaller
from typing import Any, Callable

from solarwind.exceptions import ConfigValidationError, InvalidFormatError
from solarwind.measurements import RECORD_TYPES
from solarwind.product_registry import Product
from solarwind.values import CellValue

# Accessor per column type. The timestamp column is handled separately so
# its own error message reaches the caller.
_ACCESSORS: dict[str, Callable[[CellValue], Any]] = {
    "float": methodcaller("as_float"),
    "integer": methodcaller("as_integer"),
    "text": methodcaller("as_text"),
}


def _resolve_record_type(product: Product) -> type:
    try:
        return RECORD_TYPES[product.name]
    except KeyError:
        raise ConfigValidationError(
            f"No record type registered for product '{product.name}'. "
            "Pass record_type explicitly."
        ) from None


def _raw_row(row: Sequence[CellValue]) -> list[Any]:
    """The JSON values of a row, for error messages."""
    return [cell.raw for cell in row]


def parse_measurements(
    rows: Iterable[Sequence[CellValue]],
    product: Product,
    record_type: type | None = None,
) -> list[Any]:
    """Parse classified data rows into measurement records.

    Args:
        rows: Data rows (header excluded), each a sequence of ``CellValue``.
        product: Descriptor giving the column names and types.
        record_type: Class to build, called with one keyword argument per
            column. Defaults to the type registered for ``product.name``.

    Returns:
        One record per row, in input order. Empty input gives an empty list.

    Raises:
        InvalidFormatError: If a row has the wrong length, a numeric cell
            cannot be parsed, or the time tag is malformed.
        ConfigValidationError: If no record type is known for the product.
    """
    if record_type is None:
        record_type = _resolve_record_type(product)

    expected = product.field_count
    time_column, *value_columns = product.columns
    measurements: list[Any] = []

    for row in rows:
        if len(row) != expected:
            raise InvalidFormatError(
                "Data row length not as expected. "
                f"Expected row length of {expected}, got {len(row)}."
            )

        values: dict[str, Any] = {time_column.name: row[0].as_timestamp()}
        for column, cell in zip(value_columns, row[1:]):
            value = _ACCESSORS[column.type](cell)
            if value is None:
                raise InvalidFormatError(
                    "Invalid data found in measurement. "
                    f"Failing raw data: {_raw_row(row)}."
                )
            values[column.name] = value

        measurements.append(record_type(**values))

    return measurements
