"""
Internal document pipeline for solarwind.

Takes a decoded NOAA JSON document and runs it through the fixed sequence
validate -> classify -> parse. Shared by ``SolarWindClient`` and by callers
that already hold a decoded document (e.g. loaded from a fixture).

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging
from typing import Any

from solarwind.exceptions import InvalidFormatError
from solarwind.parser import parse_measurements
from solarwind.product_registry import Product
from solarwind.values import classify_table

logger = logging.getLogger(__name__)


def validate_document(document: Any, product: Product) -> None:
    """Check the outer shape of a NOAA document before any cell is read.

    A valid document is a JSON array of arrays with the product header as
    its first row and at least one data row.

    Raises:
        InvalidFormatError: If there are no data rows, a row is not an
            array, or the header differs from the product's.
    """
    if not isinstance(document, list) or len(document) < 2:
        raise InvalidFormatError("Received data contains no measurements.")

    for index, row in enumerate(document):
        if not isinstance(row, list):
            raise InvalidFormatError(
                "Received data rows must be JSON arrays. "
                f"Got {type(row).__name__} at row {index}."
            )

    expected = list(product.header)
    header = document[0]
    if header != expected:
        raise InvalidFormatError(
            f"Headers do not match. Expected {expected}, got {header}."
        )


def parse_document(document: Any, product: Product) -> list[Any]:
    """Validate, classify and parse a decoded NOAA document.

    Steps:
      1. ``validate_document()`` -- non-empty, arrays only, header match.
      2. ``classify_table()`` -- every cell, header included.
      3. ``parse_measurements()`` -- data rows only.

    Returns:
        The product's measurement records in document order.

    Raises:
        InvalidFormatError: From any of the three steps.
    """
    validate_document(document, product)
    table = classify_table(document)
    measurements = parse_measurements(table[1:], product)
    logger.debug(
        "Parsed %d %s measurements", len(measurements), product.name
    )
    return measurements
