"""
solarwind: Python library for NOAA SWPC real-time solar wind data.

Public API surface:

- ``magnetometer(interval)`` -- Interplanetary magnetic field readings
  (GSM components, total field) as ``MagnetometerMeasurement`` records.

- ``plasma(interval)`` -- Solar wind density, speed and temperature as
  ``PlasmaMeasurement`` records.

- ``fetch_measurements(product, interval)`` -- Either product by name.

- ``fetch_all(interval)`` -- Both products, fetched concurrently, as
  ``{"magnetometer": [...], "plasma": [...]}``.

- ``parse_document(document, product)`` -- Parse an already-decoded NOAA
  JSON document without any network access.

Intervals are ``"5-minute"``, ``"2-hour"``, ``"6-hour"``, ``"1-day"``,
``"3-day"`` and ``"7-day"``. NOAA publishes one reading per minute whatever
the interval, minus the last two minutes, oldest first.

For repeated fetches, build a ``SolarWindClient`` once and reuse it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from solarwind._pipeline import parse_document as _parse_document
from solarwind.client import SolarWindClient
from solarwind.config import INTERVALS, ClientConfig, load_config
from solarwind.exceptions import ConfigValidationError, InvalidFormatError, SolarWindError
from solarwind.measurements import MagnetometerMeasurement, PlasmaMeasurement
from solarwind.product_registry import Product, get_product

__all__ = [
    "magnetometer",
    "plasma",
    "fetch_measurements",
    "fetch_all",
    "parse_document",
    "SolarWindClient",
    "ClientConfig",
    "MagnetometerMeasurement",
    "PlasmaMeasurement",
    "Product",
    "INTERVALS",
    "SolarWindError",
    "InvalidFormatError",
    "ConfigValidationError",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _client(config_path: str | Path | None) -> SolarWindClient:
    """Build a client from *config_path*, or from defaults when ``None``."""
    if config_path is None:
        return SolarWindClient()
    logger.debug("Using client config from %s", config_path)
    return SolarWindClient(load_config(config_path))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def magnetometer(
    interval: str | None = None,
    config_path: str | Path | None = None,
) -> list[MagnetometerMeasurement]:
    """Fetch the most recent magnetometer measurements.

    Args:
        interval: Time span to fetch. Defaults to the config's
            ``default_interval`` (``"5-minute"`` unless configured).
        config_path: Optional YAML client config.

    Returns:
        Measurements ordered oldest first.

    Raises:
        requests.RequestException: If the download fails.
        InvalidFormatError: If the document cannot be parsed.
    """
    return _client(config_path).magnetometer(interval)


def plasma(
    interval: str | None = None,
    config_path: str | Path | None = None,
) -> list[PlasmaMeasurement]:
    """Fetch the most recent plasma measurements.

    Args:
        interval: Time span to fetch. Defaults to the config's
            ``default_interval``.
        config_path: Optional YAML client config.

    Returns:
        Measurements ordered oldest first.

    Raises:
        requests.RequestException: If the download fails.
        InvalidFormatError: If the document cannot be parsed.
    """
    return _client(config_path).plasma(interval)


def fetch_measurements(
    product: str | Product,
    interval: str | None = None,
    config_path: str | Path | None = None,
) -> list[Any]:
    """Fetch the most recent measurements of *product* (a name or ``Product``)."""
    return _client(config_path).measurements(product, interval)


def fetch_all(
    interval: str | None = None,
    config_path: str | Path | None = None,
) -> dict[str, list[Any]]:
    """Fetch magnetometer and plasma measurements concurrently."""
    return _client(config_path).fetch_all(interval)


def parse_document(document: Any, product: str | Product) -> list[Any]:
    """Parse a decoded NOAA JSON document (header row first).

    Args:
        document: The ``json.loads`` result of a NOAA product file.
        product: ``"magnetometer"``, ``"plasma"`` or a ``Product``.

    Raises:
        InvalidFormatError: If the document or any of its rows is malformed.
        ConfigValidationError: If *product* is an unknown name.
    """
    if not isinstance(product, Product):
        product = get_product(product)
    return _parse_document(document, product)
