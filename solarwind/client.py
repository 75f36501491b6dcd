"""
HTTP client for NOAA SWPC solar wind products.

The ``SolarWindClient`` class is a handle that remembers the client config
and an HTTP session, so repeated fetches never need to repeat the base URL,
timeout or headers.

Each fetch is a single GET of ``{base_url}/{url_slug}-{interval}.json``
followed by the document pipeline (validate -> classify -> parse). There is
no retry, backoff or caching: HTTP errors from ``requests`` propagate as-is
and malformed documents raise ``InvalidFormatError``.

``fetch_all()`` issues the magnetometer and plasma fetches concurrently on a
thread pool. The two tasks share nothing but the session and are joined
before returning.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import requests

from solarwind._pipeline import parse_document
from solarwind.config import INTERVALS, ClientConfig
from solarwind.exceptions import InvalidFormatError
from solarwind.measurements import MagnetometerMeasurement, PlasmaMeasurement
from solarwind.product_registry import Product, get_product

logger = logging.getLogger(__name__)

# Products fetched together by fetch_all()
_ALL_PRODUCTS = ("magnetometer", "plasma")


class SolarWindClient:
    """Fetches and parses NOAA solar wind products.

    Attributes:
        config: The ``ClientConfig`` in use.
        session: Object with a ``requests``-compatible ``get()``. A new
            ``requests.Session`` is created when none is given.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self.config.user_agent
        self.session = session

    def __repr__(self) -> str:
        return (
            f"SolarWindClient(base_url={self.config.base_url!r}, "
            f"default_interval={self.config.default_interval!r})"
        )

    # -- URLs ---------------------------------------------------------------

    def url_for(self, product: str | Product, interval: str | None = None) -> str:
        """Build the NOAA URL of *product* over *interval*.

        Raises:
            ValueError: If *interval* is not one NOAA publishes.
            ConfigValidationError: If *product* is an unknown name.
        """
        product = self._product(product)
        interval = interval or self.config.default_interval
        if interval not in INTERVALS:
            raise ValueError(
                f"Unsupported interval: '{interval}'. "
                f"Supported intervals: {list(INTERVALS)}"
            )
        return f"{self.config.base_url}/{product.url_slug}-{interval}.json"

    # -- Fetching -----------------------------------------------------------

    def fetch_document(self, url: str) -> Any:
        """GET *url* and decode the JSON body.

        Raises:
            requests.RequestException: On connection errors and HTTP error
                statuses.
            InvalidFormatError: If the body is not valid JSON.
        """
        response = self.session.get(url, timeout=self.config.timeout)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as exc:
            raise InvalidFormatError(f"Response body is not valid JSON: {url}") from exc

    def measurements(
        self, product: str | Product, interval: str | None = None
    ) -> list[Any]:
        """Fetch and parse one product over *interval*.

        Returns:
            Records ordered oldest first, as NOAA publishes them.
        """
        product = self._product(product)
        url = self.url_for(product, interval)
        logger.info(
            "Fetching %s measurements (%s) from %s",
            product.name,
            interval or self.config.default_interval,
            url,
        )
        document = self.fetch_document(url)
        measurements = parse_document(document, product)
        logger.info("Received %d %s measurements", len(measurements), product.name)
        return measurements

    def magnetometer(self, interval: str | None = None) -> list[MagnetometerMeasurement]:
        """Magnetometer measurements over *interval*, oldest first."""
        return self.measurements("magnetometer", interval)

    def plasma(self, interval: str | None = None) -> list[PlasmaMeasurement]:
        """Plasma measurements over *interval*, oldest first."""
        return self.measurements("plasma", interval)

    def fetch_all(self, interval: str | None = None) -> dict[str, list[Any]]:
        """Fetch magnetometer and plasma measurements concurrently.

        Returns:
            ``{"magnetometer": [...], "plasma": [...]}``.

        Raises:
            The first exception raised by either fetch.
        """
        with ThreadPoolExecutor(max_workers=len(_ALL_PRODUCTS)) as pool:
            futures = {
                name: pool.submit(self.measurements, name, interval)
                for name in _ALL_PRODUCTS
            }
            return {name: future.result() for name, future in futures.items()}

    # -- Helpers ------------------------------------------------------------

    @staticmethod
    def _product(product: str | Product) -> Product:
        if isinstance(product, Product):
            return product
        return get_product(product)
