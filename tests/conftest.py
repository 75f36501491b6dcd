"""
Shared test fixtures for solarwind tests.

Sample NOAA documents are defined here as module-level constants so the
shapes the tests rely on are easy to find. They follow the layout of the
live files: header row first, then one row per minute, oldest first.
"""

import copy
import os
from unittest.mock import Mock

import pytest

# ---------------------------------------------------------------------------
# Sample documents -- edit here if NOAA changes its layout
# ---------------------------------------------------------------------------
MAG_HEADER = ["time_tag", "bx_gsm", "by_gsm", "bz_gsm", "lon_gsm", "lat_gsm", "bt"]
PLASMA_HEADER = ["time_tag", "density", "speed", "temperature"]

MAG_DOCUMENT = [
    MAG_HEADER,
    ["2024-09-15 16:14:00.000", "-2.38", "6.14", "4.52", "111.18", "34.50", "7.98"],
    ["2024-09-15 16:15:00.000", "-2.41", "6.02", "4.61", "111.83", "35.12", "7.95"],
]

PLASMA_DOCUMENT = [
    PLASMA_HEADER,
    ["2024-09-15 16:14:00.000", "3.74", "445.5", "117208"],
    ["2024-09-15 16:15:00.000", "3.81", "447.1", "119530"],
]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def mag_document():
    """A fresh two-row magnetometer document (safe to mutate)."""
    return copy.deepcopy(MAG_DOCUMENT)


@pytest.fixture
def plasma_document():
    """A fresh two-row plasma document (safe to mutate)."""
    return copy.deepcopy(PLASMA_DOCUMENT)


@pytest.fixture
def fake_session(mag_document, plasma_document):
    """A session whose ``get`` serves the sample documents by URL.

    Every call is recorded on ``session.get`` (a ``Mock``), so tests can
    assert on the URLs and keyword arguments that were requested.
    """
    documents = {"mag": mag_document, "plasma": plasma_document}

    def fake_get(url, *args, **kwargs):
        slug = url.rsplit("/", 1)[-1].split("-", 1)[0]
        return Mock(
            status_code=200,
            raise_for_status=Mock(return_value=None),
            json=Mock(return_value=documents[slug]),
        )

    session = Mock()
    session.headers = {}
    session.get = Mock(side_effect=fake_get)
    return session


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (talks to the live NOAA service)",
    )


def pytest_collection_modifyitems(config, items):
    if os.environ.get("SOLARWIND_LIVE") == "1":
        return
    skip_live = pytest.mark.skip(reason="set SOLARWIND_LIVE=1 to run live NOAA tests")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_live)
