"""
Unit tests for pandas views of measurements (solarwind.frames).
"""

import pandas as pd
import pytest

import solarwind
from solarwind.frames import join_on_time_tag, to_frame
from solarwind.measurements import MagnetometerMeasurement, PlasmaMeasurement


class TestToFrame:
    """Tests for to_frame()."""

    def test_columns_follow_record_fields(self, mag_document):
        df = to_frame(solarwind.parse_document(mag_document, "magnetometer"))
        assert list(df.columns) == ["time_tag", "bx_gsm", "by_gsm", "bz_gsm", "lon_gsm", "lat_gsm", "bt"]
        assert len(df) == 2
        assert df["bz_gsm"].tolist() == [4.52, 4.61]

    def test_time_tag_is_utc(self, plasma_document):
        df = to_frame(solarwind.parse_document(plasma_document, "plasma"))
        assert isinstance(df["time_tag"].dtype, pd.DatetimeTZDtype)
        assert str(df["time_tag"].dt.tz) == "UTC"
        assert df["time_tag"].iloc[0] == pd.Timestamp("2024-09-15 16:14:00", tz="UTC")

    def test_empty_with_record_type(self):
        df = to_frame([], PlasmaMeasurement)
        assert df.empty
        assert list(df.columns) == ["time_tag", "density", "speed", "temperature"]

    def test_empty_without_record_type(self):
        df = to_frame([])
        assert df.empty
        assert list(df.columns) == []


class TestJoinOnTimeTag:
    """Tests for join_on_time_tag()."""

    def test_inner_join(self, mag_document, plasma_document):
        plasma_df = to_frame(solarwind.parse_document(plasma_document, "plasma"))
        mag_df = to_frame(solarwind.parse_document(mag_document[:2], "magnetometer"), MagnetometerMeasurement)
        joined = join_on_time_tag(plasma_df, mag_df)
        assert len(joined) == 1
        assert joined["speed"].iloc[0] == pytest.approx(445.5)
        assert joined["bt"].iloc[0] == pytest.approx(7.98)

    def test_sorted_by_time_tag(self, mag_document, plasma_document):
        plasma_document[1:] = plasma_document[:0:-1]
        plasma_df = to_frame(solarwind.parse_document(plasma_document, "plasma"))
        mag_df = to_frame(solarwind.parse_document(mag_document, "magnetometer"))
        joined = join_on_time_tag(plasma_df, mag_df)
        assert joined["time_tag"].is_monotonic_increasing
        assert len(joined) == 2
