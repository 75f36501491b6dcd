"""
pandas views of parsed measurements.

Records stay the source of truth; these helpers only lay them out as
DataFrames for analysis and display. Columns follow the record field order
and ``time_tag`` is a tz-aware UTC datetime column.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import Any

import pandas as pd


def to_frame(
    measurements: Sequence[Any],
    record_type: type | None = None,
) -> pd.DataFrame:
    """Build a DataFrame with one row per measurement record.

    Args:
        measurements: Records of a single type (e.g. from ``client.plasma()``).
        record_type: The record class. Only needed to give an empty
            sequence its columns; inferred from the first record otherwise.

    Returns:
        DataFrame with columns in record field order.
    """
    if record_type is None and measurements:
        record_type = type(measurements[0])
    if record_type is None:
        return pd.DataFrame()

    columns = [f.name for f in dataclasses.fields(record_type)]
    df = pd.DataFrame(
        [dataclasses.astuple(m) for m in measurements],
        columns=columns,
    )
    if "time_tag" in df.columns:
        df["time_tag"] = pd.to_datetime(df["time_tag"], utc=True)
    return df


def join_on_time_tag(
    plasma_frame: pd.DataFrame,
    magnetometer_frame: pd.DataFrame,
) -> pd.DataFrame:
    """Inner-join plasma and magnetometer frames on identical time tags.

    Returns:
        One row per time tag present in both frames, sorted ascending.
    """
    merged = pd.merge(plasma_frame, magnetometer_frame, on="time_tag", how="inner")
    return merged.sort_values("time_tag").reset_index(drop=True)
