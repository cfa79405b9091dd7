from __future__ import annotations
import pandas as pd
from typing import Iterable, Tuple

from .models import Consumption

COLUMNS = ['interval_start', 'interval_end', 'consumption']


def consumption_frame(readings: Iterable[Consumption]) -> pd.DataFrame:
    """Tabulate readings as a DataFrame of UTC intervals, sorted by interval_start."""
    rows = [
        {'interval_start': r.interval_start, 'interval_end': r.interval_end, 'consumption': r.value}
        for r in readings
    ]
    if not rows:
        return pd.DataFrame(columns=COLUMNS)
    df = pd.DataFrame(rows, columns=COLUMNS)
    df['interval_start'] = pd.to_datetime(df['interval_start'], utc=True)
    df['interval_end'] = pd.to_datetime(df['interval_end'], utc=True)
    return df.sort_values('interval_start').reset_index(drop=True)


def total_consumption(readings: Iterable[Consumption]) -> float:
    return float(sum(r.value for r in readings))


def detect_missing_intervals(readings: Iterable[Consumption], minutes: int = 30) -> Tuple[int, int, int]:
    """Return (expected, actual, missing) for fixed-length intervals in the span covered.

    If fewer than 2 readings, missing = 0 (no baseline). Use ``minutes`` to match
    the ``group_by`` of the request (60 for 'hour').
    """
    df = consumption_frame(readings)
    if len(df) < 2:
        return (len(df), len(df), 0)
    start = df['interval_start'].iloc[0]
    end = df['interval_end'].max()
    span_minutes = (end - start).total_seconds() / 60
    expected = int(span_minutes / minutes)
    actual = len(df)
    missing = max(0, expected - actual)
    return expected, actual, missing
