"""pandas helpers for week dated data.

Converts timestamp columns to canonical ``YYYY-Www`` tokens and back, and
aggregates measurements into weekly averages keyed by token.
"""

import pandas as pd

from .week import WeekDate

__all__ = [
    "week_tokens",
    "parse_week_tokens",
    "week_starts",
    "pivot_weekly",
]


def week_tokens(timestamps: pd.Series) -> pd.Series:
    """Return the ISO week token of each timestamp (``None`` where unparseable)."""
    ts = pd.to_datetime(timestamps, errors="coerce")
    iso = ts.dt.isocalendar()
    # Use ISO year + week from isocalendar; Period frequencies (e.g. W-MON) may differ from ISO.
    tokens = (
        iso["year"].astype("Int64").astype(str).str.zfill(4)
        + "-W"
        + iso["week"].astype("Int64").astype(str).str.zfill(2)
    )
    return tokens.astype(object).where(ts.notna(), None)


def parse_week_tokens(tokens: pd.Series) -> pd.Series:
    """Parse a series of canonical tokens into ``WeekDate`` objects."""
    return tokens.map(WeekDate.fromisoformat, na_action="ignore")


def week_starts(tokens: pd.Series, weekday: int = 1) -> pd.Series:
    """Return the date (as Timestamp) of ``weekday`` in each week token."""
    weeks = parse_week_tokens(tokens)
    return pd.to_datetime(weeks.map(lambda w: w.to_date(weekday), na_action="ignore"))


def pivot_weekly(
    df: pd.DataFrame,
    timestamp_col: str = "timestamp",
    week_col: str = "Week",
) -> pd.DataFrame:
    """Aggregate a timestamped DataFrame into weekly averages.

    Numeric columns are first averaged per calendar day, then per ISO week, so
    days with many samples do not dominate the week. Rows whose timestamp cannot
    be parsed are dropped. Returns one row per week token, sorted, with
    ``week_col`` first.
    """
    value_cols = [c for c in df.columns if c != timestamp_col]
    if df.empty:
        return pd.DataFrame(columns=[week_col, *value_cols])
    df = df.assign(
        **{timestamp_col: lambda df: pd.to_datetime(df[timestamp_col], errors="coerce")}
    ).dropna(subset=[timestamp_col])
    # Build daily averages first
    daily = (
        df.assign(date=lambda df: df[timestamp_col].dt.date)
        .drop(columns=[timestamp_col])
        .groupby("date", as_index=False)
        .mean(numeric_only=True)
    )
    weekly = (
        daily.assign(**{week_col: lambda df: week_tokens(df["date"])})
        .drop(columns=["date"])
        .groupby(week_col, as_index=False)
        .mean(numeric_only=True)
    )
    numeric_cols = [c for c in weekly.columns if c != week_col]
    return weekly[[week_col, *numeric_cols]].sort_values(week_col).reset_index(drop=True)
