"""Validation helpers for dataframe inputs."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd


def require_columns(df: pd.DataFrame, required: Iterable[str]) -> None:
    required = list(dict.fromkeys(required))
    missing = [column for column in required if column not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)} (have {list(df.columns)})")
    duplicated = set(df.columns[df.columns.duplicated()])
    ambiguous = [column for column in required if column in duplicated]
    if ambiguous:
        raise ValueError(f"Duplicate column labels: {sorted(ambiguous)}")
