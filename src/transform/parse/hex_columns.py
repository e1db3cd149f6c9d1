"""Parse dataframe columns of hexadecimal strings into integers."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from transform.parse.hex_to_int import hex_to_int
from utils.logging_setup import get_logger
from utils.validation import require_columns

logger = get_logger(__name__)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_cell(value: object) -> int | None:
    if not isinstance(value, str):
        return None
    return hex_to_int(value)


def parse_hex_series(series: pd.Series) -> pd.Series:
    """Apply ``hex_to_int`` to every entry of ``series``.

    Unparseable or non-string entries become ``pd.NA``. The result uses the
    nullable ``Int64`` dtype unless a value falls outside 64 bits, in which
    case the Python ints are kept in an object column.
    """
    parsed = [_parse_cell(value) for value in series]
    failed = sum(1 for value in parsed if value is None)
    if failed:
        logger.debug("parse_hex_series name=%s failed=%d total=%d", series.name, failed, len(parsed))

    if all(value is None or _INT64_MIN <= value <= _INT64_MAX for value in parsed):
        return pd.Series(parsed, index=series.index, name=series.name, dtype="Int64")
    return pd.Series(
        [pd.NA if value is None else value for value in parsed],
        index=series.index,
        name=series.name,
        dtype=object,
    )


def parse_hex_columns(df: pd.DataFrame, columns: Iterable[str]) -> pd.DataFrame:
    columns = list(columns)
    require_columns(df, columns)
    out = df.copy()
    for column in columns:
        out[column] = parse_hex_series(df[column])
    return out
