"""Observation-by-period table normalisation.

A slopegraph table is a float DataFrame: rows are observations (the index
holds their names), columns are periods in left-to-right order. Missing
values are NaN and are a normal input state, never an error.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd

from slopegraph.errors import InvalidInputError

MIN_PERIODS = 2


def as_table(
    data: Any,
    *,
    row_labels: Optional[Sequence[Any]] = None,
    period_labels: Optional[Sequence[Any]] = None,
) -> pd.DataFrame:
    """Convert input data into a float observation-by-period DataFrame.

    Args:
        data: A DataFrame (rows = observations, columns = periods), a mapping
            of period name -> column values, or a 2-D array-like of rows.
        row_labels: Optional observation names; overrides the DataFrame index.
            Defaults to 1..N for non-DataFrame input.
        period_labels: Optional period names; overrides column names.
            Defaults to 1..M for array input.

    Returns:
        A new float DataFrame; the caller's object is never modified.

    Raises:
        InvalidInputError: If the data is not 2-D, contains non-numeric cells,
            or labels do not match the table shape.
    """
    if isinstance(data, pd.DataFrame):
        df = data.copy()
    elif isinstance(data, Mapping):
        try:
            df = pd.DataFrame({k: list(v) for k, v in data.items()})
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Cannot build a table from mapping: {e}") from e
    else:
        arr = np.asarray(data, dtype=object)
        if arr.ndim != 2:
            raise InvalidInputError(
                f"Table must be 2-D (observations x periods), got {arr.ndim}-D input"
            )
        df = pd.DataFrame(arr)
        if row_labels is None:
            df.index = range(1, len(df) + 1)
        if period_labels is None:
            df.columns = range(1, df.shape[1] + 1)

    try:
        df = df.apply(pd.to_numeric, errors="raise").astype(float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Table cells must be numeric or missing: {e}") from e

    if row_labels is not None:
        if len(row_labels) != len(df):
            raise InvalidInputError(
                f"Got {len(row_labels)} row labels for {len(df)} observations"
            )
        df.index = list(row_labels)
    if period_labels is not None:
        if len(period_labels) != df.shape[1]:
            raise InvalidInputError(
                f"Got {len(period_labels)} period labels for {df.shape[1]} periods"
            )
        df.columns = list(period_labels)
    return df


def validate_table(table: pd.DataFrame) -> None:
    """Raise InvalidInputError unless the table has at least two periods."""
    if table.shape[1] < MIN_PERIODS:
        raise InvalidInputError(
            f"Table must have at least {MIN_PERIODS} period columns, got {table.shape[1]}"
        )
