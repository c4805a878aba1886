"""Fixtures for slopegraph tests."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import numpy as np
import pandas as pd
import pytest


def pytest_configure() -> None:
    # Ensure `src` is importable when running tests from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if src_dir.exists():
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def scenario_a() -> pd.DataFrame:
    """3 observations x 2 periods, no missing values."""
    return pd.DataFrame(
        {"p1": [10.0, 10.0, 5.0], "p2": [20.0, 15.0, 5.0]},
        index=["alpha", "beta", "gamma"],
    )


@pytest.fixture
def tied_table() -> pd.DataFrame:
    """Observations 1 and 2 share the segment (1, 2, 10, 10)."""
    return pd.DataFrame(
        {"p1": [10.0, 10.0, 3.0], "p2": [10.0, 10.0, 7.0]},
        index=["first", "second", "third"],
    )


@pytest.fixture
def gap_table() -> pd.DataFrame:
    """3 periods; 'gap' is missing at period 2, 'late' at period 1, 'early' at period 3."""
    return pd.DataFrame(
        {
            "p1": [1.0, 4.0, np.nan, 8.0],
            "p2": [2.0, np.nan, 6.0, 9.0],
            "p3": [3.0, 5.0, 7.0, np.nan],
        },
        index=["full", "gap", "late", "early"],
    )


@pytest.fixture
def surface() -> MagicMock:
    """Drawing surface that records calls."""
    return MagicMock()
