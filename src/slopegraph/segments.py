"""Segment construction and deduplication.

Turns an observation-by-period table into the line segments of a slopegraph.
One Segment exists per (observation, adjacent period pair) where both values
are present; a missing value breaks the trajectory on both sides and is
never interpolated across.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple

import numpy as np
import pandas as pd

from slopegraph.table import validate_table
from slopegraph.utils.logging import get_logger

logger = get_logger(__name__)

SEGMENT_COLUMNS = ["row", "x1", "x2", "y1", "y2"]


class Segment(NamedTuple):
    """One drawable line piece.

    Attributes:
        row: 1-based position of the observation in the source table.
        x1: Period position of the left endpoint (1-based).
        x2: Period position of the right endpoint, always x1 + 1.
        y1: Observation value at period x1.
        y2: Observation value at period x2.
    """

    row: int
    x1: int
    x2: int
    y1: float
    y2: float

    @property
    def key(self) -> tuple[int, int, float, float]:
        """Geometry of the segment, without the observation index."""
        return (self.x1, self.x2, self.y1, self.y2)

    @property
    def is_flat(self) -> bool:
        """True when both endpoints have the same value."""
        return self.y1 == self.y2


def build_segments(table: pd.DataFrame) -> list[Segment]:
    """Build the full SegmentSet for a table, in row-major order.

    Args:
        table: Float observation-by-period DataFrame (see ``as_table``).

    Returns:
        Segments for observation 1 (all period pairs), then observation 2, ...

    Raises:
        InvalidInputError: If the table has fewer than two period columns.
    """
    validate_table(table)
    values = table.to_numpy(dtype=float)
    present = ~np.isnan(values)
    n_rows, n_periods = values.shape

    segments: list[Segment] = []
    for i in range(n_rows):
        for j in range(n_periods - 1):
            if present[i, j] and present[i, j + 1]:
                segments.append(
                    Segment(i + 1, j + 1, j + 2, float(values[i, j]), float(values[i, j + 1]))
                )

    logger.debug(
        f"built {len(segments)} segments from {n_rows} observations x {n_periods} periods"
    )
    return segments


def dedupe_segments(segments: Iterable[Segment]) -> list[Segment]:
    """Return the DrawSet: segments with exact duplicate geometry removed.

    The first occurrence of each (x1, x2, y1, y2) is kept, so its observation
    decides the style of the shared stroke. Near-duplicates are not merged.
    """
    seen: set[tuple[int, int, float, float]] = set()
    out: list[Segment] = []
    for seg in segments:
        if seg.key in seen:
            continue
        seen.add(seg.key)
        out.append(seg)
    return out


def segments_to_frame(segments: Iterable[Segment]) -> pd.DataFrame:
    """Five-column record view of a SegmentSet, indexed 1..K."""
    df = pd.DataFrame(list(segments), columns=SEGMENT_COLUMNS)
    df.index = range(1, len(df) + 1)
    return df
