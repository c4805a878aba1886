"""Slopegraph layout and rendering.

This module provides the LayoutRenderer class, which turns an
observation-by-period table into an ordered sequence of calls on a
DrawingSurface, and returns the full SegmentSet.

Draw order is fixed:

1. canvas, then ``panel_first``
2. x-axis with one tick per period
3. left-edge name labels, then right-edge name labels
4. for each DrawSet segment: both numeric endpoint labels, then the stroke
5. ``panel_last``

All validation (table shape, style vector lengths, line types, decimals) happens before
step 1, so a failed render draws nothing.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional, Sequence

import numpy as np
import pandas as pd

from slopegraph.config import LabelPosition, SlopegraphConfig
from slopegraph.errors import InvalidInputError
from slopegraph.segments import Segment, build_segments, dedupe_segments
from slopegraph.style import ResolvedStyle, check_decimals, format_value, resolve_style
from slopegraph.surface import DrawingSurface, PlotlySurface
from slopegraph.table import as_table
from slopegraph.theme import get_theme_colors
from slopegraph.utils.logging import get_logger

logger = get_logger(__name__)

# Auto margins in px: room for the x-axis below, and for the title when present.
AUTO_MARGIN_BOTTOM = 72
AUTO_MARGIN_TITLE = 72


class EdgeLabel(NamedTuple):
    """An observation name drawn beside the first or last period."""

    row: int
    x: float
    y: float
    name: str


def compute_limits(
    table: pd.DataFrame, config: SlopegraphConfig
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Return (xlim, ylim), using configured limits where set.

    The default x range is half a period beyond the first and last period.
    The default y range is the data range padded by 1% on each side; constant
    data is padded by 1% of its value (or 1 when the value is 0).
    """
    n_periods = table.shape[1]
    xlim = config.xlim if config.xlim is not None else (0.5, n_periods + 0.5)
    if config.ylim is not None:
        return tuple(xlim), tuple(config.ylim)

    values = table.to_numpy(dtype=float)
    present = values[~np.isnan(values)]
    if present.size == 0:
        logger.warning("table has no present values, using ylim=(0, 1)")
        return tuple(xlim), (0.0, 1.0)

    lo = float(present.min())
    hi = float(present.max())
    pad = (hi - lo) / 100
    if pad == 0:
        pad = abs(lo) / 100 or 1.0
    return tuple(xlim), (lo - pad, hi + pad)


def auto_margins(title: Optional[str]) -> dict[str, float]:
    return dict(l=0, r=0, t=AUTO_MARGIN_TITLE if title else 0, b=AUTO_MARGIN_BOTTOM)


def edge_labels(table: pd.DataFrame, *, side: str, offset: float) -> list[EdgeLabel]:
    """Name labels for one edge of the chart.

    Args:
        table: Float observation-by-period DataFrame.
        side: "left" (first period, at x = 1 - offset) or "right"
            (last period, at x = M + offset).
        offset: Horizontal clearance between the label and the period.

    Returns:
        One label per observation whose boundary value is present, in row order.
    """
    n_periods = table.shape[1]
    if side == "left":
        col, x = 0, 1 - offset
    elif side == "right":
        col, x = n_periods - 1, n_periods + offset
    else:
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")

    values = table.iloc[:, col].to_numpy(dtype=float)
    return [
        EdgeLabel(i + 1, x, float(v), str(name))
        for i, (name, v) in enumerate(zip(table.index, values))
        if not np.isnan(v)
    ]


def stroke_coordinates(seg: Segment, offset_x: float) -> tuple[float, float, float, float]:
    """Inset stroke (x1, y1, x2, y2) for a segment.

    Both ends are pulled ``offset_x`` toward each other horizontally so the
    stroke clears the number labels. Sloped strokes are nudged vertically by
    ``(y2 - y1) * offset_x`` to stay on the line; flat ones keep their y.
    """
    if seg.is_flat:
        return (seg.x1 + offset_x, seg.y1, seg.x2 - offset_x, seg.y2)
    ysloped = (seg.y2 - seg.y1) * offset_x
    return (seg.x1 + offset_x, seg.y1 + ysloped, seg.x2 - offset_x, seg.y2 - ysloped)


class LayoutRenderer:
    """Renders slopegraphs onto a DrawingSurface.

    Attributes:
        surface: Surface receiving the draw calls.
        config: Rendering configuration.
    """

    def __init__(self, surface: DrawingSurface, config: Optional[SlopegraphConfig] = None) -> None:
        self.surface = surface
        self.config = config if config is not None else SlopegraphConfig()

    def render(
        self,
        data: Any,
        *,
        row_labels: Optional[Sequence[Any]] = None,
        period_labels: Optional[Sequence[Any]] = None,
    ) -> list[Segment]:
        """Draw a slopegraph of ``data`` and return its full SegmentSet.

        Args:
            data: Observation-by-period data accepted by ``as_table``.
            row_labels: Optional observation names.
            period_labels: Optional period names.

        Returns:
            Every segment of every observation in row-major order, including
            segments whose stroke was shared with an earlier observation.

        Raises:
            InvalidInputError: If the table is malformed or has fewer than two
                periods, or xlabels does not match the number of periods.
            StyleLengthError: If a style vector cannot be broadcast.
            InvalidStyleError: If a line type or the decimals setting is not recognised.
        """
        cfg = self.config
        table = as_table(data, row_labels=row_labels, period_labels=period_labels)
        segments = build_segments(table)

        n_rows, n_periods = table.shape
        _, fg_color = get_theme_colors(cfg.theme)
        style = resolve_style(cfg, n_rows, foreground=fg_color)
        check_decimals(cfg.decimals)
        xlabels = list(cfg.xlabels) if cfg.xlabels is not None else [str(c) for c in table.columns]
        if len(xlabels) != n_periods:
            raise InvalidInputError(f"Got {len(xlabels)} xlabels for {n_periods} periods")
        xlim, ylim = compute_limits(table, cfg)
        draw_set = dedupe_segments(segments)

        logger.info(
            f"LayoutRenderer.render: observations={n_rows}, periods={n_periods}, "
            f"segments={len(segments)}, strokes={len(draw_set)}"
        )

        self.surface.open_canvas(
            xlim,
            ylim,
            title=cfg.title,
            family=cfg.family,
            margins=cfg.margins if cfg.margins is not None else auto_margins(cfg.title),
            theme=cfg.theme,
        )
        if cfg.panel_first is not None:
            cfg.panel_first(self.surface)

        self.surface.axis(
            range(1, n_periods + 1),
            xlabels,
            color=cfg.col_xaxt or fg_color,
            family=cfg.family,
        )

        self._draw_edge_labels(edge_labels(table, side="left", offset=cfg.offset_lab), style, cfg.labpos_left)
        self._draw_edge_labels(edge_labels(table, side="right", offset=cfg.offset_lab), style, cfg.labpos_right)

        for seg in draw_set:
            self._draw_segment(seg, style)

        if cfg.panel_last is not None:
            cfg.panel_last(self.surface)
        return segments

    def _draw_edge_labels(
        self, labels: list[EdgeLabel], style: ResolvedStyle, position: LabelPosition
    ) -> None:
        cfg = self.config
        for label in labels:
            self.surface.text(
                label.x,
                label.y,
                label.name,
                color=style.label_colors[label.row - 1],
                size=cfg.cex_lab,
                font=cfg.font_lab,
                family=cfg.family,
                position=position,
            )

    def _draw_segment(self, seg: Segment, style: ResolvedStyle) -> None:
        cfg = self.config
        row_style = style.for_row(seg.row)
        for x, y in ((seg.x1, seg.y1), (seg.x2, seg.y2)):
            self.surface.text(
                x,
                y,
                format_value(y, cfg.decimals),
                color=row_style["number_color"],
                size=cfg.cex_num,
                font=cfg.font_num,
                family=cfg.family,
                position=LabelPosition.CENTER,
            )
        x1, y1, x2, y2 = stroke_coordinates(seg, cfg.offset_x)
        self.surface.segment(
            x1,
            y1,
            x2,
            y2,
            color=row_style["line_color"],
            line_type=row_style["line_type"],
            width=row_style["line_width"],
        )


def slopegraph(
    data: Any,
    surface: DrawingSurface,
    config: Optional[SlopegraphConfig] = None,
    *,
    row_labels: Optional[Sequence[Any]] = None,
    period_labels: Optional[Sequence[Any]] = None,
    **overrides: Any,
) -> list[Segment]:
    """Draw a slopegraph onto ``surface`` and return the full SegmentSet.

    Keyword overrides replace individual SlopegraphConfig fields, e.g.
    ``slopegraph(df, surface, col_lines="gray", decimals=1)``.
    """
    cfg = (config or SlopegraphConfig()).replace(**overrides) if overrides else config
    return LayoutRenderer(surface, cfg).render(data, row_labels=row_labels, period_labels=period_labels)


def slopegraph_plotly(
    data: Any,
    config: Optional[SlopegraphConfig] = None,
    **kwargs: Any,
) -> tuple[dict, list[Segment]]:
    """Render onto a new PlotlySurface.

    Returns:
        (Plotly figure dict ready for ui.plotly, full SegmentSet).
    """
    surface = PlotlySurface()
    segments = slopegraph(data, surface, config, **kwargs)
    return surface.to_dict(), segments
