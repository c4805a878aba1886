"""Drawing surfaces for slopegraph output.

The renderer never reaches for a global "current plot". It is handed an
object implementing DrawingSurface and issues an ordered sequence of calls
to it. PlotlySurface is the concrete surface; it accumulates a Plotly figure
and returns a figure dict (never go.Figure) for ui.plotly / update_figure.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

import plotly.graph_objects as go

from slopegraph.config import LabelPosition
from slopegraph.theme import ThemeMode, get_theme_colors, get_theme_template
from slopegraph.utils.logging import get_logger

logger = get_logger(__name__)

BASE_FONT_SIZE = 12

# Canonical line type -> plotly dash. "blank" is not drawn.
PLOTLY_DASHES = {
    "solid": "solid",
    "dashed": "dash",
    "dotted": "dot",
    "dotdash": "dashdot",
    "longdash": "longdash",
    "twodash": "longdashdot",
}

# LabelPosition -> (xanchor, yanchor, xshift px, yshift px)
_ANCHORS = {
    LabelPosition.LEFT: ("right", "middle", -3, 0),
    LabelPosition.RIGHT: ("left", "middle", 3, 0),
    LabelPosition.ABOVE: ("center", "bottom", 0, 3),
    LabelPosition.BELOW: ("center", "top", 0, -3),
    LabelPosition.CENTER: ("center", "middle", 0, 0),
}


class DrawingSurface(Protocol):
    """The calls a slopegraph render makes, in the order it makes them."""

    def open_canvas(
        self,
        xlim: tuple[float, float],
        ylim: tuple[float, float],
        *,
        title: Optional[str],
        family: str,
        margins: dict[str, float],
        theme: ThemeMode,
    ) -> None: ...

    def axis(
        self,
        positions: Sequence[int],
        labels: Sequence[str],
        *,
        color: str,
        family: str,
    ) -> None: ...

    def text(
        self,
        x: float,
        y: float,
        label: str,
        *,
        color: Any,
        size: float,
        font: int,
        family: str,
        position: LabelPosition,
    ) -> None: ...

    def segment(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        color: Any,
        line_type: str,
        width: float,
    ) -> None: ...


def styled_text(label: str, font: int) -> str:
    """Wrap text in Plotly's HTML subset for font 2 (bold), 3 (italic), 4 (bold italic)."""
    if font in (2, 4):
        label = f"<b>{label}</b>"
    if font in (3, 4):
        label = f"<i>{label}</i>"
    return label


class PlotlySurface:
    """DrawingSurface backed by a plotly.graph_objects.Figure.

    Text becomes annotations in data coordinates and segments become line
    shapes, so the figure holds no traces.

    Attributes:
        fig: The figure being drawn on.
        base_font_size: Font size in px that ``size`` multipliers scale.
    """

    def __init__(self, *, base_font_size: float = BASE_FONT_SIZE) -> None:
        self.fig = go.Figure()
        self.base_font_size = base_font_size

    def open_canvas(
        self,
        xlim: tuple[float, float],
        ylim: tuple[float, float],
        *,
        title: Optional[str] = None,
        family: str = "serif",
        margins: Optional[dict[str, float]] = None,
        theme: ThemeMode = ThemeMode.LIGHT,
    ) -> None:
        bg_color, fg_color = get_theme_colors(theme)
        layout: dict[str, Any] = dict(
            template=get_theme_template(theme),
            paper_bgcolor=bg_color,
            plot_bgcolor=bg_color,
            font=dict(family=family, color=fg_color),
            showlegend=False,
            xaxis=dict(
                range=list(xlim),
                showgrid=False,
                zeroline=False,
                showticklabels=False,
                ticks="",
            ),
            yaxis=dict(range=list(ylim), visible=False),
        )
        if margins is not None:
            layout["margin"] = dict(margins)
        if title:
            layout["title"] = dict(text=title, x=0.5)
        self.fig.update_layout(**layout)

    def axis(
        self,
        positions: Sequence[int],
        labels: Sequence[str],
        *,
        color: str,
        family: str = "serif",
    ) -> None:
        self.fig.update_xaxes(
            tickmode="array",
            tickvals=list(positions),
            ticktext=[str(label) for label in labels],
            showticklabels=True,
            ticks="outside",
            showline=True,
            linecolor=color,
            tickcolor=color,
            tickfont=dict(color=color, family=family),
        )

    def text(
        self,
        x: float,
        y: float,
        label: str,
        *,
        color: Any,
        size: float = 1.0,
        font: int = 1,
        family: str = "serif",
        position: LabelPosition = LabelPosition.CENTER,
    ) -> None:
        xanchor, yanchor, xshift, yshift = _ANCHORS[position]
        self.fig.add_annotation(
            x=x,
            y=y,
            xref="x",
            yref="y",
            text=styled_text(str(label), font),
            showarrow=False,
            xanchor=xanchor,
            yanchor=yanchor,
            xshift=xshift,
            yshift=yshift,
            font=dict(color=color, size=self.base_font_size * size, family=family),
        )

    def segment(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *,
        color: Any,
        line_type: str = "solid",
        width: float = 1.0,
    ) -> None:
        if line_type == "blank":
            logger.debug(f"skipping blank segment ({x1}, {y1}) -> ({x2}, {y2})")
            return
        self.fig.add_shape(
            type="line",
            x0=x1,
            y0=y1,
            x1=x2,
            y1=y2,
            xref="x",
            yref="y",
            line=dict(color=color, width=width, dash=PLOTLY_DASHES[line_type]),
        )

    def to_dict(self) -> dict:
        """Plotly figure dict ready for ui.plotly / update_figure."""
        return self.fig.to_dict()
