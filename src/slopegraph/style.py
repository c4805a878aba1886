"""Per-observation style resolution and number formatting.

Style inputs are broadcast to one entry per observation once, up front, and
then looked up by observation index; segment position never matters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from slopegraph.config import SlopegraphConfig
from slopegraph.errors import InvalidStyleError, StyleLengthError

DEFAULT_LINE_TYPE = "solid"
DEFAULT_LINE_WIDTH = 1.0

# Canonical line type names, with integer codes and plotly dash names as aliases.
LINE_TYPES = ("blank", "solid", "dashed", "dotted", "dotdash", "longdash", "twodash")
_LINE_TYPE_ALIASES = {
    "dash": "dashed",
    "dot": "dotted",
    "dashdot": "dotdash",
    "longdashdot": "twodash",
}


def normalize_line_type(value: Any) -> str:
    """Map a line type (name, plotly dash name, or integer 0-6) to its canonical name.

    Raises:
        InvalidStyleError: If the value is not a known line type.
    """
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        if 0 <= int(value) < len(LINE_TYPES):
            return LINE_TYPES[int(value)]
    elif isinstance(value, str):
        name = value.lower()
        name = _LINE_TYPE_ALIASES.get(name, name)
        if name in LINE_TYPES:
            return name
    raise InvalidStyleError(f"Unknown line type {value!r}; expected one of {LINE_TYPES} or 0-{len(LINE_TYPES) - 1}")


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, bytes)) or np.ndim(value) == 0


def broadcast(value: Any, n: int, *, name: str = "style") -> list[Any]:
    """Expand a style value to exactly n entries.

    A scalar is repeated n times. A sequence of length k is accepted when k
    divides n evenly and is tiled; any other length raises.

    Raises:
        StyleLengthError: If the value cannot be cleanly repeated to length n.
    """
    if _is_scalar(value):
        return [value] * n
    values = list(value)
    k = len(values)
    if k == n:
        return values
    if k == 0 or n % k != 0:
        raise StyleLengthError(
            f"{name} has {k} values, which cannot be broadcast to {n} observations"
        )
    return values * (n // k)


@dataclass(frozen=True)
class ResolvedStyle:
    """Fixed-length style table, one entry per observation."""

    line_colors: tuple[Any, ...]
    label_colors: tuple[Any, ...]
    number_colors: tuple[Any, ...]
    line_types: tuple[Any, ...]
    line_widths: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.line_colors)

    def for_row(self, row: int) -> dict[str, Any]:
        """Style of the observation at 1-based position ``row``."""
        i = row - 1
        return {
            "line_color": self.line_colors[i],
            "label_color": self.label_colors[i],
            "number_color": self.number_colors[i],
            "line_type": self.line_types[i],
            "line_width": self.line_widths[i],
        }


def resolve_style(config: SlopegraphConfig, n: int, *, foreground: str) -> ResolvedStyle:
    """Broadcast every style option of ``config`` to ``n`` observations.

    Label and number colors default to the line colors, which default to
    ``foreground``.
    """
    col_lines = config.col_lines if config.col_lines is not None else foreground
    line_colors = broadcast(col_lines, n, name="col_lines")
    label_colors = (
        broadcast(config.col_lab, n, name="col_lab") if config.col_lab is not None else line_colors
    )
    number_colors = (
        broadcast(config.col_num, n, name="col_num") if config.col_num is not None else line_colors
    )
    lty = config.lty if config.lty is not None else DEFAULT_LINE_TYPE
    lwd = config.lwd if config.lwd is not None else DEFAULT_LINE_WIDTH
    return ResolvedStyle(
        line_colors=tuple(line_colors),
        label_colors=tuple(label_colors),
        number_colors=tuple(number_colors),
        line_types=tuple(normalize_line_type(t) for t in broadcast(lty, n, name="lty")),
        line_widths=tuple(float(w) for w in broadcast(lwd, n, name="lwd")),
    )


def check_decimals(decimals: Any) -> int:
    """Return the number of decimals to show, 0 when None.

    Raises:
        InvalidStyleError: If decimals is not None or a non-negative int.
    """
    if decimals is None:
        return 0
    if isinstance(decimals, bool) or not isinstance(decimals, (int, np.integer)) or decimals < 0:
        raise InvalidStyleError(f"decimals must be None or a non-negative int, got {decimals!r}")
    return int(decimals)


def format_value(value: float, decimals: Optional[int] = None) -> str:
    """Format a numeric endpoint label with a fixed number of decimals (default 0)."""
    return f"{value:.{check_decimals(decimals)}f}"

