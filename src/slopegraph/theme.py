"""Theme utilities for slopegraph Plotly output.

The foreground color is the inherited default for lines, labels, numbers
and the x-axis when the caller does not supply colors.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class ThemeMode(str, Enum):
    """Figure theme mode."""

    DARK = "dark"
    LIGHT = "light"


def resolve_theme(theme: Union[str, ThemeMode, None]) -> ThemeMode:
    """Convert str to ThemeMode. Default to LIGHT."""
    if isinstance(theme, ThemeMode):
        return theme
    if theme is None:
        return ThemeMode.LIGHT
    s = str(theme).lower()
    if s in ("dark", "plotly_dark"):
        return ThemeMode.DARK
    return ThemeMode.LIGHT


def get_theme_colors(theme: ThemeMode) -> tuple[str, str]:
    """Get background and foreground colors for a theme."""
    if theme is ThemeMode.DARK:
        return "#000000", "#ffffff"
    return "#ffffff", "#000000"


def get_theme_template(theme: ThemeMode) -> str:
    """Get Plotly template name for a theme."""
    if theme is ThemeMode.DARK:
        return "plotly_dark"
    return "plotly_white"
