"""Slopegraph configuration state.

This module defines the LabelPosition enum and the SlopegraphConfig dataclass
that holds every overridable rendering knob, plus its JSON-friendly
serialization.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Union

from slopegraph.theme import ThemeMode, resolve_theme
from slopegraph.utils.logging import get_logger

logger = get_logger(__name__)

StyleValue = Union[Any, Sequence[Any]]


class LabelPosition(Enum):
    """Where text sits relative to its anchor point."""

    BELOW = "below"
    LEFT = "left"
    ABOVE = "above"
    RIGHT = "right"
    CENTER = "center"


# Fields holding callables or tuples that need special handling in (de)serialization.
_CALLABLE_FIELDS = ("panel_first", "panel_last")
_PAIR_FIELDS = ("xlim", "ylim")


@dataclass
class SlopegraphConfig:
    """Rendering configuration for one slopegraph.

    Style fields (``col_lines``, ``col_lab``, ``col_num``, ``lty``, ``lwd``)
    accept a single value for all observations or a per-observation sequence.
    Colors left as None fall back to ``col_lines`` and then to the theme
    foreground.
    """
    xlim: Optional[tuple[float, float]] = None     # None -> (0.5, M + 0.5)
    ylim: Optional[tuple[float, float]] = None     # None -> data range +/- 1%
    title: Optional[str] = None
    xlabels: Optional[list[str]] = None            # None -> table column names
    labpos_left: LabelPosition = LabelPosition.LEFT
    labpos_right: LabelPosition = LabelPosition.RIGHT
    decimals: Optional[int] = None                 # None -> 0 decimals
    col_lines: Optional[StyleValue] = None
    col_lab: Optional[StyleValue] = None
    col_num: Optional[StyleValue] = None
    col_xaxt: Optional[str] = None
    offset_x: float = 0.1                          # stroke inset from each period
    offset_lab: float = 0.1                        # clearance of edge name labels
    cex_lab: float = 1.0                           # name label size multiplier
    cex_num: float = 1.0                           # number label size multiplier
    family: str = "serif"
    font_lab: int = 1                              # 1 plain, 2 bold, 3 italic, 4 bold-italic
    font_num: int = 1
    lty: StyleValue = "solid"
    lwd: StyleValue = 1.0
    margins: Optional[dict[str, float]] = None     # None -> auto (see renderer)
    theme: ThemeMode = ThemeMode.LIGHT
    panel_first: Optional[Callable[[Any], None]] = None  # called with the surface before content
    panel_last: Optional[Callable[[Any], None]] = None   # called with the surface after content

    def replace(self, **overrides: Any) -> "SlopegraphConfig":
        """Return a copy with the given fields overridden.

        Raises:
            TypeError: If an override names an unknown field.
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown slopegraph option(s): {sorted(unknown)}")
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update(overrides)
        return SlopegraphConfig(**values)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict. Panel callables are not serialized."""
        d: dict[str, Any] = {}
        for f in fields(self):
            if f.name in _CALLABLE_FIELDS:
                continue
            v = getattr(self, f.name)
            if isinstance(v, Enum):
                v = v.value
            elif isinstance(v, tuple):
                v = list(v)
            d[f.name] = v
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SlopegraphConfig":
        """Deserialize from a dict produced by to_dict().

        Missing keys take their defaults; unknown keys are ignored with a warning.

        Raises:
            ValueError: If a label position or theme value is not recognised.
        """
        known = {f.name for f in fields(cls)} - set(_CALLABLE_FIELDS)
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Unknown key '{key}' in slopegraph config, ignoring")
                continue
            kwargs[key] = value

        for key in _PAIR_FIELDS:
            if kwargs.get(key) is not None:
                lo, hi = kwargs[key]
                kwargs[key] = (float(lo), float(hi))
        for key in ("labpos_left", "labpos_right"):
            if key in kwargs:
                kwargs[key] = LabelPosition(kwargs[key])
        if "theme" in kwargs:
            kwargs["theme"] = resolve_theme(kwargs["theme"])
        return cls(**kwargs)
