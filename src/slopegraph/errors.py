"""Exception types raised by slopegraph.

All errors are raised synchronously, before the first call to a drawing
surface, so a failed render leaves nothing half-drawn.
"""

from __future__ import annotations


class SlopegraphError(Exception):
    """Base class for slopegraph errors."""


class InvalidInputError(SlopegraphError, ValueError):
    """The observation-by-period table cannot be plotted (e.g. fewer than 2 periods)."""


class StyleLengthError(SlopegraphError, ValueError):
    """A per-observation style vector cannot be broadcast to the number of observations."""


class InvalidStyleError(SlopegraphError, ValueError):
    """A style value (e.g. a line type) is not recognised."""
