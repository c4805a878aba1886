"""
slopegraph: Edward Tufte-style slopegraphs from observation-by-period tables.

This package provides:
- build_segments / dedupe_segments: the segments connecting each observation's
  values across adjacent periods, and the deduplicated set actually stroked
- LayoutRenderer / slopegraph: style resolution, label placement and draw calls
  onto a DrawingSurface (PlotlySurface for Plotly figure dicts)
- SlopegraphConfig / SlopegraphPresets: rendering options and named presets saved as JSON
- Logging utilities for library and application use

For logging configuration in standalone scripts/demos:
    ```python
    from slopegraph.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from slopegraph.utils.logging import configure_logging, get_logger

from slopegraph.config import LabelPosition, SlopegraphConfig
from slopegraph.presets import SlopegraphPresets, validate_config
from slopegraph.errors import InvalidInputError, InvalidStyleError, SlopegraphError, StyleLengthError
from slopegraph.renderer import LayoutRenderer, slopegraph, slopegraph_plotly
from slopegraph.segments import Segment, build_segments, dedupe_segments, segments_to_frame
from slopegraph.surface import DrawingSurface, PlotlySurface
from slopegraph.table import as_table
from slopegraph.theme import ThemeMode

# Ensure the slopegraph logger has a NullHandler so logs don't propagate to root
# when no application has configured logging.
_logger = logging.getLogger("slopegraph")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "DrawingSurface",
    "InvalidInputError",
    "InvalidStyleError",
    "LabelPosition",
    "LayoutRenderer",
    "PlotlySurface",
    "Segment",
    "SlopegraphConfig",
    "SlopegraphError",
    "SlopegraphPresets",
    "StyleLengthError",
    "ThemeMode",
    "as_table",
    "build_segments",
    "configure_logging",
    "dedupe_segments",
    "get_logger",
    "segments_to_frame",
    "slopegraph",
    "slopegraph_plotly",
    "validate_config",
]

__version__ = "0.1.0"
