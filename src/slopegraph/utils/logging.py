"""
Logging utilities for the slopegraph library.

Library Logging Conventions
---------------------------
1. **Library code never calls configure_logging()** - it only uses get_logger(__name__).
2. **Demos and scripts may call configure_logging()** to get console output.
3. When imported by an application that has configured logging, all
   slopegraph logs flow to that application's handlers.

slopegraph does NOT write any log files; it is a headless library.

Example Usage
-------------
In library code (segments.py, renderer.py, etc.):
    ```python
    from slopegraph.utils.logging import get_logger
    logger = get_logger(__name__)
    logger.info("rendered %d segments", n)
    ```

In standalone demos/scripts:
    ```python
    from slopegraph.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL_ENV = "SLOPEGRAPH_LOG_LEVEL"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure logging for the slopegraph logger only (never root).

    Args:
        level: Logging level (e.g. "DEBUG", "INFO"). Defaults to the
            SLOPEGRAPH_LOG_LEVEL env var, or "INFO" if unset.
        fmt: Log message format. Defaults to DEFAULT_FMT.
        datefmt: Date format. Defaults to DEFAULT_DATEFMT.
        force: If True, remove existing handlers before adding a new one.
            If False, do nothing when a stderr StreamHandler is already attached.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("slopegraph")
    logger.setLevel(level)

    formatter = logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger by name.

    If name is None, returns the 'slopegraph' package logger.
    """
    if name is None:
        name = "slopegraph"
    return logging.getLogger(name)
