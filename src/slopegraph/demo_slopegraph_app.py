# Demo app for slopegraph
"""Demo application rendering a slopegraph into a NiceGUI plotly element.

The sample table has a tied pair of observations (drawn as one stroke), a
missing value that breaks a trajectory, and a per-observation color vector.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
from nicegui import ui

from slopegraph.config import SlopegraphConfig
from slopegraph.renderer import slopegraph_plotly
from slopegraph.segments import segments_to_frame
from slopegraph.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def sample_table() -> pd.DataFrame:
    """Small panel of receipts as a share of GDP, two of them tied."""
    return pd.DataFrame(
        {
            "1970": [46.9, 44.0, 39.0, 39.0, 35.2, 30.3],
            "1975": [50.5, 47.1, 41.8, 41.8, np.nan, 31.4],
            "1979": [57.4, 55.8, 45.0, 43.2, 37.8, 32.9],
        },
        index=["Sweden", "Netherlands", "France", "Belgium", "Germany", "Canada"],
    )


def main() -> None:
    """Demo entrypoint."""
    configure_logging(level="INFO")

    df = sample_table()
    config = SlopegraphConfig(
        title="Current Receipts of Government as a Percentage of GDP",
        col_lines=["gray", "gray", "black"],
        decimals=1,
        xlim=(-0.5, 4.5),
    )
    fig, segments = slopegraph_plotly(df, config)
    logger.info(f"demo rendered {len(segments)} segments")

    ui.page_title("slopegraph demo")
    with ui.column().classes("w-full gap-4 p-4"):
        ui.plotly(fig).classes("w-full h-[600px]")
        ui.table.from_pandas(segments_to_frame(segments).reset_index(drop=True))

    ui.run(reload=False)


if __name__ in {"__main__", "__mp_main__"}:
    main()
