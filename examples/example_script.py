import plotly.io as pio
import pandas as pd

from slopegraph import SlopegraphConfig, segments_to_frame, slopegraph_plotly

df = pd.DataFrame(
    {
        "5 Year": [99, 96, 95, 89, 63, 55],
        "10 Year": [95, 94, 90, 87, 55, 50],
        "15 Year": [87, 91, 89, 84, 52, None],
        "20 Year": [81, 88, 89, 83, 49, 45],
    },
    index=["Group A", "Group B", "Group C", "Group D", "Group E", "Group F"],
)

cfg = SlopegraphConfig(col_lines="gray", xlim=(-0.5, 5.5), title="Example rates by period")
fig, segments = slopegraph_plotly(df, cfg)

print(segments_to_frame(segments))
pio.show(fig)
