"""
Owned handle to the chart currently on screen.
"""

from typing import Optional

import plotly.graph_objects as go


class ChartHandle:
    """
    Holds the single current figure for one view.

    Each redraw replaces the figure; the previous one is discarded. The
    revision counter increases on every replacement and is used as part of the
    widget key so the chart is re-created rather than patched.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.figure: Optional[go.Figure] = None
        self.revision = 0

    @property
    def is_empty(self) -> bool:
        return self.figure is None

    @property
    def widget_key(self) -> str:
        return f"{self.name}_chart_{self.revision}"

    def replace(self, figure: go.Figure) -> go.Figure:
        """Install ``figure`` as the current chart, discarding the old one."""
        self.figure = figure
        self.revision += 1
        return figure

    def clear(self) -> None:
        self.figure = None
