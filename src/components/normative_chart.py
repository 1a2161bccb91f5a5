"""
Normative chart component: JACC upper limit vs height for both sexes.
"""

from typing import List, Optional

import plotly.graph_objects as go

from aortic.chart_data import USER_MEASUREMENT_KEY
from aortic.config import DEFAULT_CONFIG, HeightDomain
from aortic.models import ChartSeries, Sex
from src.config import PLOT_COLORS, PLOT_HEIGHT
from src.utils.formatting import axis_label, hover_label


def _sex_color(sex: Optional[Sex]) -> str:
    return PLOT_COLORS["female"] if sex is Sex.FEMALE else PLOT_COLORS["male"]


def render_normative_chart(
    series: List[ChartSeries],
    age: float,
    height_cm: Optional[float],
    chart_type: str = "area",
    domain: HeightDomain = DEFAULT_CONFIG.height_domain,
) -> go.Figure:
    """
    Render the age/height calculator chart.

    Parameters
    ----------
    series : list of ChartSeries
        Output of ``aortic.chart_data.normative_chart_data``
    age : float
        Age in years, used in the title
    height_cm : float, optional
        User height; draws a dashed vertical line when given
    chart_type : str
        ``"area"`` or ``"diameter"``, selects axis label and hover units
    domain : HeightDomain
        Fixed x-axis range

    Returns
    -------
    go.Figure
        Plotly figure object
    """
    fig = go.Figure()

    for s in series:
        hover_text = [hover_label(s.label, y, chart_type) for y in s.y]

        if s.kind == "curve":
            color = _sex_color(s.sex)
            fig.add_trace(go.Scatter(
                x=s.x,
                y=s.y,
                mode='lines',
                name=s.label,
                line=dict(color=color, width=2, shape='spline', smoothing=0.4),
                hovertext=hover_text,
                hoverinfo='text',
                showlegend=True,
            ))
        elif s.key == USER_MEASUREMENT_KEY:
            fig.add_trace(go.Scatter(
                x=s.x,
                y=s.y,
                mode='markers',
                name=s.label,
                marker=dict(
                    size=16,
                    color=PLOT_COLORS["user"],
                    symbol='star',
                    line=dict(color=PLOT_COLORS["user"], width=1),
                ),
                hovertext=hover_text,
                hoverinfo='text',
                showlegend=True,
            ))
        else:
            color = _sex_color(s.sex)
            fig.add_trace(go.Scatter(
                x=s.x,
                y=s.y,
                mode='markers',
                name=s.label,
                marker=dict(size=12, color=color, symbol='circle'),
                hovertext=hover_text,
                hoverinfo='text',
                showlegend=True,
            ))

    if height_cm:
        fig.add_shape(create_vertical_line_shape(height_cm, PLOT_COLORS["user_line"]))

    fig.update_layout(
        height=PLOT_HEIGHT,
        title=dict(
            text=f"Age {age:g} years - Upper Limits Across Height Range",
            x=0.5,
            font=dict(size=16, color="black")
        ),
        hovermode="closest",
        showlegend=True,
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="right",
            x=1
        ),
        xaxis=dict(
            title="Height (cm)",
            range=[domain.min_cm, domain.max_cm],
            showgrid=True,
            gridcolor='lightgray',
            zeroline=False,
        ),
        yaxis=dict(
            title=axis_label(chart_type),
            showgrid=True,
            gridcolor='lightgray',
            zeroline=False,
        ),
    )

    return fig


def create_vertical_line_shape(x_position: float, color: str) -> dict:
    """
    Create a dashed vertical line shape spanning the full plot height.

    Parameters
    ----------
    x_position : float
        X-coordinate for the vertical line (height in cm)
    color : str
        Line color

    Returns
    -------
    dict
        Plotly shape dictionary
    """
    return {
        'type': 'line',
        'xref': 'x',
        'yref': 'paper',
        'x0': x_position,
        'x1': x_position,
        'y0': 0,
        'y1': 1,
        'line': dict(
            color=color,
            width=2,
            dash='dash',
        ),
    }
