"""
Comparison chart component: JACC, NORRE and ASE upper-limit diameters vs height.
"""

from typing import List

import plotly.graph_objects as go

from aortic.chart_data import USER_MEASUREMENT_KEY
from aortic.config import DEFAULT_CONFIG, HeightDomain
from aortic.models import ChartSeries, Demographics
from src.components.normative_chart import create_vertical_line_shape
from src.config import METHOD_DASH, METHOD_SYMBOL, PLOT_COLORS, PLOT_HEIGHT
from src.utils.formatting import axis_label, hover_label


def render_comparison_chart(
    series: List[ChartSeries],
    demographics: Demographics,
    domain: HeightDomain = DEFAULT_CONFIG.height_domain,
) -> go.Figure:
    """
    Render the method comparison chart.

    Only the three reference curves appear in the legend; the points at the
    user's height are identified by hover text.

    Parameters
    ----------
    series : list of ChartSeries
        Output of ``aortic.chart_data.comparison_chart_data``
    demographics : Demographics
        Inputs the series were computed for; used for title and height line
    domain : HeightDomain
        Fixed x-axis range

    Returns
    -------
    go.Figure
        Plotly figure object
    """
    fig = go.Figure()

    for s in series:
        hover_text = [hover_label(s.label, y, "diameter") for y in s.y]

        if s.kind == "curve":
            fig.add_trace(go.Scatter(
                x=s.x,
                y=s.y,
                mode='lines',
                name=s.label,
                line=dict(
                    color=PLOT_COLORS.get(s.method, "gray"),
                    width=2,
                    dash=METHOD_DASH.get(s.method, "solid"),
                ),
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
                marker=dict(size=16, color=PLOT_COLORS["user"], symbol='star'),
                hovertext=hover_text,
                hoverinfo='text',
                showlegend=False,
            ))
        else:
            fig.add_trace(go.Scatter(
                x=s.x,
                y=s.y,
                mode='markers',
                name=s.label,
                marker=dict(
                    size=12,
                    color=PLOT_COLORS.get(s.method, "gray"),
                    symbol=METHOD_SYMBOL.get(s.method, "circle"),
                ),
                hovertext=hover_text,
                hoverinfo='text',
                showlegend=False,
            ))

    fig.add_shape(
        create_vertical_line_shape(demographics.height_cm, PLOT_COLORS["height_line"])
    )

    fig.update_layout(
        height=PLOT_HEIGHT,
        title=dict(
            text=(
                f"{demographics.sex.label}, Age {demographics.age:g} years - "
                "Upper Limits Across Height Range"
            ),
            x=0.5,
            font=dict(size=14, color="black")
        ),
        hovermode="closest",
        showlegend=True,
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="right",
            x=1,
            font=dict(size=11),
        ),
        xaxis=dict(
            title="Height (cm)",
            range=[domain.min_cm, domain.max_cm],
            showgrid=True,
            gridcolor='lightgray',
            zeroline=False,
        ),
        yaxis=dict(
            title=axis_label("diameter"),
            showgrid=True,
            gridcolor='lightgray',
            zeroline=False,
        ),
    )

    return fig
