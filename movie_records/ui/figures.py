from __future__ import annotations

from typing import Sequence

import plotly.graph_objs as go

from movie_records.core.pipeline import ChartPoint

BAR_COLOUR = "#f59e0b"


def empty_figure(message: str) -> go.Figure:
    """
    Standardised 'no data' figure.
    """
    fig = go.Figure()
    fig.update_layout(
        title=message,
        xaxis={"visible": False},
        yaxis={"visible": False},
        height=160,
        margin=dict(l=10, r=10, t=30, b=10),
    )
    return fig


def top_actors_figure(points: Sequence[ChartPoint]) -> go.Figure:
    """
    Small bar chart of movies per actor for the sidebar.
    """
    if not points:
        return empty_figure("No records yet")

    fig = go.Figure(
        go.Bar(
            x=[p.label for p in points],
            y=[p.value for p in points],
            marker_color=BAR_COLOUR,
            hovertemplate="%{x}: %{y} movie(s)<extra></extra>",
        )
    )
    fig.update_xaxes(showticklabels=False)
    fig.update_yaxes(rangemode="tozero", dtick=1)
    fig.update_layout(
        height=160,
        margin=dict(l=10, r=10, t=10, b=10),
        showlegend=False,
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig
