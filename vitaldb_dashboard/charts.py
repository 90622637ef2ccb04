"""
Plotly figure builders for the three dashboard views.

Figures only draw what they are given; all counting happens in
aggregator.py before a figure is built.
"""

import plotly.graph_objects as go
import pandas as pd

from .models import CategorySummary


def _empty_figure(height: int = 400) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text="No data",
        showarrow=False,
        font=dict(size=16, color="#888"),
        xref="paper", yref="paper", x=0.5, y=0.5,
    )
    fig.update_layout(
        height=height,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        plot_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def pie_chart(summaries: list[CategorySummary], height: int = 500) -> go.Figure:
    """Pie chart with "<label>: <pct>%" hover text and a side legend."""
    total = sum(s.value for s in summaries)
    if not summaries or total == 0:
        return _empty_figure(height)

    fig = go.Figure(go.Pie(
        labels=[str(s.label) for s in summaries],
        values=[s.value for s in summaries],
        marker=dict(colors=[s.color for s in summaries]),
        sort=False,
        textinfo="none",
        hovertemplate="<b>%{label}:</b> %{percent:.1%}<extra></extra>",
    ))
    fig.update_layout(
        height=height,
        legend=dict(orientation="v", x=1.02, y=0.5),
        margin=dict(l=10, r=10, t=10, b=10),
    )
    return fig


def age_bar_chart(summaries: list[CategorySummary], height: int = 400) -> go.Figure:
    """Cases per age bucket with the count printed above each bar."""
    if not summaries:
        return _empty_figure(height)

    fig = go.Figure(go.Bar(
        x=[str(s.label) for s in summaries],
        y=[s.value for s in summaries],
        marker_color=[s.color for s in summaries],
        text=[s.value for s in summaries],
        textposition="outside",
        hovertemplate="Age %{x}: %{y} cases<extra></extra>",
    ))
    fig.update_layout(
        height=height,
        xaxis_title="Age Group",
        yaxis_title="Cases",
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=10, r=10, t=10, b=40),
    )
    return fig


def scatter_chart(points: pd.DataFrame, height: int = 500) -> go.Figure:
    """Surgery duration (hours) against ICU stay (days).

    Expects the frame returned by dashboard.get_scatter_data().
    """
    if points.empty:
        return _empty_figure(height)

    fig = go.Figure(go.Scatter(
        x=points["duration_hours"],
        y=points["icu_days"],
        mode="markers",
        marker=dict(
            size=10,
            color=points["color"].tolist(),
            opacity=points["opacity"].tolist(),
        ),
        hovertext=points["tooltip"],
        hoverinfo="text",
    ))
    fig.update_layout(
        height=height,
        xaxis_title="Surgery Duration (hours)",
        yaxis_title="ICU Stay (days)",
        xaxis=dict(rangemode="tozero"),
        yaxis=dict(rangemode="tozero"),
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=10, r=10, t=10, b=40),
    )
    return fig
