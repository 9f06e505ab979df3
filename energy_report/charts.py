"""Plotly figures for the dashboard."""

import plotly.graph_objects as go

from .analytics import derive_analytics
from .report import format_hour


def hourly_figure(day, analytics=None):
    if analytics is None:
        analytics = derive_analytics(day.hourly_kWh)
    hours = list(range(len(day.hourly_kWh)))
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=hours, y=list(day.hourly_kWh), mode='lines+markers', name='Consumption', line=dict(color='black')))
    fig.add_trace(go.Scatter(
        x=[analytics.peak_hour],
        y=[analytics.peak_value],
        mode='markers+text',
        name='Peak',
        text=[f"peak {analytics.peak_value:.1f}"],
        textposition='top right',
        marker=dict(color='red', size=10),
    ))
    fig.update_layout(
        title="Hourly Consumption (kWh/h)",
        xaxis_title="Hour of Day",
        yaxis_title="kWh",
        showlegend=True,
        xaxis=dict(
            tickmode='array',
            tickvals=[0, 6, 12, 18, 23],
            ticktext=[format_hour(h) for h in (0, 6, 12, 18, 23)],
        )
    )
    return fig


def consumers_figure(day):
    names = [c.name for c in day.top_consumers]
    values = [c.kWh for c in day.top_consumers]
    fig = go.Figure()
    # reversed so the largest consumer is drawn on top
    fig.add_trace(go.Bar(
        x=values[::-1],
        y=names[::-1],
        orientation='h',
        name='kWh/day',
        marker_color='gray',
        text=[f"{v:.1f}" for v in values[::-1]],
        textposition='outside',
    ))
    fig.update_layout(title="Top Consumers (kWh/day)", xaxis_title="kWh", showlegend=False)
    return fig


def categories_figure(day):
    fig = go.Figure()
    fig.add_trace(go.Pie(
        labels=[c.name for c in day.category_breakdown],
        values=[c.kWh for c in day.category_breakdown],
        sort=False,
        direction='clockwise',
        rotation=0,
    ))
    fig.update_layout(title="Category Breakdown (share)")
    return fig
