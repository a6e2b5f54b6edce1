# MIT License
"""Plotly figure builders for the livestock metrics dashboard.

This module centralises creation of Plotly figures used by the Streamlit
frontend.  Each builder takes the dataframes returned by
:meth:`MetricsResult.to_frames` or plain values from the result, so the
pages never touch the calculators directly.
"""

from __future__ import annotations
from typing import Sequence
import pandas as pd
import plotly.graph_objects as go

SOURCE_COLUMNS = (
    ("enteric_fermentation", "Enteric Fermentation"),
    ("manure_management", "Manure Management"),
    ("feed_production", "Feed Production"),
)


def fig_emissions_over_time(df: pd.DataFrame) -> go.Figure:
    """Create a stacked area chart of emissions by source.

    Parameters
    ----------
    df:
        Dataframe with columns 'year', 'base_emissions' and one column
        per emission source.

    Returns
    -------
    plotly.graph_objects.Figure
        Stacked areas for the three sources and a line for the baseline.
    """
    fig = go.Figure()
    for col, name in SOURCE_COLUMNS:
        fig.add_scatter(x=df["year"], y=df[col], mode="lines", stackgroup="sources", name=name)
    fig.add_scatter(
        x=df["year"], y=df["base_emissions"], mode="lines", name="Baseline Emissions",
        line={"color": "red", "width": 2},
    )
    fig.update_layout(
        title="Emissions Over Time",
        xaxis_title="Year",
        yaxis_title="Tonnes CO₂e",
        template="plotly_white",
    )
    return fig


def fig_emission_sources(names: Sequence[str], values: Sequence[float]) -> go.Figure:
    fig = go.Figure(go.Pie(labels=list(names), values=list(values), hole=0.55))
    fig.update_layout(template="plotly_white", title="Emissions Sources")
    return fig


def fig_calving(df: pd.DataFrame) -> go.Figure:
    """Create a bar chart of base and additional calves with the calving rate.

    Parameters
    ----------
    df:
        Dataframe with columns 'year', 'base_calves_produced',
        'additional_calves' and 'calving_rate_percent'.

    Returns
    -------
    plotly.graph_objects.Figure
        Stacked bars on the left axis, calving rate line on the right.
    """
    fig = go.Figure()
    fig.add_bar(x=df["year"], y=df["base_calves_produced"], name="Base Production")
    fig.add_bar(x=df["year"], y=df["additional_calves"], name="Additional Production")
    fig.add_scatter(
        x=df["year"], y=df["calving_rate_percent"], mode="lines+markers", name="Calving Rate (%)", yaxis="y2"
    )
    fig.update_layout(
        title="Calving Production Over Time",
        barmode="stack",
        xaxis_title="Year",
        yaxis={"title": "Calves Born"},
        yaxis2={"title": "Calving Rate (%)", "overlaying": "y", "side": "right"},
        template="plotly_white",
    )
    return fig


def fig_energy_emissions(df: pd.DataFrame) -> go.Figure:
    fig = go.Figure()
    fig.add_scatter(x=df["energy_level_mj"], y=df["emissions_factor"], mode="lines+markers", name="Emissions Factor")
    fig.add_scatter(
        x=df["energy_level_mj"], y=df["relative_emissions"], mode="lines+markers",
        name="Relative Emissions", yaxis="y2",
    )
    fig.update_layout(
        title="Energy-Emissions Relationship",
        xaxis_title="Daily Energy Intake (MJ)",
        yaxis={"title": "Emissions Factor"},
        yaxis2={"title": "Relative Emissions (kg CO₂e)", "overlaying": "y", "side": "right"},
        template="plotly_white",
    )
    return fig
