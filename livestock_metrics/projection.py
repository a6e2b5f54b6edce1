# MIT License
"""Yearly projection of herd emissions and calving.

Management improvements are assumed to accrue linearly over the project:
emissions intensity falls by 2 % per year (capped at 20 %) and the
calving rate rises by 0.5 percentage points per year (capped at 5
points).  The baseline columns are a constant do-nothing counterfactual
and are never decayed.

Both projectors return a pandas DataFrame with one row per year, starting
at year 1.
"""

from __future__ import annotations
import numpy as np
import pandas as pd
from .params import ModelCoefficients
from .sim_1_emissions import SourceShares


def emissions_year_adjustment(year: int, coeffs: ModelCoefficients) -> float:
    """Multiplier on adjusted emissions for ``year`` (1 in year 1)."""
    return 1 - min(coeffs.emissions_decay_cap, coeffs.emissions_decay_per_year * (year - 1))


def calving_improvement_points(year: int, coeffs: ModelCoefficients) -> float:
    """Calving rate gain in percentage points for ``year`` (0 in year 1)."""
    return min(coeffs.calving_gain_cap, coeffs.calving_gain_per_year * (year - 1))


def project_emissions(
    base_annual_t: float,
    adjusted_annual_t: float,
    shares: SourceShares,
    project_years: int,
    coeffs: ModelCoefficients,
) -> pd.DataFrame:
    rows = []
    for y in np.arange(1, project_years + 1):
        adjusted = adjusted_annual_t * emissions_year_adjustment(y, coeffs)
        rows.append(dict(year=int(y),
                         base_emissions=base_annual_t,
                         adjusted_emissions=adjusted,
                         enteric_fermentation=adjusted * shares.enteric_fermentation / 100,
                         manure_management=adjusted * shares.manure_management / 100,
                         feed_production=adjusted * shares.feed_production / 100))
    return pd.DataFrame(rows)


def project_calving(
    herd_size: int,
    base_calving_rate: float,
    improved_calving_rate: float,
    project_years: int,
    coeffs: ModelCoefficients,
) -> pd.DataFrame:
    base_calves = herd_size * base_calving_rate / 100
    rows = []
    for y in np.arange(1, project_years + 1):
        rate = min(100.0, improved_calving_rate + calving_improvement_points(y, coeffs))
        calves = herd_size * rate / 100
        rows.append(dict(year=int(y),
                         calving_rate_percent=rate,
                         calves_produced=calves,
                         base_calves_produced=base_calves,
                         additional_calves=calves - base_calves))
    return pd.DataFrame(rows)
