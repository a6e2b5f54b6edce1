# MIT License
"""Aggregation of the emissions, reproduction and energy models.

:func:`compute_metrics` runs the three calculators and the yearly
projector on one :class:`~livestock_metrics.params.ProjectParameters`
snapshot and packages the outputs into a :class:`MetricsResult`.  All
arithmetic is done on unrounded values; display rounding is applied only
while building the result, so rounded numbers never feed back into a
calculation.  Yearly series are returned unrounded.

The function is pure.  Callers that need caching or debouncing own it.
"""

from __future__ import annotations
import logging
from typing import List
import pandas as pd
from .params import ProjectParameters
from .projection import project_calving, project_emissions
from .reference import is_buffalo
from .results import (
    EmissionSource,
    EmissionsMetrics,
    EnergyEmissionsPoint,
    EnergyMetrics,
    MetricsResult,
    ReproductionMetrics,
    YearlyCalvingRecord,
    YearlyEmissionsRecord,
)
from .sim_1_emissions import EmissionsProfile, SourceShares, compute_emissions
from .sim_2_reproduction import compute_reproduction
from .sim_3_energy import compute_energy, energy_emissions_curve

logger = logging.getLogger(__name__)

SOURCE_NAMES = ("Enteric Fermentation", "Manure Management", "Feed Production")


def _emission_sources(shares: SourceShares) -> List[EmissionSource]:
    values = (shares.enteric_fermentation, shares.manure_management, shares.feed_production)
    return [EmissionSource(name=n, value=v) for n, v in zip(SOURCE_NAMES, values)]


def _emissions_records(df: pd.DataFrame) -> List[YearlyEmissionsRecord]:
    return [
        YearlyEmissionsRecord(
            year=int(r.year),
            base_emissions=float(r.base_emissions),
            adjusted_emissions=float(r.adjusted_emissions),
            enteric_fermentation=float(r.enteric_fermentation),
            manure_management=float(r.manure_management),
            feed_production=float(r.feed_production),
        )
        for r in df.itertuples(index=False)
    ]


def _calving_records(df: pd.DataFrame) -> List[YearlyCalvingRecord]:
    return [
        YearlyCalvingRecord(
            year=int(r.year),
            calving_rate_percent=float(r.calving_rate_percent),
            calves_produced=float(r.calves_produced),
            base_calves_produced=float(r.base_calves_produced),
            additional_calves=float(r.additional_calves),
        )
        for r in df.itertuples(index=False)
    ]


def _energy_points(df: pd.DataFrame) -> List[EnergyEmissionsPoint]:
    return [
        EnergyEmissionsPoint(
            energy_level_mj=round(float(r.energy_level_mj), 0),
            emissions_factor=round(float(r.emissions_factor), 2),
            relative_emissions=round(float(r.relative_emissions), 0),
        )
        for r in df.itertuples(index=False)
    ]


def _emissions_metrics(em: EmissionsProfile, df_em: pd.DataFrame) -> EmissionsMetrics:
    return EmissionsMetrics(
        base_emissions_intensity=round(em.base_intensity, 1),
        adjusted_emissions_intensity=round(em.adjusted_intensity, 1),
        reduction_percent=round(em.reduction_percent, 1),
        base_annual_emissions=round(em.base_annual_t, 1),
        adjusted_annual_emissions=round(em.adjusted_annual_t, 1),
        annual_reduction=round(em.base_annual_t - em.adjusted_annual_t, 1),
        yearly_emissions_data=_emissions_records(df_em),
        emissions_sources=_emission_sources(em.shares),
    )


def compute_metrics(params: ProjectParameters) -> MetricsResult:
    """Compute emissions, reproduction and energy metrics for a herd.

    Parameters
    ----------
    params:
        Complete parameter snapshot.  Unknown lookup keys fall back to the
        reference table defaults.

    Returns
    -------
    MetricsResult
        Scalar summaries rounded for display, unrounded yearly series
        over ``params.project_years`` and the seven point energy/emissions
        sensitivity curve.
    """
    logger.debug("Computing metrics for %d head over %d years", params.herd_size, params.project_years)
    coeffs = params.coefficients
    em = compute_emissions(params)
    rep = compute_reproduction(params)
    en = compute_energy(params)

    df_em = project_emissions(em.base_annual_t, em.adjusted_annual_t, em.shares, params.project_years, coeffs)
    df_calv = project_calving(
        params.herd_size, rep.base_calving_rate, rep.improved_calving_rate, params.project_years, coeffs
    )
    df_curve = energy_emissions_curve(
        en.daily_energy_intake_mj, em.adjusted_intensity, is_buffalo(params.animal_type), coeffs
    )

    reproduction = ReproductionMetrics(
        base_calving_rate=rep.base_calving_rate,
        improved_calving_rate=rep.improved_calving_rate,
        calving_rate_improvement=round(rep.improved_calving_rate - rep.base_calving_rate, 1),
        base_time_to_calf_months=rep.base_time_to_calf_months,
        improved_time_to_calf_months=round(rep.improved_time_to_calf_months, 1),
        time_saved=round(rep.time_saved_months, 1),
        final_year_additional_calves=round(float(df_calv["additional_calves"].iloc[-1]), 0),
        yearly_calving_data=_calving_records(df_calv),
    )
    energy = EnergyMetrics(
        daily_energy_intake=round(en.daily_energy_intake_mj, 1),
        methane_factor=round(en.methane_factor_percent, 1),
        feed_conversion_efficiency=round(en.feed_conversion_efficiency, 3),
        feed_digestibility=round(en.feed_digestibility * 100, 0),
        energy_emissions_data=_energy_points(df_curve),
    )
    return MetricsResult(
        emissions=_emissions_metrics(em, df_em),
        reproduction=reproduction,
        energy=energy,
    )
