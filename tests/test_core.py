"""Unit tests for the calculators.

These tests verify the basic computations performed by the modelling
modules: emissions intensity and source split, reproductive performance
with and without overrides, energy metrics and the sensitivity curve, and
the capped yearly improvement curves of the projector.
"""

import math

import pytest
from pydantic import ValidationError

from livestock_metrics.params import ModelCoefficients, ProjectParameters, SpeciesCoefficients
from livestock_metrics.projection import (
    calving_improvement_points,
    emissions_year_adjustment,
    project_calving,
    project_emissions,
)
from livestock_metrics.reference import animal_profile, supplementation_profile
from livestock_metrics.sim_1_emissions import compute_emissions, reduction_percent, source_shares
from livestock_metrics.sim_2_reproduction import compute_reproduction, reproductive_performance
from livestock_metrics.sim_3_energy import compute_energy, energy_emissions_curve, energy_levels

COEFFS = ModelCoefficients()


def test_emissions_intensity_cattle():
    em = compute_emissions(ProjectParameters(herd_size=1000))
    assert math.isclose(em.base_intensity, 120.0)
    assert math.isclose(em.adjusted_intensity, 120 * 0.92)
    assert math.isclose(em.reduction_percent, 8.0)
    # herd totals in tonnes
    assert math.isclose(em.base_annual_t, 120.0)
    assert math.isclose(em.adjusted_annual_t, 110.4)


def test_emissions_factors_multiply():
    params = ProjectParameters(
        feed_type="optimized", dietary_profile="high", supplementation_type="protein",
        use_emission_reduction_additive=True, additive_efficiency_percent=30,
    )
    em = compute_emissions(params)
    assert math.isclose(em.adjusted_intensity, 120 * 0.75 * 1.1 * 1.05 * 0.7)


def test_additive_disabled_ignores_efficiency():
    em = compute_emissions(ProjectParameters(additive_efficiency_percent=80))
    assert math.isclose(em.adjusted_intensity, 120 * 0.92)


def test_additive_above_100_is_not_clamped():
    em = compute_emissions(ProjectParameters(use_emission_reduction_additive=True, additive_efficiency_percent=150))
    assert em.adjusted_intensity < 0


def test_buffalo_premium_and_shares():
    em = compute_emissions(ProjectParameters(animal_type="buffalo", subtype="water_buffalo", herd_size=500))
    assert math.isclose(em.base_intensity, 161.0)
    assert em.shares.enteric_fermentation == 65
    assert em.shares.manure_management == 25
    assert em.shares.feed_production == 10


def test_source_shares_sum_to_100():
    for buffalo in (False, True):
        s = source_shares(buffalo, COEFFS)
        assert s.enteric_fermentation + s.manure_management + s.feed_production == 100


def test_reduction_percent_zero_base():
    assert reduction_percent(0.0, 0.0) == 0.0


def test_reproduction_defaults():
    rep = compute_reproduction(ProjectParameters(supplementation_type="mineral"))
    assert rep.base_calving_rate == 85
    assert rep.improved_calving_rate == 95
    assert rep.base_time_to_calf_months == 13
    # max(13 - 2, 13 * 0.85) = 11.05
    assert math.isclose(rep.improved_time_to_calf_months, 11.05)
    assert math.isclose(rep.time_saved_months, 1.95)


def test_reproduction_interval_takes_smaller_gain():
    rep = reproductive_performance(
        animal_profile("cattle", "dairy"), supplementation_profile("none"), COEFFS,
        time_to_calf_before_override=10,
    )
    # max(8, 8.5) = 8.5, the 15 % gain is smaller
    assert math.isclose(rep.improved_time_to_calf_months, 8.5)
    rep = reproductive_performance(
        animal_profile("cattle", "dairy"), supplementation_profile("none"), COEFFS,
        time_to_calf_before_override=20,
    )
    # max(18, 17) = 18
    assert math.isclose(rep.improved_time_to_calf_months, 18.0)


def test_reproduction_overrides_and_cap():
    rep = compute_reproduction(
        ProjectParameters(
            supplementation_type="complete", calving_rate_override=90,
            time_to_calf_before_override=15, time_to_calf_after_override=12.5,
        )
    )
    assert rep.base_calving_rate == 90
    assert rep.improved_calving_rate == 100
    assert rep.improved_time_to_calf_months == 12.5
    assert math.isclose(rep.time_saved_months, 2.5)


def test_energy_metrics_cattle():
    en = compute_energy(ProjectParameters(feed_type="mixed", dietary_profile="medium"))
    assert math.isclose(en.methane_factor_percent, 6.5 + 0.25 * 10)
    assert math.isclose(en.daily_energy_intake_mj, 150.0)
    assert math.isclose(en.feed_conversion_efficiency, 0.75 * 0.15)
    assert math.isclose(en.feed_digestibility, 0.75)


def test_energy_metrics_buffalo():
    en = compute_energy(ProjectParameters(animal_type="buffalo", subtype="swamp_buffalo", feed_type="grass"))
    assert math.isclose(en.methane_factor_percent, 7.0 + 0.35 * 10)
    assert math.isclose(en.daily_energy_intake_mj, 180.0)
    assert math.isclose(en.feed_conversion_efficiency, 0.65 * 0.13)


def test_energy_levels_inclusive():
    levels = energy_levels(COEFFS)
    assert len(levels) == 7
    assert levels[0] == pytest.approx(0.7)
    assert levels[-1] == pytest.approx(1.3)
    assert levels[3] == pytest.approx(1.0)


def test_energy_curve_values():
    df = energy_emissions_curve(150.0, 100.0, False, COEFFS)
    assert len(df) == 7
    mid = df.iloc[3]
    assert mid["energy_level_mj"] == pytest.approx(150.0)
    assert mid["emissions_factor"] == pytest.approx(1.15)
    assert mid["relative_emissions"] == pytest.approx(115.0)
    buffalo = energy_emissions_curve(180.0, 100.0, True, COEFFS)
    assert buffalo.iloc[0]["emissions_factor"] == pytest.approx(0.8 + 0.4 * math.sqrt(0.7))
    assert df["emissions_factor"].is_monotonic_increasing


def test_year_adjustment_caps():
    assert emissions_year_adjustment(1, COEFFS) == 1.0
    assert math.isclose(emissions_year_adjustment(6, COEFFS), 0.9)
    assert math.isclose(emissions_year_adjustment(11, COEFFS), 0.8)
    assert emissions_year_adjustment(50, COEFFS) == emissions_year_adjustment(11, COEFFS)
    assert calving_improvement_points(1, COEFFS) == 0.0
    assert calving_improvement_points(11, COEFFS) == 5.0
    assert calving_improvement_points(50, COEFFS) == 5.0
    prev_e, prev_c = 0.0, 0.0
    for y in range(1, 60):
        decay = 1 - emissions_year_adjustment(y, COEFFS)
        gain = calving_improvement_points(y, COEFFS)
        assert prev_e <= decay <= 0.2 + 1e-12
        assert prev_c <= gain <= 5.0
        prev_e, prev_c = decay, gain


def test_project_emissions_split():
    shares = source_shares(False, COEFFS)
    df = project_emissions(120.0, 100.0, shares, 12, COEFFS)
    assert list(df["year"]) == list(range(1, 13))
    assert (df["base_emissions"] == 120.0).all()
    total = df["enteric_fermentation"] + df["manure_management"] + df["feed_production"]
    assert ((total - df["adjusted_emissions"]).abs() < 1e-9).all()
    assert df.loc[df["year"] == 12, "adjusted_emissions"].iloc[0] == pytest.approx(80.0)


def test_project_calving():
    df = project_calving(200, 85, 97, 10, COEFFS)
    assert (df["base_calves_produced"] == 170.0).all()
    # improved 97 + 0.5/yr caps at 100 from year 7
    assert df.loc[df["year"] == 1, "calving_rate_percent"].iloc[0] == 97
    assert df.loc[df["year"] == 7, "calving_rate_percent"].iloc[0] == 100
    assert df["calving_rate_percent"].max() == 100
    last = df.iloc[-1]
    assert last["calves_produced"] == pytest.approx(200.0)
    assert last["additional_calves"] == pytest.approx(30.0)


def test_reproduction_zero_overrides_are_honoured():
    rep = compute_reproduction(
        ProjectParameters(supplementation_type="mineral", calving_rate_override=0, time_to_calf_after_override=0)
    )
    assert rep.base_calving_rate == 0
    assert rep.improved_calving_rate == 10
    assert rep.improved_time_to_calf_months == 0
    assert math.isclose(rep.time_saved_months, 13.0)


def test_custom_cattle_coefficients():
    coeffs = ModelCoefficients(
        cattle=SpeciesCoefficients(base_methane_factor_percent=6.0, feed_conversion_factor=0.2),
        manure_share_percent=30,
        emissions_decay_cap=0.1,
    )
    params = ProjectParameters(coefficients=coeffs)
    en = compute_energy(params)
    assert math.isclose(en.methane_factor_percent, 6.0 + 0.25 * 10)
    assert math.isclose(en.feed_conversion_efficiency, 0.75 * 0.2)
    shares = compute_emissions(params).shares
    assert (shares.enteric_fermentation, shares.manure_management, shares.feed_production) == (60, 30, 10)
    assert math.isclose(emissions_year_adjustment(20, coeffs), 0.9)


def test_energy_range_must_be_ordered():
    with pytest.raises(ValidationError):
        ModelCoefficients(energy_level_min=1.3, energy_level_max=0.7)


def test_source_shares_cannot_exceed_100():
    with pytest.raises(ValidationError):
        ModelCoefficients(manure_share_percent=40)
    with pytest.raises(ValidationError):
        ModelCoefficients(cattle=SpeciesCoefficients(enteric_share_percent=80))
    ModelCoefficients(manure_share_percent=35)
