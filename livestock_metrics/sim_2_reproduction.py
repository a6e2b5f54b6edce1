# MIT License
"""Reproductive performance calculator.

Derives the baseline and improved calving rate and calving interval
(time to calf) of a herd.  Explicit overrides on the parameters take
precedence over the animal profile defaults; supplementation adds its
reproductive effect to the calving rate, capped at 100 %.
"""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict
from .params import ModelCoefficients, ProjectParameters
from .reference import AnimalProfile, SupplementationProfile, animal_profile, supplementation_profile


class ReproductionProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_calving_rate: float
    improved_calving_rate: float
    base_time_to_calf_months: float
    improved_time_to_calf_months: float
    time_saved_months: float


def improved_time_to_calf(base_months: float, coeffs: ModelCoefficients) -> float:
    """Default improved calving interval.

    The larger of ``base - 2`` months and ``base × 0.85``, i.e. the
    smaller of the absolute and the relative gain.
    """
    return max(
        base_months - coeffs.time_to_calf_absolute_gain_months,
        base_months * coeffs.time_to_calf_relative_factor,
    )


def reproductive_performance(
    animal: AnimalProfile,
    supplementation: SupplementationProfile,
    coeffs: ModelCoefficients,
    calving_rate_override: Optional[float] = None,
    time_to_calf_before_override: Optional[float] = None,
    time_to_calf_after_override: Optional[float] = None,
) -> ReproductionProfile:
    base_rate = calving_rate_override if calving_rate_override is not None else animal.default_calving_rate_percent
    improved_rate = min(100.0, base_rate + supplementation.reproductive_effect_percent_points)
    base_ttc = (
        time_to_calf_before_override
        if time_to_calf_before_override is not None
        else animal.default_time_to_calf_months
    )
    if time_to_calf_after_override is not None:
        improved_ttc = time_to_calf_after_override
    else:
        improved_ttc = improved_time_to_calf(base_ttc, coeffs)
    return ReproductionProfile(
        base_calving_rate=base_rate,
        improved_calving_rate=improved_rate,
        base_time_to_calf_months=base_ttc,
        improved_time_to_calf_months=improved_ttc,
        time_saved_months=base_ttc - improved_ttc,
    )


def compute_reproduction(params: ProjectParameters) -> ReproductionProfile:
    return reproductive_performance(
        animal_profile(params.animal_type, params.subtype),
        supplementation_profile(params.supplementation_type),
        params.coefficients,
        calving_rate_override=params.calving_rate_override,
        time_to_calf_before_override=params.time_to_calf_before_override,
        time_to_calf_after_override=params.time_to_calf_after_override,
    )
