# MIT License
"""Emissions intensity calculator.

This module turns the animal, feed, diet and supplementation profiles of a
:class:`~livestock_metrics.params.ProjectParameters` into a baseline and an
adjusted emissions intensity (kg CO₂e per head per year), the reduction
between them, the herd level annual emissions and the split of emissions
between enteric fermentation, manure management and feed production.
"""

from __future__ import annotations
import logging
from typing import Tuple
from pydantic import BaseModel, ConfigDict
from .params import ModelCoefficients, ProjectParameters
from .reference import (
    AnimalProfile,
    DietaryEnergyProfile,
    FeedProfile,
    SupplementationProfile,
    animal_profile,
    dietary_profile,
    feed_profile,
    is_buffalo,
    supplementation_profile,
)
from .utils import kg_to_tonnes

logger = logging.getLogger(__name__)


class SourceShares(BaseModel):
    """Percentages of the adjusted emissions per source.  Sum to 100."""

    model_config = ConfigDict(frozen=True)

    enteric_fermentation: float
    manure_management: float
    feed_production: float


class EmissionsProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_intensity: float
    adjusted_intensity: float
    reduction_percent: float
    base_annual_t: float
    adjusted_annual_t: float
    shares: SourceShares


def emissions_intensity(
    animal: AnimalProfile,
    feed: FeedProfile,
    dietary: DietaryEnergyProfile,
    supplementation: SupplementationProfile,
    buffalo: bool,
    use_additive: bool,
    additive_efficiency_percent: float,
    coeffs: ModelCoefficients,
) -> Tuple[float, float]:
    """Compute baseline and adjusted emissions intensity.

    Parameters
    ----------
    animal, feed, dietary, supplementation:
        Reference profiles selected for the herd.
    buffalo:
        Whether the herd is buffalo; selects the species coefficients.
    use_additive, additive_efficiency_percent:
        Emission reducing feed additive.  The efficiency is applied as
        ``1 - efficiency / 100`` without clamping.
    coeffs:
        Model coefficients.

    Returns
    -------
    tuple of float
        ``(base_intensity, adjusted_intensity)`` in kg CO₂e/head/year.
    """
    base = animal.base_emissions_intensity * coeffs.for_species(buffalo).emissions_premium
    adjusted = base * feed.emissions_factor * dietary.emissions_factor * supplementation.emissions_factor
    if use_additive:
        adjusted *= 1 - additive_efficiency_percent / 100
    return base, adjusted


def reduction_percent(base: float, adjusted: float) -> float:
    if base == 0:
        return 0.0
    return (base - adjusted) / base * 100


def source_shares(buffalo: bool, coeffs: ModelCoefficients) -> SourceShares:
    enteric = coeffs.for_species(buffalo).enteric_share_percent
    manure = coeffs.manure_share_percent
    return SourceShares(
        enteric_fermentation=enteric,
        manure_management=manure,
        feed_production=100 - enteric - manure,
    )


def herd_annual_tonnes(herd_size: int, intensity_kg_per_head: float) -> float:
    """Annual herd emissions in tonnes CO₂e."""
    return kg_to_tonnes(herd_size * intensity_kg_per_head)


def compute_emissions(params: ProjectParameters) -> EmissionsProfile:
    logger.debug("Computing emissions for %s/%s", params.animal_type, params.subtype)
    coeffs = params.coefficients
    buffalo = is_buffalo(params.animal_type)
    base, adjusted = emissions_intensity(
        animal_profile(params.animal_type, params.subtype),
        feed_profile(params.feed_type),
        dietary_profile(params.dietary_profile),
        supplementation_profile(params.supplementation_type),
        buffalo,
        params.use_emission_reduction_additive,
        params.additive_efficiency_percent,
        coeffs,
    )
    return EmissionsProfile(
        base_intensity=base,
        adjusted_intensity=adjusted,
        reduction_percent=reduction_percent(base, adjusted),
        base_annual_t=herd_annual_tonnes(params.herd_size, base),
        adjusted_annual_t=herd_annual_tonnes(params.herd_size, adjusted),
        shares=source_shares(buffalo, coeffs),
    )
