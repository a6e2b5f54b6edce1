# MIT License
"""Energy metrics for the herd.

Computes daily energy intake, the methane conversion factor (Ym, the
share of gross dietary energy lost as methane) and feed conversion
efficiency from the species and the feed digestibility.  Also builds the
energy/emissions sensitivity curve, which scales daily energy intake
between 0.7× and 1.3× and applies a square-root emissions response.
"""

from __future__ import annotations
import logging
import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict
from .params import ModelCoefficients, ProjectParameters
from .reference import dietary_profile, feed_profile, is_buffalo

logger = logging.getLogger(__name__)


class EnergyProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    daily_energy_intake_mj: float
    methane_factor_percent: float
    feed_conversion_efficiency: float
    feed_digestibility: float


def energy_levels(coeffs: ModelCoefficients) -> np.ndarray:
    """Relative energy levels sampled by the sensitivity curve.

    The number of samples is derived from the range and step and the
    levels are generated with :func:`numpy.linspace`, so the upper bound is
    always included regardless of floating point accumulation.
    """
    span = coeffs.energy_level_max - coeffs.energy_level_min
    n = int(round(span / coeffs.energy_level_step)) + 1
    return np.linspace(coeffs.energy_level_min, coeffs.energy_level_max, n)


def energy_emissions_curve(
    daily_energy_intake_mj: float,
    adjusted_intensity: float,
    buffalo: bool,
    coeffs: ModelCoefficients,
) -> pd.DataFrame:
    """Build the energy/emissions sensitivity curve.

    Parameters
    ----------
    daily_energy_intake_mj:
        Baseline daily energy intake (MJ/day).
    adjusted_intensity:
        Adjusted emissions intensity (kg CO₂e/head/year).
    buffalo:
        Selects the buffalo curve coefficients.
    coeffs:
        Model coefficients.

    Returns
    -------
    pandas.DataFrame
        One row per energy level with columns ``energy_level``,
        ``energy_level_mj``, ``emissions_factor`` and
        ``relative_emissions``.  Values are unrounded.
    """
    sc = coeffs.for_species(buffalo)
    levels = energy_levels(coeffs)
    factors = sc.curve_intercept + sc.curve_slope * np.sqrt(levels)
    return pd.DataFrame(
        {
            "energy_level": levels,
            "energy_level_mj": daily_energy_intake_mj * levels,
            "emissions_factor": factors,
            "relative_emissions": adjusted_intensity * factors,
        }
    )


def compute_energy(params: ProjectParameters) -> EnergyProfile:
    coeffs = params.coefficients
    buffalo = is_buffalo(params.animal_type)
    sc = coeffs.for_species(buffalo)
    feed = feed_profile(params.feed_type)
    dietary = dietary_profile(params.dietary_profile)
    methane = sc.base_methane_factor_percent + (1 - feed.digestibility) * coeffs.digestibility_methane_slope
    logger.debug("Ym %.2f %% for digestibility %.2f", methane, feed.digestibility)
    return EnergyProfile(
        daily_energy_intake_mj=dietary.megajoules_per_day * sc.energy_intake_multiplier,
        methane_factor_percent=methane,
        feed_conversion_efficiency=feed.digestibility * sc.feed_conversion_factor,
        feed_digestibility=feed.digestibility,
    )
