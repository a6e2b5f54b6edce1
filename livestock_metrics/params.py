# MIT License
"""Data models for the livestock metrics dashboard.

All parameter models are defined using [`pydantic.BaseModel`](https://docs.pydantic.dev/)
to provide type checking, validation and JSON serialisation.

:class:`ProjectParameters` is the complete input snapshot for one call to
:func:`~livestock_metrics.aggregate.compute_metrics`.  The fixed
coefficients of the model (buffalo premiums, emission source shares,
improvement rates) live in :class:`ModelCoefficients` so they can be
corrected without touching the calculators.
"""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic import field_validator, model_validator


class SpeciesCoefficients(BaseModel):
    """Coefficients that differ between cattle and buffalo."""

    model_config = ConfigDict(frozen=True)

    emissions_premium: float = Field(1.0, ge=0.0, le=10.0, description="Multiplier on the base emissions intensity")
    enteric_share_percent: float = Field(60.0, ge=0.0, le=100.0, description="Share of emissions from enteric fermentation (%)")
    base_methane_factor_percent: float = Field(6.5, ge=0.0, le=100.0, description="Methane conversion factor Ym before the digestibility term (%)")
    energy_intake_multiplier: float = Field(1.0, ge=0.0, le=10.0, description="Multiplier on the dietary energy profile (MJ/day)")
    feed_conversion_factor: float = Field(0.15, ge=0.0, le=1.0, description="kg product per kg feed at full digestibility")
    curve_intercept: float = Field(0.85, description="Intercept of the energy/emissions sensitivity curve")
    curve_slope: float = Field(0.3, description="Slope on sqrt(energy level) of the sensitivity curve")


class ModelCoefficients(BaseModel):
    """Fixed coefficients of the emissions, reproduction and energy models.

    Attributes
    ----------
    cattle, buffalo:
        Species specific coefficients.  Any species other than buffalo
        uses the cattle set.
    manure_share_percent:
        Share of emissions attributed to manure management.  Feed
        production takes whatever enteric fermentation and manure leave.
    emissions_decay_per_year, emissions_decay_cap:
        Linear yearly improvement of emissions intensity and its cap.
    calving_gain_per_year, calving_gain_cap:
        Yearly calving rate improvement in percentage points and its cap.
    time_to_calf_absolute_gain_months, time_to_calf_relative_factor:
        Default improvement of the calving interval when no explicit
        "after" value is supplied.
    energy_level_min, energy_level_max, energy_level_step:
        Relative energy intake range sampled by the sensitivity curve.
    """

    model_config = ConfigDict(frozen=True)

    cattle: SpeciesCoefficients = Field(default_factory=lambda: SpeciesCoefficients())
    buffalo: SpeciesCoefficients = Field(
        default_factory=lambda: SpeciesCoefficients(
            emissions_premium=1.15,
            enteric_share_percent=65.0,
            base_methane_factor_percent=7.0,
            energy_intake_multiplier=1.2,
            feed_conversion_factor=0.13,
            curve_intercept=0.8,
            curve_slope=0.4,
        )
    )
    manure_share_percent: float = Field(25.0, ge=0.0, le=100.0)
    digestibility_methane_slope: float = Field(10.0, ge=0.0, description="Ym increase per unit of indigestible feed")
    emissions_decay_per_year: float = Field(0.02, ge=0.0, le=1.0)
    emissions_decay_cap: float = Field(0.2, ge=0.0, le=1.0)
    calving_gain_per_year: float = Field(0.5, ge=0.0, le=100.0)
    calving_gain_cap: float = Field(5.0, ge=0.0, le=100.0)
    time_to_calf_absolute_gain_months: float = Field(2.0, ge=0.0)
    time_to_calf_relative_factor: float = Field(0.85, ge=0.0, le=1.0)
    energy_level_min: float = Field(0.7, gt=0.0)
    energy_level_max: float = Field(1.3, gt=0.0)
    energy_level_step: float = Field(0.1, gt=0.0)

    @field_validator("energy_level_max")
    def max_after_min(cls, v, values):
        if "energy_level_min" in values.data and v < values.data["energy_level_min"]:
            raise ValueError("energy_level_max must not be lower than energy_level_min")
        return v

    @model_validator(mode="after")
    def shares_within_100(self):
        for name in ("cattle", "buffalo"):
            enteric = getattr(self, name).enteric_share_percent
            if enteric + self.manure_share_percent > 100:
                raise ValueError(f"{name} enteric share plus manure share exceeds 100 %")
        return self

    def for_species(self, is_buffalo: bool) -> SpeciesCoefficients:
        return self.buffalo if is_buffalo else self.cattle


class ProjectParameters(BaseModel):
    """A complete set of herd and management parameters.

    Lookup keys (animal type, subtype, feed, diet, supplementation) are
    plain strings so that values coming from a form never fail
    validation; unknown keys resolve to documented defaults in
    :mod:`livestock_metrics.reference`.  Overrides left at ``None`` use the
    animal profile defaults.
    """

    model_config = ConfigDict(frozen=True)

    herd_size: int = Field(100, ge=0, description="Number of animals in the herd")
    animal_type: str = Field("cattle", description="Species: 'cattle' or 'buffalo'")
    subtype: str = Field("dairy", description="Breed or class within the species")
    feed_type: str = Field("mixed", description="Feed type key")
    dietary_profile: str = Field("medium", description="Dietary energy level key")
    supplementation_type: str = Field("none", description="Supplementation key")
    use_emission_reduction_additive: bool = Field(False, description="Whether a methane reducing feed additive is used")
    # not bounded: values outside 0-100 are passed through to the formula
    additive_efficiency_percent: float = Field(0.0, description="Emissions reduction of the additive (%)")
    grazing_practice: str = Field("continuous", description="Grazing practice, carried through for reporting")
    calving_rate_override: Optional[float] = Field(None, description="Baseline calving rate (%)")
    time_to_calf_before_override: Optional[float] = Field(None, description="Baseline calving interval (months)")
    time_to_calf_after_override: Optional[float] = Field(None, description="Improved calving interval (months)")
    project_years: int = Field(10, ge=1, description="Project horizon (years)")
    coefficients: ModelCoefficients = Field(default_factory=lambda: ModelCoefficients())
