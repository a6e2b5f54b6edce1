# MIT License
"""Result models returned by :func:`~livestock_metrics.aggregate.compute_metrics`.

Fields are snake_case in Python and carry camelCase aliases, so
``result.model_dump(by_alias=True)`` yields the JSON shape consumed by the
rendering layer::

    {"emissions": {...}, "reproduction": {...}, "energy": {...}}

All models are frozen; a new :class:`MetricsResult` is built for every
parameter change.
"""
from __future__ import annotations
from typing import Dict, List
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_RESULT_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class YearlyEmissionsRecord(BaseModel):
    """Herd emissions for one project year (t CO₂e).

    ``enteric_fermentation + manure_management + feed_production`` equals
    ``adjusted_emissions``.
    """

    model_config = _RESULT_CONFIG

    year: int
    base_emissions: float
    adjusted_emissions: float
    enteric_fermentation: float
    manure_management: float
    feed_production: float


class YearlyCalvingRecord(BaseModel):
    model_config = _RESULT_CONFIG

    year: int
    calving_rate_percent: float
    calves_produced: float
    base_calves_produced: float
    additional_calves: float


class EnergyEmissionsPoint(BaseModel):
    model_config = _RESULT_CONFIG

    energy_level_mj: float = Field(..., alias="energyLevelMJ")
    emissions_factor: float
    relative_emissions: float


class EmissionSource(BaseModel):
    model_config = _RESULT_CONFIG

    name: str
    value: float


class EmissionsMetrics(BaseModel):
    model_config = _RESULT_CONFIG

    base_emissions_intensity: float = Field(..., description="kg CO₂e/head/year")
    adjusted_emissions_intensity: float = Field(..., description="kg CO₂e/head/year")
    reduction_percent: float
    base_annual_emissions: float = Field(..., description="t CO₂e/year for the herd")
    adjusted_annual_emissions: float = Field(..., description="t CO₂e/year for the herd")
    annual_reduction: float = Field(..., description="t CO₂e/year avoided by the herd")
    yearly_emissions_data: List[YearlyEmissionsRecord]
    emissions_sources: List[EmissionSource]


class ReproductionMetrics(BaseModel):
    model_config = _RESULT_CONFIG

    base_calving_rate: float
    improved_calving_rate: float
    calving_rate_improvement: float
    base_time_to_calf_months: float
    improved_time_to_calf_months: float
    time_saved: float
    final_year_additional_calves: float
    yearly_calving_data: List[YearlyCalvingRecord]


class EnergyMetrics(BaseModel):
    model_config = _RESULT_CONFIG

    daily_energy_intake: float = Field(..., description="MJ/day")
    methane_factor: float = Field(..., description="Ym, % of gross energy")
    feed_conversion_efficiency: float = Field(..., description="kg product per kg feed")
    feed_digestibility: float = Field(..., description="%")
    energy_emissions_data: List[EnergyEmissionsPoint]


class MetricsResult(BaseModel):
    model_config = _RESULT_CONFIG

    emissions: EmissionsMetrics
    reproduction: ReproductionMetrics
    energy: EnergyMetrics

    def to_frames(self) -> Dict[str, pd.DataFrame]:
        """Return the yearly series and the sensitivity curve as dataframes.

        Keys are ``"emissions"``, ``"calving"`` and ``"energy"``; columns
        use the snake_case field names.
        """
        return {
            "emissions": pd.DataFrame([r.model_dump() for r in self.emissions.yearly_emissions_data]),
            "calving": pd.DataFrame([r.model_dump() for r in self.reproduction.yearly_calving_data]),
            "energy": pd.DataFrame([p.model_dump() for p in self.energy.energy_emissions_data]),
        }
