"""Core package for livestock emissions, reproduction and energy modelling.

This package contains the deterministic models behind the livestock
metrics dashboard: reference tables for animals, feeds, diets and
supplements, the emissions, reproductive performance and energy
calculators, the yearly projector and the Plotly figure builders used by
the Streamlit frontend.

The high-level :func:`compute_metrics` helper in ``aggregate.py`` composes
the calculators into a single :class:`MetricsResult`.
"""

from .params import ProjectParameters, ModelCoefficients, SpeciesCoefficients
from .reference import Species, FeedType, DietaryLevel, SupplementationType, get_profile
from .results import MetricsResult
from .aggregate import compute_metrics

__all__ = [
    "ProjectParameters",
    "ModelCoefficients",
    "SpeciesCoefficients",
    "Species",
    "FeedType",
    "DietaryLevel",
    "SupplementationType",
    "get_profile",
    "MetricsResult",
    "compute_metrics",
]
