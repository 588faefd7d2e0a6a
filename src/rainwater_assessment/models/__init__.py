"""
Data models for rainwater harvesting assessment.

Contains DTOs for assessment inputs, hydrogeological zones, recharge
structures and results.
"""

from .assessment import (
    RoofMaterial,
    Feasibility,
    AssessmentInput,
    CostBenefit,
    AssessmentResult,
)
from .structure import (
    RechargePit,
    RechargeTrench,
    RechargeShaft,
    RecommendedStructure,
    RecommendationOutcome,
)
from .zone import HydrogeologicalZone

__all__ = [
    "RoofMaterial",
    "Feasibility",
    "AssessmentInput",
    "CostBenefit",
    "AssessmentResult",
    "RechargePit",
    "RechargeTrench",
    "RechargeShaft",
    "RecommendedStructure",
    "RecommendationOutcome",
    "HydrogeologicalZone",
]
