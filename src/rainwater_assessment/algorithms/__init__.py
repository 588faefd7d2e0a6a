"""
Calculation algorithms for rainwater harvesting assessment.

Provides rainfall simulation, zone lookup, harvest volume, structure
recommendation, cost/benefit and feasibility components.
"""

from .rainfall import RainfallEstimator, RainfallEstimate
from .zones import ZoneResolver, GroundwaterDepthSampler, HYDROGEOLOGICAL_ZONES, FALLBACK_ZONE
from .harvest import HarvestCalculator
from .recommender import StructureRecommender, Recommendation, PitSpec, TrenchSpec, ShaftSpec
from .cost_benefit import CostBenefitAnalyzer
from .feasibility import FeasibilityScorer

__all__ = [
    "RainfallEstimator",
    "RainfallEstimate",
    "ZoneResolver",
    "GroundwaterDepthSampler",
    "HYDROGEOLOGICAL_ZONES",
    "FALLBACK_ZONE",
    "HarvestCalculator",
    "StructureRecommender",
    "Recommendation",
    "PitSpec",
    "TrenchSpec",
    "ShaftSpec",
    "CostBenefitAnalyzer",
    "FeasibilityScorer",
]
