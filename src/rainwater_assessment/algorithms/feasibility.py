"""
Site feasibility scoring.

Weighted score over roof area, annual rainfall and open space:

    score = (area / 200) × 30 + (rain / 1200) × 30 + 25 + (space / 50) × 15

classified Green (>= 75), Yellow (>= 40) or Red.
"""

from ..core import constants
from ..models import Feasibility


class FeasibilityScorer:
    """Three-tier feasibility classification with fixed weights."""

    @staticmethod
    def score(roof_area_m2: float, annual_rain_mm: float, open_space_m2: float) -> float:
        return (
            (roof_area_m2 / constants.FEASIBILITY_ROOF_REFERENCE_M2) * constants.FEASIBILITY_ROOF_WEIGHT
            + (annual_rain_mm / constants.FEASIBILITY_RAIN_REFERENCE_MM) * constants.FEASIBILITY_RAIN_WEIGHT
            + constants.FEASIBILITY_BASELINE
            + (open_space_m2 / constants.FEASIBILITY_SPACE_REFERENCE_M2) * constants.FEASIBILITY_SPACE_WEIGHT
        )

    @staticmethod
    def classify_score(score: float) -> Feasibility:
        if score >= constants.FEASIBILITY_GREEN_THRESHOLD:
            return Feasibility.GREEN
        if score >= constants.FEASIBILITY_YELLOW_THRESHOLD:
            return Feasibility.YELLOW
        return Feasibility.RED

    @classmethod
    def classify(cls, roof_area_m2: float, annual_rain_mm: float, open_space_m2: float) -> Feasibility:
        """Score a site and map the score to its tier."""
        return cls.classify_score(cls.score(roof_area_m2, annual_rain_mm, open_space_m2))
