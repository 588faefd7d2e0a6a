"""
Assessment engine for rooftop rainwater harvesting.

Orchestrates rainfall estimation, zone lookup, harvest calculation,
structure recommendation, feasibility and cost/benefit into one result.
"""

import logging
import random
from typing import Optional

from .core import Config, LoggerContext, constants
from .algorithms import (
    RainfallEstimator,
    ZoneResolver,
    GroundwaterDepthSampler,
    HarvestCalculator,
    StructureRecommender,
    CostBenefitAnalyzer,
    FeasibilityScorer,
    Recommendation,
)
from .models import (
    AssessmentInput,
    AssessmentResult,
    HydrogeologicalZone,
    RecommendationOutcome,
)
from .processing import InputValidator


NEGLIGIBLE_VOLUME_NOTE = (
    " The harvestable runoff at this site is small enough that no dedicated "
    "recharge structure is needed; direct use or a small storage tank is sufficient."
)


class AssessmentEngine:
    """
    Stateless assessment pipeline.

    The only non-determinism is the random source shared by the rainfall
    estimator and the groundwater depth sampler. Pass a seeded
    ``random.Random`` (or set ``simulation.random_seed``) to replay results.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize engine.

        Args:
            config: Configuration; built-in defaults when None
            rng: Random source exposing ``uniform(a, b)``
            logger: Logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

        seed = config.random_seed if config is not None else None
        self.rng = rng or random.Random(seed)

        efficiency = config.system_efficiency if config else constants.DEFAULT_SYSTEM_EFFICIENCY
        water_cost = config.water_cost_per_m3 if config else constants.DEFAULT_WATER_COST_PER_M3
        self.location_label = config.location_label if config else constants.DEFAULT_LOCATION_LABEL

        self.rainfall = RainfallEstimator(rng=self.rng, logger=self.logger)
        self.zones = ZoneResolver(logger=self.logger)
        self.depth_sampler = GroundwaterDepthSampler(rng=self.rng, logger=self.logger)
        self.harvest = HarvestCalculator(system_efficiency=efficiency, logger=self.logger)
        self.recommender = StructureRecommender(logger=self.logger)
        self.cost_benefit = CostBenefitAnalyzer(water_cost_per_m3=water_cost, logger=self.logger)
        self.feasibility = FeasibilityScorer()
        self.validator = InputValidator(
            latitude_range=self.zones.supported_range,
            logger=self.logger
        )

    def assess(self, assessment: AssessmentInput) -> AssessmentResult:
        """
        Run a full assessment.

        Args:
            assessment: Site parameters

        Returns:
            Populated AssessmentResult (possibly with no structures)

        Raises:
            AssessmentValidationError: If the input cannot yield a meaningful result
        """
        self.validator.ensure_valid(assessment)

        with LoggerContext(self.logger, "rainwater assessment"):
            rain = self.rainfall.estimate(assessment.latitude)

            zone = self.zones.resolve(assessment.latitude)
            depth = self.depth_sampler.sample(zone)

            coefficient = self.harvest.runoff_coefficient(assessment.roof_material)
            annual_harvest = self.harvest.harvestable_volume(
                rain.annual_mm, assessment.roof_area_m2, coefficient
            )
            monsoon_harvest = self.harvest.harvestable_volume(
                rain.monsoon_mm, assessment.roof_area_m2, coefficient
            )

            recommendation = self.recommender.recommend(
                harvest_m3=monsoon_harvest,
                open_space_m2=assessment.open_space_m2,
                groundwater_depth_m=depth,
                dwellers=assessment.dwellers,
            )
            total_cost = recommendation.total_cost_inr

            feasibility = self.feasibility.classify(
                assessment.roof_area_m2, rain.annual_mm, assessment.open_space_m2
            )
            cost_benefit = self.cost_benefit.analyze(total_cost, annual_harvest)

            result = AssessmentResult(
                annual_rain_mm=round(rain.annual_mm, 1),
                monsoon_rain_mm=round(rain.monsoon_mm, 1),
                runoff_coeff=coefficient,
                annual_harvest_m3=round(annual_harvest, 1),
                monsoon_harvest_m3=round(monsoon_harvest, 1),
                recommended_structures=recommendation.structures,
                depth_to_groundwater_m=round(depth, 1),
                aquifer_note=self.aquifer_note(zone, recommendation, assessment.open_space_m2),
                feasibility=feasibility,
                cost_estimate_inr=total_cost,
                cost_benefit=cost_benefit,
                location_name=self.location_label,
                system_efficiency=self.harvest.system_efficiency,
                zone_name=zone.name,
                outcome=recommendation.outcome,
            )

        self.logger.info(
            f"Assessment at ({assessment.latitude:.4f}, {assessment.longitude:.4f}): "
            f"{result.annual_harvest_m3} m³/yr, {len(result.recommended_structures)} structure(s), "
            f"{result.feasibility.value}, cost {result.cost_estimate_inr} INR"
        )
        return result

    @staticmethod
    def aquifer_note(
        zone: HydrogeologicalZone,
        recommendation: Recommendation,
        open_space_m2: float
    ) -> str:
        """Human-readable site note, explaining an empty recommendation."""
        if recommendation.outcome == RecommendationOutcome.INSUFFICIENT_SPACE:
            return (
                f"While there is harvestable water, the available open space "
                f"({open_space_m2:g} m²) is too limited for a standard recharge structure. "
                f"Consider redirecting runoff to a nearby existing well or a larger "
                f"green space if possible."
            )
        if recommendation.outcome == RecommendationOutcome.NEGLIGIBLE_VOLUME:
            return zone.describe() + NEGLIGIBLE_VOLUME_NOTE
        return zone.describe()


def assess(assessment: AssessmentInput, rng: Optional[random.Random] = None) -> AssessmentResult:
    """Assess a site with default configuration."""
    return AssessmentEngine(rng=rng).assess(assessment)
