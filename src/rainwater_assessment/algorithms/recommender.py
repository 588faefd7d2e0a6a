"""
Recharge structure recommendation module.

Selects artificial recharge structures for a site from its monsoon harvest,
open space, depth to groundwater and household size. The heuristics follow
the techniques in the CGWB "Rain Water Harvesting and Artificial Recharge"
manual, scaled to residential projects.

The decision is a greedy cascade run in a fixed order:

1. Recharge shaft (deep water tables)
2. Recharge trench (large volumes, enough ground)
3. Recharge pits (the workhorse, up to three units)

Each stage sees only the volume the previous stages left unsatisfied, so
capacity is never counted twice. A stage whose guard fails contributes
nothing to the result.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core import constants
from ..models import (
    RechargePit,
    RechargeTrench,
    RechargeShaft,
    RecommendedStructure,
    RecommendationOutcome,
)


@dataclass(frozen=True)
class PitSpec:
    """Standard recharge pit unit."""

    min_width_m: float = 1.5
    max_width_m: float = 4.0
    depth_m: float = 3.0
    max_space_share: float = 0.6
    max_units: int = 3
    min_space_m2: float = 4.0
    min_volume_m3: float = 5.0
    base_cost: float = 2500.0
    cost_per_m3: float = 250.0


@dataclass(frozen=True)
class TrenchSpec:
    """Standard recharge trench cross-section."""

    width_m: float = 1.0
    depth_m: float = 1.5
    max_length_m: float = 40.0
    min_length_m: float = 2.0
    min_space_m2: float = 10.0
    min_volume_m3: float = 40.0
    base_cost: float = 2000.0
    cost_per_m_length: float = 500.0


@dataclass(frozen=True)
class ShaftSpec:
    """Standard recharge shaft."""

    diameter_m: float = 1.0
    min_depth_m: float = 8.0
    max_depth_m: float = 25.0
    depth_ratio: float = 0.7  # Share of the groundwater depth to bore
    min_space_m2: float = 2.0
    min_volume_m3: float = 20.0
    base_cost: float = 8000.0
    cost_per_m_depth: float = 1000.0


@dataclass(frozen=True)
class Recommendation:
    """Structures chosen for a site and why."""

    structures: Tuple[RecommendedStructure, ...]
    outcome: RecommendationOutcome
    target_volume_m3: float
    remaining_volume_m3: float

    @property
    def total_cost_inr(self) -> float:
        return sum(s.cost_inr for s in self.structures)


class StructureRecommender:
    """
    Greedy shaft -> trench -> pit recommender.

    All sizing constants are passed in as immutable specs so that alternative
    unit catalogues can be evaluated without touching module state.
    """

    def __init__(
        self,
        pit: PitSpec = PitSpec(),
        trench: TrenchSpec = TrenchSpec(),
        shaft: ShaftSpec = ShaftSpec(),
        porosity: float = constants.FILTER_MEDIA_POROSITY,
        percolation_factor: float = constants.PERCOLATION_FACTOR,
        deep_water_table_m: float = constants.DEEP_WATER_TABLE_M,
        logger: Optional[logging.Logger] = None
    ):
        self.pit = pit
        self.trench = trench
        self.shaft = shaft
        self.porosity = porosity
        self.percolation_factor = percolation_factor
        self.deep_water_table_m = deep_water_table_m
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def target_fraction(dwellers: int) -> float:
        """
        Share of the monsoon harvest to recharge.

        70% for a household of two, plus 5% per extra dweller, capped at 90%.
        """
        extra = max(0, dwellers - constants.BASELINE_DWELLERS)
        return min(
            constants.MAX_RECHARGE_FRACTION,
            constants.BASE_RECHARGE_FRACTION + extra * constants.RECHARGE_FRACTION_PER_DWELLER
        )

    def recharge_capacity(self, physical_volume_m3: float) -> float:
        """Seasonal recharge through a filled void of the given physical volume."""
        return physical_volume_m3 * self.porosity * self.percolation_factor

    def recommend(
        self,
        harvest_m3: float,
        open_space_m2: float,
        groundwater_depth_m: Optional[float],
        dwellers: int
    ) -> Recommendation:
        """
        Recommend recharge structures.

        Args:
            harvest_m3: Monsoon harvestable volume (m³)
            open_space_m2: Open ground available for construction (m²)
            groundwater_depth_m: Depth to groundwater (m), None if unknown
            dwellers: Household size

        Returns:
            Recommendation with zero or more structures (at most one entry per kind)
        """
        target = harvest_m3 * self.target_fraction(dwellers)

        if open_space_m2 < constants.MIN_BUILDABLE_SPACE_M2:
            self.logger.debug(f"Open space {open_space_m2} m² below buildable minimum")
            return Recommendation((), RecommendationOutcome.INSUFFICIENT_SPACE, target, target)

        if target <= constants.NEGLIGIBLE_VOLUME_M3:
            self.logger.debug(f"Target recharge {target:.2f} m³ is negligible")
            return Recommendation((), RecommendationOutcome.NEGLIGIBLE_VOLUME, target, target)

        structures: List[RecommendedStructure] = []
        remaining = target

        shaft, remaining = self._recommend_shaft(remaining, open_space_m2, groundwater_depth_m)
        if shaft is not None:
            structures.append(shaft)

        trench, remaining = self._recommend_trench(remaining, open_space_m2)
        if trench is not None:
            structures.append(trench)

        pit, remaining = self._recommend_pits(remaining, open_space_m2)
        if pit is not None:
            structures.append(pit)

        if structures:
            outcome = RecommendationOutcome.RECOMMENDED
        elif open_space_m2 < self.pit.min_space_m2 and remaining > self.pit.min_volume_m3:
            outcome = RecommendationOutcome.INSUFFICIENT_SPACE
        else:
            outcome = RecommendationOutcome.NEGLIGIBLE_VOLUME

        self.logger.debug(
            f"Recommended {[s.kind for s in structures]} for target {target:.1f} m³, "
            f"{max(remaining, 0.0):.1f} m³ left unsatisfied ({outcome.value})"
        )
        return Recommendation(tuple(structures), outcome, target, remaining)

    def _recommend_shaft(
        self,
        remaining: float,
        open_space_m2: float,
        groundwater_depth_m: Optional[float]
    ) -> Tuple[Optional[RechargeShaft], float]:
        spec = self.shaft
        is_deep = groundwater_depth_m is not None and groundwater_depth_m > self.deep_water_table_m
        if not (is_deep and open_space_m2 >= spec.min_space_m2 and remaining > spec.min_volume_m3):
            return None, remaining

        depth = max(spec.min_depth_m, min(spec.max_depth_m, groundwater_depth_m * spec.depth_ratio))
        area = math.pi * (spec.diameter_m / 2) ** 2
        capacity = self.recharge_capacity(area * depth)
        cost = spec.base_cost + spec.cost_per_m_depth * depth

        shaft = RechargeShaft(
            area_m2=round(area, 1),
            depth_m=round(depth, 1),
            volume_m3=round(capacity, 1),
            cost_inr=round(cost),
            count=1,
        )
        return shaft, remaining - capacity

    def _recommend_trench(
        self,
        remaining: float,
        open_space_m2: float
    ) -> Tuple[Optional[RechargeTrench], float]:
        spec = self.trench
        if not (remaining > spec.min_volume_m3 and open_space_m2 >= spec.min_space_m2):
            return None, remaining

        capacity_per_m = self.recharge_capacity(spec.width_m * spec.depth_m)
        if capacity_per_m <= 0:
            return None, remaining

        length = min(
            remaining / capacity_per_m,
            open_space_m2 / spec.width_m,
            spec.max_length_m,
        )
        if length <= spec.min_length_m:
            return None, remaining

        capacity = length * capacity_per_m
        cost = spec.base_cost + spec.cost_per_m_length * length

        trench = RechargeTrench(
            length_m=round(length, 1),
            width_m=spec.width_m,
            depth_m=spec.depth_m,
            volume_m3=round(capacity, 1),
            cost_inr=round(cost),
            count=1,
        )
        return trench, remaining - capacity

    def _recommend_pits(
        self,
        remaining: float,
        open_space_m2: float
    ) -> Tuple[Optional[RechargePit], float]:
        spec = self.pit
        if not (remaining > spec.min_volume_m3 and open_space_m2 >= spec.min_space_m2):
            return None, remaining

        max_area = min(spec.max_width_m ** 2, open_space_m2 * spec.max_space_share)
        area = max(spec.min_width_m ** 2, max_area)
        physical_volume = area * spec.depth_m
        capacity_per_pit = self.recharge_capacity(physical_volume)
        if capacity_per_pit <= 0:
            return None, remaining

        count = min(math.ceil(remaining / capacity_per_pit), spec.max_units)
        cost_per_pit = spec.base_cost + spec.cost_per_m3 * physical_volume

        pit = RechargePit(
            area_m2=round(area, 1),
            depth_m=spec.depth_m,
            volume_m3=round(capacity_per_pit * count, 1),
            cost_inr=round(cost_per_pit * count),
            count=count,
        )
        return pit, remaining - capacity_per_pit * count
