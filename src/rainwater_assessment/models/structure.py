"""
Recharge structure data models.

A recommended structure is one of three closed variants (pit, trench, shaft).
Each variant carries its own dimensions plus a shared envelope: the total
recharge capacity and cost of the group, and the number of identical units.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union, Dict, Any


class RecommendationOutcome(str, Enum):
    """Why the recommender returned what it returned."""

    RECOMMENDED = "recommended"
    INSUFFICIENT_SPACE = "insufficient_space"
    NEGLIGIBLE_VOLUME = "negligible_volume"


@dataclass(frozen=True)
class RechargePit:
    """Square recharge pit filled with graded filter media."""

    area_m2: float
    depth_m: float
    volume_m3: float  # Total recharge capacity (all units)
    cost_inr: float  # Total cost (all units)
    count: int = 1

    kind = "pit"

    def dimensions(self) -> Dict[str, Any]:
        return {"areaM2": self.area_m2, "depthM": self.depth_m}


@dataclass(frozen=True)
class RechargeTrench:
    """Linear recharge trench of fixed cross-section."""

    length_m: float
    width_m: float
    depth_m: float
    volume_m3: float
    cost_inr: float
    count: int = 1

    kind = "trench"

    def dimensions(self) -> Dict[str, Any]:
        return {"lengthM": self.length_m, "widthM": self.width_m, "depthM": self.depth_m}


@dataclass(frozen=True)
class RechargeShaft:
    """Bored recharge shaft reaching towards a deep water table."""

    area_m2: float  # Top (cross-section) area
    depth_m: float
    volume_m3: float
    cost_inr: float
    count: int = 1

    kind = "shaft"

    def dimensions(self) -> Dict[str, Any]:
        return {"depthM": self.depth_m, "areaM2": self.area_m2}


RecommendedStructure = Union[RechargePit, RechargeTrench, RechargeShaft]
