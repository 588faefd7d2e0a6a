"""
Hydrogeological zone data models.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class HydrogeologicalZone:
    """Reference description of a regional aquifer setting."""

    name: str
    lat_range: Tuple[float, float]  # Half-open [low, high)
    depth_range_m: Tuple[float, float]  # Typical depth to groundwater
    aquifer_type: str
    recharge_suitability: str

    def contains(self, latitude: float) -> bool:
        low, high = self.lat_range
        return low <= latitude < high

    def describe(self) -> str:
        return (
            f"This area is part of the {self.name}. "
            f"Aquifer Type: {self.aquifer_type} "
            f"Recharge Suitability: {self.recharge_suitability}"
        )
