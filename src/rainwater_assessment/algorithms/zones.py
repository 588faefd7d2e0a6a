"""
Hydrogeological zone lookup and groundwater depth sampling.

The zone table is a simplified picture of the major hydrogeological settings
of India after the Central Ground Water Board classification. Zones are
matched by latitude only; several ranges overlap and the first zone in table
order wins.
"""

import logging
import random
from typing import Optional, Sequence, Tuple

from ..models import HydrogeologicalZone


HYDROGEOLOGICAL_ZONES: Tuple[HydrogeologicalZone, ...] = (
    HydrogeologicalZone(
        name="Northern Alluvial Plains (Indo-Gangetic)",
        lat_range=(25.0, 32.0),
        depth_range_m=(8.0, 25.0),
        aquifer_type="Deep, multi-layered alluvial sand and gravel aquifers.",
        recharge_suitability=(
            "Excellent for various recharge structures, particularly shafts "
            "and trenches due to high permeability."
        ),
    ),
    HydrogeologicalZone(
        name="Central Highlands (Bundelkhand, etc.)",
        lat_range=(22.0, 25.0),
        depth_range_m=(10.0, 35.0),
        aquifer_type="Weathered and fractured hard rock (granite, gneiss).",
        recharge_suitability=(
            "Moderate. Recharge is effective through existing fractures. "
            "Dug wells and pits are common."
        ),
    ),
    HydrogeologicalZone(
        name="Peninsular Hard Rock Zone (Deccan Plateau)",
        lat_range=(12.0, 22.0),
        depth_range_m=(5.0, 45.0),
        aquifer_type="Complex fractured basalt (Deccan Traps) and crystalline rocks.",
        recharge_suitability=(
            "Variable. Success depends on targeting fracture zones. Recharge "
            "pits and trenches along drainage lines are effective."
        ),
    ),
    # Covers both east and west coasts
    HydrogeologicalZone(
        name="Coastal Sedimentary Zone",
        lat_range=(8.0, 16.0),
        depth_range_m=(2.0, 10.0),
        aquifer_type="Shallow sand and clay layers, often with saline water intrusion risks.",
        recharge_suitability=(
            "Good, but requires careful management to avoid contamination. "
            "Shallow recharge pits are preferred over deep shafts."
        ),
    ),
    # Overlaps the northern plains but represents a different climate
    HydrogeologicalZone(
        name="Western Arid Zone (Rajasthan/Gujarat)",
        lat_range=(24.0, 30.0),
        depth_range_m=(20.0, 100.0),
        aquifer_type="Deep sandy aquifers with low and erratic rainfall.",
        recharge_suitability=(
            "Critical but challenging. Large-scale structures are often needed, "
            "but rooftop harvesting is highly valuable for direct use."
        ),
    ),
)

FALLBACK_ZONE = HydrogeologicalZone(
    name="Mixed Geological Area",
    lat_range=(0.0, 50.0),
    depth_range_m=(5.0, 20.0),
    aquifer_type="Variable local geology.",
    recharge_suitability=(
        "Site-specific investigation recommended. Standard pits and trenches "
        "are generally applicable."
    ),
)


class ZoneResolver:
    """Resolve a latitude to its hydrogeological zone."""

    def __init__(
        self,
        zones: Sequence[HydrogeologicalZone] = HYDROGEOLOGICAL_ZONES,
        fallback: HydrogeologicalZone = FALLBACK_ZONE,
        logger: Optional[logging.Logger] = None
    ):
        self.zones = tuple(zones)
        self.fallback = fallback
        self.logger = logger or logging.getLogger(__name__)

    def resolve(self, latitude: float) -> HydrogeologicalZone:
        """
        Find the zone for a latitude.

        Returns the first zone in table order whose half-open range contains
        the latitude, or the fallback zone when none does.
        """
        for zone in self.zones:
            if zone.contains(latitude):
                self.logger.debug(f"Latitude {latitude:.4f} resolved to {zone.name}")
                return zone

        self.logger.debug(f"Latitude {latitude:.4f} matched no zone, using {self.fallback.name}")
        return self.fallback

    @property
    def supported_range(self) -> Tuple[float, float]:
        """Latitude range with a defined zone (the fallback's range)."""
        return self.fallback.lat_range


class GroundwaterDepthSampler:
    """Sample a depth to groundwater from a zone's typical range."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.rng = rng or random.Random()
        self.logger = logger or logging.getLogger(__name__)

    def sample(self, zone: HydrogeologicalZone) -> float:
        """Uniformly sample depth (m) within ``zone.depth_range_m``."""
        min_depth, max_depth = zone.depth_range_m
        depth = self.rng.uniform(min_depth, max_depth)
        self.logger.debug(
            f"Sampled groundwater depth {depth:.1f} m in [{min_depth}, {max_depth}] "
            f"for {zone.name}"
        )
        return depth

