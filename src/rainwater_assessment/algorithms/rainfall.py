"""
Rainfall estimation module.

Simulates annual and monsoon rainfall from latitude. The supported region
runs from a wet southern edge to a dry northern edge; rainfall is linearly
interpolated between the two and perturbed with bounded jitter. This is a
simulated estimate, not measured data.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from ..core import constants


@dataclass(frozen=True)
class RainfallEstimate:
    """Annual and monsoon rainfall for a site."""

    annual_mm: float
    monsoon_mm: float


class RainfallEstimator:
    """Latitude-driven rainfall simulator with an injected random source."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        lat_south: float = constants.RAINFALL_LAT_SOUTH,
        lat_north: float = constants.RAINFALL_LAT_NORTH,
        max_rain_mm: float = constants.RAINFALL_MAX_MM,
        min_rain_mm: float = constants.RAINFALL_MIN_MM,
        jitter_mm: float = constants.RAINFALL_JITTER_MM,
        monsoon_fraction: float = constants.MONSOON_FRACTION,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize estimator.

        Args:
            rng: Random source exposing ``uniform(a, b)``
            lat_south: Latitude assigned the maximum rainfall
            lat_north: Latitude assigned the minimum rainfall
            max_rain_mm: Annual rainfall at the southern edge
            min_rain_mm: Annual rainfall at the northern edge
            jitter_mm: Half-width of the uniform jitter band
            monsoon_fraction: Share of annual rainfall falling in the monsoon
            logger: Logger instance
        """
        self.rng = rng or random.Random()
        self.lat_south = lat_south
        self.lat_north = lat_north
        self.max_rain_mm = max_rain_mm
        self.min_rain_mm = min_rain_mm
        self.jitter_mm = jitter_mm
        self.monsoon_fraction = monsoon_fraction
        self.logger = logger or logging.getLogger(__name__)

    def base_rainfall(self, latitude: float) -> float:
        """
        Interpolated annual rainfall without jitter.

        Latitudes outside the supported band are clamped to its edges.
        """
        span = self.lat_north - self.lat_south
        position = (latitude - self.lat_south) / span
        position = max(0.0, min(1.0, position))
        return self.max_rain_mm - position * (self.max_rain_mm - self.min_rain_mm)

    def estimate(self, latitude: float) -> RainfallEstimate:
        """
        Estimate annual and monsoon rainfall for a latitude.

        Args:
            latitude: Site latitude (degrees)

        Returns:
            RainfallEstimate in mm
        """
        base = self.base_rainfall(latitude)
        annual = base + self.rng.uniform(-self.jitter_mm, self.jitter_mm)
        monsoon = annual * self.monsoon_fraction

        self.logger.debug(
            f"Rainfall at lat {latitude:.4f}: base {base:.1f} mm, "
            f"annual {annual:.1f} mm, monsoon {monsoon:.1f} mm"
        )
        return RainfallEstimate(annual_mm=annual, monsoon_mm=monsoon)
