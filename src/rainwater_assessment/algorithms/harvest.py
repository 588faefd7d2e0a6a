"""
Harvestable volume calculation.
"""

import logging
from typing import Mapping, Optional, Union

from ..core import constants
from ..exceptions import UnknownRoofMaterial
from ..models import RoofMaterial


class HarvestCalculator:
    """Convert rainfall on a roof into harvestable runoff volume."""

    def __init__(
        self,
        coefficients: Mapping[str, float] = constants.ROOF_COEFFICIENTS,
        system_efficiency: float = constants.DEFAULT_SYSTEM_EFFICIENCY,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize calculator.

        Args:
            coefficients: Runoff coefficient per roof material value
            system_efficiency: Share of runoff surviving first flush, evaporation and filtering
            logger: Logger instance
        """
        self.coefficients = coefficients
        self.system_efficiency = system_efficiency
        self.logger = logger or logging.getLogger(__name__)

    def runoff_coefficient(self, material: Union[RoofMaterial, str]) -> float:
        """
        Look up the runoff coefficient for a roof material.

        Raises:
            UnknownRoofMaterial: If the material has no coefficient
        """
        material = RoofMaterial.parse(material)
        try:
            return self.coefficients[material.value]
        except KeyError:
            raise UnknownRoofMaterial(material.value) from None

    def harvestable_volume(self, rainfall_mm: float, area_m2: float, coefficient: float) -> float:
        """
        Harvestable volume in m³.

        volume = (rainfall / 1000) × area × coefficient × efficiency
        """
        volume = (rainfall_mm / 1000.0) * area_m2 * coefficient * self.system_efficiency
        self.logger.debug(
            f"Harvest: {rainfall_mm:.1f} mm on {area_m2:.1f} m² "
            f"(C={coefficient:.2f}, eff={self.system_efficiency:.2f}) -> {volume:.2f} m³"
        )
        return volume
