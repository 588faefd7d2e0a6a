"""
Input validation module.

Validates assessment inputs before any calculation runs.
"""

import logging
import math
from numbers import Real
from typing import List, Tuple, Optional

from ..exceptions import AssessmentValidationError, UnknownRoofMaterial
from ..models import AssessmentInput, RoofMaterial


class InputValidator:
    """Validate assessment inputs."""

    def __init__(
        self,
        latitude_range: Tuple[float, float] = (0.0, 50.0),
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize input validator.

        Args:
            latitude_range: Half-open [low, high) latitude range with a defined zone
            logger: Logger instance
        """
        self.latitude_range = latitude_range
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _is_number(value) -> bool:
        return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)

    def validate(self, assessment: AssessmentInput) -> Tuple[bool, List[str]]:
        """
        Validate that an input can produce a meaningful assessment.

        Args:
            assessment: Assessment input

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        low, high = self.latitude_range
        if not self._is_number(assessment.latitude):
            errors.append(f"Invalid latitude: {assessment.latitude!r} (must be a finite number)")
        elif not (low <= assessment.latitude < high):
            errors.append(
                f"Latitude {assessment.latitude} is outside the supported range [{low}, {high})"
            )

        if not self._is_number(assessment.longitude):
            errors.append(f"Invalid longitude: {assessment.longitude!r} (must be a finite number)")
        elif not (-180 <= assessment.longitude <= 180):
            errors.append(f"Invalid longitude: {assessment.longitude} (must be -180 to 180)")

        if not self._is_number(assessment.roof_area_m2) or assessment.roof_area_m2 <= 0:
            errors.append(f"Invalid roof area: {assessment.roof_area_m2!r} m² (must be > 0)")

        if not self._is_number(assessment.open_space_m2) or assessment.open_space_m2 < 0:
            errors.append(f"Invalid open space: {assessment.open_space_m2!r} m² (must be >= 0)")

        dwellers = assessment.dwellers
        if isinstance(dwellers, bool) or not isinstance(dwellers, int) or dwellers < 1:
            errors.append(f"Invalid household size: {dwellers!r} (must be an integer >= 1)")

        try:
            RoofMaterial.parse(assessment.roof_material)
        except UnknownRoofMaterial as e:
            errors.extend(e.errors)

        is_valid = len(errors) == 0
        if not is_valid:
            self.logger.debug(f"Input rejected: {errors}")
        return is_valid, errors

    def ensure_valid(self, assessment: AssessmentInput) -> None:
        """
        Raise if the input is not valid.

        Raises:
            AssessmentValidationError: Listing every problem found
        """
        is_valid, errors = self.validate(assessment)
        if not is_valid:
            raise AssessmentValidationError(errors)
