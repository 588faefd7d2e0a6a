"""Custom exception hierarchy for rainwater_assessment."""

from typing import List


class RainwaterAssessmentError(Exception):
    """Base exception for all rainwater_assessment errors."""


class AssessmentValidationError(RainwaterAssessmentError, ValueError):
    """The assessment input cannot produce a meaningful result."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"Invalid assessment input: {'; '.join(self.errors)}")


class UnknownRoofMaterial(AssessmentValidationError):
    """The roof material is not one of the supported surfaces."""

    def __init__(self, material: object):
        self.material = material
        super().__init__([f"Unknown roof material: {material!r}"])
