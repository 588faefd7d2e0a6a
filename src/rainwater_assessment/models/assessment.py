"""
Assessment data models.

Contains DTOs for the assessment input, cost/benefit summary and result record.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Mapping, Any

from ..exceptions import UnknownRoofMaterial, AssessmentValidationError
from .structure import RecommendedStructure, RecommendationOutcome


class RoofMaterial(str, Enum):
    """Roof surface materials with known runoff behaviour."""

    METAL = "metal"
    TILE = "tile"
    RCC = "rcc"
    ASPHALT = "asphalt"
    THATCH = "thatch"

    @classmethod
    def parse(cls, value: Any) -> "RoofMaterial":
        """Parse a material name (case-insensitive); unknown values are rejected."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownRoofMaterial(value)


class Feasibility(str, Enum):
    """Overall site suitability tier."""

    GREEN = "Green"
    YELLOW = "Yellow"
    RED = "Red"


@dataclass(frozen=True)
class AssessmentInput:
    """Site parameters collected by the assessment form."""

    latitude: float
    longitude: float
    roof_area_m2: float
    roof_material: RoofMaterial
    open_space_m2: float
    dwellers: int
    consent_to_store: bool = False

    # Form layer keys (camelCase) mapped onto field names
    _ALIASES = {
        "lat": "latitude",
        "lon": "longitude",
        "roofAreaM2": "roof_area_m2",
        "roofType": "roof_material",
        "roof_type": "roof_material",
        "openSpaceM2": "open_space_m2",
        "consentToStore": "consent_to_store",
    }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AssessmentInput":
        """
        Build an input from a plain mapping.

        Accepts both snake_case field names and the camelCase keys used by the
        form layer (``lat``, ``roofAreaM2``, ``roofType`` ...).

        Raises:
            AssessmentValidationError: If required keys are missing or a value
                cannot be converted
        """
        values = {}
        for key, value in data.items():
            values[cls._ALIASES.get(key, key)] = value

        required = ["latitude", "longitude", "roof_area_m2", "roof_material",
                    "open_space_m2", "dwellers"]
        missing = [name for name in required if name not in values]
        if missing:
            raise AssessmentValidationError(
                [f"Missing required field: {name}" for name in missing]
            )

        roof_material = RoofMaterial.parse(values["roof_material"])
        dwellers = _whole_number("dwellers", values["dwellers"])
        consent = _flag("consent_to_store", values.get("consent_to_store", False))

        try:
            return cls(
                latitude=float(values["latitude"]),
                longitude=float(values["longitude"]),
                roof_area_m2=float(values["roof_area_m2"]),
                roof_material=roof_material,
                open_space_m2=float(values["open_space_m2"]),
                dwellers=dwellers,
                consent_to_store=consent,
            )
        except (TypeError, ValueError) as e:
            raise AssessmentValidationError([f"Malformed input value: {e}"]) from e


def _whole_number(name: str, value: Any) -> int:
    """Accept ints and exact whole-number floats or strings ("4", 4.0)."""
    if isinstance(value, bool):
        raise AssessmentValidationError([f"{name} must be a whole number, got {value!r}"])
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise AssessmentValidationError(
            [f"{name} must be a whole number, got {value!r}"]
        ) from None
    if not number.is_integer():
        raise AssessmentValidationError([f"{name} must be a whole number, got {value!r}"])
    return int(number)


def _flag(name: str, value: Any) -> bool:
    """Accept booleans and the strings "true"/"false" (any case)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
    raise AssessmentValidationError([f"{name} must be true or false, got {value!r}"])


@dataclass(frozen=True)
class CostBenefit:
    """Savings and payback of the recommended structures."""

    annual_savings_inr: float
    payback_period_years: Optional[float] = None  # None when savings are zero


@dataclass(frozen=True)
class AssessmentResult:
    """Result of a rooftop rainwater harvesting assessment."""

    annual_rain_mm: float
    monsoon_rain_mm: float
    runoff_coeff: float
    annual_harvest_m3: float
    monsoon_harvest_m3: float
    recommended_structures: Tuple[RecommendedStructure, ...]
    depth_to_groundwater_m: Optional[float]
    aquifer_note: str
    feasibility: Feasibility
    cost_estimate_inr: float
    cost_benefit: CostBenefit
    location_name: str
    system_efficiency: float
    zone_name: str
    outcome: RecommendationOutcome
