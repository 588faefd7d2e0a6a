"""
Tests for assessment data models.
"""

import dataclasses

import pytest  # type: ignore

from rainwater_assessment.exceptions import AssessmentValidationError, UnknownRoofMaterial
from rainwater_assessment.models import (
    AssessmentInput,
    RoofMaterial,
    RechargePit,
    RechargeTrench,
    RechargeShaft,
)


class TestRoofMaterial:
    """Test roof material parsing."""

    @pytest.mark.parametrize("value, expected", [
        ("metal", RoofMaterial.METAL),
        ("RCC", RoofMaterial.RCC),
        (" Thatch ", RoofMaterial.THATCH),
        (RoofMaterial.TILE, RoofMaterial.TILE),
    ])
    def test_parse(self, value, expected):
        assert RoofMaterial.parse(value) is expected

    @pytest.mark.parametrize("value", ["glass", "", None, 3])
    def test_unknown_rejected(self, value):
        with pytest.raises(UnknownRoofMaterial):
            RoofMaterial.parse(value)


class TestAssessmentInput:
    """Test construction of assessment inputs."""

    def test_from_form_keys(self):
        assessment = AssessmentInput.from_dict({
            "lat": 13.0,
            "lon": 77.6,
            "roofAreaM2": "100",
            "roofType": "rcc",
            "openSpaceM2": 50,
            "dwellers": "4",
            "consentToStore": True,
        })
        assert assessment.latitude == 13.0
        assert assessment.roof_area_m2 == 100.0
        assert assessment.roof_material is RoofMaterial.RCC
        assert assessment.dwellers == 4
        assert assessment.consent_to_store is True

    def test_from_field_names(self):
        assessment = AssessmentInput.from_dict({
            "latitude": 20.0,
            "longitude": 78.0,
            "roof_area_m2": 80.0,
            "roof_material": "metal",
            "open_space_m2": 0.0,
            "dwellers": 2,
        })
        assert assessment.roof_material is RoofMaterial.METAL
        assert assessment.consent_to_store is False

    def test_missing_fields_listed(self):
        with pytest.raises(AssessmentValidationError) as exc_info:
            AssessmentInput.from_dict({"lat": 13.0, "lon": 77.6, "roofType": "rcc"})
        assert "Missing required field: roof_area_m2" in exc_info.value.errors
        assert "Missing required field: dwellers" in exc_info.value.errors

    def test_unknown_material_rejected(self):
        with pytest.raises(UnknownRoofMaterial):
            AssessmentInput.from_dict({
                "lat": 13.0, "lon": 77.6, "roofAreaM2": 100, "roofType": "glass",
                "openSpaceM2": 10, "dwellers": 3,
            })

    def test_malformed_number_rejected(self):
        with pytest.raises(AssessmentValidationError):
            AssessmentInput.from_dict({
                "lat": "north", "lon": 77.6, "roofAreaM2": 100, "roofType": "rcc",
                "openSpaceM2": 10, "dwellers": 3,
            })

    @pytest.mark.parametrize("dwellers", [2.7, "2.5", "four", None, True])
    def test_non_whole_household_size_rejected(self, dwellers):
        with pytest.raises(AssessmentValidationError) as exc_info:
            AssessmentInput.from_dict({
                "lat": 13.0, "lon": 77.6, "roofAreaM2": 100, "roofType": "rcc",
                "openSpaceM2": 10, "dwellers": dwellers,
            })
        assert any("dwellers" in error for error in exc_info.value.errors)

    @pytest.mark.parametrize("dwellers", [3, 3.0, "3", " 3.0 "])
    def test_whole_household_size_accepted(self, dwellers):
        assessment = AssessmentInput.from_dict({
            "lat": 13.0, "lon": 77.6, "roofAreaM2": 100, "roofType": "rcc",
            "openSpaceM2": 10, "dwellers": dwellers,
        })
        assert assessment.dwellers == 3
        assert isinstance(assessment.dwellers, int)

    @pytest.mark.parametrize("consent, expected", [
        (True, True),
        (False, False),
        ("true", True),
        ("False", False),
        (" TRUE ", True),
    ])
    def test_consent_flag_parsed(self, consent, expected):
        assessment = AssessmentInput.from_dict({
            "lat": 13.0, "lon": 77.6, "roofAreaM2": 100, "roofType": "rcc",
            "openSpaceM2": 10, "dwellers": 3, "consentToStore": consent,
        })
        assert assessment.consent_to_store is expected

    @pytest.mark.parametrize("consent", ["yes", "0", 1, None])
    def test_ambiguous_consent_rejected(self, consent):
        with pytest.raises(AssessmentValidationError):
            AssessmentInput.from_dict({
                "lat": 13.0, "lon": 77.6, "roofAreaM2": 100, "roofType": "rcc",
                "openSpaceM2": 10, "dwellers": 3, "consentToStore": consent,
            })

    def test_frozen(self, deccan_input):
        with pytest.raises(dataclasses.FrozenInstanceError):
            deccan_input.roof_area_m2 = 0.0


class TestStructures:
    """Test the recharge structure variants."""

    def test_kinds(self):
        assert RechargePit(2.25, 3.0, 13.5, 3188).kind == "pit"
        assert RechargeTrench(10.0, 1.0, 1.5, 30.0, 7000).kind == "trench"
        assert RechargeShaft(0.8, 10.0, 15.7, 18000).kind == "shaft"

    def test_default_count(self):
        assert RechargePit(2.25, 3.0, 13.5, 3188).count == 1

    def test_dimensions_are_kind_specific(self):
        assert RechargePit(2.25, 3.0, 13.5, 3188, 2).dimensions() == {
            "areaM2": 2.25, "depthM": 3.0,
        }
        assert RechargeTrench(10.0, 1.0, 1.5, 30.0, 7000).dimensions() == {
            "lengthM": 10.0, "widthM": 1.0, "depthM": 1.5,
        }
        assert RechargeShaft(0.8, 10.0, 15.7, 18000).dimensions() == {
            "depthM": 10.0, "areaM2": 0.8,
        }

    def test_trench_has_no_shaft_fields(self):
        fields = {f.name for f in dataclasses.fields(RechargeTrench)}
        assert "area_m2" not in fields
        assert "length_m" in fields
