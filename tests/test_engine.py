"""
Integration tests for the assessment engine.

Runs complete assessments with a deterministic random source and checks the
result record end to end.
"""

import json
import random
from dataclasses import replace

import pytest  # type: ignore

from rainwater_assessment import assess
from rainwater_assessment.core import Config, constants
from rainwater_assessment.engine import AssessmentEngine
from rainwater_assessment.exceptions import AssessmentValidationError
from rainwater_assessment.models import (
    AssessmentInput,
    Feasibility,
    RecommendationOutcome,
    RoofMaterial,
)


@pytest.fixture
def engine(midpoint_rng):
    """Engine with zero rainfall jitter and mid-range groundwater depth."""
    return AssessmentEngine(rng=midpoint_rng)


@pytest.mark.integration
class TestDeccanScenario:
    """100 m² RCC roof at latitude 13 with a 50 m² yard and four dwellers."""

    @pytest.fixture
    def result(self, engine, deccan_input):
        return engine.assess(deccan_input)

    def test_rainfall(self, result):
        assert result.annual_rain_mm == 2120.7
        assert result.monsoon_rain_mm == 1696.6

    def test_runoff_and_harvest(self, result):
        assert result.runoff_coeff == 0.90
        assert result.system_efficiency == 0.90
        assert result.annual_harvest_m3 == 171.8
        assert result.monsoon_harvest_m3 == 137.4

    def test_zone_and_depth(self, result):
        assert result.zone_name == "Peninsular Hard Rock Zone (Deccan Plateau)"
        assert result.depth_to_groundwater_m == 25.0
        assert result.aquifer_note.startswith(
            "This area is part of the Peninsular Hard Rock Zone (Deccan Plateau)."
        )

    def test_structures(self, result):
        assert result.outcome == RecommendationOutcome.RECOMMENDED
        assert [s.kind for s in result.recommended_structures] == ["shaft", "trench"]

        shaft, trench = result.recommended_structures
        assert shaft.depth_m == 17.5
        assert shaft.volume_m3 == 27.5
        assert shaft.cost_inr == 25500
        assert trench.length_m == 27.5
        assert trench.volume_m3 == 82.4
        assert trench.cost_inr == 15741

        for structure in result.recommended_structures:
            assert structure.volume_m3 > 0
            assert structure.cost_inr > 0

    def test_cost_benefit(self, result):
        assert result.cost_estimate_inr == 41241
        assert result.cost_benefit.annual_savings_inr == 3436
        assert result.cost_benefit.payback_period_years == 12.0

    def test_feasibility(self, result):
        # 15 + 53.0 + 25 + 15
        assert result.feasibility == Feasibility.GREEN

    def test_location_label(self, result):
        assert result.location_name == "your selected area"


@pytest.mark.integration
class TestEmptyRecommendations:
    """Test the notes that explain an empty recommendation."""

    def test_tiny_yard_explains_space_constraint(self, engine, deccan_input):
        result = engine.assess(replace(deccan_input, open_space_m2=1.0))

        assert result.recommended_structures == ()
        assert result.outcome == RecommendationOutcome.INSUFFICIENT_SPACE
        assert "open space (1 m²) is too limited" in result.aquifer_note
        assert result.cost_estimate_inr == 0
        assert result.annual_harvest_m3 > 0

    def test_small_roof_explains_nothing_is_needed(self, engine):
        small = AssessmentInput(
            latitude=37.0,
            longitude=75.0,
            roof_area_m2=10.0,
            roof_material=RoofMaterial.RCC,
            open_space_m2=50.0,
            dwellers=2,
        )
        result = engine.assess(small)

        assert result.recommended_structures == ()
        assert result.outcome == RecommendationOutcome.NEGLIGIBLE_VOLUME
        assert result.zone_name == "Mixed Geological Area"
        assert "no dedicated recharge structure is needed" in result.aquifer_note
        assert "too limited" not in result.aquifer_note

    def test_no_savings_means_no_payback(self, engine):
        tiny = AssessmentInput(
            latitude=37.0,
            longitude=75.0,
            roof_area_m2=0.01,
            roof_material=RoofMaterial.THATCH,
            open_space_m2=50.0,
            dwellers=1,
        )
        result = engine.assess(tiny)
        assert result.cost_benefit.annual_savings_inr == 0
        assert result.cost_benefit.payback_period_years is None


@pytest.mark.integration
class TestInvalidInput:
    """Test rejection of inputs that cannot produce a meaningful result."""

    @pytest.mark.parametrize("changes", [
        {"roof_area_m2": 0.0},
        {"roof_area_m2": -20.0},
        {"dwellers": 0},
        {"open_space_m2": -1.0},
        {"latitude": 60.0},
        {"latitude": -5.0},
        {"roof_material": "glass"},
    ])
    def test_rejected(self, engine, deccan_input, changes):
        with pytest.raises(AssessmentValidationError):
            engine.assess(replace(deccan_input, **changes))

    def test_zero_roof_area_message(self, engine, deccan_input):
        with pytest.raises(AssessmentValidationError, match="roof area"):
            engine.assess(replace(deccan_input, roof_area_m2=0.0))

    def test_validation_error_is_a_value_error(self, engine, deccan_input):
        with pytest.raises(ValueError):
            engine.assess(replace(deccan_input, dwellers=0))


@pytest.mark.integration
class TestProperties:
    """Invariants over a grid of sites."""

    @pytest.fixture
    def sites(self):
        sites = []
        for latitude in [8.0, 13.0, 20.0, 26.0, 36.0]:
            for material in RoofMaterial:
                for space in [0.0, 1.5, 5.0, 50.0]:
                    for dwellers in [1, 5]:
                        sites.append(AssessmentInput(
                            latitude=latitude,
                            longitude=78.0,
                            roof_area_m2=120.0,
                            roof_material=material,
                            open_space_m2=space,
                            dwellers=dwellers,
                        ))
        return sites

    def test_annual_harvest_exceeds_monsoon_harvest(self, sites):
        engine = AssessmentEngine(rng=random.Random(11))
        for site in sites:
            result = engine.assess(site)
            assert result.annual_harvest_m3 >= result.monsoon_harvest_m3 >= 0

    def test_runoff_coefficient_matches_table(self, sites):
        engine = AssessmentEngine(rng=random.Random(12))
        for site in sites:
            result = engine.assess(site)
            assert result.runoff_coeff == constants.ROOF_COEFFICIENTS[site.roof_material.value]

    def test_no_structures_without_space(self, sites):
        engine = AssessmentEngine(rng=random.Random(13))
        for site in sites:
            result = engine.assess(site)
            if site.open_space_m2 < 2:
                assert result.recommended_structures == ()
            assert result.cost_estimate_inr == sum(
                s.cost_inr for s in result.recommended_structures
            )

    def test_payback_consistent_with_savings(self, sites):
        engine = AssessmentEngine(rng=random.Random(14))
        for site in sites:
            result = engine.assess(site)
            savings = result.cost_benefit.annual_savings_inr
            if savings == 0:
                assert result.cost_benefit.payback_period_years is None
            else:
                assert result.cost_benefit.payback_period_years == round(
                    result.cost_estimate_inr / savings, 1
                )


class TestDeterminism:
    """Seeded random sources replay identical results."""

    def test_same_seed_same_result(self, deccan_input):
        first = AssessmentEngine(rng=random.Random(42)).assess(deccan_input)
        second = AssessmentEngine(rng=random.Random(42)).assess(deccan_input)
        assert first == second

    def test_configured_seed(self, clean_env, deccan_input):
        path = clean_env / "config.json"
        path.write_text(json.dumps({"simulation": {"random_seed": 7}}))

        first = AssessmentEngine(config=Config(str(path))).assess(deccan_input)
        second = AssessmentEngine(config=Config(str(path))).assess(deccan_input)
        assert first == second

    def test_package_level_assess(self, deccan_input, midpoint_rng):
        result = assess(deccan_input, rng=midpoint_rng)
        assert result.annual_harvest_m3 == 171.8


class TestConfiguredEngine:
    """Configuration values flow into the calculation."""

    def test_water_cost_and_label(self, clean_env, deccan_input, midpoint_rng):
        path = clean_env / "config.json"
        path.write_text(json.dumps({
            "economics": {"water_cost_per_m3": 40},
            "report": {"location_label": "Bengaluru"},
        }))

        engine = AssessmentEngine(config=Config(str(path)), rng=midpoint_rng)
        result = engine.assess(deccan_input)

        assert result.cost_benefit.annual_savings_inr == 6871
        assert result.location_name == "Bengaluru"

    def test_system_efficiency(self, clean_env, deccan_input, midpoint_rng):
        path = clean_env / "config.json"
        path.write_text(json.dumps({"harvest": {"system_efficiency": 0.5}}))

        engine = AssessmentEngine(config=Config(str(path)), rng=midpoint_rng)
        result = engine.assess(deccan_input)

        assert result.system_efficiency == 0.5
        assert result.annual_harvest_m3 == 95.4
