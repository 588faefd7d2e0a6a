"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to sys.path so tests run without installing the package
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from rainwater_assessment.models import AssessmentInput, RoofMaterial  # noqa: E402


class FixedRandom:
    """Random source returning the same position in every range."""

    def __init__(self, fraction: float = 0.5):
        self.fraction = fraction

    def uniform(self, a, b):
        return a + (b - a) * self.fraction


@pytest.fixture
def fixed_rng():
    """Factory for FixedRandom sources."""
    return FixedRandom


@pytest.fixture
def midpoint_rng():
    """Random source with zero rainfall jitter and mid-range groundwater depth."""
    return FixedRandom(0.5)


@pytest.fixture
def deccan_input():
    """Typical Deccan plateau house: 100 m² RCC roof, 50 m² yard, four dwellers."""
    return AssessmentInput(
        latitude=13.0,
        longitude=77.6,
        roof_area_m2=100.0,
        roof_material=RoofMaterial.RCC,
        open_space_m2=50.0,
        dwellers=4,
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no configuration environment."""
    for var in ("CONFIG_FILE", "WATER_COST_PER_M3", "SYSTEM_EFFICIENCY", "RANDOM_SEED",
                "REPORT_TIMEZONE", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as end-to-end test of the assessment pipeline"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
