"""
Rooftop Rainwater Harvesting Assessment

This package estimates rooftop rainwater harvesting potential for a site and
recommends groundwater recharge structures with a cost/benefit summary.
"""

__version__ = "0.1.0"
__description__ = "Rooftop rainwater harvesting potential and recharge structure assessment"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name in ("AssessmentEngine", "assess"):
        from . import engine
        return getattr(engine, name)
    if name == "RainwaterAssessmentApp":
        from .main import RainwaterAssessmentApp
        return RainwaterAssessmentApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "AssessmentEngine",
    "assess",
    "RainwaterAssessmentApp",
]
