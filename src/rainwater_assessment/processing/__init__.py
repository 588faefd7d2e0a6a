"""
Input processing for rainwater harvesting assessment.
"""

from .validator import InputValidator

__all__ = [
    "InputValidator",
]
