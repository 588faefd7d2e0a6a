"""
Application-wide constants for rainwater harvesting assessment.

This module defines default values and constants used throughout the application.
Reference tables (roof coefficients, hydrogeological zones) are read-only.
"""

from types import MappingProxyType

# Rainfall simulation
# Supported region spans roughly 8°N (wet south) to 37°N (dry north)
RAINFALL_LAT_SOUTH = 8.0
RAINFALL_LAT_NORTH = 37.0
RAINFALL_MAX_MM = 2500.0  # Coastal Kerala/Goa
RAINFALL_MIN_MM = 300.0  # Rajasthan
RAINFALL_JITTER_MM = 100.0  # ± natural variability
MONSOON_FRACTION = 0.8

# Harvest
# 10% loss to first flush, evaporation and filter inefficiency
DEFAULT_SYSTEM_EFFICIENCY = 0.90

ROOF_COEFFICIENTS = MappingProxyType({
    "metal": 0.95,
    "tile": 0.90,
    "rcc": 0.90,
    "asphalt": 0.85,
    "thatch": 0.60,
})

# Groundwater
DEEP_WATER_TABLE_M = 12.0

# Recharge structures
MIN_BUILDABLE_SPACE_M2 = 2.0
NEGLIGIBLE_VOLUME_M3 = 2.0
BASE_RECHARGE_FRACTION = 0.7
RECHARGE_FRACTION_PER_DWELLER = 0.05
MAX_RECHARGE_FRACTION = 0.9
BASELINE_DWELLERS = 2
FILTER_MEDIA_POROSITY = 0.4  # Voids in gravel/sand filter media
PERCOLATION_FACTOR = 5  # Recharge cycles through the same void space per season

# Economics
DEFAULT_WATER_COST_PER_M3 = 20.0  # INR, municipal supply

# Feasibility score weights
FEASIBILITY_ROOF_REFERENCE_M2 = 200.0
FEASIBILITY_RAIN_REFERENCE_MM = 1200.0
FEASIBILITY_SPACE_REFERENCE_M2 = 50.0
FEASIBILITY_ROOF_WEIGHT = 30.0
FEASIBILITY_RAIN_WEIGHT = 30.0
FEASIBILITY_BASELINE = 25.0
FEASIBILITY_SPACE_WEIGHT = 15.0
FEASIBILITY_GREEN_THRESHOLD = 75.0
FEASIBILITY_YELLOW_THRESHOLD = 40.0

# Report defaults
DEFAULT_LOCATION_LABEL = "your selected area"
DEFAULT_REPORT_TIMEZONE = "Asia/Kolkata"

# Form defaults (centre of India)
DEFAULT_LATITUDE = 20.5937
DEFAULT_LONGITUDE = 78.9629
