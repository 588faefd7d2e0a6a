"""
Configuration module for rainwater harvesting assessment.

Loads configuration from an optional JSON file and environment variables,
layered over built-in defaults.
"""

import copy
import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants
from .date_utils import DateUtils


DEFAULT_CONFIG: Dict[str, Any] = {
    "economics": {
        "water_cost_per_m3": constants.DEFAULT_WATER_COST_PER_M3,
    },
    "harvest": {
        "system_efficiency": constants.DEFAULT_SYSTEM_EFFICIENCY,
    },
    "simulation": {
        "random_seed": None,
    },
    "report": {
        "location_label": constants.DEFAULT_LOCATION_LABEL,
        "timezone": constants.DEFAULT_REPORT_TIMEZONE,
    },
    "logging": {
        "level": "INFO",
        "file": None,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into base (in place)."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or 'config.json' when it exists; otherwise defaults only
        """
        self.config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._explicit = config_file is not None or bool(os.getenv("CONFIG_FILE"))
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
            return

        with open(config_path, "r", encoding="utf-8") as f:
            loaded = json.load(f)

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file must contain a JSON object: {self.config_file}")

        _merge(self.config, loaded)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("WATER_COST_PER_M3"):
            self.config["economics"]["water_cost_per_m3"] = float(os.getenv("WATER_COST_PER_M3"))

        if os.getenv("SYSTEM_EFFICIENCY"):
            self.config["harvest"]["system_efficiency"] = float(os.getenv("SYSTEM_EFFICIENCY"))

        if os.getenv("RANDOM_SEED"):
            self.config["simulation"]["random_seed"] = int(os.getenv("RANDOM_SEED"))

        if os.getenv("REPORT_TIMEZONE"):
            self.config["report"]["timezone"] = os.getenv("REPORT_TIMEZONE")

        if os.getenv("LOG_LEVEL"):
            self.config["logging"]["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("LOG_FILE"):
            self.config["logging"]["file"] = os.getenv("LOG_FILE")

    def _validate_config(self) -> None:
        """Validate configuration values."""
        errors = []

        efficiency = self.get("harvest.system_efficiency")
        if not isinstance(efficiency, (int, float)) or not (0 < efficiency <= 1):
            errors.append(f"harvest.system_efficiency must be in (0, 1], got {efficiency!r}")

        water_cost = self.get("economics.water_cost_per_m3")
        if not isinstance(water_cost, (int, float)) or water_cost < 0:
            errors.append(f"economics.water_cost_per_m3 must be >= 0, got {water_cost!r}")

        seed = self.get("simulation.random_seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            errors.append(f"simulation.random_seed must be an integer or null, got {seed!r}")

        try:
            DateUtils.parse_timezone(self.report_timezone)
        except ValueError as e:
            errors.append(f"report.timezone: {e}")

        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'economics.water_cost_per_m3')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def water_cost_per_m3(self) -> float:
        """Get municipal water cost (INR per m³)."""
        return self.get("economics.water_cost_per_m3", constants.DEFAULT_WATER_COST_PER_M3)

    @property
    def system_efficiency(self) -> float:
        """Get harvesting system efficiency factor."""
        return self.get("harvest.system_efficiency", constants.DEFAULT_SYSTEM_EFFICIENCY)

    @property
    def random_seed(self) -> Optional[int]:
        """Get simulation random seed (None for system entropy)."""
        return self.get("simulation.random_seed")

    @property
    def location_label(self) -> str:
        """Get location label shown on results."""
        return self.get("report.location_label", constants.DEFAULT_LOCATION_LABEL)

    @property
    def report_timezone(self) -> str:
        """Get timezone used to stamp reports."""
        return self.get("report.timezone", constants.DEFAULT_REPORT_TIMEZONE)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    def __repr__(self) -> str:
        return f"Config(file={self.config_file}, seed={self.random_seed})"
