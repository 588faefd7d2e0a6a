"""
Result writer module.

Serializes assessment results for the report layer and logs a readable summary.
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional

from .core import DateUtils, constants
from .models import AssessmentResult, RecommendedStructure


class ResultWriter:
    """Write assessment results as JSON."""

    def __init__(
        self,
        timezone: str = constants.DEFAULT_REPORT_TIMEZONE,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize result writer.

        Args:
            timezone: Timezone used for the report timestamp
            logger: Logger instance
        """
        self.timezone = timezone
        self.logger = logger or logging.getLogger(__name__)
        self.date_utils = DateUtils(logger=self.logger)

    @staticmethod
    def structure_to_dict(structure: RecommendedStructure) -> Dict[str, Any]:
        return {
            "type": structure.kind,
            "dimensions": structure.dimensions(),
            "volumeM3": structure.volume_m3,
            "costInr": structure.cost_inr,
            "count": structure.count,
        }

    def to_dict(
        self,
        result: AssessmentResult,
        generated_at: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Convert a result to a JSON-ready dictionary.

        Keys follow the camelCase names the report layer reads.

        Args:
            result: Assessment result
            generated_at: Report timestamp (defaults to now)

        Returns:
            Dictionary representation
        """
        stamp = self.date_utils.now_in_timezone(self.timezone, generated_at)

        return {
            "annualRainMm": result.annual_rain_mm,
            "monsoonRainMm": result.monsoon_rain_mm,
            "runoffCoeff": result.runoff_coeff,
            "annualHarvestM3": result.annual_harvest_m3,
            "monsoonHarvestM3": result.monsoon_harvest_m3,
            "recommendedStructures": [
                self.structure_to_dict(s) for s in result.recommended_structures
            ],
            "depthToGroundwaterM": result.depth_to_groundwater_m,
            "aquiferNote": result.aquifer_note,
            "feasibility": result.feasibility.value,
            "costEstimateInr": result.cost_estimate_inr,
            "costBenefit": {
                "paybackPeriodYears": result.cost_benefit.payback_period_years,
                "annualSavingsInr": result.cost_benefit.annual_savings_inr,
            },
            "locationName": result.location_name,
            "systemEfficiency": result.system_efficiency,
            "zoneName": result.zone_name,
            "outcome": result.outcome.value,
            "generatedAt": self.date_utils.to_iso_with_timezone(stamp),
            "reportDate": self.date_utils.format_report_date(stamp),
        }

    def write_json(
        self,
        result: AssessmentResult,
        output_path: Optional[str] = None,
        generated_at: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Write a result as JSON to a file, or to stdout when no path is given.

        Returns:
            The dictionary that was written
        """
        payload = self.to_dict(result, generated_at)
        text = json.dumps(payload, indent=2, ensure_ascii=False)

        if output_path:
            path = Path(output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text + "\n", encoding="utf-8")
            self.logger.info(f"Wrote assessment to {path}")
        else:
            sys.stdout.write(text + "\n")

        return payload

    def log_summary(self, result: AssessmentResult) -> None:
        """Log a human-readable summary of a result."""
        self.logger.info("=" * 60)
        self.logger.info("Rainwater Harvesting Assessment")
        self.logger.info("=" * 60)
        self.logger.info(
            f"Rainfall in {result.location_name}: {result.annual_rain_mm} mm/yr "
            f"({result.monsoon_rain_mm} mm monsoon)"
        )
        self.logger.info(
            f"Harvest: {result.annual_harvest_m3} m³/yr ({result.monsoon_harvest_m3} m³ monsoon), "
            f"runoff coefficient {result.runoff_coeff}, efficiency {result.system_efficiency}"
        )
        self.logger.info(f"Feasibility: {result.feasibility.value}")

        if not result.recommended_structures:
            self.logger.info(
                "No recharge structure is needed or feasible based on the calculated "
                "runoff volume and available space."
            )
        for s in result.recommended_structures:
            dims = ", ".join(f"{k}={v}" for k, v in s.dimensions().items())
            self.logger.info(
                f"  {s.count} x {s.kind} ({dims}): {s.volume_m3} m³, {s.cost_inr} INR"
            )

        payback = result.cost_benefit.payback_period_years
        self.logger.info(
            f"Cost {result.cost_estimate_inr} INR, savings "
            f"{result.cost_benefit.annual_savings_inr} INR/yr, payback "
            f"{'n/a' if payback is None else f'{payback} years'}"
        )
        self.logger.info(result.aquifer_note)
