"""
Cost/benefit analysis of recommended structures.
"""

import logging
from typing import Optional

from ..core import constants
from ..models import CostBenefit


class CostBenefitAnalyzer:
    """Annual savings and payback period from harvested water."""

    def __init__(
        self,
        water_cost_per_m3: float = constants.DEFAULT_WATER_COST_PER_M3,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize analyzer.

        Args:
            water_cost_per_m3: Municipal water cost avoided per m³ harvested (INR)
            logger: Logger instance
        """
        self.water_cost_per_m3 = water_cost_per_m3
        self.logger = logger or logging.getLogger(__name__)

    def analyze(self, cost_inr: float, annual_harvest_m3: float) -> CostBenefit:
        """
        Compute annual savings and payback period.

        Payback is ``cost / annual savings`` rounded to one decimal, or None
        when there are no savings to pay the structures back.

        Args:
            cost_inr: Total structure cost (INR)
            annual_harvest_m3: Annual harvestable volume (m³)

        Returns:
            CostBenefit summary
        """
        annual_savings = round(annual_harvest_m3 * self.water_cost_per_m3)

        payback_years = None
        if annual_savings > 0:
            payback_years = round(cost_inr / annual_savings, 1)

        self.logger.debug(
            f"Cost {cost_inr:.0f} INR, savings {annual_savings} INR/yr, payback {payback_years}"
        )
        return CostBenefit(annual_savings_inr=annual_savings, payback_period_years=payback_years)
