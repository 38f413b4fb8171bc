"""Calculation engine for FinCalc.

This module provides the CalculatorEngine class which acts as a facade over
the calculator services in fincalc/services/, and the module-level
compute_sip / compute_gst / format_currency entry points.

Service Classes:
    - SIPCalculator: SIP maturity, shares and growth schedule
    - GSTCalculator: GST add/remove and breakdowns
"""
import pandas as pd

from fincalc.data_structures import GSTResult, SIPResult
from fincalc.formatting import format_currency  # noqa: F401  re-exported entry point
from fincalc.services import GSTCalculator, SIPCalculator


class CalculatorEngine:
    """Single entry point for both calculators.
    
    The engine holds no calculation state; services are created on first use.
    
    Attributes:
        sip_calculator: SIPCalculator instance (lazy-loaded).
        gst_calculator: GSTCalculator instance (lazy-loaded).
    """
    
    def __init__(self):
        self._sip_calculator = None
        self._gst_calculator = None
    
    @property
    def sip_calculator(self):
        """Lazy-load SIPCalculator instance."""
        if self._sip_calculator is None:
            self._sip_calculator = SIPCalculator()
        return self._sip_calculator
    
    @property
    def gst_calculator(self):
        """Lazy-load GSTCalculator instance."""
        if self._gst_calculator is None:
            self._gst_calculator = GSTCalculator()
        return self._gst_calculator
    
    def compute_sip(self, monthly_investment, duration_years, annual_rate_percent) -> SIPResult:
        """Project a monthly SIP.
        
        Delegates to SIPCalculator.
        """
        return self.sip_calculator.calculate(monthly_investment, duration_years, annual_rate_percent)
    
    def sip_growth_schedule(self, monthly_investment, duration_years, annual_rate_percent) -> pd.DataFrame:
        """Year-by-year growth table of a SIP.
        
        Delegates to SIPCalculator.
        """
        return self.sip_calculator.growth_schedule(monthly_investment, duration_years, annual_rate_percent)
    
    def compute_gst(self, amount, rate_percent, mode) -> GSTResult:
        """Add GST to, or remove GST from, an amount.
        
        Delegates to GSTCalculator.
        """
        return self.gst_calculator.calculate(amount, rate_percent, mode)
    
    def gst_breakdown(self, result: GSTResult):
        """Calculation breakdown lines for a GST result.
        
        Delegates to GSTCalculator.
        """
        return self.gst_calculator.breakdown(result)


_default_engine = CalculatorEngine()


def compute_sip(monthly_investment, duration_years, annual_rate_percent) -> SIPResult:
    """Compute total invested, estimated returns and maturity amount of a SIP.
    
    Raises:
        InvalidInputError: If any input is missing, non-finite, zero or negative.
    """
    return _default_engine.compute_sip(monthly_investment, duration_years, annual_rate_percent)


def compute_gst(amount, rate_percent, mode) -> GSTResult:
    """Compute the tax, net and gross amounts for mode "add" or "remove".
    
    Raises:
        InvalidInputError: If the amount is not positive, the rate is negative,
            or the mode is unknown.
    """
    return _default_engine.compute_gst(amount, rate_percent, mode)
