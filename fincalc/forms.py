"""Form state for the SIP and GST calculator screens.

A form holds the raw text a user typed, runs the matching calculator, and
keeps the last successful result. Failures come back as a Result carrying a
user-facing message; the presentation layer decides how to show it.
"""
import logging
from typing import Dict, List, Optional

from fincalc.config import (
    DEFAULT_GST_RATE,
    SIP_INVALID_MESSAGE,
    GST_INVALID_AMOUNT_MESSAGE,
    GST_INVALID_RATE_MESSAGE,
    GST_INVALID_MODE_MESSAGE,
)
from fincalc.data_structures import GSTMode, GSTResult, SIPResult
from fincalc.exceptions import InvalidInputError
from fincalc.formatting import format_sip_currency, format_compact
from fincalc.result import Result, ErrorType
from fincalc.services import GSTCalculator, SIPCalculator
from fincalc.services.validation import parse_number

logger = logging.getLogger(__name__)


class SIPForm:
    """State of the SIP calculator screen.
    
    Attributes:
        monthly_investment: Raw monthly investment text.
        duration: Raw duration text, in years.
        return_rate: Raw expected annual return text, in percent.
        result: Last successful SIPResult, or None.
    """
    
    def __init__(self, monthly_investment: str = "", duration: str = "", return_rate: str = "",
                 calculator: SIPCalculator = None):
        self.monthly_investment = monthly_investment
        self.duration = duration
        self.return_rate = return_rate
        self.result: Optional[SIPResult] = None
        self._calculator = calculator or SIPCalculator()
    
    def calculate(self) -> Result[SIPResult]:
        """Run the SIP calculation on the current field values.
        
        Returns:
            Result.ok(SIPResult) on success. On failure, Result.fail with the
            validation message; the previous result is kept.
        """
        try:
            result = self._calculator.calculate(
                parse_number(self.monthly_investment),
                parse_number(self.duration),
                parse_number(self.return_rate),
            )
        except InvalidInputError as e:
            logger.info("SIP input rejected: %s", e)
            return Result.fail(SIP_INVALID_MESSAGE, ErrorType.VALIDATION)
        
        self.result = result
        return Result.ok(result)
    
    def reset(self) -> None:
        """Clear all fields and the last result."""
        self.monthly_investment = ""
        self.duration = ""
        self.return_rate = ""
        self.result = None
    
    def summary(self) -> Optional[Dict[str, str]]:
        """Display figures for the last result.
        
        Returns:
            Dict of formatted values, or None if nothing has been calculated.
        """
        if self.result is None:
            return None
        return {
            'total_invested': format_sip_currency(self.result.total_invested),
            'estimated_returns': format_sip_currency(self.result.estimated_returns),
            'maturity_amount': format_sip_currency(self.result.maturity_amount),
            'maturity_compact': format_compact(self.result.maturity_amount),
            'returns_percentage': f"{self._calculator.returns_percentage(self.result):.1f}%",
            'principal_share': f"{self._calculator.principal_share(self.result):.1f}%",
        }


class GSTForm:
    """State of the GST calculator screen.
    
    Attributes:
        amount: Raw amount text.
        gst_rate: Raw GST rate text, in percent.
        calculation_type: "add" or "remove".
        result: Last successful GSTResult, or None.
    """
    
    def __init__(self, amount: str = "", gst_rate: str = str(DEFAULT_GST_RATE),
                 calculation_type: str = GSTMode.ADD.value, calculator: GSTCalculator = None):
        self.amount = amount
        self.gst_rate = gst_rate
        self.calculation_type = calculation_type
        self.result: Optional[GSTResult] = None
        self._calculator = calculator or GSTCalculator()
    
    def calculate(self) -> Result[GSTResult]:
        """Run the GST calculation on the current field values.
        
        Returns:
            Result.ok(GSTResult) on success. On failure, Result.fail with a
            message for the field at fault; the previous result is kept.
        """
        try:
            result = self._calculator.calculate(
                parse_number(self.amount),
                parse_number(self.gst_rate),
                self.calculation_type,
            )
        except InvalidInputError as e:
            logger.info("GST input rejected: %s", e)
            message = {
                "amount": GST_INVALID_AMOUNT_MESSAGE,
                "mode": GST_INVALID_MODE_MESSAGE,
            }.get(e.field, GST_INVALID_RATE_MESSAGE)
            return Result.fail(message, ErrorType.VALIDATION)
        
        self.result = result
        return Result.ok(result)
    
    def reset(self) -> None:
        """Restore the default rate and mode and clear the amount and result."""
        self.amount = ""
        self.gst_rate = str(DEFAULT_GST_RATE)
        self.calculation_type = GSTMode.ADD.value
        self.result = None
    
    def breakdown(self) -> List[str]:
        if self.result is None:
            return []
        return self._calculator.breakdown(self.result)
