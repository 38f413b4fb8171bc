"""GST calculation service for FinCalc.

This service handles Goods and Services Tax operations:
- Adding GST to a tax-exclusive amount
- Removing GST from a tax-inclusive amount
- Human-readable calculation breakdowns
"""
import logging
import math
from typing import List

from fincalc.config import GST_RATE_OPTIONS
from fincalc.data_structures import GSTInput, GSTMode, GSTResult
from fincalc.exceptions import InvalidInputError
from fincalc.formatting import format_gst_currency, format_rate
from fincalc.services.validation import require_non_negative, require_positive

logger = logging.getLogger(__name__)


class GSTCalculator:
    """Computes the tax, net and gross amounts for a GST rate.
    
    No rounding is applied; amounts are rounded to the paisa only when
    formatted for display.
    """
    
    @property
    def rate_options(self):
        """Standard GST slabs as (rate, label) pairs."""
        return list(GST_RATE_OPTIONS)
    
    def validate(self, amount, rate_percent, mode) -> GSTInput:
        """Check the amount is positive, the rate non-negative and the mode known.
        
        Raises:
            InvalidInputError: On the first offending field.
        """
        amount = require_positive("amount", amount)
        rate_percent = require_non_negative("rate_percent", rate_percent)
        try:
            mode = GSTMode.parse(mode)
        except ValueError:
            raise InvalidInputError("mode", mode, "must be 'add' or 'remove'") from None
        return GSTInput(amount=amount, rate_percent=rate_percent, mode=mode)
    
    def calculate(self, amount, rate_percent, mode) -> GSTResult:
        """Apply or back out GST.
        
        Args:
            amount: Tax-exclusive amount for ADD, tax-inclusive amount for REMOVE.
            rate_percent: GST rate, e.g. 18 for 18%. Zero is valid (exempt goods).
            mode: GSTMode or "add" / "remove".
            
        Returns:
            GSTResult with gross_amount == net_amount + tax_amount.
            
        Raises:
            InvalidInputError: If the amount is not positive, the rate is
                negative, any number is non-finite, or the mode is unknown.
        """
        gst = self.validate(amount, rate_percent, mode)
        
        # amount * rate can overflow for large finite amounts, so divide first
        if gst.mode is GSTMode.ADD:
            tax_amount = gst.amount / 100 * gst.rate_percent
            net_amount = gst.amount
            gross_amount = gst.amount + tax_amount
        else:
            tax_amount = min(gst.amount / (100 + gst.rate_percent) * gst.rate_percent, gst.amount)
            net_amount = gst.amount - tax_amount
            gross_amount = gst.amount
        
        if not math.isfinite(gross_amount):
            raise InvalidInputError("amount", gst.amount, "result is too large to represent")
        
        result = GSTResult(
            tax_amount=tax_amount,
            net_amount=net_amount,
            gross_amount=gross_amount,
            rate_percent=gst.rate_percent,
            mode=gst.mode,
        )
        logger.debug("GST %s -> tax %.2f", gst, tax_amount)
        return result
    
    def breakdown(self, result: GSTResult) -> List[str]:
        """Calculation breakdown lines, ordered the way each mode reads.
        
        ADD starts from the base amount and ends with the total; REMOVE starts
        from the inclusive amount and ends with the base amount.
        """
        tax_line = f"GST ({format_rate(result.rate_percent)}%): {format_gst_currency(result.tax_amount)}"
        if result.mode is GSTMode.ADD:
            return [
                f"Base Amount: {format_gst_currency(result.net_amount)}",
                tax_line,
                f"Total: {format_gst_currency(result.gross_amount)}",
            ]
        return [
            f"GST-Inclusive Amount: {format_gst_currency(result.gross_amount)}",
            tax_line,
            f"Base Amount: {format_gst_currency(result.net_amount)}",
        ]
