"""Currency formatting for calculator results.

Amounts are rendered Indian-Rupee style: a rupee sign, the last three
digits grouped together and every two digits above that (lakh/crore
grouping), rounded half-up. SIP figures show whole rupees and GST figures
show paise.
"""
import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from fincalc.config import (
    CURRENCY_SYMBOL,
    SIP_DISPLAY_DECIMALS,
    GST_DISPLAY_DECIMALS,
    ONE_LAKH,
    ONE_CRORE,
)


def _group_indian(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = [tail]
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups)


def format_currency(value: float, decimals: int = GST_DISPLAY_DECIMALS) -> str:
    """Format an amount as rupees, e.g. 1161695.38 -> '₹11,61,695' with 0 decimals.
    
    Args:
        value: Amount to format.
        decimals: Number of decimal places always shown.
        
    Returns:
        Formatted string with a leading '-' for negative amounts.
        
    Raises:
        ValueError: If value is NaN or infinite, or decimals is negative.
    """
    if decimals < 0:
        raise ValueError(f"decimals must not be negative: {decimals}")
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite amount: {value}")
    
    with localcontext() as ctx:
        ctx.prec = 400
        rounded = Decimal(str(value)).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
        text = f"{abs(rounded):f}"
    
    whole, _, fraction = text.partition(".")
    sign = "-" if rounded < 0 else ""
    formatted = f"{sign}{CURRENCY_SYMBOL}{_group_indian(whole)}"
    if decimals:
        formatted += f".{fraction}"
    return formatted


def format_sip_currency(value: float) -> str:
    return format_currency(value, SIP_DISPLAY_DECIMALS)


def format_gst_currency(value: float) -> str:
    return format_currency(value, GST_DISPLAY_DECIMALS)


def format_compact(amount: float) -> str:
    """Helper to format amounts in crore/lakh for summaries, e.g. '11.62 lac'."""
    sign = "-" if amount < 0 else ""
    amt = abs(amount)
    if amt >= ONE_CRORE:
        return f"{sign}{amt / ONE_CRORE:.2f} cr"
    if amt >= ONE_LAKH:
        return f"{sign}{amt / ONE_LAKH:.2f} lac"
    return f"{sign}{amt:,.2f}"


def format_rate(rate_percent: float) -> str:
    """Render a percentage without trailing zeros: 18.0 -> '18', 2.5 -> '2.5'."""
    return f"{rate_percent:g}"
