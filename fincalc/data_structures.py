from dataclasses import dataclass
from enum import Enum


class GSTMode(str, Enum):
    """Whether the entered amount excludes (ADD) or includes (REMOVE) GST."""
    ADD = "add"
    REMOVE = "remove"

    @classmethod
    def parse(cls, value) -> 'GSTMode':
        """Accept a GSTMode or its string value, case-insensitively.
        
        Raises:
            ValueError: If the value names no mode.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown GST mode: {value!r}")


@dataclass(frozen=True)
class SIPInput:
    monthly_investment: float
    duration_years: float
    annual_rate_percent: float


@dataclass(frozen=True)
class SIPResult:
    """Outcome of a SIP calculation. maturity_amount = total_invested + estimated_returns."""
    total_invested: float
    estimated_returns: float
    maturity_amount: float


@dataclass(frozen=True)
class GSTInput:
    amount: float
    rate_percent: float
    mode: GSTMode


@dataclass(frozen=True)
class GSTResult:
    """Outcome of a GST calculation. gross_amount = net_amount + tax_amount in both modes."""
    tax_amount: float
    net_amount: float
    gross_amount: float
    rate_percent: float
    mode: GSTMode


@dataclass(frozen=True)
class SIPScheduleRow:
    year: float
    deposits: float
    earnings: float
    total_deposits: float
    accrued_earnings: float
    balance: float
