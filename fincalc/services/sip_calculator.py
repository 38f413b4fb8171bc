"""SIP calculation service for FinCalc.

This service handles Systematic Investment Plan projections:
- Maturity amount for a fixed monthly contribution (annuity-due)
- Returns and principal shares of the maturity
- Year-by-year growth schedule
"""
import math
import logging
from typing import List

import pandas as pd

from fincalc.config import MONTHS_PER_YEAR
from fincalc.exceptions import InvalidInputError
from fincalc.data_structures import SIPInput, SIPResult, SIPScheduleRow
from fincalc.services.validation import require_positive

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = ["Year", "Deposits", "Earnings", "Total Deposits", "Accrued Earnings", "Balance"]


class SIPCalculator:
    """Computes SIP maturity figures.
    
    Contributions are made at the start of each month and compound monthly.
    The period count is years * 12 as a real number, so fractional years
    give fractional periods rather than being truncated.
    """
    
    def validate(self, monthly_investment, duration_years, annual_rate_percent) -> SIPInput:
        """Check that all three inputs are finite and strictly positive.
        
        A zero rate is rejected here so the annuity formula never divides by zero.
        
        Raises:
            InvalidInputError: On the first offending field.
        """
        return SIPInput(
            monthly_investment=require_positive("monthly_investment", monthly_investment),
            duration_years=require_positive("duration_years", duration_years),
            annual_rate_percent=require_positive("annual_rate_percent", annual_rate_percent),
        )
    
    def calculate(self, monthly_investment, duration_years, annual_rate_percent) -> SIPResult:
        """Compute total invested, estimated returns and maturity amount.
        
        Args:
            monthly_investment: Amount contributed every month.
            duration_years: Investment horizon in years (may be fractional).
            annual_rate_percent: Expected annual return, e.g. 12 for 12%.
            
        Returns:
            SIPResult for the given inputs.
            
        Raises:
            InvalidInputError: If any input is missing, non-finite, zero or negative.
        """
        sip = self.validate(monthly_investment, duration_years, annual_rate_percent)
        periods = sip.duration_years * MONTHS_PER_YEAR
        result = self._result_after(sip, periods)
        logger.debug("SIP %s -> maturity %.2f", sip, result.maturity_amount)
        return result
    
    def returns_percentage(self, result: SIPResult) -> float:
        """Share of the maturity amount that is returns, in percent."""
        return result.estimated_returns / result.maturity_amount * 100
    
    def principal_share(self, result: SIPResult) -> float:
        """Share of the maturity amount that is money invested, in percent."""
        return result.total_invested / result.maturity_amount * 100
    
    def schedule_rows(self, monthly_investment, duration_years, annual_rate_percent) -> List[SIPScheduleRow]:
        """Year-end snapshots of the investment.
        
        One row per completed year, plus a final row at the exact duration
        when the last year is partial. The final balance always equals the
        maturity amount from calculate().
        """
        sip = self.validate(monthly_investment, duration_years, annual_rate_percent)
        
        checkpoints = [float(year) for year in range(1, math.floor(sip.duration_years) + 1)]
        if not checkpoints or checkpoints[-1] < sip.duration_years:
            checkpoints.append(sip.duration_years)
        
        rows = []
        prev_deposits = 0.0
        prev_earnings = 0.0
        for year in checkpoints:
            snapshot = self._result_after(sip, year * MONTHS_PER_YEAR)
            rows.append(SIPScheduleRow(
                year=year,
                deposits=snapshot.total_invested - prev_deposits,
                earnings=snapshot.estimated_returns - prev_earnings,
                total_deposits=snapshot.total_invested,
                accrued_earnings=snapshot.estimated_returns,
                balance=snapshot.maturity_amount,
            ))
            prev_deposits = snapshot.total_invested
            prev_earnings = snapshot.estimated_returns
        return rows
    
    def growth_schedule(self, monthly_investment, duration_years, annual_rate_percent) -> pd.DataFrame:
        """Year-by-year growth table as a DataFrame (see schedule_rows)."""
        rows = self.schedule_rows(monthly_investment, duration_years, annual_rate_percent)
        return pd.DataFrame(
            [[r.year, r.deposits, r.earnings, r.total_deposits, r.accrued_earnings, r.balance] for r in rows],
            columns=SCHEDULE_COLUMNS,
        )
    
    def _result_after(self, sip: SIPInput, periods: float) -> SIPResult:
        monthly_rate = sip.annual_rate_percent / MONTHS_PER_YEAR / 100
        try:
            growth = math.pow(1 + monthly_rate, periods)
        except OverflowError:
            growth = math.inf
        maturity_amount = sip.monthly_investment * ((growth - 1) / monthly_rate) * (1 + monthly_rate)
        if not math.isfinite(maturity_amount):
            raise InvalidInputError("annual_rate_percent", sip.annual_rate_percent,
                                    "result is too large to represent")
        total_invested = sip.monthly_investment * periods
        return SIPResult(
            total_invested=total_invested,
            estimated_returns=maturity_amount - total_invested,
            maturity_amount=maturity_amount,
        )
