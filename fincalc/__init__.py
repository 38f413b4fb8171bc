"""FinCalc: SIP and GST calculators."""

from .data_structures import GSTMode, GSTResult, SIPResult
from .engine import CalculatorEngine, compute_gst, compute_sip, format_currency
from .exceptions import FinCalcError, InvalidInputError
from .formatting import format_gst_currency, format_sip_currency
from .result import ErrorType, Result

__all__ = ['CalculatorEngine', 'compute_sip', 'compute_gst', 'format_currency',
           'format_sip_currency', 'format_gst_currency', 'GSTMode', 'SIPResult',
           'GSTResult', 'FinCalcError', 'InvalidInputError', 'Result', 'ErrorType']
