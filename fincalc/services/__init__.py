"""Services package for FinCalc calculations.

Each calculator is a focused, stateless service class.
"""

from .sip_calculator import SIPCalculator
from .gst_calculator import GSTCalculator

__all__ = ['SIPCalculator', 'GSTCalculator']
