"""Centralized configuration for FinCalc.

This module contains the display formats, default values, and business rule
constants shared by the SIP and GST calculators.
"""

# =============================================================================
# CURRENCY DISPLAY
# =============================================================================

# Indian Rupee symbol prefixed to formatted amounts
CURRENCY_SYMBOL = "₹"

# SIP figures are shown in whole rupees
SIP_DISPLAY_DECIMALS = 0

# GST figures are shown to the paisa
GST_DISPLAY_DECIMALS = 2

# Compact summary thresholds
ONE_LAKH = 100_000
ONE_CRORE = 10_000_000

# =============================================================================
# GST DEFAULTS
# =============================================================================

# Default GST rate (percent) preselected on the form
DEFAULT_GST_RATE = 18

# Standard GST slabs offered on the form: (rate, label)
GST_RATE_OPTIONS = [
    (0, "0% (Exempt)"),
    (5, "5% (Essential goods)"),
    (12, "12% (Standard goods)"),
    (18, "18% (Most goods)"),
    (28, "28% (Luxury goods)"),
]

# =============================================================================
# BUSINESS RULES
# =============================================================================

# Months per year used to derive the SIP period count and monthly rate
MONTHS_PER_YEAR = 12

# Relative tolerance for result invariants
RELATIVE_TOLERANCE = 1e-6

# =============================================================================
# USER MESSAGES
# =============================================================================

SIP_INVALID_MESSAGE = "Please enter valid positive values for all fields"
GST_INVALID_AMOUNT_MESSAGE = "Please enter a valid amount greater than 0"
GST_INVALID_RATE_MESSAGE = "Please select a valid GST rate"
GST_INVALID_MODE_MESSAGE = "Please choose whether to add or remove GST"
