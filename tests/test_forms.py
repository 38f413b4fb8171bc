"""Tests for SIPForm and GSTForm.

Tests cover:
1. Parsing raw text fields and calculating
2. Failure results carrying the user-facing message
3. Previous result kept on failure
4. Reset behavior
5. Summary and breakdown rendering
"""
import os
import sys
import unittest
from unittest.mock import Mock

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fincalc.config import (
    SIP_INVALID_MESSAGE,
    GST_INVALID_AMOUNT_MESSAGE,
    GST_INVALID_RATE_MESSAGE,
    GST_INVALID_MODE_MESSAGE,
)
from fincalc.data_structures import GSTMode
from fincalc.forms import SIPForm, GSTForm
from fincalc.result import ErrorType
from fincalc.services import SIPCalculator


class TestSIPForm(unittest.TestCase):

    def test_calculate_from_text(self):
        form = SIPForm("5000", "10", "12")
        result = form.calculate()

        self.assertTrue(result)
        self.assertEqual(result.value.total_invested, 600000)
        self.assertIs(form.result, result.value)

    def test_text_with_trailing_characters(self):
        result = SIPForm("5000 rupees", "10y", "12%").calculate()
        self.assertTrue(result.success)
        self.assertEqual(round(result.value.maturity_amount), 1161695)

    def test_invalid_fields_fail(self):
        cases = [("", "10", "12"), ("0", "10", "12"), ("5000", "-1", "12"),
                 ("5000", "10", "abc"), ("5000", "10", "0")]
        for fields in cases:
            with self.subTest(fields=fields):
                result = SIPForm(*fields).calculate()
                self.assertFalse(result)
                self.assertIsNone(result.value)
                self.assertEqual(result.error, SIP_INVALID_MESSAGE)
                self.assertEqual(result.error_type, ErrorType.VALIDATION)

    def test_failure_keeps_previous_result(self):
        form = SIPForm("5000", "10", "12")
        first = form.calculate().value

        form.duration = "-3"
        self.assertFalse(form.calculate())
        self.assertIs(form.result, first)

    def test_failure_is_logged(self):
        form = SIPForm("", "10", "12")
        with self.assertLogs('fincalc.forms', level='INFO') as logs:
            form.calculate()
        self.assertIn("monthly_investment", logs.output[0])

    def test_reset(self):
        form = SIPForm("5000", "10", "12")
        form.calculate()
        form.reset()

        self.assertEqual((form.monthly_investment, form.duration, form.return_rate), ("", "", ""))
        self.assertIsNone(form.result)
        self.assertIsNone(form.summary())

    def test_summary(self):
        form = SIPForm("5000", "10", "12")
        form.calculate()
        summary = form.summary()

        self.assertEqual(summary['total_invested'], "₹6,00,000")
        self.assertEqual(summary['maturity_amount'], "₹11,61,695")
        self.assertEqual(summary['estimated_returns'], "₹5,61,695")
        self.assertEqual(summary['maturity_compact'], "11.62 lac")
        self.assertEqual(summary['returns_percentage'], "48.4%")
        self.assertEqual(summary['principal_share'], "51.6%")

    def test_uses_injected_calculator(self):
        calc = Mock(spec=SIPCalculator)
        calc.calculate.return_value = "sentinel"

        result = SIPForm("1", "2", "3", calculator=calc).calculate()

        calc.calculate.assert_called_once_with(1.0, 2.0, 3.0)
        self.assertEqual(result.value, "sentinel")


class TestGSTForm(unittest.TestCase):

    def test_defaults(self):
        form = GSTForm()
        self.assertEqual(form.amount, "")
        self.assertEqual(form.gst_rate, "18")
        self.assertEqual(form.calculation_type, "add")
        self.assertIsNone(form.result)
        self.assertEqual(form.breakdown(), [])

    def test_add(self):
        form = GSTForm(amount="10000")
        result = form.calculate()

        self.assertTrue(result)
        self.assertEqual(result.value.gross_amount, 11800)
        self.assertEqual(form.breakdown()[-1], "Total: ₹11,800.00")

    def test_remove(self):
        form = GSTForm(amount="11800", gst_rate="18", calculation_type=GSTMode.REMOVE.value)
        result = form.calculate()

        self.assertAlmostEqual(result.value.net_amount, 10000, places=6)
        self.assertEqual(form.breakdown()[0], "GST-Inclusive Amount: ₹11,800.00")

    def test_zero_rate(self):
        result = GSTForm(amount="500", gst_rate="0").calculate()
        self.assertEqual(result.value.tax_amount, 0)

    def test_invalid_amount_message(self):
        for amount in ("", "abc", "0", "-100"):
            with self.subTest(amount=amount):
                result = GSTForm(amount=amount).calculate()
                self.assertFalse(result)
                self.assertEqual(result.error, GST_INVALID_AMOUNT_MESSAGE)

    def test_invalid_rate_message(self):
        for rate in ("-5", "", "x"):
            with self.subTest(rate=rate):
                result = GSTForm(amount="100", gst_rate=rate).calculate()
                self.assertEqual(result.error, GST_INVALID_RATE_MESSAGE)
                self.assertEqual(result.error_type, ErrorType.VALIDATION)

    def test_invalid_mode_message(self):
        result = GSTForm(amount="100", calculation_type="double").calculate()
        self.assertEqual(result.error, GST_INVALID_MODE_MESSAGE)

    def test_failure_keeps_previous_result(self):
        form = GSTForm(amount="100")
        first = form.calculate().value

        form.amount = "-1"
        form.calculate()
        self.assertIs(form.result, first)

    def test_reset_restores_defaults(self):
        form = GSTForm(amount="100", gst_rate="5", calculation_type="remove")
        form.calculate()
        form.reset()

        self.assertEqual(form.amount, "")
        self.assertEqual(form.gst_rate, "18")
        self.assertEqual(form.calculation_type, "add")
        self.assertIsNone(form.result)


if __name__ == '__main__':
    unittest.main()
