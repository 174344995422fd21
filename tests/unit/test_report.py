"""Unit tests for the PDF simulation report."""

from datetime import date, datetime

import pytest

from salarysim.sdk.report import (
    ExportPreconditionError,
    FOOTER_LINE,
    FORMULA_LINE,
    format_amount,
    render,
    report_filename,
    report_lines,
)
from salarysim.sdk.taxes import compute
from salarysim.sdk.validation import validate


@pytest.fixture
def result():
    valid = validate({
        "name": "Ana Silva",
        "identifier": "1234",
        "gross_salary": "1500",
        "tax_regime": "dual_holder",
        "dependents": "1",
        "social_security_rate": "11",
        "meal_allowance_daily": "5",
        "other_deductions": "50",
    })
    return compute(valid, now=datetime(2025, 6, 1, 10, 0))


class TestReportLines:

    def test_user_details_first(self, result):
        lines = report_lines(result)

        assert lines[:5] == [
            "=== User details ===",
            "Name: Ana Silva",
            "Number: 1234",
            "Regime: Dual holder",
            "Dependents: 1",
        ]

    def test_breakdown_with_signed_lines(self, result):
        lines = report_lines(result)
        start = lines.index("=== Calculations ===")

        assert lines[start + 1:start + 8] == [
            "Gross salary: 1500.00 €",
            "Income tax: -165.00 €",
            "Social security: -165.00 €",
            "Other deductions: -50.00 €",
            "Meal allowance: 110.00 €",
            "Net monthly: 1230.00 €",
            "Net annual (14x): 17220.00 €",
        ]

    def test_ends_with_formula_and_footer(self, result):
        assert report_lines(result)[-2:] == [FORMULA_LINE, FOOTER_LINE]

    def test_format_amount(self):
        assert format_amount(702) == "702.00 €"
        assert format_amount(-0.004) == "-0.00 €"
        assert format_amount(1234.567) == "1234.57 €"


class TestRender:

    def test_produces_pdf(self, result):
        pdf = render(result)
        assert pdf.startswith(b"%PDF")
        assert len(pdf) > 500

    def test_markup_characters_in_name(self, result):
        odd = result.model_copy(update={"name": "A & B <Ltd>"})
        assert render(odd).startswith(b"%PDF")

    def test_no_result_is_precondition_error(self):
        with pytest.raises(ExportPreconditionError, match="No results available"):
            render(None)


class TestFilename:

    def test_pattern(self, result):
        assert report_filename(result, on=date(2025, 6, 1)) == "Simulation_Ana_Silva_2025-06-01.pdf"

    def test_path_separators_replaced(self, result):
        odd = result.model_copy(update={"name": "a/b\\c"})
        assert report_filename(odd, on=date(2025, 1, 2)) == "Simulation_a_b_c_2025-01-02.pdf"
