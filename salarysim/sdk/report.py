"""PDF report for a finished simulation.

The report is a labeled listing: user details, then the computed breakdown
with deductions shown as negative lines, then the net pay formula and a
footer. Amounts use two decimals and a euro suffix.
"""

from datetime import date
from io import BytesIO
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer

from .schemas import SimulationResult

CURRENCY_SYMBOL = "€"
FORMULA_LINE = "Formula: Net = Gross - Income tax - Social security - Deductions + Meal allowance"
FOOTER_LINE = "Simulation generated automatically"

REGIME_LABELS = {
    "single_holder": "Single holder",
    "dual_holder": "Dual holder",
}


class ExportPreconditionError(Exception):
    """Raised when a report is requested before any simulation exists."""
    pass


def format_amount(value: float) -> str:
    """Format an amount as '1234.50 €'."""
    return f"{value:.2f} {CURRENCY_SYMBOL}"


def breakdown_rows(result: SimulationResult) -> List[tuple]:
    """Computed breakdown as (label, signed amount) pairs, in report order."""
    return [
        ("Gross salary", result.gross_salary),
        ("Income tax", -result.income_tax_amount),
        ("Social security", -result.social_security_amount),
        ("Other deductions", -result.other_deductions_amount),
        ("Meal allowance", result.meal_allowance_amount),
        ("Net monthly", result.net_monthly),
        ("Net annual (14x)", result.net_annual_projected),
    ]


def report_lines(result: SimulationResult) -> List[str]:
    """Text lines of the report. Empty strings mark vertical gaps."""
    lines = [
        "=== User details ===",
        f"Name: {result.name}",
        f"Number: {result.identifier}",
        f"Regime: {REGIME_LABELS.get(result.tax_regime, result.tax_regime)}",
        f"Dependents: {result.dependents}",
        "",
        "=== Calculations ===",
    ]
    lines.extend(f"{label}: {format_amount(value)}" for label, value in breakdown_rows(result))
    lines.extend(["", FORMULA_LINE, FOOTER_LINE])
    return lines


def render(result: Optional[SimulationResult]) -> bytes:
    """Render the report as PDF bytes.

    Raises:
        ExportPreconditionError: If result is None
    """
    if result is None:
        raise ExportPreconditionError("No results available to generate a PDF.")

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=10 * mm,
        rightMargin=10 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title=f"Simulation {result.name}",
    )
    style = ParagraphStyle("line", fontName="Helvetica", fontSize=12, leading=17)

    elems = []
    for line in report_lines(result):
        if line:
            elems.append(Paragraph(escape(line), style))
        else:
            elems.append(Spacer(1, 4 * mm))

    doc.build(elems)
    return buffer.getvalue()


def report_filename(result: SimulationResult, on: Optional[date] = None) -> str:
    """Suggested file name: Simulation_<name>_<YYYY-MM-DD>.pdf."""
    if on is None:
        on = date.today()
    safe_name = "".join(c if c.isalnum() or c in "-_" else "_" for c in result.name.strip())
    return f"Simulation_{safe_name}_{on.isoformat()}.pdf"
