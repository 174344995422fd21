"""Unit tests for withholding tax and net pay calculations.

Covers the three monthly brackets, dependent credits, the zero floor,
and the net monthly / annual formulas.
"""

from datetime import datetime

import pytest

from salarysim.sdk.schemas import ValidInput
from salarysim.sdk.taxes import (
    calc_bracket_tax,
    calc_income_tax,
    calc_meal_allowance,
    calc_social_security,
    compute,
)
from salarysim.sdk.validation import ValidationError


def make_input(**overrides) -> ValidInput:
    """Build a ValidInput with sensible defaults."""
    fields = {
        "name": "Ana Silva",
        "identifier": "1234",
        "gross_salary": 1500.0,
        "tax_regime": "single_holder",
        "dependents": 0,
        "social_security_rate": 11.0,
        "meal_allowance_daily": 0.0,
        "meal_allowance_mode": "card",
        "other_deductions": None,
    }
    fields.update(overrides)
    return ValidInput(**fields)


class TestBracketTax:
    """Each bracket taxes only its slice of the salary."""

    @pytest.mark.parametrize("gross", [0.01, 250, 999.99, 1000])
    def test_first_bracket(self, gross):
        assert calc_bracket_tax(gross) == pytest.approx(gross * 0.11)

    @pytest.mark.parametrize("gross", [1000.01, 1500, 2000])
    def test_second_bracket(self, gross):
        assert calc_bracket_tax(gross) == pytest.approx(110 + (gross - 1000) * 0.15)

    @pytest.mark.parametrize("gross", [2000.01, 3500, 10000])
    def test_top_bracket(self, gross):
        assert calc_bracket_tax(gross) == pytest.approx(110 + 150 + (gross - 2000) * 0.28)

    def test_lower_brackets_saturate(self):
        """Above 2000 the first two brackets always contribute 110 + 150."""
        assert calc_bracket_tax(3000) == pytest.approx(260 + 280)

    def test_not_a_marginal_rebase(self):
        """3000 is not taxed as 3000 * 0.28."""
        assert calc_bracket_tax(3000) != pytest.approx(3000 * 0.28)


class TestIncomeTax:
    """Dependent credits and the zero floor."""

    def test_credit_per_dependent(self):
        assert calc_income_tax(1500, dependents=1) == pytest.approx(165)
        assert calc_income_tax(1500, dependents=3) == pytest.approx(125)

    @pytest.mark.parametrize("gross,dependents", [
        (100, 1),
        (900, 5),
        (1500, 10),
        (2500, 1000),
    ])
    def test_never_negative(self, gross, dependents):
        assert calc_income_tax(gross, dependents) == 0

    def test_no_dependents(self):
        assert calc_income_tax(900) == pytest.approx(99)

    def test_credit_larger_than_any_float(self):
        assert calc_income_tax(1500, dependents=10 ** 308) == 0

    @pytest.mark.parametrize("gross,dependents,expected", [
        (800, 2, max(0, 800 * 0.11 - 40)),
        (1800, 2, max(0, 110 + 800 * 0.15 - 40)),
        (2600, 2, max(0, 110 + 150 + 600 * 0.28 - 40)),
    ])
    def test_bracket_formulas_with_credit(self, gross, dependents, expected):
        assert calc_income_tax(gross, dependents) == pytest.approx(expected)


class TestOtherAmounts:

    def test_social_security_is_percent_of_gross(self):
        assert calc_social_security(1500, 11) == pytest.approx(165)
        assert calc_social_security(1500, 0) == 0

    def test_meal_allowance_uses_22_days(self):
        assert calc_meal_allowance(5) == pytest.approx(110)
        assert calc_meal_allowance(0) == 0


class TestCompute:
    """Full breakdown from a ValidInput."""

    def test_scenario_with_dependent_meal_and_deductions(self):
        result = compute(make_input(
            gross_salary=1500, dependents=1, social_security_rate=11,
            meal_allowance_daily=5, other_deductions=50,
        ))

        assert result.income_tax_amount == pytest.approx(165)
        assert result.social_security_amount == pytest.approx(165)
        assert result.meal_allowance_amount == pytest.approx(110)
        assert result.other_deductions_amount == pytest.approx(50)
        assert result.net_monthly == pytest.approx(1230)
        assert result.net_annual_projected == pytest.approx(17220)

    def test_scenario_first_bracket_no_extras(self):
        result = compute(make_input(
            gross_salary=900, dependents=0, social_security_rate=11,
            meal_allowance_daily=0, other_deductions=0,
        ))

        assert result.income_tax_amount == pytest.approx(99)
        assert result.social_security_amount == pytest.approx(99)
        assert result.net_monthly == pytest.approx(702)
        assert result.net_annual_projected == pytest.approx(9828)

    def test_absent_other_deductions_count_as_zero(self):
        result = compute(make_input(other_deductions=None))
        assert result.other_deductions_amount == 0
        assert result.other_deductions is None

    @pytest.mark.parametrize("gross,dependents,ss,meal,other", [
        (750, 0, 11, 7.5, 0),
        (1234.56, 2, 9.5, 4.77, 12.3),
        (5321.1, 1, 11, 0, 300),
    ])
    def test_net_formula_holds_exactly(self, gross, dependents, ss, meal, other):
        result = compute(make_input(
            gross_salary=gross, dependents=dependents, social_security_rate=ss,
            meal_allowance_daily=meal, other_deductions=other,
        ))

        expected_net = (
            result.gross_salary
            - result.social_security_amount
            - result.income_tax_amount
            - result.other_deductions_amount
            + result.meal_allowance_amount
        )
        assert result.net_monthly == expected_net
        assert result.net_annual_projected == result.net_monthly * 14

    def test_regime_and_meal_mode_do_not_change_amounts(self):
        base = compute(make_input(meal_allowance_daily=6))
        other = compute(make_input(
            meal_allowance_daily=6, tax_regime="dual_holder", meal_allowance_mode="cash",
        ))

        assert other.income_tax_amount == base.income_tax_amount
        assert other.net_monthly == base.net_monthly
        assert other.tax_regime == "dual_holder"
        assert other.meal_allowance_mode == "cash"

    def test_input_fields_carried_through(self):
        result = compute(make_input(name="Rui", identifier="X-9", dependents=2))

        assert result.name == "Rui"
        assert result.identifier == "X-9"
        assert result.dependents == 2
        assert result.gross_salary == 1500

    def test_timestamp_from_given_time(self):
        now = datetime(2025, 3, 14, 9, 30, 0)
        result = compute(make_input(), now=now)
        assert result.timestamp == now.strftime("%c")

    def test_same_input_same_amounts(self):
        now = datetime(2025, 1, 1)
        assert compute(make_input(), now=now) == compute(make_input(), now=now)

    def test_overflowing_amounts_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            compute(make_input(gross_salary=1e308, social_security_rate=0.0))
        assert exc_info.value.field == "amounts"

    def test_overflowing_meal_allowance_rejected(self):
        with pytest.raises(ValidationError):
            compute(make_input(meal_allowance_daily=1e308))
