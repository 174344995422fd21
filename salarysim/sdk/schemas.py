"""Pydantic schemas for salary-sim data.

Three stages of a simulation share these models:

- SimulationInput: raw values as typed by the user (numbers may be strings)
- ValidInput: the same fields after validation, numbers parsed
- SimulationResult: ValidInput plus the computed breakdown, frozen

Results serialize with camelCase names (grossSalary, netMonthly, ...), which
is the shape stored in history.json.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


TaxRegime = Literal["single_holder", "dual_holder"]
MealAllowanceMode = Literal["card", "cash"]

# Raw numeric input: a parsed number, the text the user typed, or absent
RawNumber = Optional[Union[float, str]]


class SimulationInput(BaseModel):
    """Raw simulation input, unvalidated."""

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    identifier: str = ""
    gross_salary: RawNumber = None
    tax_regime: TaxRegime = "single_holder"
    dependents: Optional[Union[int, float, str]] = 0
    social_security_rate: RawNumber = None
    meal_allowance_daily: RawNumber = None
    meal_allowance_mode: MealAllowanceMode = "card"
    other_deductions: RawNumber = None


class ValidInput(BaseModel):
    """Simulation input that passed validation."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str
    identifier: str
    gross_salary: float = Field(..., gt=0)
    tax_regime: TaxRegime = "single_holder"
    dependents: int = Field(default=0, ge=0)
    social_security_rate: float = Field(..., ge=0, description="Percent of gross")
    meal_allowance_daily: float = Field(..., ge=0, description="Per working day")
    meal_allowance_mode: MealAllowanceMode = Field(
        default="card",
        description="Informational only; never changes any computed amount",
    )
    other_deductions: Optional[float] = Field(default=None, ge=0)


class SimulationResult(ValidInput):
    """Computed simulation. Immutable once produced."""

    # Stored history must stay strict JSON
    model_config = ConfigDict(allow_inf_nan=False)

    social_security_amount: float
    income_tax_amount: float = Field(..., ge=0)
    other_deductions_amount: float = Field(..., ge=0)
    meal_allowance_amount: float = Field(..., ge=0)
    net_monthly: float
    net_annual_projected: float
    timestamp: str = Field(..., description="Locale-formatted creation time")

    def to_record(self) -> dict:
        """Serialize for storage (camelCase keys)."""
        return self.model_dump(by_alias=True, mode="json")


class ProfileDefaults(BaseModel):
    """Default form values read from profile.yaml 'defaults'."""

    model_config = ConfigDict(extra="forbid")

    tax_regime: TaxRegime = "single_holder"
    dependents: int = Field(default=0, ge=0)
    social_security_rate: Optional[float] = Field(default=None, ge=0)
    meal_allowance_daily: Optional[float] = Field(default=None, ge=0)
    meal_allowance_mode: MealAllowanceMode = "card"
    other_deductions: Optional[float] = Field(default=None, ge=0)
