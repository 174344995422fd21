"""Input validation for salary simulations.

Rules run in a fixed order and the first failure wins: a submission with
an empty name and a negative salary only reports the name. Each rule has
its own user-facing message.
"""

import math
from typing import Any, Dict, Optional, Set, Union

from pydantic import ValidationError as PydanticValidationError

from .schemas import SimulationInput, ValidInput


class ValidationError(Exception):
    """Raised when a simulation input fails a validation rule."""
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


MESSAGES = {
    "name": "Please fill in the Name field.",
    "identifier": "Please fill in the Number field.",
    "gross_salary": "Invalid gross salary.",
    "social_security_rate": "Invalid social security rate.",
    "meal_allowance_daily": "Invalid meal allowance.",
    "other_deductions": "Invalid other deductions.",
    "dependents": "Invalid number of dependents.",
    "tax_regime": "Invalid tax regime.",
    "meal_allowance_mode": "Invalid meal allowance type.",
    # Not a form field: inputs so large the breakdown overflows
    "amounts": "Amounts are too large to simulate.",
}


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_number(value: Any) -> Optional[float]:
    """Parse a raw numeric input.

    Returns:
        The value as a finite float, or None if it is absent or not a number
    """
    if _is_absent(value) or isinstance(value, bool):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_count(value: Any) -> Optional[int]:
    """Parse a raw whole-number input such as dependents ("2", 2, 2.0)."""
    number = parse_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _fail(field: str):
    raise ValidationError(field, MESSAGES.get(field, f"Unknown field: {field}."))


def _schema_rejections(raw: Dict[str, Any]) -> Set[str]:
    """Fields the SimulationInput schema refuses (wrong type, unknown choice or key)."""
    try:
        SimulationInput.model_validate(raw)
    except PydanticValidationError as e:
        return {str(err["loc"][0]) for err in e.errors() if err["loc"]}
    return set()


def validate(raw: Union[SimulationInput, Dict[str, Any]]) -> ValidInput:
    """Validate a raw simulation input.

    A dict that doesn't fit the SimulationInput schema (name=None, an
    unknown tax_regime, an extra key) is reported the same way as a rule
    failure, on the first offending field in rule order.

    Args:
        raw: SimulationInput or a dict with the same keys

    Returns:
        ValidInput with numbers parsed

    Raises:
        ValidationError: For the first rule the input violates
    """
    if isinstance(raw, SimulationInput):
        raw = raw.model_dump()
    rejected = _schema_rejections(raw)
    values = {**SimulationInput().model_dump(), **raw}

    def check(field: str, ok: bool):
        if field in rejected or not ok:
            _fail(field)

    check("name", not _is_absent(values["name"]))
    check("identifier", not _is_absent(values["identifier"]))

    gross = parse_number(values["gross_salary"])
    check("gross_salary", gross is not None and gross > 0)

    ss_rate = parse_number(values["social_security_rate"])
    check("social_security_rate", ss_rate is not None and ss_rate >= 0)

    meal_daily = parse_number(values["meal_allowance_daily"])
    check("meal_allowance_daily", meal_daily is not None and meal_daily >= 0)

    # Absent is fine here, compute() treats it as 0
    other_absent = _is_absent(values["other_deductions"])
    other = None if other_absent else parse_number(values["other_deductions"])
    check("other_deductions", other_absent or (other is not None and other >= 0))

    dependents = parse_count(values["dependents"])
    check("dependents", dependents is not None and dependents >= 0)

    check("tax_regime", True)
    check("meal_allowance_mode", True)
    for field in sorted(rejected):
        _fail(field)

    return ValidInput(
        name=values["name"],
        identifier=values["identifier"],
        gross_salary=gross,
        tax_regime=values["tax_regime"],
        dependents=dependents,
        social_security_rate=ss_rate,
        meal_allowance_daily=meal_daily,
        meal_allowance_mode=values["meal_allowance_mode"],
        other_deductions=other,
    )
