# This project was developed with assistance from AI tools.
"""Field-level validation for the affordability calculator.

Checks run in a fixed order and the first failure wins, so clients always get
the same message for the same bad payload:

1. presence + range, in ``RANGE_CHECK_ORDER``;
2. number format, in ``FIELDS`` order.

A numeric zero counts as missing (see ``is_missing``). That keeps a
long-standing client-visible behavior; whether zero should be accepted for
the non-negative fields is an open product question.
"""

import math
import re
from collections.abc import Callable
from typing import Any

from ..schemas.calculator import AffordabilityInput, AffordabilityRequest
from .errors import MissingFieldError, NotANumberError, OutOfRangeError

_NUMBER_RE = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")
_PREFIXED_INT_RE = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


class FieldRule:
    """Presence/range rule for one calculator field."""

    def __init__(
        self,
        name: str,
        wire_name: str,
        label: str,
        in_range: Callable[[float], bool],
        message: str,
    ):
        self.name = name
        self.wire_name = wire_name
        self.label = label
        self.in_range = in_range
        self.message = message


def _non_negative(value: float) -> bool:
    return value >= 0


def _positive(value: float) -> bool:
    return value > 0


def _month_span(value: float) -> bool:
    return 1 <= value <= 60


FIELDS: dict[str, FieldRule] = {
    rule.name: rule
    for rule in (
        FieldRule(
            "moving_and_setup_cost",
            "movingAndSetupCost",
            "Moving & Setup Costs",
            _non_negative,
            "Invalid moving and setup costs provided.",
        ),
        FieldRule(
            "monthly_living_cost",
            "monthlyLivingCost",
            "Monthly Living Costs",
            _non_negative,
            "Invalid monthly living costs provided.",
        ),
        FieldRule("rent", "rent", "Monthly Rent", _positive, "Invalid rent provided."),
        FieldRule(
            "security_deposit",
            "securityDeposit",
            "Security Deposit",
            _non_negative,
            "Invalid security deposit provided.",
        ),
        FieldRule(
            "total_monthly_income",
            "totalMonthlyIncome",
            "Total Monthly Income",
            _positive,
            "Invalid total monthly income provided.",
        ),
        FieldRule(
            "total_savings",
            "totalSavings",
            "Total Savings",
            _non_negative,
            "Invalid total savings provided.",
        ),
        FieldRule(
            "months_to_evaluate",
            "monthsToEvaluate",
            "Months to Evaluate",
            _month_span,
            "Months To Evaluate must be between 1 and 60.",
        ),
    )
}

# Months is checked right after rent.
RANGE_CHECK_ORDER: tuple[str, ...] = (
    "moving_and_setup_cost",
    "monthly_living_cost",
    "rent",
    "months_to_evaluate",
    "security_deposit",
    "total_monthly_income",
    "total_savings",
)


def is_missing(value: Any) -> bool:
    """True for absent, null, false, empty-string and numeric-zero values.

    A string ``"0"`` is present.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def coerce_number(value: Any) -> float | None:
    """Convert a JSON scalar to a float, accepting plain decimal strings only.

    Returns None when the value has no strict numeric reading; the number-format
    check then rejects it.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        return value
    if isinstance(value, str) and _NUMBER_RE.match(value):
        return float(value)
    return None


def loose_number(value: Any) -> float | None:
    """Numeric reading used by the range check, as lenient as browser ``Number()``.

    Blank strings read as 0, ``Infinity``/``-Infinity`` as infinities and
    unsigned ``0x``/``0o``/``0b`` literals as integers, so such input fails
    with the field's range message. None means there is no numeric reading.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if not isinstance(value, str):
        return coerce_number(value)
    text = value.strip()
    if text == "":
        return 0.0
    if text in _INFINITIES:
        return _INFINITIES[text]
    if _PREFIXED_INT_RE.match(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return math.inf
    return coerce_number(text)


def is_numeric(value: Any) -> bool:
    """True for finite numbers and strings spelling a finite decimal number."""
    number = coerce_number(value)
    return number is not None and math.isfinite(number)


def check_presence_and_range(name: str, value: Any) -> None:
    """Raise MissingFieldError or OutOfRangeError for one field."""
    rule = FIELDS[name]
    if is_missing(value):
        raise MissingFieldError(rule.wire_name, rule.message)
    number = loose_number(value)
    if number is not None and not rule.in_range(number):
        raise OutOfRangeError(rule.wire_name, rule.message)


def check_number_format(name: str, value: Any) -> None:
    """Raise NotANumberError naming the field's label."""
    if not is_numeric(value):
        rule = FIELDS[name]
        raise NotANumberError(rule.wire_name, f"{rule.label} must be a valid number.")


def validate_affordability_request(req: AffordabilityRequest) -> AffordabilityInput:
    """Validate a raw request and convert it to calculator input.

    Raises:
        MissingFieldError, OutOfRangeError, NotANumberError: first failing
            field, in the documented order.
    """
    raw = {name: getattr(req, name) for name in FIELDS}

    for name in RANGE_CHECK_ORDER:
        check_presence_and_range(name, raw[name])

    for name, value in raw.items():
        check_number_format(name, value)

    values = {name: coerce_number(value) for name, value in raw.items()}
    # Whole months only; fractional input is truncated toward zero
    values["months_to_evaluate"] = int(values["months_to_evaluate"])
    return AffordabilityInput(**values)
