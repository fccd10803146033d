# This project was developed with assistance from AI tools.
"""Tests for calculator input validation."""

import pytest

from src.schemas.calculator import AffordabilityRequest
from src.services.affordability_validation import (
    coerce_number,
    is_missing,
    is_numeric,
    loose_number,
    validate_affordability_request,
)
from src.services.errors import (
    AffordabilityValidationError,
    MissingFieldError,
    NotANumberError,
    OutOfRangeError,
)


def _request(payload: dict) -> AffordabilityRequest:
    return AffordabilityRequest.model_validate(payload)


def _with(valid_payload, **overrides) -> AffordabilityRequest:
    return _request({**valid_payload, **overrides})


class TestHelpers:
    @pytest.mark.parametrize("value", [None, False, 0, 0.0, "", float("nan")])
    def test_missing_values(self, value):
        assert is_missing(value)

    @pytest.mark.parametrize("value", ["0", " ", 1, -1, True, [], {}, "abc"])
    def test_present_values(self, value):
        assert not is_missing(value)

    @pytest.mark.parametrize(
        "value,expected",
        [(12, 12.0), (1.5, 1.5), ("42", 42.0), (" 7.25 ", 7.25), ("-3", -3.0), ("1e3", 1000.0), (".5", 0.5)],
    )
    def test_coerce_number(self, value, expected):
        assert coerce_number(value) == expected

    @pytest.mark.parametrize("value", ["abc", "12abc", "1_000", "0x10", True, None, [1], {"a": 1}])
    def test_coerce_number_rejects(self, value):
        assert coerce_number(value) is None

    @pytest.mark.parametrize(
        "value,expected",
        [
            (" ", 0.0),
            ("\t\n", 0.0),
            ("Infinity", float("inf")),
            ("-Infinity", float("-inf")),
            ("0x10", 16.0),
            ("0b101", 5.0),
            ("0o17", 15.0),
            (" 42 ", 42.0),
            (True, 1.0),
            (-3, -3.0),
        ],
    )
    def test_loose_number(self, value, expected):
        assert loose_number(value) == expected

    @pytest.mark.parametrize("value", ["abc", "-0x10", "0x", "1_000", [1], None])
    def test_loose_number_rejects(self, value):
        assert loose_number(value) is None

    def test_huge_integer_coerces_to_infinity(self):
        assert coerce_number(10**400) == float("inf")

    @pytest.mark.parametrize("value", [1, 2.5, "3", "  4.0 "])
    def test_is_numeric(self, value):
        assert is_numeric(value)

    @pytest.mark.parametrize("value", ["1e400", float("inf"), "Infinity", "nan", "abc", True])
    def test_is_not_numeric(self, value):
        assert not is_numeric(value)


class TestValidRequests:
    def test_converts_to_numbers(self, valid_payload):
        data = validate_affordability_request(_request(valid_payload))
        assert data.moving_and_setup_cost == 1000.0
        assert data.rent == 1500.0
        assert data.months_to_evaluate == 6
        assert isinstance(data.months_to_evaluate, int)

    def test_numeric_strings_accepted(self, valid_payload):
        payload = {key: str(value) for key, value in valid_payload.items()}
        data = validate_affordability_request(_request(payload))
        assert data.total_savings == 5000.0
        assert data.months_to_evaluate == 6

    def test_string_zero_counts_as_present(self, valid_payload):
        """Only a numeric zero is treated as missing; ``"0"`` passes."""
        data = validate_affordability_request(_with(valid_payload, securityDeposit="0"))
        assert data.security_deposit == 0.0

    def test_fractional_months_truncated(self, valid_payload):
        data = validate_affordability_request(_with(valid_payload, monthsToEvaluate=6.9))
        assert data.months_to_evaluate == 6

    def test_month_bounds_inclusive(self, valid_payload):
        assert validate_affordability_request(_with(valid_payload, monthsToEvaluate=1)).months_to_evaluate == 1
        assert validate_affordability_request(_with(valid_payload, monthsToEvaluate=60)).months_to_evaluate == 60

    def test_snake_case_names_accepted(self, valid_payload):
        req = AffordabilityRequest(
            moving_and_setup_cost=1000,
            monthly_living_cost=200,
            rent=1500,
            security_deposit=1500,
            total_monthly_income=4000,
            total_savings=5000,
            months_to_evaluate=6,
        )
        assert validate_affordability_request(req).rent == 1500.0


class TestZeroTreatedAsMissing:
    """Characterization: a numeric 0 is rejected as missing, even where 0 is in range."""

    @pytest.mark.parametrize(
        "field,message",
        [
            ("movingAndSetupCost", "Invalid moving and setup costs provided."),
            ("monthlyLivingCost", "Invalid monthly living costs provided."),
            ("rent", "Invalid rent provided."),
            ("monthsToEvaluate", "Months To Evaluate must be between 1 and 60."),
            ("securityDeposit", "Invalid security deposit provided."),
            ("totalMonthlyIncome", "Invalid total monthly income provided."),
            ("totalSavings", "Invalid total savings provided."),
        ],
    )
    def test_zero_rejected(self, valid_payload, field, message):
        with pytest.raises(MissingFieldError) as exc_info:
            validate_affordability_request(_with(valid_payload, **{field: 0}))
        assert str(exc_info.value) == message
        assert exc_info.value.field == field


class TestRanges:
    @pytest.mark.parametrize(
        "field,value",
        [
            ("movingAndSetupCost", -1),
            ("monthlyLivingCost", -0.01),
            ("rent", -1500),
            ("securityDeposit", "-5"),
            ("totalMonthlyIncome", -4000),
            ("totalSavings", -1),
        ],
    )
    def test_negative_rejected(self, valid_payload, field, value):
        with pytest.raises(OutOfRangeError):
            validate_affordability_request(_with(valid_payload, **{field: value}))

    def test_string_zero_rent_out_of_range(self, valid_payload):
        with pytest.raises(OutOfRangeError, match="Invalid rent provided."):
            validate_affordability_request(_with(valid_payload, rent="0"))

    @pytest.mark.parametrize("months", [0.5, 61, 60.5, -3, "100", 1000])
    def test_months_out_of_range(self, valid_payload, months):
        with pytest.raises(OutOfRangeError, match="Months To Evaluate must be between 1 and 60."):
            validate_affordability_request(_with(valid_payload, monthsToEvaluate=months))

    def test_months_message_wins_over_later_fields(self, valid_payload):
        """Months is checked before deposit, income and savings."""
        req = _with(valid_payload, monthsToEvaluate=99, securityDeposit=-1, totalMonthlyIncome=None)
        with pytest.raises(OutOfRangeError, match="Months To Evaluate"):
            validate_affordability_request(req)

    @pytest.mark.parametrize(
        "field,value,message",
        [
            ("rent", " ", "Invalid rent provided."),
            ("totalMonthlyIncome", "\t", "Invalid total monthly income provided."),
            ("monthlyLivingCost", "-Infinity", "Invalid monthly living costs provided."),
            ("monthsToEvaluate", "Infinity", "Months To Evaluate must be between 1 and 60."),
            ("monthsToEvaluate", "0xFF", "Months To Evaluate must be between 1 and 60."),
        ],
    )
    def test_lenient_strings_fail_range_check(self, valid_payload, field, value, message):
        """Blank, infinite and hex strings get a numeric reading for the range check."""
        with pytest.raises(OutOfRangeError) as exc_info:
            validate_affordability_request(_with(valid_payload, **{field: value}))
        assert str(exc_info.value) == message

    def test_blank_non_negative_field_reported_by_format_check(self, valid_payload):
        """A blank string reads as 0, which is in range for a cost, and is not a number."""
        with pytest.raises(NotANumberError, match="Monthly Living Costs must be a valid number."):
            validate_affordability_request(_with(valid_payload, monthlyLivingCost=" "))

    def test_in_range_hex_string_reported_by_format_check(self, valid_payload):
        with pytest.raises(NotANumberError, match="Months to Evaluate must be a valid number."):
            validate_affordability_request(_with(valid_payload, monthsToEvaluate="0x10"))


class TestNumberFormat:
    @pytest.mark.parametrize(
        "field,label",
        [
            ("movingAndSetupCost", "Moving & Setup Costs"),
            ("monthlyLivingCost", "Monthly Living Costs"),
            ("rent", "Monthly Rent"),
            ("securityDeposit", "Security Deposit"),
            ("totalMonthlyIncome", "Total Monthly Income"),
            ("totalSavings", "Total Savings"),
            ("monthsToEvaluate", "Months to Evaluate"),
        ],
    )
    def test_non_numeric_string_names_label(self, valid_payload, field, label):
        with pytest.raises(NotANumberError) as exc_info:
            validate_affordability_request(_with(valid_payload, **{field: "lots"}))
        assert str(exc_info.value) == f"{label} must be a valid number."

    def test_boolean_true_is_not_a_number(self, valid_payload):
        with pytest.raises(NotANumberError, match="Monthly Rent must be a valid number."):
            validate_affordability_request(_with(valid_payload, rent=True))

    def test_infinite_string_is_not_a_number(self, valid_payload):
        with pytest.raises(NotANumberError, match="Total Savings"):
            validate_affordability_request(_with(valid_payload, totalSavings="1e400"))

    def test_range_checks_run_before_format_checks(self, valid_payload):
        """A later range failure beats an earlier non-numeric field."""
        req = _with(valid_payload, movingAndSetupCost="abc", totalSavings=-1)
        with pytest.raises(OutOfRangeError, match="Invalid total savings provided."):
            validate_affordability_request(req)

    def test_format_checks_follow_field_order(self, valid_payload):
        req = _with(valid_payload, monthsToEvaluate="six", rent="a lot")
        with pytest.raises(NotANumberError, match="Monthly Rent"):
            validate_affordability_request(req)


class TestFirstFailureWins:
    def test_empty_body_reports_first_field(self):
        with pytest.raises(MissingFieldError, match="Invalid moving and setup costs provided."):
            validate_affordability_request(_request({}))

    def test_only_one_error_reported(self, valid_payload):
        req = _with(valid_payload, rent=-1, totalSavings=-1)
        with pytest.raises(AffordabilityValidationError) as exc_info:
            validate_affordability_request(req)
        assert exc_info.value.field == "rent"

    def test_errors_are_value_errors(self, valid_payload):
        with pytest.raises(ValueError):
            validate_affordability_request(_with(valid_payload, rent=None))
