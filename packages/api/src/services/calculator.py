# This project was developed with assistance from AI tools.
"""Affordability calculation logic.

Pure math, no I/O. Input must already be validated.
"""

import math

from ..schemas.calculator import AffordabilityInput, AffordabilityResponse
from .errors import CalculationError


def format_two_decimals(value: float) -> str:
    """Render a float with exactly two decimal digits (``783.3333`` -> ``"783.33"``).

    Non-finite values render as ``"Infinity"``, ``"-Infinity"`` or ``"NaN"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.2f}"


def calculate_affordability(data: AffordabilityInput) -> AffordabilityResponse:
    """Project costs and funds over ``months_to_evaluate`` months.

    Raises:
        CalculationError: total monthly cost is zero, so no duration exists.
    """
    months = data.months_to_evaluate

    initial_costs = data.moving_and_setup_cost + data.security_deposit
    total_monthly_cost = data.monthly_living_cost + data.rent
    total_cost_over_time = initial_costs + total_monthly_cost * months
    total_funds_available = data.total_savings + data.total_monthly_income * months

    if total_monthly_cost == 0:
        raise CalculationError("Total monthly cost is zero; affordability duration is undefined")

    can_afford = total_funds_available >= total_cost_over_time
    # Overflowing inputs leave no whole number of months
    covered_months = total_funds_available / total_monthly_cost
    affordability_duration = math.floor(covered_months) if math.isfinite(covered_months) else None

    additional_monthly_income_needed: int | str = 0
    if not can_afford:
        shortfall = (total_cost_over_time - data.total_savings) / months - data.total_monthly_income
        additional_monthly_income_needed = format_two_decimals(shortfall)

    return AffordabilityResponse(
        initial_costs=initial_costs,
        total_monthly_cost=total_monthly_cost,
        total_cost_over_time=total_cost_over_time,
        affordability_duration=affordability_duration,
        can_afford=can_afford,
        additional_monthly_income_needed=additional_monthly_income_needed,
    )
