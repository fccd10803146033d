# This project was developed with assistance from AI tools.
"""Affordability calculator schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from . import CamelModel


class AffordabilityRequest(CamelModel):
    """Raw ``POST /validate`` body.

    Fields are deliberately untyped: presence, range and number-format rules
    are applied in order by ``services.affordability_validation`` so the
    client gets one field-specific message instead of a pydantic error list.
    """

    model_config = ConfigDict(extra="ignore")

    moving_and_setup_cost: Any = None
    monthly_living_cost: Any = None
    rent: Any = None
    security_deposit: Any = None
    total_monthly_income: Any = None
    total_savings: Any = None
    months_to_evaluate: Any = None


class AffordabilityInput(BaseModel):
    """Validated calculator input."""

    model_config = ConfigDict(frozen=True)

    moving_and_setup_cost: float = Field(ge=0)
    monthly_living_cost: float = Field(ge=0)
    rent: float = Field(gt=0)
    security_deposit: float = Field(ge=0)
    total_monthly_income: float = Field(gt=0)
    total_savings: float = Field(ge=0)
    months_to_evaluate: int = Field(ge=1, le=60)


class AffordabilityResponse(CamelModel):
    """Affordability calculation results."""

    initial_costs: float
    total_monthly_cost: float
    total_cost_over_time: float
    affordability_duration: int | None = Field(
        description="Whole months the available funds cover; null when the figures overflow.",
    )
    can_afford: bool
    additional_monthly_income_needed: int | str = Field(
        description="0 when affordable, otherwise the monthly shortfall with two decimals.",
    )
