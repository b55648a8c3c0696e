"""
Request and response schemas shared by the API routers.

Input schemas clamp out-of-range values instead of rejecting them, so the
calculation engine always receives sanitized parameters.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from fastapi import Body
from pydantic import BaseModel, ConfigDict, Field, field_validator

from roicalc.calculations.types import (
    AnalysisResult,
    FinancingTerms,
    Model1Parameters,
    Model2Parameters,
    Parameters,
    parameters_to_dict,
)
from roicalc.formatting import parse_currency


def _to_float(value: Any) -> float:
    if isinstance(value, str):
        value = value.replace(",", ".")
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _to_int(value: Any) -> int:
    try:
        return int(_to_float(value))
    except (ValueError, OverflowError):
        return 1


# Upper bounds keep every figure a finite float
MAX_AMOUNT = 1e12
MAX_TERM_YEARS = 100
MAX_TIMEFRAME_MONTHS = 1200


def clamp_percent(value: Any) -> float:
    """Clamp a percentage into [0, 100]."""
    return min(100.0, max(0.0, _to_float(value)))


def clamp_non_negative(value: Any) -> float:
    return max(0.0, _to_float(value))


def clamp_money(value: Any) -> float:
    """Parse a money amount (number or display string) into [0, MAX_AMOUNT]."""
    if isinstance(value, str):
        value = parse_currency(value)
    return min(MAX_AMOUNT, clamp_non_negative(value))


def clamp_months(value: Any, upper: int = MAX_TIMEFRAME_MONTHS) -> int:
    """Whole number in [1, upper] (timeframes and loan terms)."""
    return min(upper, max(1, _to_int(value)))


class FinancingTermsInput(BaseModel):
    """Financing terms for one loan leg."""

    down_payment: float = 20.0
    interest_rate: float = 3.0
    term: int = 30

    @field_validator("down_payment", mode="before")
    @classmethod
    def clamp_down_payment(cls, value):
        return clamp_percent(value)

    @field_validator("interest_rate", mode="before")
    @classmethod
    def clamp_interest_rate(cls, value):
        return clamp_percent(value)

    @field_validator("term", mode="before")
    @classmethod
    def clamp_term(cls, value):
        return clamp_months(value, MAX_TERM_YEARS)

    def to_terms(self) -> FinancingTerms:
        return FinancingTerms(
            down_payment=self.down_payment,
            interest_rate=self.interest_rate,
            term=self.term,
        )


class Model1Input(BaseModel):
    """Buy-and-renovate parameters."""

    model_config = ConfigDict(protected_namespaces=())

    model_type: Literal[1] = 1
    property_value: float
    renovation_cost: float = 0.0
    timeframe: int = 6
    profit_margin: float = 30.0
    property_financing: FinancingTermsInput = FinancingTermsInput()
    renovation_financing: FinancingTermsInput = FinancingTermsInput(
        down_payment=100, interest_rate=5, term=5
    )

    @field_validator("property_value", "renovation_cost", mode="before")
    @classmethod
    def clamp_amounts(cls, value):
        return clamp_money(value)

    @field_validator("timeframe", mode="before")
    @classmethod
    def clamp_timeframe(cls, value):
        return clamp_months(value)

    @field_validator("profit_margin", mode="before")
    @classmethod
    def clamp_profit_margin(cls, value):
        return min(MAX_AMOUNT, clamp_non_negative(value))

    def to_parameters(self) -> Model1Parameters:
        return Model1Parameters(
            property_value=self.property_value,
            renovation_cost=self.renovation_cost,
            timeframe=self.timeframe,
            profit_margin=self.profit_margin,
            property_financing=self.property_financing.to_terms(),
            renovation_financing=self.renovation_financing.to_terms(),
        )


class Model2Input(BaseModel):
    """Land-and-build parameters."""

    model_config = ConfigDict(protected_namespaces=())

    model_type: Literal[2] = 2
    land_value: float
    construction_cost: float = 0.0
    timeframe: int = 24
    profit_margin: float = 60.0
    financing: FinancingTermsInput = FinancingTermsInput(down_payment=100)

    @field_validator("land_value", "construction_cost", mode="before")
    @classmethod
    def clamp_amounts(cls, value):
        return clamp_money(value)

    @field_validator("timeframe", mode="before")
    @classmethod
    def clamp_timeframe(cls, value):
        return clamp_months(value)

    @field_validator("profit_margin", mode="before")
    @classmethod
    def clamp_profit_margin(cls, value):
        return min(MAX_AMOUNT, clamp_non_negative(value))

    def to_parameters(self) -> Model2Parameters:
        return Model2Parameters(
            land_value=self.land_value,
            construction_cost=self.construction_cost,
            timeframe=self.timeframe,
            profit_margin=self.profit_margin,
            financing=self.financing.to_terms(),
        )


ParametersInput = Annotated[
    Union[Model1Input, Model2Input], Field(discriminator="model_type")
]

# Same union for use directly as a request body
ParametersBody = Annotated[
    Union[Model1Input, Model2Input], Body(discriminator="model_type")
]


def parameters_to_response(params: Parameters) -> Dict[str, Any]:
    """Serialize core parameters with their model type tag."""
    return {"model_type": params.model_type, **parameters_to_dict(params)}


class LegResponse(BaseModel):
    """Per-leg financing figures at the sale horizon."""

    name: str
    value: float
    down_payment: float
    financed: float
    monthly_payment: float
    payments_made: float
    interest: float
    remaining_balance: float
    cost: float


class AnalysisResponse(BaseModel):
    """Computed analysis, with identity fields when saved."""

    model_config = ConfigDict(protected_namespaces=())

    id: Optional[str] = None
    name: Optional[str] = None
    created_at: Optional[str] = None
    model_type: int
    parameters: Dict[str, Any]

    total_investment: float
    total_revenue: float
    net_profit: float
    roi: float
    monthly_payment: float
    remaining_debt: float
    initial_investment: float
    financed_amount: float
    total_interest: float
    monthly_roi: float
    payback_period: str
    payback_months: Optional[int] = None
    legs: List[LegResponse] = []


def result_to_response(result: AnalysisResult) -> AnalysisResponse:
    """Convert an AnalysisResult to its response schema."""
    return AnalysisResponse(
        id=result.id,
        name=result.name,
        created_at=result.created_at,
        model_type=result.model_type,
        parameters=parameters_to_response(result.parameters),
        **result.computed_fields(),
    )
