"""
Financial calculation API endpoints.

These endpoints accept inputs and return calculated results without
saving anything. Used for real-time updates while parameters are edited.
"""

from fastapi import APIRouter
from pydantic import BaseModel, field_validator
from typing import Optional

from roicalc.api.schemas import (
    AnalysisResponse,
    ParametersBody,
    MAX_TERM_YEARS,
    clamp_money,
    clamp_months,
    clamp_percent,
    result_to_response,
)
from roicalc.calculations import amortization, returns
from roicalc.calculations.analysis import analyze

router = APIRouter()


@router.post("/analysis", response_model=AnalysisResponse)
async def calculate_analysis(inputs: ParametersBody):
    """Run the full investment analysis for one parameter record."""
    result = analyze(inputs.to_parameters())
    return result_to_response(result)


class LoanInput(BaseModel):
    """Input for a single loan evaluated at a horizon."""

    principal: float
    annual_rate: float
    term_years: int
    months: int

    @field_validator("principal", mode="before")
    @classmethod
    def clamp_principal(cls, value):
        return clamp_money(value)

    @field_validator("annual_rate", mode="before")
    @classmethod
    def clamp_rate(cls, value):
        return clamp_percent(value)

    @field_validator("term_years", mode="before")
    @classmethod
    def clamp_term(cls, value):
        return clamp_months(value, MAX_TERM_YEARS)

    @field_validator("months", mode="before")
    @classmethod
    def clamp_horizon(cls, value):
        return clamp_months(value)


class LoanResponse(BaseModel):
    """Loan figures at the requested horizon."""

    monthly_payment: float
    payments_made: float
    interest_accrued: float
    remaining_balance: float


@router.post("/loan", response_model=LoanResponse)
async def calculate_loan(inputs: LoanInput):
    """Installment, interest accrued and balance owed after ``months``."""
    payment = amortization.installment_payment(
        inputs.principal, inputs.annual_rate, inputs.term_years
    )

    return LoanResponse(
        monthly_payment=payment,
        payments_made=payment * inputs.months,
        interest_accrued=amortization.interest_accrued(
            inputs.principal, payment, inputs.annual_rate, inputs.months
        ),
        remaining_balance=amortization.remaining_balance(
            inputs.principal, payment, inputs.annual_rate, inputs.months
        ),
    )


class PaybackInput(BaseModel):
    """Input for payback period calculation."""

    roi: float
    timeframe: int

    @field_validator("timeframe", mode="before")
    @classmethod
    def clamp_timeframe(cls, value):
        return clamp_months(value)


class PaybackResponse(BaseModel):
    """Payback period for an ROI over a timeframe."""

    monthly_roi: float
    payback_months: Optional[int] = None
    payback_period: str


@router.post("/payback", response_model=PaybackResponse)
async def calculate_payback(inputs: PaybackInput):
    """Calculate monthly ROI and payback period."""
    return PaybackResponse(
        monthly_roi=returns.monthly_roi(inputs.roi, inputs.timeframe),
        payback_months=returns.payback_months(inputs.roi, inputs.timeframe),
        payback_period=returns.payback_period(inputs.roi, inputs.timeframe),
    )
