"""
Investment Analysis

Composes leg aggregation and return analysis into a full result record.
"""

from roicalc.calculations.aggregation import financing_legs
from roicalc.calculations.returns import (
    sale_price,
    calculate_roi,
    monthly_roi,
    payback_months,
    payback_period,
)
from roicalc.calculations.types import AnalysisResult, Parameters


def analyze(params: Parameters) -> AnalysisResult:
    """
    Run the full analysis for one parameter record.

    Recomputed from scratch on every call; identity fields are left empty
    for the simulation store to fill in.
    """
    legs = financing_legs(params)

    total_costs = sum(leg.cost for leg in legs)
    initial_investment = sum(leg.down_payment for leg in legs)
    revenue = sale_price(total_costs, params.profit_margin)
    roi = calculate_roi(revenue, total_costs, initial_investment)

    return AnalysisResult(
        model_type=params.model_type,
        parameters=params,
        total_investment=total_costs,
        total_revenue=revenue,
        net_profit=revenue - total_costs,
        roi=roi,
        monthly_payment=sum(leg.monthly_payment for leg in legs),
        remaining_debt=sum(leg.remaining_balance for leg in legs),
        initial_investment=initial_investment,
        financed_amount=sum(leg.financed for leg in legs),
        total_interest=sum(leg.interest for leg in legs),
        monthly_roi=monthly_roi(roi, params.timeframe),
        payback_period=payback_period(roi, params.timeframe),
        payback_months=payback_months(roi, params.timeframe),
        legs=legs,
    )
