"""
Investment Model Aggregation

Applies the loan math to each financing leg of an investment model and
sums the legs into cash invested, cash financed and total cost to the
date of sale.

Model 1 (buy and renovate) has a property leg and a renovation leg, each
with its own financing terms. Model 2 (land and build) finances land plus
construction as a single leg.
"""

from typing import List

from roicalc.calculations.amortization import (
    installment_payment,
    interest_accrued,
    remaining_balance,
)
from roicalc.calculations.types import (
    FinancingTerms,
    LegSummary,
    Model1Parameters,
    Model2Parameters,
    Parameters,
)


def summarize_leg(
    name: str, value: float, terms: FinancingTerms, timeframe: int
) -> LegSummary:
    """
    Evaluate one financing leg at the sale horizon.

    Args:
        name: Leg label ("property", "renovation", "land_and_construction")
        value: Total value of the asset financed by this leg
        terms: Down payment, rate and term for this leg
        timeframe: Months until sale

    Returns:
        LegSummary with payments, interest and remaining balance
    """
    down_payment = value * (terms.down_payment / 100)
    financed = value * (1 - terms.down_payment / 100)
    payment = installment_payment(financed, terms.interest_rate, terms.term)

    interest = interest_accrued(financed, payment, terms.interest_rate, timeframe)
    balance = remaining_balance(financed, payment, terms.interest_rate, timeframe)

    return LegSummary(
        name=name,
        value=value,
        down_payment=down_payment,
        financed=financed,
        monthly_payment=payment,
        payments_made=payment * timeframe,
        interest=interest,
        remaining_balance=balance,
    )


def financing_legs(params: Parameters) -> List[LegSummary]:
    """Break an investment down into its financing legs."""
    if isinstance(params, Model1Parameters):
        return [
            summarize_leg(
                "property",
                params.property_value,
                params.property_financing,
                params.timeframe,
            ),
            summarize_leg(
                "renovation",
                params.renovation_cost,
                params.renovation_financing,
                params.timeframe,
            ),
        ]
    if isinstance(params, Model2Parameters):
        return [
            summarize_leg(
                "land_and_construction",
                params.land_value + params.construction_cost,
                params.financing,
                params.timeframe,
            ),
        ]
    raise TypeError(f"Unsupported parameters: {type(params).__name__}")


def initial_investment(params: Parameters) -> float:
    """Cash the investor puts in upfront (down payments only)."""
    if isinstance(params, Model1Parameters):
        property_down = params.property_value * (
            params.property_financing.down_payment / 100
        )
        renovation_down = params.renovation_cost * (
            params.renovation_financing.down_payment / 100
        )
        return property_down + renovation_down
    if isinstance(params, Model2Parameters):
        total_value = params.land_value + params.construction_cost
        return total_value * (params.financing.down_payment / 100)
    raise TypeError(f"Unsupported parameters: {type(params).__name__}")


def financed_amount(params: Parameters) -> float:
    """Total amount borrowed across all legs."""
    if isinstance(params, Model1Parameters):
        financed_property = params.property_value * (
            1 - params.property_financing.down_payment / 100
        )
        financed_renovation = params.renovation_cost * (
            1 - params.renovation_financing.down_payment / 100
        )
        return financed_property + financed_renovation
    if isinstance(params, Model2Parameters):
        total_value = params.land_value + params.construction_cost
        return total_value * (1 - params.financing.down_payment / 100)
    raise TypeError(f"Unsupported parameters: {type(params).__name__}")


def total_costs(params: Parameters) -> float:
    """
    Total cost of the investment up to the date of sale.

    Per leg: down payment + installments paid + interest accrued + balance
    still owed at the sale date. Debt outstanding at the sale date is
    counted on top of the installments already paid.
    """
    return sum(leg.cost for leg in financing_legs(params))
