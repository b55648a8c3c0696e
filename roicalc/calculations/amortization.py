"""
Loan Amortization Calculations

Fixed-installment (annuity) loan math: the monthly payment for a loan,
and the interest accrued and balance still owed after a number of months.

Rates are annual percentages (3 for 3%), terms are in years and horizons
in months. A loan may be evaluated at a horizon shorter than its term, so
interest and balance are simulated month by month rather than derived
from a closed form.
"""

from typing import Tuple


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate to a monthly decimal rate."""
    return annual_rate_percent / 12 / 100


def installment_payment(
    principal: float, annual_rate_percent: float, term_years: int
) -> float:
    """
    Calculate the fixed monthly installment of an amortizing loan.

    Args:
        principal: Loan principal amount
        annual_rate_percent: Annual interest rate in percent (e.g., 3 for 3%)
        term_years: Loan term in years (must be at least 1)

    Returns:
        Monthly payment amount
    """
    rate = monthly_rate(annual_rate_percent)
    number_of_payments = term_years * 12

    if rate == 0:
        return principal / number_of_payments

    growth = (1 + rate) ** number_of_payments
    return principal * rate * growth / (growth - 1)


def simulate_loan(
    principal: float, monthly_payment: float, annual_rate_percent: float, months: int
) -> Tuple[float, float]:
    """
    Run the loan forward month by month.

    Each month interest is charged on the opening balance, then the
    installment is paid. The balance is not floored while iterating.

    Returns:
        Tuple of (total interest accrued, closing balance)
    """
    rate = monthly_rate(annual_rate_percent)
    balance = principal
    total_interest = 0.0

    for _ in range(months):
        total_interest += balance * rate
        balance = balance * (1 + rate) - monthly_payment

    return total_interest, balance


def interest_accrued(
    principal: float, monthly_payment: float, annual_rate_percent: float, months: int
) -> float:
    """Total interest charged over the first ``months`` payments."""
    if annual_rate_percent == 0:
        return 0.0

    total_interest, _ = simulate_loan(
        principal, monthly_payment, annual_rate_percent, months
    )
    return total_interest


def remaining_balance(
    principal: float, monthly_payment: float, annual_rate_percent: float, months: int
) -> float:
    """
    Balance still owed after ``months`` payments.

    Never negative: paying more than is owed is not tracked as a credit.
    """
    if annual_rate_percent == 0:
        return max(0.0, principal - monthly_payment * months)

    _, balance = simulate_loan(principal, monthly_payment, annual_rate_percent, months)
    return max(0.0, balance)
