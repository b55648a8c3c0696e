"""
Return Analysis

Sale price, ROI, monthly ROI and payback period derived from the
aggregated costs of an investment.
"""

import math
from typing import Optional

NOT_APPLICABLE = "not applicable"
MAX_PAYBACK_MONTHS = 600


def sale_price(total_costs: float, profit_margin: float) -> float:
    """Sale price that yields ``profit_margin`` percent over total costs."""
    return total_costs * (1 + profit_margin / 100)


def calculate_roi(
    sale_price: float, total_costs: float, initial_investment: float
) -> float:
    """
    Calculate ROI on the cash actually invested (down payments).

    Args:
        sale_price: Revenue from the sale
        total_costs: Total cost up to the date of sale
        initial_investment: Cash put in upfront

    Returns:
        ROI in percent, or 0 when nothing was invested upfront
    """
    if initial_investment == 0:
        return 0.0
    return ((sale_price - total_costs) / initial_investment) * 100


def monthly_roi(roi: float, months: int) -> float:
    """Average ROI per month over the holding period."""
    if months == 0:
        return 0.0
    return roi / months


def payback_months(roi: float, timeframe: int) -> Optional[int]:
    """
    Months until accumulated ROI reaches 100% (initial cash recovered).

    Returns:
        Whole months, or None when the investment does not pay back or the
        ROI is not a finite number
    """
    if not math.isfinite(roi) or roi <= 0:
        return None
    return math.ceil(100 / (roi / timeframe))


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def payback_period(roi: float, timeframe: int) -> str:
    """
    Human-readable payback period.

    Examples: "8 months", "1 year", "3 years and 4 months", "600+ months",
    "not applicable".
    """
    months = payback_months(roi, timeframe)
    if months is None or months < 0:
        return NOT_APPLICABLE
    if months > MAX_PAYBACK_MONTHS:
        return f"{MAX_PAYBACK_MONTHS}+ months"

    years, remaining_months = divmod(months, 12)

    if years == 0:
        return _plural(months, "month", "months")

    label = _plural(years, "year", "years")
    if remaining_months > 0:
        label += " and " + _plural(remaining_months, "month", "months")
    return label
