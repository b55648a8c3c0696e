"""
Simulation Comparison

Projects saved simulations forward over a common horizon, assuming each
deal can be repeated back to back. The horizon is the longest timeframe
among the compared simulations, so every simulation completes at least
one transaction.
"""

import math
from typing import List
from dataclasses import dataclass, field

from roicalc.calculations.types import AnalysisResult


@dataclass
class YearlyROI:
    """Accumulated results for one simulation at the end of a year."""

    year: int
    transactions: int
    roi: float
    profit: float


@dataclass
class ROIProjection:
    """Repeated-transaction projection for one simulation."""

    id: str
    name: str
    timeframe: int
    transactions: int
    roi_per_transaction: float
    total_roi: float
    average_monthly_roi: float
    total_profit: float
    yearly: List[YearlyROI] = field(default_factory=list)


@dataclass
class Comparison:
    horizon_months: int
    projections: List[ROIProjection]


def project_simulation(result: AnalysisResult, horizon_months: int) -> ROIProjection:
    """
    Project one simulation over ``horizon_months``.

    Args:
        result: A saved analysis result
        horizon_months: Common horizon, at least the simulation's timeframe

    Returns:
        ROIProjection including the year-by-year progression
    """
    timeframe = result.parameters.timeframe
    transactions = horizon_months // timeframe
    total_roi = result.roi * transactions
    total_profit = result.net_profit * transactions

    yearly = []
    for year in range(1, math.ceil(horizon_months / 12) + 1):
        completed = (year * 12) // timeframe
        yearly.append(
            YearlyROI(
                year=year,
                transactions=completed,
                roi=result.roi * completed,
                profit=total_profit * (completed / transactions),
            )
        )

    return ROIProjection(
        id=result.id or "",
        name=result.name or "",
        timeframe=timeframe,
        transactions=transactions,
        roi_per_transaction=result.roi,
        total_roi=total_roi,
        average_monthly_roi=total_roi / horizon_months,
        total_profit=total_profit,
        yearly=yearly,
    )


def compare_simulations(results: List[AnalysisResult]) -> Comparison:
    """
    Compare saved simulations over the longest of their timeframes.

    Raises:
        ValueError: If fewer than two simulations are given
    """
    if len(results) < 2:
        raise ValueError("At least 2 simulations required for comparison")

    horizon = max(result.parameters.timeframe for result in results)

    return Comparison(
        horizon_months=horizon,
        projections=[project_simulation(result, horizon) for result in results],
    )
