"""
Parameter and result records for the calculation engine.

Parameters are a tagged union: ``Model1Parameters`` (buy and renovate, two
financing legs) or ``Model2Parameters`` (land and build, one financing leg).
Each variant carries a constant ``model_type`` used for explicit dispatch.
"""

from typing import List, Dict, Optional, Union, Any
from dataclasses import dataclass, field, asdict


@dataclass(frozen=True)
class FinancingTerms:
    """Financing terms for one loan leg."""

    down_payment: float  # Percent of the leg value paid upfront (0-100)
    interest_rate: float  # Annual interest rate in percent (e.g., 3 for 3%)
    term: int  # Loan term in years


@dataclass(frozen=True)
class Model1Parameters:
    """Buy-and-renovate investment: property leg plus renovation leg."""

    property_value: float
    renovation_cost: float
    timeframe: int  # Months until sale
    profit_margin: float  # Percent over total costs
    property_financing: FinancingTerms
    renovation_financing: FinancingTerms

    model_type = 1


@dataclass(frozen=True)
class Model2Parameters:
    """Land-and-build investment: one leg covering land and construction."""

    land_value: float
    construction_cost: float
    timeframe: int
    profit_margin: float
    financing: FinancingTerms

    model_type = 2


Parameters = Union[Model1Parameters, Model2Parameters]


@dataclass
class LegSummary:
    """Aggregate figures for a single financing leg at the sale horizon."""

    name: str
    value: float
    down_payment: float
    financed: float
    monthly_payment: float
    payments_made: float
    interest: float
    remaining_balance: float

    @property
    def cost(self) -> float:
        # Remaining debt is counted as capital tied up in the deal
        return (
            self.down_payment
            + self.payments_made
            + self.interest
            + self.remaining_balance
        )


@dataclass
class AnalysisResult:
    """Computed analysis for one parameter record.

    Identity fields (id, name, created_at) are filled in by the simulation
    store when a result is saved; the calculation engine leaves them empty.
    """

    model_type: int
    parameters: Parameters
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
    payback_months: Optional[int]
    legs: List[LegSummary] = field(default_factory=list)

    id: Optional[str] = None
    name: Optional[str] = None
    created_at: Optional[str] = None

    def computed_fields(self) -> Dict[str, Any]:
        """Return the derived figures only (no identity, no parameters)."""
        data = asdict(self)
        for key in ("id", "name", "created_at", "parameters", "model_type"):
            data.pop(key)
        for leg, summary in zip(data["legs"], self.legs):
            leg["cost"] = summary.cost
        return data


def parameters_to_dict(params: Parameters) -> Dict[str, Any]:
    """Serialize a parameter record to plain JSON-compatible data."""
    return asdict(params)


def parameters_from_dict(model_type: int, data: Dict[str, Any]) -> Parameters:
    """Rebuild a parameter record from ``parameters_to_dict`` output."""
    if model_type == 1:
        return Model1Parameters(
            property_value=data["property_value"],
            renovation_cost=data["renovation_cost"],
            timeframe=data["timeframe"],
            profit_margin=data["profit_margin"],
            property_financing=FinancingTerms(**data["property_financing"]),
            renovation_financing=FinancingTerms(**data["renovation_financing"]),
        )
    if model_type == 2:
        return Model2Parameters(
            land_value=data["land_value"],
            construction_cost=data["construction_cost"],
            timeframe=data["timeframe"],
            profit_margin=data["profit_margin"],
            financing=FinancingTerms(**data["financing"]),
        )
    raise ValueError(f"Unknown model type: {model_type}")
