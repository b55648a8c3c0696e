"""
Saved simulation API endpoints.
"""

import logging
from dataclasses import asdict
from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel, Field
from typing import Optional, List

from roicalc.api.schemas import AnalysisResponse, ParametersInput, result_to_response
from roicalc.calculations.comparison import compare_simulations
from roicalc.config import Settings, get_settings
from roicalc.services.simulation_store import SimulationStore, get_simulation_store

logger = logging.getLogger(__name__)

router = APIRouter()


class SimulationCreate(BaseModel):
    """Schema for saving a simulation."""

    name: str = Field(min_length=1, max_length=255)
    parameters: ParametersInput


class SimulationListResponse(BaseModel):
    """Response for listing simulations."""

    simulations: List[AnalysisResponse]
    total: int


class CompareRequest(BaseModel):
    """Simulations to compare, by ID."""

    ids: List[str]


class YearlyROIResponse(BaseModel):
    year: int
    transactions: int
    roi: float
    profit: float


class ProjectionResponse(BaseModel):
    """Repeated-transaction projection for one simulation."""

    id: str
    name: str
    timeframe: int
    transactions: int
    roi_per_transaction: float
    total_roi: float
    average_monthly_roi: float
    total_profit: float
    yearly: List[YearlyROIResponse]


class CompareResponse(BaseModel):
    """Comparison of saved simulations over a common horizon."""

    horizon_months: int
    projections: List[ProjectionResponse]
    simulations: List[AnalysisResponse]


@router.get("/", response_model=SimulationListResponse)
async def list_simulations(
    model_type: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
    store: SimulationStore = Depends(get_simulation_store),
):
    """List saved simulations, optionally filtered by model type."""
    results, total = store.list(model_type=model_type, skip=skip, limit=limit)

    return SimulationListResponse(
        simulations=[result_to_response(r) for r in results],
        total=total,
    )


@router.post("/", response_model=AnalysisResponse, status_code=201)
async def create_simulation(
    simulation_data: SimulationCreate,
    store: SimulationStore = Depends(get_simulation_store),
):
    """Analyze the given parameters and save the result as a simulation."""
    result = store.save(
        simulation_data.name, simulation_data.parameters.to_parameters()
    )
    return result_to_response(result)


@router.post("/compare", response_model=CompareResponse)
async def compare(
    request: CompareRequest,
    store: SimulationStore = Depends(get_simulation_store),
    settings: Settings = Depends(get_settings),
):
    """Compare saved simulations as repeated transactions."""
    max_compared = settings.max_compared_simulations
    ids = list(dict.fromkeys(request.ids))

    if len(ids) > max_compared:
        raise HTTPException(
            status_code=400,
            detail=f"At most {max_compared} simulations can be compared",
        )

    results = []
    for simulation_id in ids:
        result = store.get(simulation_id)
        if result is None:
            raise HTTPException(status_code=404, detail="Simulation not found")
        results.append(result)

    try:
        comparison = compare_simulations(results)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        f"Compared {len(results)} simulations over {comparison.horizon_months} months"
    )

    return CompareResponse(
        horizon_months=comparison.horizon_months,
        projections=[
            ProjectionResponse(**asdict(p))
            for p in comparison.projections
        ],
        simulations=[result_to_response(r) for r in results],
    )


@router.get("/{simulation_id}", response_model=AnalysisResponse)
async def get_simulation(
    simulation_id: str,
    store: SimulationStore = Depends(get_simulation_store),
):
    """Get a saved simulation by ID."""
    result = store.get(simulation_id)

    if result is None:
        raise HTTPException(status_code=404, detail="Simulation not found")

    return result_to_response(result)


@router.delete("/{simulation_id}")
async def delete_simulation(
    simulation_id: str,
    store: SimulationStore = Depends(get_simulation_store),
):
    """Soft delete a saved simulation."""
    if not store.delete(simulation_id):
        raise HTTPException(status_code=404, detail="Simulation not found")

    return {"deleted": True, "id": simulation_id}
