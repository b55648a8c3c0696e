"""
Saved simulation storage.

Assigns identity (id, name, date) to analysis results and persists them.
Saved simulations are never modified; they can only be deleted.
"""

import logging
from typing import List, Optional, Tuple

from fastapi import Depends
from sqlalchemy.orm import Session

from roicalc.calculations.analysis import analyze
from roicalc.calculations.types import (
    AnalysisResult,
    LegSummary,
    Parameters,
    parameters_from_dict,
    parameters_to_dict,
)
from roicalc.db.database import get_db
from roicalc.db.models import Simulation

logger = logging.getLogger(__name__)


def simulation_to_result(simulation: Simulation) -> AnalysisResult:
    """Rebuild an AnalysisResult from a stored simulation row."""
    results = dict(simulation.results)
    legs = [
        LegSummary(**{k: v for k, v in leg.items() if k != "cost"})
        for leg in results.pop("legs", [])
    ]

    return AnalysisResult(
        model_type=simulation.model_type,
        parameters=parameters_from_dict(simulation.model_type, simulation.parameters),
        legs=legs,
        id=simulation.id,
        name=simulation.name,
        created_at=simulation.created_at.isoformat() if simulation.created_at else None,
        **results,
    )


class SimulationStore:
    """Persists analysis results as named simulations."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return self.db.query(Simulation).filter(Simulation.is_deleted == False)

    def save(self, name: str, params: Parameters) -> AnalysisResult:
        """
        Analyze ``params`` and save the result under ``name``.

        Args:
            name: Display name chosen by the user
            params: Sanitized parameter record

        Returns:
            The saved result with identity fields populated
        """
        result = analyze(params)

        simulation = Simulation(
            name=name,
            model_type=result.model_type,
            parameters=parameters_to_dict(params),
            results=result.computed_fields(),
        )
        self.db.add(simulation)
        self.db.commit()
        self.db.refresh(simulation)

        logger.info(
            f"Saved simulation '{simulation.name}' ({simulation.id}) "
            f"for model {simulation.model_type}"
        )
        return simulation_to_result(simulation)

    def list(
        self, model_type: Optional[int] = None, skip: int = 0, limit: int = 100
    ) -> Tuple[List[AnalysisResult], int]:
        """List saved simulations, oldest first, with the total count."""
        query = self._query()

        if model_type is not None:
            query = query.filter(Simulation.model_type == model_type)

        total = query.count()
        simulations = (
            query.order_by(Simulation.created_at).offset(skip).limit(limit).all()
        )

        return [simulation_to_result(s) for s in simulations], total

    def get(self, simulation_id: str) -> Optional[AnalysisResult]:
        """Get a saved simulation by ID, or None if missing or deleted."""
        simulation = self._query().filter(Simulation.id == simulation_id).first()
        if simulation is None:
            return None
        return simulation_to_result(simulation)

    def delete(self, simulation_id: str) -> bool:
        """Soft delete a simulation. Returns False if it does not exist."""
        simulation = self._query().filter(Simulation.id == simulation_id).first()
        if simulation is None:
            logger.warning(f"Simulation {simulation_id} not found for deletion")
            return False

        simulation.is_deleted = True
        self.db.commit()

        logger.info(f"Deleted simulation '{simulation.name}' ({simulation_id})")
        return True


def get_simulation_store(db: Session = Depends(get_db)) -> SimulationStore:
    """Dependency for getting the simulation store."""
    return SimulationStore(db)
