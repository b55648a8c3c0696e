"""
Last-used parameter storage.

The calculation engine never reads or writes stored parameters; callers
obtain a ``ParameterStore`` and pass the loaded record to the engine.
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from roicalc.calculations.types import (
    FinancingTerms,
    Model1Parameters,
    Model2Parameters,
    Parameters,
    parameters_from_dict,
    parameters_to_dict,
)
from roicalc.db.database import get_db
from roicalc.db.models import ParameterSet

logger = logging.getLogger(__name__)


DEFAULT_PARAMETERS: Dict[int, Parameters] = {
    1: Model1Parameters(
        property_value=120000,
        renovation_cost=30000,
        timeframe=6,
        profit_margin=30,
        property_financing=FinancingTerms(down_payment=20, interest_rate=3, term=30),
        renovation_financing=FinancingTerms(down_payment=100, interest_rate=5, term=5),
    ),
    2: Model2Parameters(
        land_value=75000,
        construction_cost=75000,
        timeframe=24,
        profit_margin=60,
        financing=FinancingTerms(down_payment=100, interest_rate=3, term=30),
    ),
}


class ParameterStore(ABC):
    """Load/save interface for the last-used parameters of each model."""

    @abstractmethod
    def load(self, model_type: int) -> Parameters:
        """Return the last saved parameters, or the defaults for the model."""

    @abstractmethod
    def save(self, params: Parameters) -> None:
        """Remember ``params`` as the last-used parameters for its model."""


def default_parameters(model_type: int) -> Parameters:
    """Built-in defaults for a model type."""
    if model_type not in DEFAULT_PARAMETERS:
        raise ValueError(f"Unknown model type: {model_type}")
    return DEFAULT_PARAMETERS[model_type]


class InMemoryParameterStore(ParameterStore):
    """Parameter store kept in process memory."""

    def __init__(self, initial: Optional[Dict[int, Parameters]] = None):
        self._parameters: Dict[int, Parameters] = copy.copy(initial or {})

    def load(self, model_type: int) -> Parameters:
        if model_type in self._parameters:
            return self._parameters[model_type]
        return default_parameters(model_type)

    def save(self, params: Parameters) -> None:
        self._parameters[params.model_type] = params


class SqlParameterStore(ParameterStore):
    """Parameter store backed by the ``parameter_sets`` table."""

    def __init__(self, db: Session):
        self.db = db

    def _get_row(self, model_type: int) -> Optional[ParameterSet]:
        return (
            self.db.query(ParameterSet)
            .filter(
                ParameterSet.model_type == model_type,
                ParameterSet.is_deleted == False,
            )
            .first()
        )

    def load(self, model_type: int) -> Parameters:
        row = self._get_row(model_type)
        if row is None:
            return default_parameters(model_type)
        return parameters_from_dict(model_type, row.parameters)

    def save(self, params: Parameters) -> None:
        row = self._get_row(params.model_type)
        data = parameters_to_dict(params)

        if row is None:
            row = ParameterSet(model_type=params.model_type, parameters=data)
            self.db.add(row)
        else:
            row.parameters = data

        self.db.commit()
        logger.info(f"Saved last-used parameters for model {params.model_type}")


def get_parameter_store(db: Session = Depends(get_db)) -> ParameterStore:
    """Dependency for getting the parameter store."""
    return SqlParameterStore(db)
