"""
Application services module.
"""

from roicalc.services.parameter_store import (
    ParameterStore,
    InMemoryParameterStore,
    SqlParameterStore,
    get_parameter_store,
)
from roicalc.services.simulation_store import SimulationStore, get_simulation_store

__all__ = [
    "ParameterStore",
    "InMemoryParameterStore",
    "SqlParameterStore",
    "get_parameter_store",
    "SimulationStore",
    "get_simulation_store",
]
