"""
Database configuration and models.
"""

from roicalc.db.database import engine, SessionLocal, get_db, init_db
from roicalc.db.models import Base, Simulation, ParameterSet

__all__ = ["engine", "SessionLocal", "get_db", "init_db", "Base", "Simulation", "ParameterSet"]
