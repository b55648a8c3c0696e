"""
SQLAlchemy ORM models for saved simulations and last-used parameters.
"""

from datetime import datetime
from sqlalchemy import (
    Column,
    String,
    Integer,
    Boolean,
    DateTime,
    JSON,
)
from sqlalchemy.orm import declarative_base
import uuid

Base = declarative_base()


def generate_uuid():
    return str(uuid.uuid4())


class AuditMixin:
    """Mixin for audit fields on all models."""

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )
    is_deleted = Column(Boolean, default=False, nullable=False)


class Simulation(AuditMixin, Base):
    """A saved analysis result. Immutable once saved, except for deletion."""

    __tablename__ = "simulations"

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    model_type = Column(Integer, nullable=False, index=True)

    # Parameter record as entered (stored as JSON)
    parameters = Column(JSON, nullable=False)

    # Computed fields at save time (stored as JSON)
    results = Column(JSON, nullable=False)


class ParameterSet(AuditMixin, Base):
    """Last-used parameters for one investment model."""

    __tablename__ = "parameter_sets"

    id = Column(String, primary_key=True, default=generate_uuid)
    model_type = Column(Integer, unique=True, nullable=False)
    parameters = Column(JSON, nullable=False)
