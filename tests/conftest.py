"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from roicalc.main import app
from roicalc.db.database import get_db
# Import all models to ensure all tables are created
from roicalc.db.models import Base, Simulation, ParameterSet
from roicalc.calculations.types import FinancingTerms, Model1Parameters, Model2Parameters


# Create a shared test database engine
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Override database dependency for testing."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


# Override the dependency globally for all tests
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and drop after."""
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def session_factory():
    """Session factory bound to the test database."""
    return TestingSessionLocal


@pytest.fixture
def db_session():
    """Create database session for test setup."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def model1_params():
    """Default buy-and-renovate parameters."""
    return Model1Parameters(
        property_value=120000,
        renovation_cost=30000,
        timeframe=6,
        profit_margin=30,
        property_financing=FinancingTerms(down_payment=20, interest_rate=3, term=30),
        renovation_financing=FinancingTerms(down_payment=100, interest_rate=5, term=5),
    )


@pytest.fixture
def model2_params():
    """Default land-and-build parameters."""
    return Model2Parameters(
        land_value=75000,
        construction_cost=75000,
        timeframe=24,
        profit_margin=60,
        financing=FinancingTerms(down_payment=100, interest_rate=3, term=30),
    )
