"""
Tests for calculations, simulations and parameters API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from roicalc.main import app
from roicalc.config import Settings, get_settings
from roicalc.calculations.analysis import analyze
from roicalc.services.simulation_store import SimulationStore

# Database setup is handled by conftest.py


MODEL1_PAYLOAD = {
    "model_type": 1,
    "property_value": 120000,
    "renovation_cost": 30000,
    "timeframe": 6,
    "profit_margin": 30,
    "property_financing": {"down_payment": 20, "interest_rate": 3, "term": 30},
    "renovation_financing": {"down_payment": 100, "interest_rate": 5, "term": 5},
}

MODEL2_PAYLOAD = {
    "model_type": 2,
    "land_value": 75000,
    "construction_cost": 75000,
    "timeframe": 24,
    "profit_margin": 60,
    "financing": {"down_payment": 100, "interest_rate": 3, "term": 30},
}


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def saved_simulations(db_session, model1_params, model2_params):
    """Two saved simulations, one per model."""
    store = SimulationStore(db_session)
    flip = store.save("Flip", model1_params)
    build = store.save("Build", model2_params)
    return flip, build


# ============================================================================
# CALCULATIONS API TESTS
# ============================================================================

class TestCalculationsAPI:
    """Test calculation endpoints."""

    def test_analysis_model1(self, client, model1_params):
        """Test analysis endpoint for buy and renovate."""
        response = client.post("/api/calculate/analysis", json=MODEL1_PAYLOAD)
        assert response.status_code == 200
        data = response.json()

        expected = analyze(model1_params)
        assert data["model_type"] == 1
        assert data["id"] is None
        assert data["roi"] == pytest.approx(expected.roi)
        assert data["total_investment"] == pytest.approx(expected.total_investment)
        assert data["payback_period"] == expected.payback_period
        assert len(data["legs"]) == 2
        assert data["parameters"]["property_financing"]["term"] == 30

    def test_analysis_model2(self, client):
        """Test analysis endpoint for land and build."""
        response = client.post("/api/calculate/analysis", json=MODEL2_PAYLOAD)
        assert response.status_code == 200
        data = response.json()

        assert data["model_type"] == 2
        assert data["total_investment"] == pytest.approx(150000)
        assert data["roi"] == pytest.approx(60)
        assert data["monthly_payment"] == 0
        assert len(data["legs"]) == 1

    def test_analysis_clamps_inputs(self, client):
        """Out-of-range inputs are clamped instead of rejected."""
        payload = {
            **MODEL2_PAYLOAD,
            "land_value": "75.000,00 €",
            "timeframe": 0,
            "profit_margin": -10,
            "financing": {"down_payment": 150, "interest_rate": -2, "term": 0},
        }
        response = client.post("/api/calculate/analysis", json=payload)
        assert response.status_code == 200
        data = response.json()

        params = data["parameters"]
        assert params["land_value"] == 75000
        assert params["timeframe"] == 1
        assert params["profit_margin"] == 0
        assert params["financing"] == {"down_payment": 100, "interest_rate": 0, "term": 1}

    def test_analysis_unknown_model(self, client):
        """Unknown model type is a validation error."""
        response = client.post(
            "/api/calculate/analysis", json={**MODEL2_PAYLOAD, "model_type": 3}
        )
        assert response.status_code == 422

    def test_analysis_huge_amounts(self, client):
        """Amounts beyond float range are capped and still analyzed."""
        payload = {
            **MODEL2_PAYLOAD,
            "land_value": 1e308,
            "construction_cost": 1e308,
            "financing": {"down_payment": 50, "interest_rate": 3, "term": 30},
        }
        response = client.post("/api/calculate/analysis", json=payload)
        assert response.status_code == 200
        data = response.json()

        assert data["parameters"]["land_value"] == 1e12
        assert data["parameters"]["construction_cost"] == 1e12
        assert data["roi"] > 0
        assert data["payback_months"] > 0

    def test_calculate_loan_huge_inputs(self, client):
        response = client.post(
            "/api/calculate/loan",
            json={"principal": 1e308, "annual_rate": 1e6, "term_years": 1e9, "months": 1e9},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["monthly_payment"] > 0
        assert data["remaining_balance"] >= 0

    def test_calculate_loan(self, client):
        """Test loan endpoint at a horizon shorter than the term."""
        response = client.post(
            "/api/calculate/loan",
            json={"principal": 100000, "annual_rate": 3, "term_years": 30, "months": 12},
        )
        assert response.status_code == 200
        data = response.json()

        assert data["monthly_payment"] == pytest.approx(421.60, abs=0.01)
        assert data["payments_made"] == pytest.approx(data["monthly_payment"] * 12)
        assert 0 < data["interest_accrued"] < 3000
        assert 97000 < data["remaining_balance"] < 100000

    def test_calculate_loan_zero_rate(self, client):
        response = client.post(
            "/api/calculate/loan",
            json={"principal": 12000, "annual_rate": 0, "term_years": 1, "months": 12},
        )
        data = response.json()
        assert data["monthly_payment"] == pytest.approx(1000)
        assert data["interest_accrued"] == 0
        assert data["remaining_balance"] == 0

    def test_calculate_payback(self, client):
        response = client.post(
            "/api/calculate/payback", json={"roi": 20, "timeframe": 24}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["payback_months"] == 120
        assert data["payback_period"] == "10 years"

    def test_calculate_payback_negative_roi(self, client):
        response = client.post(
            "/api/calculate/payback", json={"roi": -5, "timeframe": 12}
        )
        data = response.json()
        assert data["payback_months"] is None
        assert data["payback_period"] == "not applicable"


# ============================================================================
# SIMULATION API TESTS
# ============================================================================

class TestSimulationAPI:
    """Test saved simulation endpoints."""

    def test_create_simulation(self, client):
        """Test saving a simulation."""
        response = client.post(
            "/api/simulations/",
            json={"name": "Flip on Main St", "parameters": MODEL1_PAYLOAD},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Flip on Main St"
        assert data["id"]
        assert data["created_at"]
        assert data["model_type"] == 1

    def test_create_simulation_requires_name(self, client):
        response = client.post(
            "/api/simulations/", json={"name": "", "parameters": MODEL1_PAYLOAD}
        )
        assert response.status_code == 422

    def test_list_simulations(self, client, saved_simulations):
        response = client.get("/api/simulations/")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [s["name"] for s in data["simulations"]] == ["Flip", "Build"]

    def test_list_simulations_by_model(self, client, saved_simulations):
        response = client.get("/api/simulations/?model_type=1")
        data = response.json()
        assert data["total"] == 1
        assert data["simulations"][0]["name"] == "Flip"

    def test_get_simulation(self, client, saved_simulations):
        flip, _ = saved_simulations
        response = client.get(f"/api/simulations/{flip.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Flip"
        assert data["roi"] == pytest.approx(flip.roi)

    def test_get_nonexistent_simulation(self, client):
        response = client.get("/api/simulations/nonexistent-id")
        assert response.status_code == 404

    def test_delete_simulation(self, client, saved_simulations):
        flip, _ = saved_simulations
        response = client.delete(f"/api/simulations/{flip.id}")
        assert response.status_code == 200
        assert response.json() == {"deleted": True, "id": flip.id}

        # Verify it's gone (soft delete)
        response = client.get(f"/api/simulations/{flip.id}")
        assert response.status_code == 404

        response = client.delete(f"/api/simulations/{flip.id}")
        assert response.status_code == 404

    def test_compare_simulations(self, client, saved_simulations):
        flip, build = saved_simulations
        response = client.post(
            "/api/simulations/compare", json={"ids": [flip.id, build.id]}
        )
        assert response.status_code == 200
        data = response.json()

        assert data["horizon_months"] == 24
        flip_proj, build_proj = data["projections"]
        assert flip_proj["transactions"] == 4
        assert flip_proj["total_roi"] == pytest.approx(flip.roi * 4)
        assert build_proj["transactions"] == 1
        assert len(flip_proj["yearly"]) == 2
        assert [s["name"] for s in data["simulations"]] == ["Flip", "Build"]

    def test_compare_requires_two(self, client, saved_simulations):
        flip, _ = saved_simulations
        response = client.post("/api/simulations/compare", json={"ids": [flip.id]})
        assert response.status_code == 400

        # Duplicates count once
        response = client.post(
            "/api/simulations/compare", json={"ids": [flip.id, flip.id]}
        )
        assert response.status_code == 400

    def test_compare_too_many(self, client, saved_simulations, db_session, model2_params):
        extra = SimulationStore(db_session).save("Another", model2_params)
        ids = [s.id for s in saved_simulations] + [extra.id]

        response = client.post("/api/simulations/compare", json={"ids": ids})
        assert response.status_code == 400

    def test_compare_limit_from_settings(self, client, saved_simulations, db_session, model2_params):
        extra = SimulationStore(db_session).save("Another", model2_params)
        ids = [s.id for s in saved_simulations] + [extra.id]

        app.dependency_overrides[get_settings] = lambda: Settings(max_compared_simulations=3)
        try:
            response = client.post("/api/simulations/compare", json={"ids": ids})
        finally:
            app.dependency_overrides.pop(get_settings)

        assert response.status_code == 200
        assert len(response.json()["projections"]) == 3

    def test_compare_missing_simulation(self, client, saved_simulations):
        flip, _ = saved_simulations
        response = client.post(
            "/api/simulations/compare", json={"ids": [flip.id, "nonexistent-id"]}
        )
        assert response.status_code == 404


# ============================================================================
# PARAMETERS API TESTS
# ============================================================================

class TestParametersAPI:
    """Test last-used parameter endpoints."""

    def test_get_default_parameters(self, client):
        response = client.get("/api/parameters/1")
        assert response.status_code == 200
        data = response.json()
        assert data["model_type"] == 1
        assert data["property_value"] == 120000
        assert data["renovation_financing"]["down_payment"] == 100

    def test_save_parameters(self, client):
        payload = {**MODEL2_PAYLOAD, "land_value": 90000, "timeframe": 18}
        response = client.put("/api/parameters/2", json=payload)
        assert response.status_code == 200

        response = client.get("/api/parameters/2")
        data = response.json()
        assert data["land_value"] == 90000
        assert data["timeframe"] == 18

        # Other model keeps its defaults
        response = client.get("/api/parameters/1")
        assert response.json()["timeframe"] == 6

    def test_save_parameters_mismatch(self, client):
        response = client.put("/api/parameters/1", json=MODEL2_PAYLOAD)
        assert response.status_code == 400

    def test_unknown_model_parameters(self, client):
        response = client.get("/api/parameters/3")
        assert response.status_code == 404


# ============================================================================
# PAGE ROUTE TESTS
# ============================================================================

class TestPageRoutes:
    """Test HTML page and health routes."""

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    def test_home_page(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Real Estate ROI Calculator" in response.text
        assert "No saved simulations yet." in response.text

    def test_home_page_lists_simulations(self, client, saved_simulations):
        response = client.get("/")
        assert response.status_code == 200
        assert "Flip" in response.text
        assert "Land and Build" in response.text
        assert "150 000,00 €" in response.text
