"""
Seed the database with one demo simulation per investment model,
using the built-in default parameters.
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from roicalc.db.database import get_db_context, init_db
from roicalc.db.models import Simulation
from roicalc.services.parameter_store import default_parameters
from roicalc.services.simulation_store import SimulationStore

DEMO_SIMULATIONS = {
    1: "Demo - Buy and Renovate",
    2: "Demo - Land and Build",
}


def main():
    init_db()

    with get_db_context() as db:
        store = SimulationStore(db)

        for model_type, name in DEMO_SIMULATIONS.items():
            existing = db.query(Simulation).filter(
                Simulation.name == name,
                Simulation.is_deleted == False,
            ).first()
            if existing:
                print(f"Simulation '{name}' already exists (ID: {existing.id}). Skipping.")
                continue

            result = store.save(name, default_parameters(model_type))

            print(f"\nCreated simulation: {result.name} (ID: {result.id})")
            print(f"  Total investment: {result.total_investment:,.2f}")
            print(f"  Sale price: {result.total_revenue:,.2f}")
            print(f"  Net profit: {result.net_profit:,.2f}")
            print(f"  ROI: {result.roi:.2f}%")
            print(f"  Payback: {result.payback_period}")

if __name__ == "__main__":
    main()
