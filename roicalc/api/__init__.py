"""
API routes for the investment calculator.
"""

from fastapi import APIRouter

from roicalc.api import calculations, simulations, parameters

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(simulations.router, prefix="/simulations", tags=["simulations"])
router.include_router(parameters.router, prefix="/parameters", tags=["parameters"])
