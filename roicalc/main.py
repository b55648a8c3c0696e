"""
Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, Depends
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from fastapi.responses import HTMLResponse

from roicalc.config import get_settings
from roicalc.api import router as api_router
from roicalc.db.database import init_db
from roicalc.formatting import format_currency, format_number, format_percent
from roicalc.services.simulation_store import SimulationStore, get_simulation_store

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

UI_DIR = Path(__file__).parent / "ui"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables if they do not exist."""
    init_db()
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Real estate investment ROI and financing calculator",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# Mount static files
app.mount("/static", StaticFiles(directory=UI_DIR / "static"), name="static")

# Set up templates
templates = Jinja2Templates(directory=UI_DIR / "templates")
templates.env.filters["currency"] = format_currency
templates.env.filters["number"] = format_number
templates.env.filters["percent"] = format_percent

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    store: SimulationStore = Depends(get_simulation_store),
):
    """Render the home page with saved simulations."""
    simulations, total = store.list()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": settings.app_name,
            "simulations": simulations,
            "total": total,
        },
    )


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("roicalc.main:app", host=settings.host, port=settings.port)
