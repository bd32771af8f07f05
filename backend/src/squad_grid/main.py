"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from squad_grid.config import settings
from squad_grid.api.deps import ensure_services
from squad_grid.api.routes.players import router as players_router
from squad_grid.api.routes.rounds import router as rounds_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    if not settings.football_data_api_key:
        logger.warning("FOOTBALL_DATA_API_KEY is not set; upstream requests will be rejected")
    # Startup: upstream client, resolver and the live round
    ensure_services(app.state)
    yield
    # Shutdown: release pooled connections
    await app.state.client.close()


app = FastAPI(
    title="Squad Grid",
    description="Guess the footballer behind a team/country grid cell",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "squad-grid"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Squad Grid API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(players_router)
app.include_router(rounds_router)


def run():
    """Serve the app with uvicorn using configured host and port."""
    import uvicorn

    uvicorn.run(
        "squad_grid.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
    )
