"""
FastAPI application entry point.

This is the main FastAPI application that wires the routers to the shared
PokéAPI client. Use ``create_app`` in tests; ``app`` is the instance served
by uvicorn.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from .routers import health, pokemon
from .. import __version__
from ..config import ServiceConfig, load_config
from ..upstream.pokeapi import PokeAPIClient

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Opens the PokéAPI client once at startup and closes its connection pool
    at shutdown.
    """
    config: ServiceConfig = app.state.config
    client = PokeAPIClient(
        base_url=config.pokeapi_base_url,
        request_timeout_s=config.request_timeout_s,
    )
    app.state.pokeapi_client = client
    logger.info(f"PokeAPI client ready: {client.base_url}")

    yield  # Server runs here

    logger.info("Shutting down Pokedex proxy...")
    await client.aclose()
    app.state.pokeapi_client = None

def create_app(config: Optional[ServiceConfig] = None) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.
    """

    app = FastAPI(
        title="Pokedex Proxy API",
        description="Reduced pokemon lookups backed by PokéAPI",
        version=__version__,
        lifespan=lifespan
    )
    app.state.config = config or load_config()
    app.state.pokeapi_client = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(pokemon.router, prefix="/pokemon", tags=["pokemon"])

    @app.get("/")
    async def root():
        """Root endpoint with basic API information."""
        return {
            "name": "Pokedex Proxy API",
            "version": __version__,
            "status": "operational",
            "endpoints": {
                "health": "/health",
                "pokemon": "/pokemon/{name}",
                "docs": "/docs",
                "redoc": "/redoc"
            }
        }

    return app

# Create the FastAPI app instance
app = create_app()
