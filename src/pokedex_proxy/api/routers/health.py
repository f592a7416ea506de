"""
Health check endpoints for monitoring and diagnostics.
"""

import time
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..models.common import HealthStatus
from ..dependencies.clients import get_pokeapi_client
from ...upstream.pokeapi import PokeAPIClient
from ... import __version__

router = APIRouter()

# Track server start time for uptime calculation
_server_start_time = time.time()

@router.get("/", response_model=HealthStatus)
async def health_check(client: PokeAPIClient = Depends(get_pokeapi_client)):
    """
    Basic health check endpoint.

    The service itself is always reported healthy; upstream reachability is
    listed under ``dependencies`` so a PokéAPI outage does not take the
    proxy out of a load balancer.
    """

    uptime = time.time() - _server_start_time

    dependencies = {}
    if await client.health_check():
        dependencies["pokeapi"] = f"✅ Reachable ({client.base_url})"
    else:
        dependencies["pokeapi"] = f"❌ Unreachable ({client.base_url})"

    return HealthStatus(
        status="healthy",
        version=__version__,
        uptime=uptime,
        dependencies=dependencies
    )

@router.get("/ready")
async def readiness_check(client: PokeAPIClient = Depends(get_pokeapi_client)):
    """
    Readiness probe for container deployments.

    Returns 200 only when PokéAPI can be reached.
    """

    if not await client.health_check():
        return JSONResponse(status_code=503, content={"ready": False, "reason": "PokeAPI unreachable"})

    return {"ready": True, "message": "Service ready to handle requests"}
