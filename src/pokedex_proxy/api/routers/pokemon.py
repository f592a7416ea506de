"""
Pokemon lookup endpoint.

Forwards the requested name to PokéAPI and maps upstream failures to
404 (unknown pokemon) or 500 (anything else).
"""

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..models.common import ErrorResponse
from ..models.pokemon import PokemonResponse
from ..dependencies.clients import get_pokeapi_client
from ...upstream.base import (
    GENERIC_FAILURE_MESSAGE,
    NOT_FOUND_MESSAGE,
    UpstreamError,
    UpstreamNotFound,
)
from ...upstream.pokeapi import PokeAPIClient

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get(
    "/{name}",
    response_model=PokemonResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Pokemon not found upstream"},
        500: {"model": ErrorResponse, "description": "Upstream lookup failed"},
    },
)
async def get_pokemon(
    name: str,
    client: PokeAPIClient = Depends(get_pokeapi_client)
):
    """
    Look up a pokemon by name (case-insensitive).

    Returns name, id, height, weight and the list of type labels.
    """
    try:
        record = await client.fetch_pokemon(name.lower())
    except UpstreamNotFound:
        logger.info(f"Pokemon not found upstream: {name}")
        return JSONResponse(status_code=404, content=ErrorResponse(error=NOT_FOUND_MESSAGE).model_dump())
    except UpstreamError as e:
        logger.error(f"Upstream lookup failed for {name}: {e}")
        return JSONResponse(status_code=500, content=ErrorResponse(error=GENERIC_FAILURE_MESSAGE).model_dump())
    except Exception:
        logger.exception(f"Unexpected error while looking up {name}")
        return JSONResponse(status_code=500, content=ErrorResponse(error=GENERIC_FAILURE_MESSAGE).model_dump())

    return PokemonResponse.from_record(record)
