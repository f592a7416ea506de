"""
Access to the shared PokéAPI client.

The client is created once in the application lifespan and stored on
``app.state``; endpoints receive it through this dependency so tests can
swap it with ``app.dependency_overrides``.
"""

from fastapi import Request

from ...upstream.pokeapi import PokeAPIClient


def get_pokeapi_client(request: Request) -> PokeAPIClient:
    """FastAPI dependency to get the PokéAPI client from app state."""
    return request.app.state.pokeapi_client
