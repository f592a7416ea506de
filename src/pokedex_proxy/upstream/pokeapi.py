from __future__ import annotations
from typing import List, Optional
import asyncio
import logging
import time

import httpx
from pydantic import BaseModel, ValidationError

from .base import (
    PokemonRecord,
    UpstreamMalformed,
    UpstreamNotFound,
    UpstreamUnavailable,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://pokeapi.co/api/v2/pokemon/"
HEALTH_TIMEOUT_S = 5.0


class _NamedResource(BaseModel):
    name: str

class _TypeSlot(BaseModel):
    type: _NamedResource

class _PokemonPayload(BaseModel):
    """Subset of the upstream pokemon resource; everything else is ignored."""
    name: str
    id: int
    height: int
    weight: int
    types: List[_TypeSlot]


class PokeAPIClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, request_timeout_s: Optional[float] = None, transport: Optional[httpx.AsyncBaseTransport] = None, health_timeout_s: float = HEALTH_TIMEOUT_S):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.request_timeout_s = request_timeout_s
        # timeout=None disables httpx's default 5s limit
        self.client = httpx.AsyncClient(timeout=request_timeout_s, transport=transport)
        self.health_timeout_s = health_timeout_s

    def build_url(self, identifier: str) -> str:
        return f"{self.base_url}{identifier.lower()}"

    async def fetch_pokemon(self, identifier: str) -> PokemonRecord:
        url = self.build_url(identifier)
        t0 = time.perf_counter()

        try:
            response = await self.client.get(url)
        except httpx.TimeoutException as e:
            raise UpstreamUnavailable(identifier, f"PokeAPI timeout after {self.request_timeout_s}s: {e}") from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailable(identifier, f"PokeAPI request failed: {e}") from e

        dt = time.perf_counter() - t0

        if response.status_code == 404:
            raise UpstreamNotFound(identifier, f"PokeAPI has no pokemon '{identifier}'", status_code=404)
        if not response.is_success:
            raise UpstreamUnavailable(identifier, f"PokeAPI returned HTTP {response.status_code}", status_code=response.status_code)

        try:
            payload = _PokemonPayload.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamMalformed(identifier, f"Unexpected PokeAPI payload: {e}", status_code=response.status_code) from e

        logger.debug(f"Fetched {url} in {dt:.3f}s")
        return PokemonRecord(
            name=payload.name,
            id=payload.id,
            height=payload.height,
            weight=payload.weight,
            types=[slot.type.name for slot in payload.types],
        )

    async def health_check(self) -> bool:
        # bounded even when lookups have no timeout
        try:
            await asyncio.wait_for(
                self.client.head(self.base_url, timeout=self.health_timeout_s),
                self.health_timeout_s,
            )
            return True
        except (httpx.HTTPError, asyncio.TimeoutError):
            return False

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "PokeAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
