from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

NOT_FOUND_MESSAGE = "Pokémon não encontrado"
GENERIC_FAILURE_MESSAGE = "Erro ao buscar dados do Pokémon"

#unified upstream errors
class UpstreamError(RuntimeError):
    def __init__(self, identifier: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.identifier = identifier
        self.status_code = status_code

class UpstreamNotFound(UpstreamError): ...
class UpstreamUnavailable(UpstreamError): ... #transport error, timeout or unexpected status
class UpstreamMalformed(UpstreamError): ... #reachable, but body is not the expected shape

@dataclass(frozen=True)
class PokemonRecord:
    name: str
    id: int
    height: int
    weight: int
    types: List[str] = field(default_factory=list) #type labels, upstream order
