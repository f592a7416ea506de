"""
API models for the pokemon lookup endpoint.
"""

from pydantic import BaseModel, Field
from typing import List

from ...upstream.base import PokemonRecord

class PokemonResponse(BaseModel):
    """Reduced view of a pokemon as returned to clients."""
    name: str = Field(..., description="Lowercase pokemon name")
    id: int = Field(..., description="National dex number")
    height: int = Field(..., description="Height in decimetres")
    weight: int = Field(..., description="Weight in hectograms")
    types: List[str] = Field(..., description="Type labels in slot order")

    @classmethod
    def from_record(cls, record: PokemonRecord) -> "PokemonResponse":
        return cls(
            name=record.name,
            id=record.id,
            height=record.height,
            weight=record.weight,
            types=list(record.types),
        )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "pikachu",
                "id": 25,
                "height": 4,
                "weight": 60,
                "types": ["electric"]
            }
        }
