"""
Pydantic models for API request/response schemas.

These models define the shape of data returned to clients. They are separate
from the upstream client types to keep the public contract independent of
PokéAPI's schema.
"""
