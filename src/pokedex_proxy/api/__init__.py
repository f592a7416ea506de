"""
FastAPI application layer for the Pokédex proxy.

This module exposes the HTTP endpoints that forward lookups to PokéAPI and
reshape the upstream payload into the reduced response schema.
"""
