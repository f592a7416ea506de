"""
Pokédex proxy service.

A thin HTTP layer that looks up a pokemon on PokéAPI and returns a reduced
JSON record with its name, id, height, weight and type labels.
"""

__version__ = "1.0.0"
