#!/usr/bin/env python3
"""
Development server launcher for the Pokedex proxy.

Starts the FastAPI app with auto-reload. Port and upstream settings come from
config/config.yaml and the environment (PORT, POKEAPI_BASE_URL, ...).
For production use the ``pokedex-proxy`` console script instead.
"""

import uvicorn
import sys
from pathlib import Path

# Add src to Python path so imports work without an install
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from pokedex_proxy.config import load_config

if __name__ == "__main__":
    config = load_config()
    print("Starting Pokedex Proxy Development Server")
    print(f"Server will be available at: http://localhost:{config.port}")
    print(f"API documentation at: http://localhost:{config.port}/docs")
    print("\n" + "="*50 + "\n")

    uvicorn.run(
        "pokedex_proxy.api.main:app",
        host=config.host,
        port=config.port,
        reload=True,     # Auto-reload on code changes (development only)
        reload_dirs=[str(src_path)],  # Only watch src directory
        log_level=config.log_level
    )
