"""
Service configuration.

Settings come from three layers, later ones winning:
defaults < YAML file (``config/config.yaml`` or ``$POKEDEX_CONFIG``) < environment.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
import logging
import os

import yaml

from .upstream.pokeapi import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parents[2] / "config" / "config.yaml"

DEFAULT_PORT = 3000

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@dataclass(frozen=True)
class ServiceConfig:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    pokeapi_base_url: str = DEFAULT_BASE_URL
    request_timeout_s: Optional[float] = None #None: wait for upstream indefinitely
    log_level: str = "info"


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must be a mapping")
    return raw


def _from_yaml(config: ServiceConfig, raw: Dict[str, Any]) -> ServiceConfig:
    server = raw.get("server") or {}
    pokeapi = raw.get("pokeapi") or {}

    updates: Dict[str, Any] = {}
    if "host" in server:
        updates["host"] = server["host"]
    if "port" in server:
        updates["port"] = server["port"]
    if "log_level" in server:
        updates["log_level"] = server["log_level"]
    if "base_url" in pokeapi:
        updates["pokeapi_base_url"] = pokeapi["base_url"]
    if "request_timeout_s" in pokeapi:
        updates["request_timeout_s"] = pokeapi["request_timeout_s"]
    return replace(config, **updates)


def _from_env(config: ServiceConfig, environ: Mapping[str, str]) -> ServiceConfig:
    updates: Dict[str, Any] = {}
    if environ.get("PORT"):
        updates["port"] = environ["PORT"]
    if environ.get("HOST"):
        updates["host"] = environ["HOST"]
    if environ.get("POKEAPI_BASE_URL"):
        updates["pokeapi_base_url"] = environ["POKEAPI_BASE_URL"]
    if environ.get("POKEAPI_TIMEOUT_S"):
        updates["request_timeout_s"] = environ["POKEAPI_TIMEOUT_S"]
    if environ.get("LOG_LEVEL"):
        updates["log_level"] = environ["LOG_LEVEL"]
    return replace(config, **updates)


def _validate(config: ServiceConfig) -> ServiceConfig:
    try:
        port = int(config.port)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid port: {config.port!r}")
    if not 0 <= port <= 65535:
        raise ValueError(f"Port out of range: {port}")

    timeout = config.request_timeout_s
    if timeout is not None:
        try:
            timeout = float(timeout)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid request timeout: {config.request_timeout_s!r}")
        if timeout <= 0:
            raise ValueError(f"Request timeout must be positive, got {timeout}")

    base_url = str(config.pokeapi_base_url)
    if not base_url.startswith(("http://", "https://")):
        raise ValueError(f"PokeAPI base URL must be http(s): {base_url!r}")
    if not base_url.endswith("/"):
        base_url += "/"

    log_level = str(config.log_level).lower()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {config.log_level!r}")

    return replace(
        config,
        port=port,
        request_timeout_s=timeout,
        pokeapi_base_url=base_url,
        log_level=log_level,
    )


def load_config(path: Optional[Union[Path, str]] = None, environ: Optional[Mapping[str, str]] = None) -> ServiceConfig:
    if environ is None:
        environ = os.environ

    config = ServiceConfig()

    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")
    elif environ.get("POKEDEX_CONFIG"):
        config_path = Path(environ["POKEDEX_CONFIG"])
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")
    else:
        config_path = DEFAULT_CONFIG_PATH

    if config_path.exists():
        config = _from_yaml(config, _read_yaml(config_path))
        logger.info(f"Loaded config: {config_path}")

    return _validate(_from_env(config, environ))
