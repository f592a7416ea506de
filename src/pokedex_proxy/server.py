"""
Server lifecycle for the Pokédex proxy.

``ProxyServer`` runs uvicorn on a background thread so callers (the test
suite in particular) can start an isolated instance on a free port and shut
it down deterministically. ``main`` is the foreground process entry point.
"""

from __future__ import annotations
from typing import Optional
import logging
import socket
import threading
import time

import uvicorn
from fastapi import FastAPI

from .api.main import create_app
from .config import ServiceConfig, load_config

logger = logging.getLogger(__name__)


class ProxyServer:
    """Owns one uvicorn server and the socket it listens on."""

    def __init__(self, app: Optional[FastAPI] = None, config: Optional[ServiceConfig] = None, host: Optional[str] = None, port: Optional[int] = None):
        self.config = config or load_config()
        self.app = app or create_app(self.config)
        self.host = host if host is not None else self.config.host
        self.requested_port = port if port is not None else self.config.port
        self.port = self.requested_port

        self._server: Optional[uvicorn.Server] = None
        self._socket: Optional[socket.socket] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def base_url(self) -> str:
        host = "127.0.0.1" if self.host in ("0.0.0.0", "") else self.host
        if ":" in host:
            host = f"[{host}]"
        return f"http://{host}:{self.port}"

    def start(self, timeout: float = 10.0) -> "ProxyServer":
        """Bind the socket, start serving and block until uvicorn is up."""
        if self._thread is not None:
            raise RuntimeError("Server already started")

        uv_config = uvicorn.Config(
            self.app,
            host=self.host,
            port=self.requested_port,
            log_level=self.config.log_level,
            lifespan="on",
        )
        self._server = uvicorn.Server(uv_config)
        self._socket = uv_config.bind_socket()
        # port 0 asks the OS for a free port
        self.port = self._socket.getsockname()[1]

        self._thread = threading.Thread(
            target=self._server.run,
            kwargs={"sockets": [self._socket]},
            name=f"pokedex-proxy:{self.port}",
            daemon=True,
        )
        self._thread.start()

        deadline = time.monotonic() + timeout
        while not self._server.started:
            if not self._thread.is_alive():
                self._release()
                raise RuntimeError("Server exited during startup")
            if time.monotonic() > deadline:
                self.stop()
                raise RuntimeError(f"Server did not start within {timeout}s")
            time.sleep(0.01)

        logger.info(f"Pokedex proxy listening on {self.base_url}")
        return self

    def stop(self, timeout: float = 10.0) -> None:
        """Stop accepting connections, drain open ones and release the socket."""
        if self._thread is None:
            return

        self._server.should_exit = True
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning(f"Connections still open after {timeout}s, forcing exit")
            self._server.force_exit = True
            self._thread.join(timeout)

        self._release()
        logger.info("Pokedex proxy stopped")

    def _release(self) -> None:
        if self._socket is not None:
            self._socket.close()
        self._server = None
        self._socket = None
        self._thread = None

    def __enter__(self) -> "ProxyServer":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()


def main() -> None:
    """Load configuration and serve in the foreground until interrupted."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_config()
    logging.getLogger().setLevel(config.log_level.upper())
    logger.info(f"Starting Pokedex proxy on {config.host}:{config.port}")
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level,
    )


if __name__ == "__main__":
    main()
