"""Dashboard web server lifecycle management."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import socket
import sys
import time
import webbrowser
from pathlib import Path
from typing import TYPE_CHECKING

import uvicorn

from tokamak_mcp.config.schema import DashboardConfig
from tokamak_mcp.dashboard.routes import create_app

if TYPE_CHECKING:
    from tokamak_mcp.bridge.facade import Bridge

log = logging.getLogger("tokamak_mcp.dashboard.server")

# How long to wait for uvicorn to start listening before opening the browser anyway
_STARTUP_WAIT = 5.0


def get_static_dir(config: DashboardConfig) -> Path:
    """Directory holding the dashboard page (index.html and assets)."""
    if config.static_dir:
        return Path(config.static_dir).expanduser()
    return Path(__file__).parent / "static"


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind the dashboard's listening socket.

    Raises:
        OSError: the address is unavailable (usually the port is in use).
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        if sys.platform != "win32":
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


async def _serve(server: uvicorn.Server, sock: socket.socket) -> None:
    # uvicorn reports fatal startup errors with sys.exit(); inside a task that
    # would escape the event loop and end the MCP process
    try:
        await server.serve(sockets=[sock])
    except SystemExit as e:
        raise RuntimeError(f"Dashboard server exited with status {e.code}") from None


class DashboardServer:
    """Serves the dashboard and its WebSocket; opens the browser once started.

    Implements the bridge's Launcher protocol: ``start`` is invoked by the
    bridge on first use, ``stop`` on shutdown.
    """

    def __init__(self, config: DashboardConfig) -> None:
        self.config = config
        self._server: uvicorn.Server | None = None
        self._socket: socket.socket | None = None
        self._task: asyncio.Task[None] | None = None
        self._port: int | None = None

    @property
    def url(self) -> str:
        if self._port is None:
            return self.config.url
        return f"http://localhost:{self._port}"

    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self, bridge: Bridge) -> None:
        """Bind the port, serve in a background task, then open the page.

        Raises:
            OSError: the port could not be bound.
            RuntimeError: uvicorn exited before it started listening.
        """
        if self.is_running():
            raise RuntimeError(f"Dashboard already running on port {self.config.port}")

        sock = bind_socket(self.config.host, self.config.port)
        self._socket = sock
        self._port = sock.getsockname()[1]

        app = create_app(bridge, get_static_dir(self.config))
        server_config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self._port,
            log_level="warning",
            access_log=False,
        )
        server = uvicorn.Server(server_config)
        task = asyncio.create_task(_serve(server, sock))
        self._server, self._task = server, task

        try:
            await self._wait_until_listening(server, task)
        except BaseException:
            await self.stop()
            raise
        log.info("Dashboard started on %s", self.url)

        if self.config.open_browser:
            opened = await asyncio.to_thread(webbrowser.open, self.url)
            if not opened:
                log.warning("Could not open a browser; visit %s manually", self.url)

    async def _wait_until_listening(self, server: uvicorn.Server, task: asyncio.Task[None]) -> None:
        deadline = time.monotonic() + _STARTUP_WAIT
        while not server.started:
            if task.done():
                exc = task.exception()
                raise RuntimeError(f"Dashboard server exited during startup: {exc}")
            if time.monotonic() > deadline:
                log.warning("Dashboard server slow to start on port %s", self._port)
                return
            await asyncio.sleep(0.05)

    async def stop(self) -> None:
        """Stop the web server and release the port."""
        task, self._task = self._task, None
        server, self._server = self._server, None
        sock, self._socket = self._socket, None
        port, self._port = self._port, None

        if task is not None:
            if server is not None:
                server.should_exit = True
            try:
                await asyncio.wait_for(asyncio.shield(task), timeout=2.0)
            except asyncio.TimeoutError:
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
            except Exception as e:
                log.debug("Dashboard server ended with error: %s", e)
            log.info("Dashboard stopped (was on port %s)", port)

        if sock is not None:
            sock.close()
