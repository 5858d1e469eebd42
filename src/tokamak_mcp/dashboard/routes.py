"""FastAPI routes for the dashboard page, REST API and WebSocket."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from tokamak_mcp import __version__

if TYPE_CHECKING:
    from tokamak_mcp.bridge.facade import Bridge

log = logging.getLogger("tokamak_mcp.dashboard.routes")


def create_app(bridge: Bridge, static_dir: Path) -> FastAPI:
    """Create the FastAPI application bound to ``bridge``."""
    app = FastAPI(
        title="Tokamak Network Desktop",
        description="Browser wallet bridge for the tokamak-mcp tool server",
        version=__version__,
    )

    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    _register_routes(app, bridge, static_dir)

    return app


def _register_routes(app: FastAPI, bridge: Bridge, static_dir: Path) -> None:
    """Register all routes."""

    @app.get("/")
    async def index() -> FileResponse:
        """Serve the dashboard HTML page."""
        index_path = static_dir / "index.html"
        if not index_path.exists():
            raise HTTPException(status_code=404, detail="Dashboard not found")
        return FileResponse(index_path)

    @app.get("/api/health")
    async def api_health() -> dict[str, Any]:
        return {"status": "ok", "connected": bridge.channel.is_connected}

    @app.get("/api/wallet")
    async def api_wallet() -> dict[str, Any]:
        """Current wallet connection as seen by the bridge."""
        return bridge.state.read().to_dict()

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket) -> None:
        """The dashboard's session channel."""
        await bridge.channel.connect(websocket)

        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    break
                data = message.get("text")
                if data is None:
                    data = message.get("bytes")
                if data is None:
                    continue
                if data == "ping":
                    await websocket.send_text("pong")
                    continue
                bridge.channel.receive(websocket, data)
        except WebSocketDisconnect:
            pass
        finally:
            await bridge.channel.disconnect(websocket)
