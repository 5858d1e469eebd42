"""WebSocket session channel to the dashboard page."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from tokamak_mcp.bridge.messages import IncomingMessage, MalformedMessage, parse_message

if TYPE_CHECKING:
    from fastapi import WebSocket

_log = logging.getLogger("tokamak_mcp.bridge.channel")

# Close code sent to a socket displaced by a newer connection
REPLACED_CLOSE_CODE = 4000


class SessionChannel:
    """Holds at most one live dashboard WebSocket.

    The last connection wins: a new socket replaces the current one, and the
    replaced one is treated as a lost session. Only frames from the current
    socket are delivered.

    Args:
        on_message: Called with each decoded frame from the current socket.
        on_close: Called when the current socket goes away (disconnect or
            replacement).
    """

    def __init__(
        self,
        on_message: Callable[[IncomingMessage], None],
        on_close: Callable[[], None],
    ) -> None:
        self._websocket: WebSocket | None = None
        self._on_message = on_message
        self._on_close = on_close

    @property
    def is_connected(self) -> bool:
        return self._websocket is not None

    async def connect(self, websocket: WebSocket) -> None:
        """Accept a new dashboard connection, replacing any current one."""
        await websocket.accept()
        previous = self._websocket
        self._websocket = websocket

        if previous is not None and previous is not websocket:
            _log.info("Dashboard reconnected; dropping previous session")
            self._on_close()
            with contextlib.suppress(Exception):
                await previous.close(code=REPLACED_CLOSE_CODE, reason="Replaced by a newer connection")
        else:
            _log.info("Dashboard client connected")

    async def disconnect(self, websocket: WebSocket) -> None:
        """Forget ``websocket`` if it is the current connection."""
        if websocket is not self._websocket:
            _log.debug("Ignoring close of a stale dashboard socket")
            return
        self._websocket = None
        _log.info("Dashboard client disconnected")
        self._on_close()

    def receive(self, websocket: WebSocket, raw: str | bytes) -> None:
        """Decode a frame and hand it to the message hook."""
        if websocket is not self._websocket:
            _log.debug("Ignoring frame from a stale dashboard socket")
            return
        try:
            message = parse_message(raw)
        except MalformedMessage as e:
            _log.warning("Dropping malformed dashboard frame: %s", e)
            return
        _log.debug("<< %s", message.type)
        self._on_message(message)

    async def send(self, message: dict[str, Any]) -> bool:
        """Send a JSON message to the dashboard.

        Returns:
            True if the frame was handed to the transport. With no client, or
            when the transport fails, the error is logged and False returned.
        """
        websocket = self._websocket
        if websocket is None:
            _log.warning("No dashboard client connected; dropping %s", message.get("type"))
            return False
        try:
            await websocket.send_json(message)
        except Exception as e:
            _log.warning("Failed to send %s to dashboard: %s", message.get("type"), e)
            return False
        _log.debug(">> %s", message.get("type"))
        return True

    async def close(self, reason: str = "Server shutting down") -> None:
        """Close the current connection, if any."""
        websocket = self._websocket
        if websocket is None:
            return
        self._websocket = None
        self._on_close()
        with contextlib.suppress(Exception):
            await websocket.close(code=1001, reason=reason)
        _log.info("Closed dashboard connection")
