"""Bridge façade: the operations the tool layer calls."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from tokamak_mcp.bridge.channel import SessionChannel
from tokamak_mcp.bridge.correlator import DEFAULT_TX_TIMEOUT, TransactionCorrelator
from tokamak_mcp.bridge.messages import (
    IncomingMessage,
    NetworkChanged,
    TransactionPayload,
    TransactionResult,
    WalletConnected,
)
from tokamak_mcp.bridge.state import ConnectionState, ConnectionStateStore
from tokamak_mcp.errors import ChannelLost, NoActiveSession, NoWalletConnected

_log = logging.getLogger("tokamak_mcp.bridge")


class Launcher(Protocol):
    """Starts the human-facing side of the bridge (web server + browser)."""

    async def start(self, bridge: Bridge) -> None: ...

    async def stop(self) -> None: ...


class Bridge:
    """Owns the session channel, connection state and correlator.

    One instance lives for the whole process and is passed explicitly to the
    tool catalog and the web routes.

    Startup is deferred: the first call to any bridge operation schedules the
    launcher (web server + browser), exactly once. A process that never needs
    the wallet never opens a browser.

    Args:
        launcher: Started on first use. None disables startup (tests).
        tx_timeout: Seconds to wait for the dashboard to answer a signing request.
    """

    def __init__(
        self,
        launcher: Launcher | None = None,
        tx_timeout: float = DEFAULT_TX_TIMEOUT,
    ) -> None:
        self.state = ConnectionStateStore()
        self.channel = SessionChannel(on_message=self._dispatch, on_close=self._on_session_lost)
        self.correlator = TransactionCorrelator(self.channel, timeout=tx_timeout)
        self._launcher = launcher
        self._start_task: asyncio.Task[None] | None = None

    # -- Lifecycle -----------------------------------------------------------

    @property
    def started(self) -> bool:
        return self._start_task is not None

    def ensure_started(self) -> asyncio.Task[None] | None:
        """Start the launcher once per bridge lifetime.

        Must be called from within the running event loop. Returns the startup
        task (already scheduled), or None when no launcher is configured. If
        startup fails the guard is reset so a later call retries.
        """
        if self._launcher is None:
            return None
        if self._start_task is None:
            _log.info("First bridge use; starting dashboard")
            self._start_task = asyncio.get_running_loop().create_task(self._launcher.start(self))
            self._start_task.add_done_callback(self._on_start_done)
        return self._start_task

    def _on_start_done(self, task: asyncio.Task[None]) -> None:
        if task.cancelled():
            if self._start_task is task:
                self._start_task = None
            return
        exc = task.exception()
        if exc is not None:
            _log.error("Dashboard startup failed: %s", exc)
            if self._start_task is task:
                self._start_task = None

    async def shutdown(self) -> None:
        """Fail any pending request, close the session and stop the launcher."""
        self.correlator.fail(ChannelLost())
        await self.channel.close()

        start_task, self._start_task = self._start_task, None
        if start_task is None or self._launcher is None:
            return
        if not start_task.done():
            # A startup still binding or opening the browser ends here
            start_task.cancel()
            await asyncio.wait([start_task])
        await self._launcher.stop()

    # -- Tool-layer operations ---------------------------------------------------

    def read_connection_state(self) -> ConnectionState:
        """Return the current wallet connection snapshot. Never suspends."""
        self.ensure_started()
        return self.state.read()

    def require_connection(self) -> ConnectionState:
        """Return the connection state, raising if no wallet is connected."""
        state = self.read_connection_state()
        if not state.connected:
            raise NoWalletConnected()
        return state

    async def request_transaction(self, payload: TransactionPayload) -> str:
        """Ask the dashboard to sign ``payload`` and return the transaction hash.

        Raises:
            NoWalletConnected: no wallet announced by the dashboard; nothing sent.
            NoActiveSession: no dashboard connected; nothing sent.
            RequestAlreadyInFlight, ChannelLost, UserRejected, TimedOut:
                from the correlator, unchanged.
        """
        self.ensure_started()
        if self.state.read().wallet_address is None:
            raise NoWalletConnected()
        if not self.channel.is_connected:
            raise NoActiveSession()
        return await self.correlator.request(payload)

    # -- Session channel hooks -------------------------------------------------

    def _dispatch(self, message: IncomingMessage) -> None:
        if isinstance(message, WalletConnected):
            self.state.apply_wallet_connected(message.data.address, message.data.network)
        elif isinstance(message, NetworkChanged):
            self.state.apply_network_changed(message.data.network)
        elif isinstance(message, TransactionResult):
            self.correlator.resolve(message)

    def _on_session_lost(self) -> None:
        self.state.apply_disconnected()
        self.correlator.fail(ChannelLost())
