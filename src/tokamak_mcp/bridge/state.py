"""Connection state reported by the browser wallet."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

_log = logging.getLogger("tokamak_mcp.bridge.state")


@dataclass(frozen=True)
class ConnectionState:
    """Snapshot of the wallet connection.

    Attributes:
        wallet_address: Connected account, or None.
        network: Active network name (e.g. "mainnet"), or None.
    """

    wallet_address: str | None = None
    network: str | None = None

    @property
    def connected(self) -> bool:
        return self.wallet_address is not None and self.network is not None

    @property
    def address(self) -> str | None:
        return self.wallet_address

    def to_dict(self) -> dict[str, Any]:
        if self.connected:
            return {"connected": True, "address": self.wallet_address, "network": self.network}
        return {"connected": False, "address": None, "network": None}


DISCONNECTED = ConnectionState()


class ConnectionStateStore:
    """Holds the single authoritative ConnectionState.

    Only Session Channel handlers mutate the store. ``read()`` is a plain
    attribute read and is safe from any tool invocation.
    """

    def __init__(self) -> None:
        self._state = DISCONNECTED

    def read(self) -> ConnectionState:
        return self._state

    def apply_wallet_connected(self, address: str, network: str) -> None:
        self._state = ConnectionState(wallet_address=address, network=network)
        _log.info("Wallet connected: %s on %s", address, network)

    def apply_network_changed(self, network: str) -> None:
        self._state = ConnectionState(wallet_address=self._state.wallet_address, network=network)
        _log.info("Network changed to %s", network)

    def apply_disconnected(self) -> None:
        if self._state.wallet_address is not None or self._state.network is not None:
            _log.info("Wallet state cleared")
        self._state = DISCONNECTED
