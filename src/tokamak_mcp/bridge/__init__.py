"""Signing bridge between the MCP tool layer and the browser wallet.

The bridge tracks the wallet connection reported by the dashboard, forwards
signing requests over a WebSocket and matches each ``tx_result`` reply back to
the caller that is waiting for it.
"""

from tokamak_mcp.bridge.channel import SessionChannel
from tokamak_mcp.bridge.correlator import (
    DEFAULT_TX_TIMEOUT,
    CorrelatorState,
    PendingSigningRequest,
    TransactionCorrelator,
)
from tokamak_mcp.bridge.facade import Bridge, Launcher
from tokamak_mcp.bridge.messages import (
    MalformedMessage,
    NetworkChanged,
    SignTransaction,
    TransactionPayload,
    TransactionResult,
    WalletConnected,
    parse_message,
)
from tokamak_mcp.bridge.state import ConnectionState, ConnectionStateStore

__all__ = [
    "Bridge",
    "Launcher",
    "SessionChannel",
    "ConnectionState",
    "ConnectionStateStore",
    "CorrelatorState",
    "PendingSigningRequest",
    "TransactionCorrelator",
    "DEFAULT_TX_TIMEOUT",
    # Wire messages
    "TransactionPayload",
    "SignTransaction",
    "TransactionResult",
    "WalletConnected",
    "NetworkChanged",
    "MalformedMessage",
    "parse_message",
]
