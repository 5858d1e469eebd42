"""tokamak_mcp: MCP tool server that signs through the user's browser wallet."""

__version__ = "0.1.0"

# Public API
from tokamak_mcp.bridge import (
    Bridge,
    ConnectionState,
    CorrelatorState,
    TransactionPayload,
)
from tokamak_mcp.config import Config, get_config, load_config
from tokamak_mcp.errors import (
    BridgeError,
    ChainError,
    ChannelLost,
    NoActiveSession,
    NoWalletConnected,
    RequestAlreadyInFlight,
    TimedOut,
    TokamakError,
    UserRejected,
)

__all__ = [
    # Bridge
    "Bridge",
    "ConnectionState",
    "CorrelatorState",
    "TransactionPayload",
    # Config
    "Config",
    "load_config",
    "get_config",
    # Errors
    "TokamakError",
    "BridgeError",
    "ChainError",
    "NoWalletConnected",
    "NoActiveSession",
    "RequestAlreadyInFlight",
    "ChannelLost",
    "TimedOut",
    "UserRejected",
]
