"""Configuration schema dataclasses for tokamak_mcp.

Defines the structure of configuration at all levels (system, user, project).
Every section has working defaults, so an empty config file is valid.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_RPC_URLS: dict[str, str] = {
    "mainnet": "https://ethereum-rpc.publicnode.com",
    "sepolia": "https://ethereum-sepolia-rpc.publicnode.com",
}


@dataclass
class DashboardConfig:
    """Web server serving the dashboard page and WebSocket.

    Example config.yaml:
        dashboard:
          port: 3000
          open_browser: false
    """

    host: str = "127.0.0.1"
    port: int = 3000
    open_browser: bool = True  # Open the page on first bridge use
    static_dir: str | None = None  # Default: packaged dashboard/static

    @property
    def url(self) -> str:
        return f"http://localhost:{self.port}"


@dataclass
class BridgeConfig:
    """Signing bridge configuration."""

    tx_timeout: float = 300.0  # Seconds to wait for the operator to sign


@dataclass
class ChainConfig:
    """JSON-RPC endpoints for read-only chain queries."""

    rpc_urls: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_RPC_URLS))


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str | None = None  # DEBUG, INFO, WARNING, ERROR
    verbose: int | None = None  # 0-4, takes precedence over level
    file: str | None = None  # Log file path


@dataclass
class Config:
    """Root configuration object."""

    dashboard: DashboardConfig = field(default_factory=DashboardConfig)
    bridge: BridgeConfig = field(default_factory=BridgeConfig)
    chain: ChainConfig = field(default_factory=ChainConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)  # Unknown top-level keys
