"""Configuration management for tokamak_mcp.

Provides hierarchical YAML-based configuration with:
- System-level config (/etc/tokamak-mcp/ or %PROGRAMDATA%)
- User-level config (~/.config/tokamak-mcp/, ~/.tnm/ or %APPDATA%)
- Project-level config (./.tnm/)
- Environment variable overrides (highest priority)

Example usage:
    from tokamak_mcp.config import load_config

    config = load_config(project_root=".")
    print(config.dashboard.port)
    print(config.bridge.tx_timeout)
"""

from tokamak_mcp.config.loader import (
    get_config,
    load_config,
    reset_config,
)
from tokamak_mcp.config.paths import (
    get_config_paths,
    get_project_config_path,
    get_system_config_path,
    get_user_config_path,
)
from tokamak_mcp.config.schema import (
    BridgeConfig,
    ChainConfig,
    Config,
    DashboardConfig,
    LoggingConfig,
)

__all__ = [
    # Main API
    "Config",
    "load_config",
    "get_config",
    "reset_config",
    # Schema types
    "DashboardConfig",
    "BridgeConfig",
    "ChainConfig",
    "LoggingConfig",
    # Path utilities
    "get_config_paths",
    "get_system_config_path",
    "get_user_config_path",
    "get_project_config_path",
]
