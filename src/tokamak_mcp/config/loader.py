"""Configuration file loading and caching.

Handles:
- YAML file parsing
- Environment variable overrides
- Config caching with reset for tests
- Conversion from dict to typed Config dataclass
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from tokamak_mcp.config.merge import merge_configs
from tokamak_mcp.config.paths import get_config_paths
from tokamak_mcp.config.schema import (
    DEFAULT_RPC_URLS,
    BridgeConfig,
    ChainConfig,
    Config,
    DashboardConfig,
    LoggingConfig,
)

# Module logger (may not be configured yet at import time)
_log = logging.getLogger("tokamak_mcp.config")

_cached_config: Config | None = None

_TRUTHY = {"1", "true", "yes", "on"}


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found or invalid."""
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data if isinstance(data, dict) else {}
    except yaml.YAMLError as e:
        _log.warning("Invalid YAML in %s: %s", path, e)
        return {}
    except PermissionError:
        _log.debug("Permission denied reading %s", path)
        return {}
    except OSError as e:
        _log.warning("Error reading %s: %s", path, e)
        return {}


def env_overrides() -> dict[str, Any]:
    """Build a config dict from TNM_* environment variables."""
    env = os.environ
    dashboard: dict[str, Any] = {}
    bridge: dict[str, Any] = {}
    rpc_urls: dict[str, str] = {}
    log: dict[str, Any] = {}

    if env.get("TNM_HOST"):
        dashboard["host"] = env["TNM_HOST"]
    if env.get("TNM_PORT"):
        dashboard["port"] = env["TNM_PORT"]
    if env.get("TNM_NO_BROWSER"):
        dashboard["open_browser"] = env["TNM_NO_BROWSER"].lower() not in _TRUTHY
    if env.get("TNM_TX_TIMEOUT"):
        bridge["tx_timeout"] = env["TNM_TX_TIMEOUT"]
    for network in DEFAULT_RPC_URLS:
        url = env.get(f"TNM_RPC_{network.upper()}")
        if url:
            rpc_urls[network] = url
    if env.get("TNM_LOG"):
        log["file"] = env["TNM_LOG"]
    if env.get("TNM_LOG_LEVEL"):
        log["level"] = env["TNM_LOG_LEVEL"]

    overrides: dict[str, Any] = {}
    if dashboard:
        overrides["dashboard"] = dashboard
    if bridge:
        overrides["bridge"] = bridge
    if rpc_urls:
        overrides["chain"] = {"rpc_urls": rpc_urls}
    if log:
        overrides["logging"] = log
    return overrides


def _as_int(value: Any, default: int, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        _log.warning("Invalid integer for %s: %r, using %d", key, value, default)
        return default


def _as_positive_float(value: Any, default: float, key: str) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError):
        _log.warning("Invalid number for %s: %r, using %g", key, value, default)
        return default
    if result <= 0:
        _log.warning("%s must be positive, got %r, using %g", key, value, default)
        return default
    return result


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in _TRUTHY
    return bool(value)


def dict_to_config(data: dict[str, Any]) -> Config:
    """Convert merged dict to typed Config dataclass."""
    defaults = Config()

    dash_data = data.get("dashboard") or {}
    dashboard = DashboardConfig(
        host=str(dash_data.get("host", defaults.dashboard.host)),
        port=_as_int(dash_data.get("port", defaults.dashboard.port), defaults.dashboard.port, "dashboard.port"),
        open_browser=_as_bool(dash_data.get("open_browser", defaults.dashboard.open_browser)),
        static_dir=dash_data.get("static_dir"),
    )

    bridge_data = data.get("bridge") or {}
    bridge = BridgeConfig(
        tx_timeout=_as_positive_float(
            bridge_data.get("tx_timeout", defaults.bridge.tx_timeout),
            defaults.bridge.tx_timeout,
            "bridge.tx_timeout",
        ),
    )

    chain_data = data.get("chain") or {}
    rpc_urls = dict(DEFAULT_RPC_URLS)
    configured = chain_data.get("rpc_urls") or {}
    if isinstance(configured, dict):
        rpc_urls.update({str(k): str(v) for k, v in configured.items() if v})
    chain = ChainConfig(rpc_urls=rpc_urls)

    log_data = data.get("logging") or {}
    verbose = log_data.get("verbose")
    logging_config = LoggingConfig(
        level=log_data.get("level"),
        verbose=_as_int(verbose, 2, "logging.verbose") if verbose is not None else None,
        file=log_data.get("file"),
    )

    known_keys = {"dashboard", "bridge", "chain", "logging"}
    extra = {k: v for k, v in data.items() if k not in known_keys}

    return Config(
        dashboard=dashboard,
        bridge=bridge,
        chain=chain,
        logging=logging_config,
        extra=extra,
    )


def load_config(project_root: str | None = None, reload: bool = False) -> Config:
    """Load and merge config from all sources.

    Priority order (highest to lowest):
    1. Environment variables (TNM_*)
    2. Project config ($project_root/.tnm/config.yaml)
    3. User config (~/.config/tokamak-mcp/config.yaml or %APPDATA%)
    4. System config (/etc/tokamak-mcp/ or %PROGRAMDATA%)

    Args:
        project_root: Project directory for project-level config.
        reload: Force reload even if cached.
    """
    global _cached_config

    if _cached_config is not None and not reload and project_root is None:
        return _cached_config

    configs: list[dict[str, Any]] = []

    for path in get_config_paths(project_root):
        config_data = load_yaml_file(path)
        if config_data:
            _log.debug("Loaded config from %s", path)
            configs.append(config_data)

    env_config = env_overrides()
    if env_config:
        configs.append(env_config)

    config = dict_to_config(merge_configs(*configs))

    # Cache only global config (no project_root)
    if project_root is None:
        _cached_config = config

    return config


def get_config() -> Config:
    """Get the cached global config, loading it on first use."""
    if _cached_config is None:
        return load_config()
    return _cached_config


def reset_config() -> None:
    """Reset cached config. Useful for testing or forcing a reload."""
    global _cached_config
    _cached_config = None
