"""Root pytest configuration for all tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tokamak_mcp.config import reset_config

# Configure pytest-asyncio
# This is redundant with pyproject.toml but ensures it's set
pytest_plugins = ("pytest_asyncio",)

_TNM_ENV = (
    "TNM_HOST",
    "TNM_PORT",
    "TNM_NO_BROWSER",
    "TNM_TX_TIMEOUT",
    "TNM_RPC_MAINNET",
    "TNM_RPC_SEPOLIA",
    "TNM_LOG",
    "TNM_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep the developer's own config files and TNM_* variables out of tests."""
    for name in _TNM_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    reset_config()
    yield
    reset_config()


@pytest.fixture(scope="session")
def anyio_backend():
    """Set anyio backend to asyncio."""
    return "asyncio"
