"""Tests for the dashboard HTTP routes and WebSocket endpoint."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tokamak_mcp.bridge import Bridge
from tokamak_mcp.dashboard.routes import create_app
from tests.utils import WALLET, wallet_connected


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    static = tmp_path / "static"
    static.mkdir()
    (static / "index.html").write_text("<html><body>Tokamak</body></html>")
    (static / "bridge.js").write_text("// bridge")
    return static


@pytest.fixture
def bridge() -> Bridge:
    return Bridge()


@pytest.fixture
def client(bridge: Bridge, static_dir: Path) -> TestClient:
    return TestClient(create_app(bridge, static_dir))


class TestPages:
    def test_index(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert "Tokamak" in response.text

    def test_static_asset(self, client: TestClient) -> None:
        response = client.get("/static/bridge.js")
        assert response.status_code == 200

    def test_index_missing(self, bridge: Bridge, tmp_path: Path) -> None:
        client = TestClient(create_app(bridge, tmp_path / "nowhere"))
        assert client.get("/").status_code == 404

    def test_packaged_page_exists(self) -> None:
        from tokamak_mcp.config.schema import DashboardConfig
        from tokamak_mcp.dashboard.server import get_static_dir

        static = get_static_dir(DashboardConfig())
        assert (static / "index.html").is_file()
        assert (static / "bridge.js").is_file()


class TestApi:
    def test_health_without_dashboard(self, client: TestClient) -> None:
        assert client.get("/api/health").json() == {"status": "ok", "connected": False}

    def test_wallet_disconnected(self, client: TestClient) -> None:
        assert client.get("/api/wallet").json() == {
            "connected": False,
            "address": None,
            "network": None,
        }


class TestWebSocket:
    def test_ping_pong(self, client: TestClient) -> None:
        with client.websocket_connect("/ws") as ws:
            ws.send_text("ping")
            assert ws.receive_text() == "pong"

    def test_wallet_connected_updates_state(self, client: TestClient, bridge: Bridge) -> None:
        with client.websocket_connect("/ws") as ws:
            ws.send_text(wallet_connected(WALLET, "sepolia"))
            # Frames are handled in order; the pong means the first one was applied
            ws.send_text("ping")
            assert ws.receive_text() == "pong"

            assert client.get("/api/health").json()["connected"] is True
            assert client.get("/api/wallet").json() == {
                "connected": True,
                "address": WALLET,
                "network": "sepolia",
            }

    def test_disconnect_resets_state(self, client: TestClient, bridge: Bridge) -> None:
        with client.websocket_connect("/ws") as ws:
            ws.send_text(wallet_connected())
            ws.send_text("ping")
            ws.receive_text()

        assert bridge.state.read().connected is False
        assert bridge.channel.is_connected is False

    def test_binary_frames_accepted(self, client: TestClient, bridge: Bridge) -> None:
        with client.websocket_connect("/ws") as ws:
            ws.send_bytes(wallet_connected(WALLET, "mainnet").encode())
            ws.send_text("ping")
            assert ws.receive_text() == "pong"

            assert bridge.state.read().wallet_address == WALLET
            assert bridge.channel.is_connected is True

    def test_malformed_frame_keeps_connection(self, client: TestClient, bridge: Bridge) -> None:
        with client.websocket_connect("/ws") as ws:
            ws.send_text("{not json")
            ws.send_text("ping")
            assert ws.receive_text() == "pong"
            assert bridge.channel.is_connected is True
