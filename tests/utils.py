"""Shared test utilities for tokamak_mcp tests."""

from __future__ import annotations

import asyncio
from typing import Any

WALLET = "0x1111111111111111111111111111111111111111"
OTHER = "0x2222222222222222222222222222222222222222"
TX_HASH = "0x" + "ab" * 32


class MockWebSocket:
    """Mock WebSocket for testing."""

    def __init__(self, should_fail: bool = False):
        self.should_fail = should_fail
        self.accepted = False
        self.closed = False
        self.close_code: int | None = None
        self.close_reason: str | None = None
        self.sent_messages: list[dict[str, Any]] = []

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, message: dict) -> None:
        if self.should_fail:
            raise Exception("WebSocket connection failed")
        self.sent_messages.append(message)

    async def close(self, code: int = 1000, reason: str = "") -> None:
        self.closed = True
        self.close_code = code
        self.close_reason = reason


class FakeLauncher:
    """Launcher that records calls instead of starting a web server."""

    def __init__(self, fail: bool = False, delay: float = 0.0):
        self.fail = fail
        self.delay = delay
        self.start_calls = 0
        self.stop_calls = 0

    async def start(self, bridge: Any) -> None:
        self.start_calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise OSError("address already in use")

    async def stop(self) -> None:
        self.stop_calls += 1


def wallet_connected(address: str = WALLET, network: str = "mainnet") -> str:
    return (
        '{"type": "wallet_connected", "data": {"address": "%s", "network": "%s"}}'
        % (address, network)
    )


def tx_result(hash: str | None = None, error: str | None = None) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if hash is not None:
        data["hash"] = hash
    if error is not None:
        data["error"] = error
    return {"type": "tx_result", "data": data}


async def wait_for_sign_request(ws: MockWebSocket, count: int = 1) -> dict[str, Any]:
    """Yield to the loop until ``count`` sign_tx frames have been sent."""
    for _ in range(200):
        if len(ws.sent_messages) >= count:
            return ws.sent_messages[count - 1]
        await asyncio.sleep(0)
    raise AssertionError("sign_tx was never sent")
