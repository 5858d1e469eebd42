"""Wallet and dashboard tools: connection state and opening the desktop."""

from __future__ import annotations

import json

from mcp.server.fastmcp import FastMCP

from tokamak_mcp.tools.helper import ToolContext, tool_errors


def get_wallet_address(ctx: ToolContext) -> str:
    state = ctx.bridge.read_connection_state()
    if state.connected:
        return f"Connected wallet: {state.wallet_address} ({state.network})"
    return "No wallet connected. Please connect a wallet in the dashboard first."


def get_connection_state(ctx: ToolContext) -> str:
    return json.dumps(ctx.bridge.read_connection_state().to_dict())


async def open_desktop(ctx: ToolContext) -> str:
    with tool_errors("open-desktop"):
        task = ctx.bridge.ensure_started()
        if task is not None and not task.done():
            await task
    return f"Tokamak Network Desktop opened at {ctx.dashboard_url}"


def register_wallet_tools(server: FastMCP, ctx: ToolContext) -> None:
    @server.tool(
        name="get_wallet_address",
        description=(
            "Get the connected wallet address. Returns the cached address if the "
            "wallet is already connected."
        ),
    )
    async def _get_wallet_address() -> str:
        return get_wallet_address(ctx)

    @server.tool(
        name="get_connection_state",
        description="Get the wallet connection state (connected, address, network) as JSON.",
    )
    async def _get_connection_state() -> str:
        return get_connection_state(ctx)

    @server.tool(
        name="open-desktop",
        title="Open Tokamak Network Desktop",
        description="Opens the Tokamak Network Desktop application in your browser",
    )
    async def _open_desktop() -> str:
        return await open_desktop(ctx)
