"""MCP tool catalog.

Each module exposes plain async implementations taking a ToolContext, plus a
``register_*`` function that publishes them on a FastMCP server.
"""

from mcp.server.fastmcp import FastMCP

from tokamak_mcp.tools.erc20 import register_erc20_tools
from tokamak_mcp.tools.helper import ToolContext, tool_errors
from tokamak_mcp.tools.stake import register_stake_tools
from tokamak_mcp.tools.ton import register_ton_tools
from tokamak_mcp.tools.wallet import register_wallet_tools
from tokamak_mcp.tools.withdraw import register_withdraw_tools


def register_all_tools(server: FastMCP, ctx: ToolContext) -> None:
    register_wallet_tools(server, ctx)
    register_erc20_tools(server, ctx)
    register_ton_tools(server, ctx)
    register_stake_tools(server, ctx)
    register_withdraw_tools(server, ctx)


__all__ = [
    "ToolContext",
    "tool_errors",
    "register_all_tools",
    "register_wallet_tools",
    "register_erc20_tools",
    "register_ton_tools",
    "register_stake_tools",
    "register_withdraw_tools",
]
