"""Assembly of the MCP tool server."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from tokamak_mcp.bridge.facade import Bridge
from tokamak_mcp.chain.reader import ChainReader
from tokamak_mcp.config.schema import Config
from tokamak_mcp.dashboard.server import DashboardServer
from tokamak_mcp.tools import ToolContext, register_all_tools

SERVER_NAME = "tnm"

INSTRUCTIONS = (
    "Tools for Tokamak Network staking and tokens. Transactions are signed by "
    "the user's browser wallet in the Tokamak Network Desktop; each "
    "transaction tool waits until the user signs or rejects the request."
)


def build_bridge(config: Config) -> Bridge:
    """Bridge wired to a dashboard server that starts on first use."""
    return Bridge(
        launcher=DashboardServer(config.dashboard),
        tx_timeout=config.bridge.tx_timeout,
    )


def create_server(ctx: ToolContext) -> FastMCP:
    """Create the FastMCP server with every tool registered."""
    server = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS)
    register_all_tools(server, ctx)
    return server


def create_app_context(config: Config) -> ToolContext:
    return ToolContext(
        bridge=build_bridge(config),
        reader=ChainReader(config.chain.rpc_urls),
        dashboard_url=config.dashboard.url,
    )
