"""Entry point for running tokamak-mcp as an MCP stdio server.

Usage:
    python -m tokamak_mcp

The MCP client (Claude Desktop, an IDE, ...) talks JSON-RPC over stdin/stdout.
The dashboard web server is started lazily, the first time a tool needs the
wallet.
"""

from __future__ import annotations

import asyncio

from tokamak_mcp.config import Config, load_config
from tokamak_mcp.logging import get_logger, setup_logging
from tokamak_mcp.server import create_app_context, create_server

log = get_logger()


async def _main(config: Config) -> None:
    """Run the MCP stdio loop; shut the bridge down when the client goes away."""
    ctx = create_app_context(config)
    server = create_server(ctx)

    log.info("MCP server ready (dashboard at %s on first use)", config.dashboard.url)
    try:
        await server.run_stdio_async()
    except (BrokenPipeError, ConnectionResetError):
        log.info("Pipe closed, shutting down...")
    finally:
        log.info("MCP client disconnected, cleaning up...")
        try:
            await asyncio.wait_for(ctx.bridge.shutdown(), timeout=3.0)
        except asyncio.TimeoutError:
            log.warning("Bridge shutdown timed out")


def main() -> None:
    """Run the tokamak-mcp tool server."""
    # Load config before logging so we can use config.logging settings
    config = load_config(project_root=".")
    setup_logging(config.logging)

    log.info(
        "Starting tokamak-mcp (port=%d, tx_timeout=%gs)",
        config.dashboard.port,
        config.bridge.tx_timeout,
    )
    try:
        asyncio.run(_main(config))
    except KeyboardInterrupt:
        log.info("Interrupted")
    finally:
        log.info("Exiting...")


if __name__ == "__main__":
    main()
