"""Shared plumbing for the MCP tool catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from mcp.server.fastmcp.exceptions import ToolError

from tokamak_mcp.bridge.facade import Bridge
from tokamak_mcp.chain.reader import ChainReader
from tokamak_mcp.errors import TokamakError

_log = logging.getLogger("tokamak_mcp.tools")


@dataclass
class ToolContext:
    """Handles the tools need: the signing bridge and the chain reader."""

    bridge: Bridge
    reader: ChainReader
    dashboard_url: str = "http://localhost:3000"


@contextmanager
def tool_errors(tool: str) -> Iterator[None]:
    """Turn bridge and domain errors into MCP tool errors with readable text."""
    try:
        yield
    except TokamakError as e:
        _log.info("%s failed: %s", tool, e)
        raise ToolError(str(e)) from e


def describe_sent(action: str, network: str, tx_hash: str) -> str:
    return f"Transaction submitted: {action} on {network}. Hash: {tx_hash}"
