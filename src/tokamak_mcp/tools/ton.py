"""TON to WTON wrapping."""

from __future__ import annotations

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from tokamak_mcp.chain.calldata import build_wrap_ton
from tokamak_mcp.chain.networks import get_token_address
from tokamak_mcp.chain.units import parse_units
from tokamak_mcp.errors import InsufficientAllowance, InsufficientBalance
from tokamak_mcp.tools.helper import ToolContext, describe_sent, tool_errors


async def wrap_ton(ctx: ToolContext, amount: str) -> str:
    with tool_errors("wrap-ton"):
        state = ctx.bridge.require_connection()
        account, network = state.wallet_address, state.network

        balance = await ctx.reader.get_token_balance("TON", account, network)
        value = parse_units(amount, balance.decimals)
        if balance.balance < value:
            raise InsufficientBalance(balance.formatted, "TON")

        # WTON pulls TON from the caller, so it needs an allowance first
        wton = get_token_address("WTON", network)
        allowance = await ctx.reader.get_allowance("TON", account, wton, network)
        if allowance.allowance < value:
            raise InsufficientAllowance(amount, wton, allowance.formatted, "TON")

        tx_hash = await ctx.bridge.request_transaction(build_wrap_ton(value, network))
        return describe_sent(f"wrap {amount} TON to WTON", network, tx_hash)


def register_ton_tools(server: FastMCP, ctx: ToolContext) -> None:
    @server.tool(
        name="wrap-ton",
        title="Wrap TON tokens to WTON",
        description="Wrap (also known as Swap, Convert) a specified amount of TON tokens to WTON.",
    )
    async def _wrap_ton(
        amount: Annotated[str, Field(description="The amount of TON to wrap")],
    ) -> str:
        return await wrap_ton(ctx, amount)
