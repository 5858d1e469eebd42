"""Withdrawal tools: list pending requests and process a ready one."""

from __future__ import annotations

import asyncio
import json

from mcp.server.fastmcp import FastMCP

from tokamak_mcp.chain.calldata import build_withdraw_ton
from tokamak_mcp.errors import NoPendingWithdrawal, WithdrawalNotReady
from tokamak_mcp.tools.helper import ToolContext, describe_sent, tool_errors
from tokamak_mcp.tools.stake import Layer2Name


async def get_pending_withdrawal(ctx: ToolContext, layer2: str) -> str:
    with tool_errors("get-pending-withdrawal"):
        state = ctx.bridge.require_connection()
        requests = await ctx.reader.get_pending_withdrawals(
            layer2, state.wallet_address, state.network
        )
        if not requests:
            return f"No pending withdrawal requests from {layer2} on {state.network}"

        formatted = [
            {
                "withdrawableBlockNumber": str(req.withdrawable_block_number),
                "amount": req.formatted_amount,
            }
            for req in requests
        ]
        return (
            f"Pending withdrawal requests from {layer2} on {state.network}:\n"
            f"{json.dumps(formatted, indent=2)}"
        )


async def withdraw_ton(ctx: ToolContext, layer2: str) -> str:
    with tool_errors("withdraw-ton"):
        state = ctx.bridge.require_connection()
        account, network = state.wallet_address, state.network

        requests, current_block = await asyncio.gather(
            ctx.reader.get_pending_withdrawals(layer2, account, network),
            ctx.reader.get_block_number(network),
        )
        if not requests:
            raise NoPendingWithdrawal(layer2, network)

        if not any(current_block >= req.withdrawable_block_number for req in requests):
            earliest = min(req.withdrawable_block_number for req in requests)
            raise WithdrawalNotReady(available_at=earliest, current_block=current_block)

        tx_hash = await ctx.bridge.request_transaction(build_withdraw_ton(layer2, network))
        return describe_sent(f"withdraw TON from {layer2}", network, tx_hash)


def register_withdraw_tools(server: FastMCP, ctx: ToolContext) -> None:
    @server.tool(
        name="get-pending-withdrawal",
        title="Get pending withdrawal requests",
        description="Get pending withdrawal requests from a Layer2 operator.",
    )
    async def _get_pending_withdrawal(layer2: Layer2Name) -> str:
        return await get_pending_withdrawal(ctx, layer2)

    @server.tool(
        name="withdraw-ton",
        title="Withdraw TON tokens",
        description="Process pending withdrawal request and receive TON tokens.",
    )
    async def _withdraw_ton(layer2: Layer2Name) -> str:
        return await withdraw_ton(ctx, layer2)
