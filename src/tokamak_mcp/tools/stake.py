"""Staking tools: staked balance, stake and unstake."""

from __future__ import annotations

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from tokamak_mcp.chain.calldata import build_stake_ton, build_unstake_ton
from tokamak_mcp.chain.constants import RAY_DECIMALS
from tokamak_mcp.chain.layer2 import KNOWN_LAYER2
from tokamak_mcp.chain.units import format_units, parse_units
from tokamak_mcp.errors import InsufficientBalance, InsufficientStake
from tokamak_mcp.tools.helper import ToolContext, describe_sent, tool_errors

Layer2Name = Annotated[
    str, Field(description=f"Layer2 operator name ({', '.join(KNOWN_LAYER2)}) or address")
]


async def get_staked_ton_balance(ctx: ToolContext, layer2: str) -> str:
    with tool_errors("get-staked-ton-balance"):
        state = ctx.bridge.require_connection()
        staked = await ctx.reader.get_staked_balance(layer2, state.wallet_address, state.network)
        return (
            f"Staked TON balance to {layer2} on {state.network}: "
            f"{format_units(staked, RAY_DECIMALS)}"
        )


async def stake_ton(ctx: ToolContext, amount: str, layer2: str) -> str:
    with tool_errors("stake-ton"):
        state = ctx.bridge.require_connection()
        account, network = state.wallet_address, state.network

        balance = await ctx.reader.get_token_balance("TON", account, network)
        value = parse_units(amount, balance.decimals)
        if balance.balance < value:
            raise InsufficientBalance(balance.formatted, "TON")

        payload = build_stake_ton(value, layer2, network)
        tx_hash = await ctx.bridge.request_transaction(payload)
        return describe_sent(f"stake {amount} TON to {layer2}", network, tx_hash)


async def unstake_ton(ctx: ToolContext, amount: str, layer2: str) -> str:
    with tool_errors("unstake-ton"):
        state = ctx.bridge.require_connection()
        account, network = state.wallet_address, state.network

        staked = await ctx.reader.get_staked_balance(layer2, account, network)
        requested = parse_units(amount, RAY_DECIMALS)
        if staked < requested:
            raise InsufficientStake(format_units(staked, RAY_DECIMALS), amount)

        payload = build_unstake_ton(requested, layer2, network)
        tx_hash = await ctx.bridge.request_transaction(payload)
        return describe_sent(f"unstake {amount} TON from {layer2}", network, tx_hash)


def register_stake_tools(server: FastMCP, ctx: ToolContext) -> None:
    @server.tool(
        name="get-staked-ton-balance",
        title="Get staked TON balance",
        description="Get the staked TON balance to Layer2 operator.",
    )
    async def _get_staked_ton_balance(layer2: Layer2Name) -> str:
        return await get_staked_ton_balance(ctx, layer2)

    @server.tool(
        name="stake-ton",
        title="Stake TON tokens",
        description="Stake a specified amount of TON tokens to a Layer2 operator.",
    )
    async def _stake_ton(
        amount: Annotated[str, Field(description="The amount of TON to stake")],
        layer2: Layer2Name,
    ) -> str:
        return await stake_ton(ctx, amount, layer2)

    @server.tool(
        name="unstake-ton",
        title="Unstake TON tokens from Layer2 operator",
        description="Request withdrawal of staked TON tokens from a Layer2 operator.",
    )
    async def _unstake_ton(
        amount: Annotated[str, Field(description="The amount of TON to unstake")],
        layer2: Layer2Name,
    ) -> str:
        return await unstake_ton(ctx, amount, layer2)
