"""Token tools: balances, approvals and transfers."""

from __future__ import annotations

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from tokamak_mcp.chain.calldata import build_approve, build_native_transfer, build_transfer
from tokamak_mcp.chain.constants import KNOWN_TOKENS, NATIVE_TOKEN
from tokamak_mcp.chain.networks import checksum
from tokamak_mcp.chain.units import parse_units
from tokamak_mcp.errors import InsufficientBalance, NetworkMismatch
from tokamak_mcp.tools.helper import ToolContext, describe_sent, tool_errors

_TOKEN_CHOICES = ", ".join((*KNOWN_TOKENS, NATIVE_TOKEN))


async def get_token_balance(ctx: ToolContext, token: str = "TON") -> str:
    with tool_errors("get_token_balance"):
        state = ctx.bridge.require_connection()
        balance = await ctx.reader.get_token_balance(token, state.wallet_address, state.network)
        return f"Balance: {balance.formatted} {balance.symbol}"


async def approve_token(
    ctx: ToolContext,
    token: str,
    spender: str,
    amount: str,
    network: str | None = None,
) -> str:
    with tool_errors("approve_token"):
        state = ctx.bridge.require_connection()
        if network is not None and network != state.network:
            raise NetworkMismatch(requested=network, connected=state.network)
        spender = checksum(spender)

        balance = await ctx.reader.get_token_balance(token, state.wallet_address, state.network)
        payload = build_approve(token, spender, parse_units(amount, balance.decimals), state.network)

        tx_hash = await ctx.bridge.request_transaction(payload)
        return describe_sent(f"approve {amount} {token} to {spender}", state.network, tx_hash)


async def transfer_token(ctx: ToolContext, token: str, to: str, amount: str) -> str:
    with tool_errors("transfer_token"):
        state = ctx.bridge.require_connection()
        to = checksum(to)

        balance = await ctx.reader.get_token_balance(token, state.wallet_address, state.network)
        value = parse_units(amount, balance.decimals)
        if balance.balance < value:
            raise InsufficientBalance(balance.formatted, balance.symbol)

        if token == NATIVE_TOKEN:
            payload = build_native_transfer(to, value)
        else:
            payload = build_transfer(token, to, value, state.network)

        tx_hash = await ctx.bridge.request_transaction(payload)
        return describe_sent(f"transfer {amount} {token} to {to}", state.network, tx_hash)


def register_erc20_tools(server: FastMCP, ctx: ToolContext) -> None:
    @server.tool(
        name="get_token_balance",
        description=f"Get token balance of the connected wallet. Supports {_TOKEN_CHOICES}.",
    )
    async def _get_token_balance(
        token: Annotated[str, Field(description=f"Token symbol ({_TOKEN_CHOICES})")] = "TON",
    ) -> str:
        return await get_token_balance(ctx, token)

    @server.tool(
        name="approve_token",
        title="Approve token spending",
        description="Approve a spender address to spend tokens on your behalf",
    )
    async def _approve_token(
        token: Annotated[str, Field(description=f"Token symbol ({', '.join(KNOWN_TOKENS)}) or address")],
        spender: Annotated[str, Field(description="Address to approve")],
        amount: Annotated[str, Field(description="Amount to approve (in token units)")],
        network: Annotated[
            str | None, Field(description="Network name (mainnet, sepolia). Default: wallet network")
        ] = None,
    ) -> str:
        return await approve_token(ctx, token, spender, amount, network)

    @server.tool(
        name="transfer_token",
        title="Transfer tokens",
        description="Transfer tokens to a specified address",
    )
    async def _transfer_token(
        token: Annotated[str, Field(description=f"Token symbol ({_TOKEN_CHOICES}) or address")],
        to: Annotated[str, Field(description="Recipient address")],
        amount: Annotated[str, Field(description="Amount to transfer (in token units)")],
    ) -> str:
        return await transfer_token(ctx, token, to, amount)
