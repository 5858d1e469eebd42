"""Tokamak Network contract tables, calldata builders and chain queries."""

from tokamak_mcp.chain.calldata import (
    build_approve,
    build_native_transfer,
    build_stake_ton,
    build_transfer,
    build_unstake_ton,
    build_withdraw_ton,
    build_wrap_ton,
    encode_call,
)
from tokamak_mcp.chain.constants import (
    DEFAULT_NETWORK,
    KNOWN_NETWORKS,
    KNOWN_TOKENS,
    RAY_DECIMALS,
)
from tokamak_mcp.chain.layer2 import KNOWN_LAYER2, Layer2Operator, resolve_layer2_address
from tokamak_mcp.chain.networks import get_chain_id, get_contract_address, get_token_address
from tokamak_mcp.chain.reader import Allowance, ChainReader, TokenBalance, WithdrawalRequest
from tokamak_mcp.chain.units import format_units, parse_units

__all__ = [
    # Builders
    "build_approve",
    "build_transfer",
    "build_native_transfer",
    "build_wrap_ton",
    "build_stake_ton",
    "build_unstake_ton",
    "build_withdraw_ton",
    "encode_call",
    # Tables
    "DEFAULT_NETWORK",
    "KNOWN_NETWORKS",
    "KNOWN_TOKENS",
    "KNOWN_LAYER2",
    "RAY_DECIMALS",
    "Layer2Operator",
    "get_chain_id",
    "get_contract_address",
    "get_token_address",
    "resolve_layer2_address",
    # Reader
    "ChainReader",
    "TokenBalance",
    "Allowance",
    "WithdrawalRequest",
    # Units
    "parse_units",
    "format_units",
]
