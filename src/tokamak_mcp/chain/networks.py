"""Network, token and address resolution helpers."""

from __future__ import annotations

from eth_utils import is_address, to_checksum_address

from tokamak_mcp.chain.constants import (
    CHAIN_IDS,
    CONTRACT_ADDRESSES,
    KNOWN_TOKENS,
    NATIVE_TOKEN,
    TOKEN_ADDRESSES,
)
from tokamak_mcp.errors import InvalidAddress, UnknownNetwork, UnknownToken


def get_chain_id(network: str) -> int:
    try:
        return CHAIN_IDS[network]
    except KeyError:
        raise UnknownNetwork(network) from None


def is_known_token(token: str) -> bool:
    return token in KNOWN_TOKENS


def checksum(address: str) -> str:
    """Validate ``address`` and return its EIP-55 checksum form."""
    if not isinstance(address, str) or not is_address(address):
        raise InvalidAddress(str(address))
    return to_checksum_address(address)


def get_token_address(token: str, network: str) -> str | None:
    """Resolve a token symbol or contract address on ``network``.

    Returns None for the native token (ETH). A ``0x`` address is validated and
    passed through.
    """
    if token == NATIVE_TOKEN:
        return None
    if token.startswith("0x"):
        return checksum(token)

    addresses = TOKEN_ADDRESSES.get(token)
    if addresses is None:
        raise UnknownToken(token)

    chain_id = get_chain_id(network)
    address = addresses.get(chain_id)
    if address is None:
        raise UnknownToken(token)
    return to_checksum_address(address)


def get_contract_address(name: str, network: str) -> str:
    """Return a staking contract address ("DEPOSIT_MANAGER", "SEIG_MANAGER")."""
    contracts = CONTRACT_ADDRESSES.get(network)
    if contracts is None:
        raise UnknownNetwork(network)
    return to_checksum_address(contracts[name])
