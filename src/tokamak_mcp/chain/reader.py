"""Read-only chain queries over JSON-RPC.

Nothing here touches bridge state; tools call these to check preconditions
(balances, allowances, withdrawal readiness) before requesting a signature.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from web3 import AsyncHTTPProvider, AsyncWeb3

from tokamak_mcp.chain.constants import NATIVE_TOKEN, RAY_DECIMALS, TOKEN_DECIMALS
from tokamak_mcp.chain.layer2 import resolve_layer2_address
from tokamak_mcp.chain.networks import (
    checksum,
    get_chain_id,
    get_contract_address,
    get_token_address,
    is_known_token,
)
from tokamak_mcp.chain.units import format_units
from tokamak_mcp.errors import UnknownNetwork

_log = logging.getLogger("tokamak_mcp.chain.reader")

ERC20_ABI: list[dict[str, Any]] = [
    {
        "inputs": [{"name": "account", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "spender", "type": "address"},
        ],
        "name": "allowance",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

SEIG_MANAGER_ABI: list[dict[str, Any]] = [
    {
        "inputs": [
            {"name": "layer2", "type": "address"},
            {"name": "account", "type": "address"},
        ],
        "name": "stakeOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

DEPOSIT_MANAGER_ABI: list[dict[str, Any]] = [
    {
        "inputs": [
            {"name": "layer2", "type": "address"},
            {"name": "account", "type": "address"},
        ],
        "name": "withdrawalRequestIndex",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"name": "layer2", "type": "address"},
            {"name": "account", "type": "address"},
        ],
        "name": "numRequests",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"name": "layer2", "type": "address"},
            {"name": "account", "type": "address"},
            {"name": "index", "type": "uint256"},
        ],
        "name": "withdrawalRequest",
        "outputs": [
            {"name": "withdrawableBlockNumber", "type": "uint128"},
            {"name": "amount", "type": "uint128"},
            {"name": "processed", "type": "bool"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]


@dataclass(frozen=True)
class TokenBalance:
    balance: int
    decimals: int
    symbol: str

    @property
    def formatted(self) -> str:
        return format_units(self.balance, self.decimals)


@dataclass(frozen=True)
class Allowance:
    allowance: int
    decimals: int

    @property
    def formatted(self) -> str:
        return format_units(self.allowance, self.decimals)


@dataclass(frozen=True)
class WithdrawalRequest:
    withdrawable_block_number: int
    amount: int  # RAY units
    processed: bool

    @property
    def formatted_amount(self) -> str:
        return format_units(self.amount, RAY_DECIMALS)


class ChainReader:
    """Async read-only client, one AsyncWeb3 per network.

    Args:
        rpc_urls: Map of network name to JSON-RPC endpoint.
    """

    def __init__(self, rpc_urls: dict[str, str]) -> None:
        self._rpc_urls = dict(rpc_urls)
        self._clients: dict[str, AsyncWeb3] = {}

    def web3(self, network: str) -> AsyncWeb3:
        client = self._clients.get(network)
        if client is None:
            get_chain_id(network)
            url = self._rpc_urls.get(network)
            if not url:
                raise UnknownNetwork(network)
            _log.debug("Creating RPC client for %s at %s", network, url)
            client = AsyncWeb3(AsyncHTTPProvider(url))
            self._clients[network] = client
        return client

    def _contract(self, network: str, address: str, abi: list[dict[str, Any]]) -> Any:
        return self.web3(network).eth.contract(address=checksum(address), abi=abi)

    async def get_token_balance(self, token: str, account: str, network: str) -> TokenBalance:
        """Balance of ``token`` (symbol, ``0x`` address, or "ETH") for ``account``."""
        account = checksum(account)
        if token == NATIVE_TOKEN:
            balance = await self.web3(network).eth.get_balance(account)
            return TokenBalance(balance=balance, decimals=TOKEN_DECIMALS[NATIVE_TOKEN], symbol=NATIVE_TOKEN)

        token_address = get_token_address(token, network)
        contract = self._contract(network, token_address, ERC20_ABI)
        balance, decimals = await asyncio.gather(
            contract.functions.balanceOf(account).call(),
            contract.functions.decimals().call(),
        )
        symbol = token if is_known_token(token) else f"{token_address[:10]}..."
        return TokenBalance(balance=balance, decimals=decimals, symbol=symbol)

    async def get_allowance(self, token: str, owner: str, spender: str, network: str) -> Allowance:
        token_address = get_token_address(token, network)
        contract = self._contract(network, token_address, ERC20_ABI)
        allowance, decimals = await asyncio.gather(
            contract.functions.allowance(checksum(owner), checksum(spender)).call(),
            contract.functions.decimals().call(),
        )
        return Allowance(allowance=allowance, decimals=decimals)

    async def get_staked_balance(self, layer2: str, account: str, network: str) -> int:
        """Staked amount (RAY units) of ``account`` on a Layer2 operator."""
        seig_manager = self._contract(
            network, get_contract_address("SEIG_MANAGER", network), SEIG_MANAGER_ABI
        )
        operator = resolve_layer2_address(layer2, network)
        return await seig_manager.functions.stakeOf(operator, checksum(account)).call()

    async def get_pending_withdrawals(
        self, layer2: str, account: str, network: str
    ) -> list[WithdrawalRequest]:
        """Unprocessed, non-zero withdrawal requests of ``account`` on ``layer2``."""
        deposit_manager = self._contract(
            network, get_contract_address("DEPOSIT_MANAGER", network), DEPOSIT_MANAGER_ABI
        )
        operator = resolve_layer2_address(layer2, network)
        account = checksum(account)

        first_index, num_requests = await asyncio.gather(
            deposit_manager.functions.withdrawalRequestIndex(operator, account).call(),
            deposit_manager.functions.numRequests(operator, account).call(),
        )

        pending: list[WithdrawalRequest] = []
        for index in range(first_index, num_requests):
            block_number, amount, processed = await deposit_manager.functions.withdrawalRequest(
                operator, account, index
            ).call()
            if amount != 0 and not processed:
                pending.append(
                    WithdrawalRequest(
                        withdrawable_block_number=block_number,
                        amount=amount,
                        processed=processed,
                    )
                )
        return pending

    async def get_block_number(self, network: str) -> int:
        return await self.web3(network).eth.get_block_number()
