"""Static network, token and contract tables for Tokamak Network."""

from __future__ import annotations

from typing import Final

MAINNET: Final = "mainnet"
SEPOLIA: Final = "sepolia"

KNOWN_NETWORKS: Final = (MAINNET, SEPOLIA)
DEFAULT_NETWORK: Final = MAINNET

CHAIN_IDS: Final[dict[str, int]] = {
    MAINNET: 1,
    SEPOLIA: 11155111,
}

NATIVE_TOKEN: Final = "ETH"
KNOWN_TOKENS: Final = ("TON", "WTON")

TOKEN_DECIMALS: Final[dict[str, int]] = {
    "ETH": 18,
    "TON": 18,
    "WTON": 27,
}

# Staked balances and withdrawal amounts are denominated in RAY (27 decimals)
RAY_DECIMALS: Final = 27

# token -> chain id -> address
TOKEN_ADDRESSES: Final[dict[str, dict[int, str]]] = {
    "TON": {
        1: "0x2be5e8c109e2197D077D13A82dAead6a9b3433C5",
        11155111: "0xa30fe40285B8f5c0457DbC3B7C8A280373c40044",
    },
    "WTON": {
        1: "0xc4A11aaf6ea915Ed7Ac194161d2fC9384F15bff2",
        11155111: "0x79E0d92670106c85E9067b56B8F674340dCa0Bbd",
    },
}

# network -> staking contracts
CONTRACT_ADDRESSES: Final[dict[str, dict[str, str]]] = {
    MAINNET: {
        "DEPOSIT_MANAGER": "0x0b58ca72b12f01fc05f8f252e226f3e2089bd00e",
        "SEIG_MANAGER": "0x0b55a0f463b6defb81c6063973763951712d0e5f",
    },
    SEPOLIA: {
        "DEPOSIT_MANAGER": "0x90ffcc7F168DceDBEF1Cb6c6eB00cA73F922956F",
        "SEIG_MANAGER": "0x2320542ae933FbAdf8f5B97cA348c7CeDA90fAd7",
    },
}
