"""Registry of Tokamak Network Layer2 operators."""

from __future__ import annotations

from dataclasses import dataclass

from eth_utils import to_checksum_address

from tokamak_mcp.chain.constants import MAINNET, SEPOLIA
from tokamak_mcp.chain.networks import checksum
from tokamak_mcp.errors import UnknownLayer2


@dataclass(frozen=True)
class Layer2Operator:
    name: str
    address: str


def _ops(*entries: tuple[str, str, str]) -> dict[str, Layer2Operator]:
    return {key: Layer2Operator(name=name, address=address) for key, name, address in entries}


LAYER2_OPERATORS: dict[str, dict[str, Layer2Operator]] = {
    MAINNET: _ops(
        ("tokamak1", "tokamak1", "0xf3B17FDB808c7d0Df9ACd24dA34700ce069007DF"),
        ("DXM_Corp", "DXM Corp", "0x44e3605d0ed58FD125E9C47D1bf25a4406c13b57"),
        ("DSRV", "DSRV", "0x2B67D8D4E61b68744885E243EfAF988f1Fc66E2D"),
        ("Talken", "Talken", "0x36101b31e74c5E8f9a9cec378407Bbb776287761"),
        ("staked", "staked", "0x2c25A6be0e6f9017b5bf77879c487eed466F2194"),
        ("level", "level", "0x0F42D1C40b95DF7A1478639918fc358B4aF5298D"),
        ("decipher", "decipher", "0xbc602C1D9f3aE99dB4e9fD3662CE3D02e593ec5d"),
        ("DeSpread", "DeSpread", "0xC42cCb12515b52B59c02eEc303c887C8658f5854"),
        ("Danal_Fintech", "Danal Fintech", "0xf3CF23D896Ba09d8EcdcD4655d918f71925E3FE5"),
        ("Hammer", "Hammer DAO", "0x06D34f65869Ec94B3BA8c0E08BCEb532f65005E2"),
    ),
    SEPOLIA: _ops(
        ("TokamakOperator_v2", "TokamakOperator_v2", "0xCBeF7Cc221c04AD2E68e623613cc5d33b0fE1599"),
        ("poseidon", "poseidon", "0xf078ae62ea4740e19ddf6c0c5e17ecdb820bbee1"),
    ),
}

KNOWN_LAYER2: tuple[str, ...] = tuple(
    dict.fromkeys(key for ops in LAYER2_OPERATORS.values() for key in ops)
)


def get_layer2_operators(network: str) -> dict[str, Layer2Operator]:
    return LAYER2_OPERATORS.get(network, {})


def resolve_layer2_address(identifier: str, network: str) -> str:
    """Resolve a Layer2 operator name (or ``0x`` address) on ``network``."""
    if identifier.startswith("0x"):
        return checksum(identifier)
    operator = get_layer2_operators(network).get(identifier)
    if operator is None:
        raise UnknownLayer2(identifier, network)
    return to_checksum_address(operator.address)
