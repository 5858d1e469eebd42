"""Calldata builders for the staking and token operations.

Each builder is a pure function returning a TransactionPayload. Amounts are
integers in base units; callers convert with ``parse_units`` after checking
balances so that a doomed request never reaches the signing bridge.
"""

from __future__ import annotations

from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector, to_hex

from tokamak_mcp.bridge.messages import TransactionPayload
from tokamak_mcp.chain.layer2 import resolve_layer2_address
from tokamak_mcp.chain.networks import checksum, get_contract_address, get_token_address
from tokamak_mcp.errors import InvalidAmount, UnknownToken


def encode_call(signature: str, arg_types: list[str], args: list[object]) -> str:
    """ABI-encode a call: 4-byte selector followed by the encoded arguments."""
    selector = function_signature_to_4byte_selector(signature)
    return to_hex(selector + encode(arg_types, args))


def _require_token(token: str, network: str) -> str:
    address = get_token_address(token, network)
    if address is None:
        # ETH has no contract to call
        raise UnknownToken(token)
    return address


def _check_amount(amount: int) -> int:
    if amount < 0:
        raise InvalidAmount(str(amount), "amount must not be negative")
    return amount


def build_approve(token: str, spender: str, amount: int, network: str) -> TransactionPayload:
    """ERC20 ``approve(spender, amount)`` on ``token``."""
    return TransactionPayload(
        to=_require_token(token, network),
        data=encode_call(
            "approve(address,uint256)",
            ["address", "uint256"],
            [checksum(spender), _check_amount(amount)],
        ),
    )


def build_transfer(token: str, to: str, amount: int, network: str) -> TransactionPayload:
    """ERC20 ``transfer(to, amount)`` on ``token``."""
    return TransactionPayload(
        to=_require_token(token, network),
        data=encode_call(
            "transfer(address,uint256)",
            ["address", "uint256"],
            [checksum(to), _check_amount(amount)],
        ),
    )


def build_native_transfer(to: str, amount: int) -> TransactionPayload:
    """Plain ETH transfer of ``amount`` wei."""
    return TransactionPayload(to=checksum(to), value=_check_amount(amount))


def build_wrap_ton(amount: int, network: str) -> TransactionPayload:
    """WTON ``swapFromTON(amount)``; needs a prior TON allowance to WTON."""
    return TransactionPayload(
        to=_require_token("WTON", network),
        data=encode_call("swapFromTON(uint256)", ["uint256"], [_check_amount(amount)]),
    )


def build_stake_ton(amount: int, layer2: str, network: str) -> TransactionPayload:
    """Stake TON to a Layer2 operator in one transaction.

    Calls ``TON.approveAndCall(WTON, amount, data)``, where ``data`` encodes
    ``(DepositManager, layer2)`` so WTON deposits on the operator's behalf.
    """
    wton = _require_token("WTON", network)
    deposit_manager = get_contract_address("DEPOSIT_MANAGER", network)
    operator = resolve_layer2_address(layer2, network)
    extra = encode(["address", "address"], [deposit_manager, operator])
    return TransactionPayload(
        to=_require_token("TON", network),
        data=encode_call(
            "approveAndCall(address,uint256,bytes)",
            ["address", "uint256", "bytes"],
            [wton, _check_amount(amount), extra],
        ),
    )


def build_unstake_ton(amount: int, layer2: str, network: str) -> TransactionPayload:
    """DepositManager ``requestWithdrawal(layer2, amount)``; amount in RAY units."""
    return TransactionPayload(
        to=get_contract_address("DEPOSIT_MANAGER", network),
        data=encode_call(
            "requestWithdrawal(address,uint256)",
            ["address", "uint256"],
            [resolve_layer2_address(layer2, network), _check_amount(amount)],
        ),
    )


def build_withdraw_ton(layer2: str, network: str) -> TransactionPayload:
    """DepositManager ``processRequest(layer2, true)``: withdraw as TON."""
    return TransactionPayload(
        to=get_contract_address("DEPOSIT_MANAGER", network),
        data=encode_call(
            "processRequest(address,bool)",
            ["address", "bool"],
            [resolve_layer2_address(layer2, network), True],
        ),
    )
