"""Tests for staking and token calldata builders."""

from __future__ import annotations

import pytest
from eth_abi import decode
from eth_utils import function_signature_to_4byte_selector, to_bytes

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
from tokamak_mcp.chain.constants import CONTRACT_ADDRESSES, TOKEN_ADDRESSES
from tokamak_mcp.chain.layer2 import LAYER2_OPERATORS
from tokamak_mcp.errors import InvalidAddress, UnknownLayer2, UnknownToken

SPENDER = "0x3333333333333333333333333333333333333333"
TON_MAINNET = TOKEN_ADDRESSES["TON"][1]
WTON_MAINNET = TOKEN_ADDRESSES["WTON"][1]
DEPOSIT_MANAGER = CONTRACT_ADDRESSES["mainnet"]["DEPOSIT_MANAGER"]
TOKAMAK1 = LAYER2_OPERATORS["mainnet"]["tokamak1"].address


def split(data: str) -> tuple[str, bytes]:
    raw = to_bytes(hexstr=data)
    return "0x" + raw[:4].hex(), raw[4:]


def selector(signature: str) -> str:
    return "0x" + function_signature_to_4byte_selector(signature).hex()


class TestEncodeCall:
    def test_known_selectors(self) -> None:
        approve = encode_call("approve(address,uint256)", ["address", "uint256"], [SPENDER, 1])
        transfer = encode_call("transfer(address,uint256)", ["address", "uint256"], [SPENDER, 1])
        assert approve.startswith("0x095ea7b3")
        assert transfer.startswith("0xa9059cbb")
        # selector + two 32-byte words
        assert len(approve) == 2 + 2 * (4 + 64)


class TestTokenCalls:
    def test_approve(self) -> None:
        payload = build_approve("TON", SPENDER, 5 * 10**18, "mainnet")
        assert payload.to.lower() == TON_MAINNET.lower()
        assert payload.value is None

        sel, args = split(payload.data)
        assert sel == "0x095ea7b3"
        spender, amount = decode(["address", "uint256"], args)
        assert spender.lower() == SPENDER
        assert amount == 5 * 10**18

    def test_transfer_on_sepolia(self) -> None:
        payload = build_transfer("WTON", SPENDER, 7, "sepolia")
        assert payload.to.lower() == TOKEN_ADDRESSES["WTON"][11155111].lower()
        sel, args = split(payload.data)
        assert sel == "0xa9059cbb"
        assert decode(["address", "uint256"], args)[1] == 7

    def test_custom_token_address(self) -> None:
        payload = build_transfer(SPENDER, SPENDER, 1, "mainnet")
        assert payload.to.lower() == SPENDER

    def test_native_transfer(self) -> None:
        payload = build_native_transfer(SPENDER, 10**18)
        assert payload.data is None
        assert payload.to_wire() == {"to": payload.to, "value": str(10**18)}

    def test_eth_has_no_contract(self) -> None:
        with pytest.raises(UnknownToken):
            build_transfer("ETH", SPENDER, 1, "mainnet")

    def test_unknown_symbol(self) -> None:
        with pytest.raises(UnknownToken):
            build_approve("DOGE", SPENDER, 1, "mainnet")

    def test_bad_recipient(self) -> None:
        with pytest.raises(InvalidAddress):
            build_transfer("TON", "0xnotanaddress", 1, "mainnet")


class TestStakingCalls:
    def test_wrap_ton(self) -> None:
        payload = build_wrap_ton(10**18, "mainnet")
        assert payload.to.lower() == WTON_MAINNET.lower()
        sel, args = split(payload.data)
        assert sel == selector("swapFromTON(uint256)")
        assert decode(["uint256"], args) == (10**18,)

    def test_stake_ton_uses_approve_and_call(self) -> None:
        payload = build_stake_ton(10**18, "tokamak1", "mainnet")
        assert payload.to.lower() == TON_MAINNET.lower()

        sel, args = split(payload.data)
        assert sel == selector("approveAndCall(address,uint256,bytes)")
        spender, amount, extra = decode(["address", "uint256", "bytes"], args)
        assert spender.lower() == WTON_MAINNET.lower()
        assert amount == 10**18

        manager, operator = decode(["address", "address"], extra)
        assert manager.lower() == DEPOSIT_MANAGER.lower()
        assert operator.lower() == TOKAMAK1.lower()

    def test_unstake_ton(self) -> None:
        payload = build_unstake_ton(2 * 10**27, "tokamak1", "mainnet")
        assert payload.to.lower() == DEPOSIT_MANAGER.lower()
        sel, args = split(payload.data)
        assert sel == selector("requestWithdrawal(address,uint256)")
        operator, amount = decode(["address", "uint256"], args)
        assert operator.lower() == TOKAMAK1.lower()
        assert amount == 2 * 10**27

    def test_withdraw_ton_receives_ton(self) -> None:
        payload = build_withdraw_ton("tokamak1", "mainnet")
        sel, args = split(payload.data)
        assert sel == selector("processRequest(address,bool)")
        operator, receive_ton = decode(["address", "bool"], args)
        assert operator.lower() == TOKAMAK1.lower()
        assert receive_ton is True

    def test_layer2_by_address(self) -> None:
        payload = build_unstake_ton(1, SPENDER, "mainnet")
        operator, _ = decode(["address", "uint256"], split(payload.data)[1])
        assert operator.lower() == SPENDER

    def test_layer2_not_on_network(self) -> None:
        with pytest.raises(UnknownLayer2):
            build_withdraw_ton("tokamak1", "sepolia")
