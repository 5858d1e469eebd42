"""Tests for the wallet connection state store."""

from __future__ import annotations

import dataclasses

import pytest

from tokamak_mcp.bridge.state import DISCONNECTED, ConnectionState, ConnectionStateStore
from tests.utils import OTHER, WALLET


@pytest.fixture
def store() -> ConnectionStateStore:
    return ConnectionStateStore()


class TestConnectionState:
    def test_default_is_disconnected(self) -> None:
        state = ConnectionState()
        assert state.connected is False
        assert state.to_dict() == {"connected": False, "address": None, "network": None}

    def test_connected_requires_address_and_network(self) -> None:
        assert ConnectionState(wallet_address=WALLET).connected is False
        assert ConnectionState(network="mainnet").connected is False
        assert ConnectionState(wallet_address=WALLET, network="mainnet").connected is True

    def test_to_dict_when_connected(self) -> None:
        state = ConnectionState(wallet_address=WALLET, network="sepolia")
        assert state.to_dict() == {"connected": True, "address": WALLET, "network": "sepolia"}

    def test_snapshot_is_immutable(self) -> None:
        state = ConnectionState(wallet_address=WALLET, network="mainnet")
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.network = "sepolia"  # type: ignore[misc]


class TestConnectionStateStore:
    def test_starts_disconnected(self, store: ConnectionStateStore) -> None:
        assert store.read() == DISCONNECTED

    def test_wallet_connected(self, store: ConnectionStateStore) -> None:
        store.apply_wallet_connected(WALLET, "mainnet")
        assert store.read() == ConnectionState(wallet_address=WALLET, network="mainnet")

    def test_reconnect_with_other_wallet_replaces(self, store: ConnectionStateStore) -> None:
        store.apply_wallet_connected(WALLET, "mainnet")
        store.apply_wallet_connected(OTHER, "sepolia")
        assert store.read().wallet_address == OTHER
        assert store.read().network == "sepolia"

    def test_network_changed_keeps_address(self, store: ConnectionStateStore) -> None:
        store.apply_wallet_connected(WALLET, "mainnet")
        store.apply_network_changed("sepolia")
        assert store.read() == ConnectionState(wallet_address=WALLET, network="sepolia")

    def test_network_changed_without_wallet(self, store: ConnectionStateStore) -> None:
        store.apply_network_changed("sepolia")
        state = store.read()
        assert state.wallet_address is None
        assert state.connected is False

    def test_disconnected_clears_everything(self, store: ConnectionStateStore) -> None:
        store.apply_wallet_connected(WALLET, "mainnet")
        store.apply_disconnected()
        assert store.read() == DISCONNECTED

    def test_earlier_snapshot_unaffected(self, store: ConnectionStateStore) -> None:
        store.apply_wallet_connected(WALLET, "mainnet")
        before = store.read()
        store.apply_network_changed("sepolia")
        assert before.network == "mainnet"
