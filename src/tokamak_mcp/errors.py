"""Error taxonomy for the signing bridge and chain helpers.

Bridge errors describe why a signing request could not complete. Chain errors
are domain failures raised before any signing request is sent. Both carry
user-facing messages; the tool layer turns them into text.
"""

from __future__ import annotations

from dataclasses import dataclass


class TokamakError(Exception):
    """Base class for all errors raised by tokamak_mcp."""


# -- Bridge ------------------------------------------------------------------


class BridgeError(TokamakError):
    """A signing request failed at the bridge layer."""


class NoWalletConnected(BridgeError):
    def __init__(self) -> None:
        super().__init__("No wallet connected. Please connect a wallet in the dashboard first.")


class NoActiveSession(BridgeError):
    def __init__(self) -> None:
        super().__init__("No dashboard session connected. Please open the dashboard in your browser.")


class RequestAlreadyInFlight(BridgeError):
    def __init__(self) -> None:
        super().__init__(
            "Another transaction is waiting for approval in the dashboard. "
            "Approve or reject it before sending a new one."
        )


class ChannelLost(BridgeError):
    def __init__(self) -> None:
        super().__init__("Dashboard session was lost before the transaction was signed")


@dataclass
class TimedOut(BridgeError):
    """No tx_result arrived within the configured bound."""

    timeout: float

    def __str__(self) -> str:
        return f"Transaction request timed out after {self.timeout:g} seconds"


@dataclass
class UserRejected(BridgeError):
    """The browser reported an error for the signing request."""

    reason: str

    def __str__(self) -> str:
        return f"Transaction failed: {self.reason}"


# -- Chain / domain ------------------------------------------------------------


class ChainError(TokamakError):
    """A domain precondition failed; no transaction was requested."""


@dataclass
class UnknownNetwork(ChainError):
    name: str

    def __str__(self) -> str:
        return f"Unknown network: {self.name}. Use 'mainnet' or 'sepolia'."


@dataclass
class UnknownToken(ChainError):
    token: str

    def __str__(self) -> str:
        return f"Unknown token: {self.token}. Use a contract address instead of token name."


@dataclass
class UnknownLayer2(ChainError):
    layer2: str
    network: str

    def __str__(self) -> str:
        return f"Layer2 {self.layer2} not configured for network {self.network}"


@dataclass
class InvalidAmount(ChainError):
    amount: str
    reason: str

    def __str__(self) -> str:
        return f"Invalid amount '{self.amount}': {self.reason}"


@dataclass
class NetworkMismatch(ChainError):
    requested: str
    connected: str

    def __str__(self) -> str:
        return (
            f"Wallet is connected to {self.connected}, not {self.requested}. "
            f"Switch networks in your wallet first."
        )


@dataclass
class InvalidAddress(ChainError):
    address: str

    def __str__(self) -> str:
        return f"Invalid address: {self.address}"


@dataclass
class InsufficientBalance(ChainError):
    balance: str
    symbol: str

    def __str__(self) -> str:
        return f"Not enough {self.symbol} tokens. Balance: {self.balance} {self.symbol}"


@dataclass
class InsufficientAllowance(ChainError):
    amount: str
    spender: str
    allowance: str
    symbol: str

    def __str__(self) -> str:
        return (
            f"Not enough {self.symbol} tokens. Allowance: {self.allowance} {self.symbol}. "
            f"Please approve {self.amount} {self.symbol} to {self.spender} "
            f"(current allowance: {self.allowance})"
        )


@dataclass
class InsufficientStake(ChainError):
    staked: str
    requested: str

    def __str__(self) -> str:
        return f"Insufficient staked amount. Staked: {self.staked}, Requested: {self.requested}"


@dataclass
class NoPendingWithdrawal(ChainError):
    layer2: str
    network: str

    def __str__(self) -> str:
        return f"No pending withdrawal requests from {self.layer2} on {self.network}"


@dataclass
class WithdrawalNotReady(ChainError):
    available_at: int
    current_block: int

    def __str__(self) -> str:
        remaining = self.available_at - self.current_block
        return (
            f"No withdrawable requests yet. Earliest request available at block "
            f"{self.available_at} ({remaining} blocks remaining, current: {self.current_block})"
        )
