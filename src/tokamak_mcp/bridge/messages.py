"""Wire messages exchanged with the dashboard over the WebSocket.

Every frame is a JSON object ``{"type": ..., "data": {...}}``.
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class WireModel(BaseModel):
    """Base model for wire types; immutable once built."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TransactionPayload(WireModel):
    """An unsigned transaction for the browser wallet to sign."""

    to: str
    data: str | None = None
    value: int | None = None

    @field_validator("to")
    @classmethod
    def _check_to(cls, v: str) -> str:
        if not (v.startswith("0x") and len(v) == 42):
            raise ValueError(f"not an address: {v!r}")
        return v

    @field_validator("data")
    @classmethod
    def _check_data(cls, v: str | None) -> str | None:
        if v is not None and not v.startswith("0x"):
            raise ValueError("data must be 0x-prefixed hex")
        return v

    @field_validator("value")
    @classmethod
    def _check_value(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError("value must not be negative")
        return v

    def to_wire(self) -> dict[str, Any]:
        """Encode for the browser. ``value`` travels as a decimal string."""
        out: dict[str, Any] = {"to": self.to}
        if self.data is not None:
            out["data"] = self.data
        if self.value is not None:
            out["value"] = str(self.value)
        return out


class WalletConnectedData(WireModel):
    address: str
    network: str


class NetworkChangedData(WireModel):
    network: str


class TransactionResultData(WireModel):
    hash: str | None = None
    error: str | None = None


class WalletConnected(WireModel):
    type: Literal["wallet_connected"] = "wallet_connected"
    data: WalletConnectedData


class NetworkChanged(WireModel):
    type: Literal["network_changed"] = "network_changed"
    data: NetworkChangedData


class TransactionResult(WireModel):
    type: Literal["tx_result"] = "tx_result"
    data: TransactionResultData = Field(default_factory=TransactionResultData)


class SignTransaction(WireModel):
    type: Literal["sign_tx"] = "sign_tx"
    data: TransactionPayload

    def to_wire(self) -> dict[str, Any]:
        return {"type": self.type, "data": self.data.to_wire()}


IncomingMessage = WalletConnected | NetworkChanged | TransactionResult

_INCOMING: dict[str, type[WireModel]] = {
    "wallet_connected": WalletConnected,
    "network_changed": NetworkChanged,
    "tx_result": TransactionResult,
}


class MalformedMessage(ValueError):
    """Raised when a frame from the browser cannot be decoded."""


def parse_message(raw: str | bytes | dict[str, Any]) -> IncomingMessage:
    """Decode a browser frame into one of the incoming message types.

    Raises:
        MalformedMessage: invalid JSON, unknown type, or bad payload.
    """
    if isinstance(raw, dict):
        obj = raw
    else:
        try:
            obj = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedMessage(f"invalid JSON: {e}") from e

    if not isinstance(obj, dict):
        raise MalformedMessage("message must be a JSON object")

    msg_type = obj.get("type")
    model = _INCOMING.get(msg_type) if isinstance(msg_type, str) else None
    if model is None:
        raise MalformedMessage(f"unknown message type: {msg_type!r}")

    try:
        return model.model_validate(obj)  # type: ignore[return-value]
    except ValidationError as e:
        raise MalformedMessage(f"invalid {msg_type} payload: {e}") from e
