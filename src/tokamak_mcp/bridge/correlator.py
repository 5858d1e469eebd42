"""Correlates a signing request with the dashboard's tx_result reply.

The correlator is a two-state machine:

    IDLE --request()--> AWAITING_RESULT --(result | rejection | lost | timeout)--> IDLE

Only one request may be outstanding. A second request while one is pending
fails immediately instead of queueing, since the operator can only look at one
signing prompt at a time.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from tokamak_mcp.bridge.messages import SignTransaction, TransactionPayload, TransactionResult
from tokamak_mcp.errors import (
    BridgeError,
    ChannelLost,
    RequestAlreadyInFlight,
    TimedOut,
    UserRejected,
)

if TYPE_CHECKING:
    from tokamak_mcp.bridge.channel import SessionChannel

_log = logging.getLogger("tokamak_mcp.bridge.correlator")

DEFAULT_TX_TIMEOUT = 300.0

MALFORMED_RESULT_REASON = "Dashboard returned a result with neither hash nor error"


class CorrelatorState(Enum):
    IDLE = "idle"
    AWAITING_RESULT = "awaiting_result"


@dataclass
class PendingSigningRequest:
    """The single in-flight request and the future its caller awaits."""

    payload: TransactionPayload
    future: asyncio.Future[str]


class TransactionCorrelator:
    """Holds at most one outstanding signing request.

    Args:
        channel: Channel used to send ``sign_tx``.
        timeout: Seconds to wait for a ``tx_result`` before failing.
    """

    def __init__(self, channel: SessionChannel, timeout: float = DEFAULT_TX_TIMEOUT) -> None:
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        self._channel = channel
        self._timeout = timeout
        self._pending: PendingSigningRequest | None = None

    @property
    def state(self) -> CorrelatorState:
        if self._pending is None:
            return CorrelatorState.IDLE
        return CorrelatorState.AWAITING_RESULT

    @property
    def pending(self) -> PendingSigningRequest | None:
        return self._pending

    @property
    def timeout(self) -> float:
        return self._timeout

    async def request(self, payload: TransactionPayload) -> str:
        """Send ``payload`` for signing and wait for the transaction hash.

        Raises:
            RequestAlreadyInFlight: another request is pending; it is left untouched.
            ChannelLost: the channel could not deliver the request, or dropped
                before a reply arrived.
            UserRejected: the dashboard answered with an error.
            TimedOut: no reply within the timeout.
        """
        if self._pending is not None:
            raise RequestAlreadyInFlight()

        future: asyncio.Future[str] = asyncio.get_running_loop().create_future()
        pending = PendingSigningRequest(payload=payload, future=future)
        self._pending = pending
        _log.info("Requesting signature for transaction to %s", payload.to)

        try:
            sent = await self._channel.send(SignTransaction(data=payload).to_wire())
            if not sent and not future.done():
                raise ChannelLost()
            tx_hash = await asyncio.wait_for(future, timeout=self._timeout)
        except asyncio.TimeoutError:
            _log.warning("No tx_result within %.0fs", self._timeout)
            raise TimedOut(self._timeout) from None
        except asyncio.CancelledError:
            _log.info("Signing request cancelled by caller")
            raise
        finally:
            if self._pending is pending:
                self._pending = None

        _log.info("Transaction signed: %s", tx_hash)
        return tx_hash

    def resolve(self, result: TransactionResult) -> bool:
        """Deliver a ``tx_result`` to the pending request.

        Returns:
            True if a pending request consumed the result.
        """
        pending = self._pending
        if pending is None:
            _log.warning("Received tx_result with no pending request; ignoring")
            return False

        self._pending = None
        if pending.future.done():
            return False

        data = result.data
        if data.hash:
            pending.future.set_result(data.hash)
        elif data.error:
            _log.info("Transaction rejected: %s", data.error)
            pending.future.set_exception(UserRejected(data.error))
        else:
            _log.warning("tx_result carried neither hash nor error")
            pending.future.set_exception(UserRejected(MALFORMED_RESULT_REASON))
        return True

    def fail(self, error: BridgeError) -> bool:
        """Fail the pending request with ``error``. No-op when idle."""
        pending = self._pending
        if pending is None:
            return False

        self._pending = None
        if pending.future.done():
            return False
        _log.info("Failing pending request: %s", error)
        pending.future.set_exception(error)
        return True
