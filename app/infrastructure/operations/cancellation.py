"""Cooperative cancellation for long-running operations.

A CancellationToken is created by the caller, handed to an operation and
checked by that operation at safe points. Cancelling the token never
interrupts work in progress; the operation notices it at its next check and
raises OperationCancelledError instead of returning a partial result.

Usage:
    from infrastructure.operations import CancellationToken

    token = CancellationToken()
    task = asyncio.create_task(extractor.get_group_patient_ids(
        "group-1", membership_time, cancellation=token
    ))
    ...
    token.cancel()  # safe to call from any thread
"""

import threading
from typing import Optional


class OperationCancelledError(Exception):
    """Raised when an operation observes that its token has been cancelled."""

    def __init__(self, message: str = "Operation was cancelled."):
        super().__init__(message)


class CancellationToken:
    """Thread-safe, one-way cancellation flag."""

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        self._event.set()

    def raise_if_cancelled(self) -> None:
        """Raise OperationCancelledError if cancellation was requested."""
        if self._event.is_set():
            raise OperationCancelledError()


def raise_if_cancelled(token: Optional[CancellationToken]) -> None:
    """Check an optional token; a missing token is never cancelled."""
    if token is not None:
        token.raise_if_cancelled()
