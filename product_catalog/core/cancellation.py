"""Caller-supplied cancellation signal.

A request carries a CancellationToken through the pipeline. The dispatcher
checks it before doing any work; handlers and the notification publisher
check it at their I/O boundaries (repository calls, subscriber calls) via
``raise_if_cancelled()``. The dispatcher turns the resulting
OperationCancelled into ``Failure(CancelledError)``.

Native task cancellation (``asyncio.CancelledError``) is a different
mechanism and is never intercepted by the core.

Usage:
    token = CancellationToken()
    task = asyncio.create_task(dispatcher.dispatch(command, token))
    token.cancel()  # observed at the next repository/subscriber boundary
"""

import asyncio


class OperationCancelled(Exception):
    """Raised at an I/O boundary when the request's token was cancelled."""


class CancellationToken:
    """Cooperative cancellation flag backed by an asyncio.Event.

    Tokens are single-use: once cancelled they stay cancelled.
    """

    def __init__(self) -> None:
        """Create a token in the not-cancelled state."""
        self._event = asyncio.Event()

    @classmethod
    def none(cls) -> "CancellationToken":
        """Return a fresh token nobody holds a reference to cancel."""
        return cls()

    def cancel(self) -> None:
        """Signal cancellation. Idempotent."""
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        """Whether cancel() has been called."""
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise OperationCancelled if the token was cancelled.

        Raises:
            OperationCancelled: If cancel() has been called.
        """
        if self._event.is_set():
            raise OperationCancelled("Operation cancelled by caller")

    async def wait(self) -> None:
        """Block until the token is cancelled."""
        await self._event.wait()
