"""Cooperative cancellation for catalog load attempts."""

from __future__ import annotations

import asyncio

from tanks_lite.domain.errors import FetchCancelled


class CancellationToken:
    """
    Cancellation flag owned by a single load attempt.

    - sequence: monotonically increasing attempt number (0 for ad-hoc tokens)
    - cancel() is idempotent and never un-cancels
    - wait() lets transports abort an in-flight request
    """

    def __init__(self, sequence: int = 0) -> None:
        self.sequence = sequence
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def raise_if_cancelled(self) -> None:
        """
        Raises:
            FetchCancelled: If cancel() has been called
        """
        if self._event.is_set():
            raise FetchCancelled(sequence=self.sequence)

    async def wait(self) -> None:
        await self._event.wait()

    def __repr__(self) -> str:
        return f"CancellationToken(sequence={self.sequence}, cancelled={self.cancelled})"
