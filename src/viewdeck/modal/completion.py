"""One-shot completion slot bridging a show request to its result."""

from __future__ import annotations

import asyncio
from typing import Generic, TypeVar

from viewdeck.errors import SlotAlreadyResolvedError


T = TypeVar("T")


class CompletionSlot(Generic[T]):
    """A future that may be written exactly once.

    Reading is idempotent: the future keeps its result after resolution.
    A second write raises instead of being ignored.
    """

    def __init__(self) -> None:
        self._future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        self._resolved = False

    @property
    def future(self) -> asyncio.Future[T]:
        return self._future

    @property
    def resolved(self) -> bool:
        return self._resolved

    def resolve(self, value: T) -> None:
        """Write the result.

        Raises:
            SlotAlreadyResolvedError: If the slot was already written.
        """
        if self._resolved:
            msg = "Completion slot was already resolved"
            raise SlotAlreadyResolvedError(msg)
        self._resolved = True
        # The awaiting task may have been cancelled; the write still counts.
        if not self._future.done():
            self._future.set_result(value)
