"""Tests for the one-shot completion slot."""

from __future__ import annotations

import asyncio

import pytest

from viewdeck.errors import ModalStateError, SlotAlreadyResolvedError
from viewdeck.modal.completion import CompletionSlot

pytestmark = pytest.mark.unit


class TestCompletionSlot:
    async def test_pending_until_resolved(self):
        slot: CompletionSlot[int] = CompletionSlot()
        await asyncio.sleep(0)
        assert not slot.future.done()
        assert not slot.resolved

    async def test_resolve_delivers_value(self):
        slot: CompletionSlot[str] = CompletionSlot()
        slot.resolve("done")
        assert slot.resolved
        assert await slot.future == "done"

    async def test_reading_twice_returns_same_value(self):
        slot: CompletionSlot[int] = CompletionSlot()
        slot.resolve(7)
        assert await slot.future == 7
        assert await slot.future == 7

    async def test_second_resolve_raises(self):
        slot: CompletionSlot[int] = CompletionSlot()
        slot.resolve(1)
        with pytest.raises(SlotAlreadyResolvedError):
            slot.resolve(2)
        assert await slot.future == 1

    async def test_already_resolved_is_a_state_error(self):
        assert issubclass(SlotAlreadyResolvedError, ModalStateError)

    async def test_resolve_after_waiter_cancelled(self):
        slot: CompletionSlot[int] = CompletionSlot()
        slot.future.cancel()
        slot.resolve(1)
        assert slot.resolved
        with pytest.raises(SlotAlreadyResolvedError):
            slot.resolve(2)

    def test_requires_running_loop(self):
        with pytest.raises(RuntimeError):
            CompletionSlot()
