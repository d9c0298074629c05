"""Thin page helpers for E2E testing.

These are reusable functions for common UI interactions,
not a full Page Object framework. Keep them simple and focused.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar, cast

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Callable

    from textual.pilot import Pilot

    from viewdeck.app import ViewDeckApp
    from viewdeck.modal.options import ModalOptions
    from viewdeck.modal.registry import DialogKey
    from viewdeck.modal.result import ModalResult
    from viewdeck.views.manager import ViewManager


def deck_app(pilot: Pilot) -> ViewDeckApp:
    return cast("ViewDeckApp", pilot.app)


def manager(pilot: Pilot) -> ViewManager:
    return deck_app(pilot).view_manager


def is_on_screen(pilot: Pilot, screen_name: str) -> bool:
    """Check if the current screen's class name contains ``screen_name``."""
    return screen_name in type(pilot.app.screen).__name__


async def wait_for_screen(pilot: Pilot, screen_name: str, attempts: int = 20) -> bool:
    """Pause until ``screen_name`` is on top, giving up after ``attempts`` pauses."""
    for _ in range(attempts):
        if is_on_screen(pilot, screen_name):
            return True
        await pilot.pause()
    return is_on_screen(pilot, screen_name)


async def wait_for_modal_closed(pilot: Pilot, attempts: int = 20) -> None:
    for _ in range(attempts):
        if not manager(pilot).is_modal_open:
            break
        await pilot.pause()
    await pilot.pause()


async def open_confirm_dialog(pilot: Pilot) -> None:
    """Open the Yes/No confirmation from the index view (press a)."""
    await pilot.press("a")
    assert await wait_for_screen(pilot, "YesNoDialog"), "confirm dialog did not open"
    await pilot.pause()


def last_result_text(pilot: Pilot) -> str:
    from textual.widgets import Label

    label = pilot.app.screen.query_one("#last-result", Label)
    return str(label.content)


async def wait_for(pilot: Pilot, predicate: Callable[[], bool], attempts: int = 20) -> bool:
    """Pause until ``predicate`` holds, giving up after ``attempts`` pauses."""
    for _ in range(attempts):
        if predicate():
            return True
        await pilot.pause()
    return predicate()


T = TypeVar("T")


async def call_in_app(pilot: Pilot, callback: Callable[..., T], *args: Any) -> T:
    """Run ``callback`` from the app's message loop, as a binding would, and return its value."""
    results: list[T] = []
    pilot.app.call_later(lambda: results.append(callback(*args)))
    assert await wait_for(pilot, lambda: bool(results)), "callback never ran in the app"
    await pilot.pause()
    return results[0]


async def show_dialog(
    pilot: Pilot, dialog_type: DialogKey, options: ModalOptions | None = None
) -> asyncio.Future[ModalResult]:
    """Open a dialog through the app's ViewManager and wait until it is on top."""
    future = await call_in_app(pilot, manager(pilot).show_modal_async, dialog_type, options)
    name = dialog_type if isinstance(dialog_type, str) else dialog_type.__name__
    assert await wait_for_screen(pilot, name), f"{name} never became the active screen"
    await pilot.pause()
    return future
