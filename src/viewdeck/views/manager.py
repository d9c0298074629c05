"""Session-scoped view coordinator: navigation lock plus modal delegation."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, TypeAlias

from viewdeck.debug_log import log
from viewdeck.modal.host import ModalHost

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Callable, Iterator

    from viewdeck.modal.options import ModalOptions
    from viewdeck.modal.registry import DialogKey, DialogRegistry
    from viewdeck.modal.renderer import DialogRenderer
    from viewdeck.modal.result import ModalResult

LockListener: TypeAlias = "Callable[[bool], None]"


class ViewManager:
    """The one dependency every view receives.

    Owns the navigation-lock flag and a private ModalHost. One instance is
    scoped to one user session (in practice, one running app), so tests can
    build as many independent managers as they need.

    The lock is only a flag: the navigation layer consults ``is_locked``
    before moving away from the current view.
    """

    def __init__(
        self,
        renderer: DialogRenderer,
        *,
        registry: DialogRegistry | None = None,
        locked: bool = False,
    ) -> None:
        self._locked = locked
        self._lock_listeners: list[LockListener] = []
        self._modal_host = ModalHost(renderer, registry=registry, binder=self.attach)

    @property
    def is_locked(self) -> bool:
        return self._locked

    @property
    def is_modal_open(self) -> bool:
        return self._modal_host.is_open

    @property
    def registry(self) -> DialogRegistry:
        return self._modal_host.registry

    def lock_view(self) -> None:
        """Lock navigation. Calling it while locked changes nothing."""
        self._set_locked(True)

    def unlock_view(self) -> None:
        """Unlock navigation. Calling it while unlocked changes nothing."""
        self._set_locked(False)

    @contextmanager
    def locked_view(self) -> Iterator[ViewManager]:
        """Hold the lock for the duration of the block, releasing it on every exit path."""
        self.lock_view()
        try:
            yield self
        finally:
            self.unlock_view()

    def show_modal_async(
        self, dialog_type: DialogKey, options: ModalOptions | None = None
    ) -> asyncio.Future[ModalResult]:
        """Open a dialog through the modal host and return its pending result."""
        return self._modal_host.show_async(dialog_type, options)

    def attach(self, component: Any) -> None:
        """Inject this manager into a view or dialog at mount time."""
        component.view_manager = self

    def add_lock_listener(self, listener: LockListener) -> None:
        self._lock_listeners.append(listener)

    def remove_lock_listener(self, listener: LockListener) -> None:
        self._lock_listeners.remove(listener)

    def _set_locked(self, locked: bool) -> None:
        if self._locked == locked:
            return
        self._locked = locked
        log.info("View locked" if locked else "View unlocked")
        for listener in list(self._lock_listeners):
            listener(locked)
