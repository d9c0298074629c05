"""Bridge between a ModalHost and the layer that actually draws dialogs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from viewdeck.messages import ModalOptionsChanged

if TYPE_CHECKING:
    from collections.abc import Callable

    from textual.app import App
    from textual.screen import Screen


class DialogRenderer(Protocol):
    """What a ModalHost needs from its rendering environment."""

    def mount(self, dialog: Any, on_dismiss: Callable[[Any], None]) -> None:
        """Show ``dialog``; call ``on_dismiss`` if the environment removes it on its own."""
        ...

    def refresh(self, dialog: Any) -> None:
        """Re-render ``dialog`` after its options changed."""
        ...

    def unmount(self, dialog: Any) -> None:
        """Remove ``dialog``. Must tolerate a dialog that is already gone."""
        ...


class TextualRenderer:
    """Renders dialogs as screens pushed onto a Textual app's screen stack."""

    def __init__(self, app: App) -> None:
        self._app = app

    def mount(self, dialog: Screen[Any], on_dismiss: Callable[[Any], None]) -> None:
        self._app.push_screen(dialog, callback=on_dismiss)

    def refresh(self, dialog: Screen[Any]) -> None:
        dialog.post_message(ModalOptionsChanged())

    def unmount(self, dialog: Screen[Any]) -> None:
        # Shutting down: the app prunes its screens itself
        if not self._app.is_running or dialog not in self._app.screen_stack:
            return
        if not dialog.is_active:
            dialog.pop_until_active()
        self._app.pop_screen()
