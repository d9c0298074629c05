"""Base screen class for page-level views."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from textual.screen import Screen

from viewdeck.views.contract import ViewMixin

if TYPE_CHECKING:
    from viewdeck.app import ViewDeckApp


class ViewScreen(ViewMixin, Screen):
    """Page-level view with an injected ViewManager.

    The app's navigation layer attaches the manager before the screen is
    shown; mounting without one raises MissingViewManagerError.
    """

    @property
    def deck_app(self) -> ViewDeckApp:
        """Get the typed ViewDeckApp instance."""
        return cast("ViewDeckApp", self.app)

    def on_mount(self) -> None:
        # Fails fast when the screen was pushed without going through the navigator
        _ = self.view_manager
