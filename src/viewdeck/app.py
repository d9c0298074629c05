"""Main viewdeck TUI application."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from textual.app import App
from textual.binding import Binding

from viewdeck.config import ViewDeckConfig
from viewdeck.constants import (
    BLOCKED_NAVIGATION_MESSAGE,
    DEFAULT_CONFIG_PATH,
    OPEN_DIALOG_MESSAGE,
)
from viewdeck.debug_log import log, setup_debug_logging
from viewdeck.messages import NavigationBlocked, ViewLockChanged
from viewdeck.modal.renderer import TextualRenderer
from viewdeck.services.forecast import ForecastService
from viewdeck.ui.modals import CounterDialog, DebugLogDialog, ForecastDialog, YesNoDialog
from viewdeck.ui.screens import CounterView, ForecastView, IndexView
from viewdeck.views.manager import ViewManager

if TYPE_CHECKING:
    from viewdeck.ui.screens.base import ViewScreen

VIEWS: dict[str, type[ViewScreen]] = {
    "index": IndexView,
    "counter": CounterView,
    "forecast": ForecastView,
}

DIALOGS = {
    "yes_no": YesNoDialog,
    "counter": CounterDialog,
    "forecast": ForecastDialog,
    "debug_log": DebugLogDialog,
}


class ViewDeckApp(App):
    """Demo host for the ViewManager: lockable views and awaitable dialogs."""

    TITLE = "viewdeck"
    CSS_PATH = "styles/viewdeck.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("1", "navigate('index')", "Home", show=True),
        Binding("2", "navigate('counter')", "Counter", show=True),
        Binding("3", "navigate('forecast')", "Forecast", show=True),
        Binding("f12", "debug_log", "Debug log", show=False),
    ]

    def __init__(
        self,
        config_path: str = DEFAULT_CONFIG_PATH,
        *,
        start_locked: bool | None = None,
        forecast_service: ForecastService | None = None,
    ):
        super().__init__()
        self.config_path = Path(config_path)
        self.config: ViewDeckConfig = ViewDeckConfig()
        self.forecast_service = forecast_service or ForecastService()
        self._start_locked = start_locked

        # One manager per app instance: the session scope of the lock and modal slot
        self.view_manager = ViewManager(TextualRenderer(self))
        self.view_manager.add_lock_listener(self._notify_lock_changed_to_screen)
        for name, dialog in DIALOGS.items():
            self.view_manager.registry.register(dialog, name)

    async def on_mount(self) -> None:
        """Initialize app on mount."""
        self.config = ViewDeckConfig.load(self.config_path)
        setup_debug_logging(self.config.debug.max_log_lines)
        self.log("Config loaded", path=str(self.config_path))

        start_locked = self.config.general.start_locked
        if self._start_locked is not None:
            start_locked = self._start_locked
        if start_locked:
            self.view_manager.lock_view()

        view = IndexView()
        self.view_manager.attach(view)
        await self.push_screen(view)
        self.log("IndexView pushed, app ready")

    def navigate_to(self, view: ViewScreen) -> bool:
        """Replace the current view unless the lock or an open dialog forbids it.

        Returns:
            True if navigation happened.
        """
        reason = self._navigation_refusal()
        if reason is not None:
            self._refuse_navigation(view, reason)
            return False

        self.view_manager.attach(view)
        self.switch_screen(view)
        log.info("Navigated", view=type(view).__name__)
        return True

    def action_navigate(self, name: str) -> None:
        self.navigate_to(VIEWS[name]())

    async def action_quit(self) -> None:
        reason = self._navigation_refusal()
        if reason is not None:
            self._refuse_navigation(None, reason)
            return
        self.exit()

    def action_debug_log(self) -> None:
        if self.view_manager.is_modal_open:
            return
        options = self.config.modal.build(title="Debug Logs", modal_css_class="modal-xl")
        # Result unused
        self.view_manager.show_modal_async("debug_log", options)

    def _navigation_refusal(self) -> str | None:
        if self.view_manager.is_locked:
            return BLOCKED_NAVIGATION_MESSAGE
        if self.view_manager.is_modal_open:
            return OPEN_DIALOG_MESSAGE
        return None

    def _refuse_navigation(self, target: ViewScreen | None, reason: str) -> None:
        log.warning(
            "Navigation blocked",
            target=type(target).__name__ if target else "exit",
            reason=reason,
        )
        self.screen.post_message(NavigationBlocked(target, reason))
        if self.config.general.notify_blocked_navigation:
            self.notify(reason, severity="warning")

    def _notify_lock_changed_to_screen(self, locked: bool) -> None:
        """Lock listener: tell the active screen the lock flipped.

        Named to stay clear of Textual's ``on_<message>`` handler convention.
        """
        self.sub_title = "locked" if locked else ""
        if self.screen_stack:
            self.screen.post_message(ViewLockChanged(locked))
