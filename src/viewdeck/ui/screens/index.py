"""Home view: lock toggle and dialog launchers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Label, Static

from viewdeck.constants import MESSAGE_PARAMETER
from viewdeck.debug_log import log
from viewdeck.modal.options import MODAL_BODY_CSS_PARAMETER, MODAL_CSS_PARAMETER
from viewdeck.modal.result import ModalResultType
from viewdeck.ui.modals.counter import CounterDialog
from viewdeck.ui.modals.forecast import ForecastDialog
from viewdeck.ui.modals.yes_no import YesNoDialog
from viewdeck.ui.screens.base import ViewScreen
from viewdeck.ui.widgets.lock_banner import LockBanner

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.events import ScreenResume

    from viewdeck.messages import ViewLockChanged
    from viewdeck.modal.options import ModalOptions
    from viewdeck.modal.registry import DialogKey
    from viewdeck.modal.result import ModalResult


class IndexView(ViewScreen):
    """Landing view showing the lock state and opening the sample dialogs."""

    BINDINGS = [
        Binding("l", "toggle_lock", "Lock/Unlock"),
        Binding("a", "confirm", "Are you sure?"),
        Binding("f", "forecast_dialog", "Fetch data"),
        Binding("c", "counter_dialog", "Counter"),
    ]

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="index-container"):
            yield Static("Hello, world!", classes="view-title")
            yield Static(
                "Lock the view, then try navigating away with 2, 3 or q.",
                classes="view-hint",
            )
            yield LockBanner(id="lock-banner")
            with Horizontal(classes="index-actions"):
                yield Button("Lock", id="lock-btn", variant="success")
                yield Button("Are you sure?", id="confirm-btn")
                yield Button("Fetch data in a dialog", id="forecast-btn")
                yield Button("Counter in a dialog", id="counter-btn")
            yield Label("", id="last-result")
        yield Footer()

    def on_mount(self) -> None:
        self._sync_lock(self.view_manager.is_locked)

    def on_screen_resume(self, event: ScreenResume) -> None:
        if self.is_mounted and self.has_view_manager:
            self._sync_lock(self.view_manager.is_locked)

    def on_view_lock_changed(self, message: ViewLockChanged) -> None:
        self._sync_lock(message.locked)

    def action_toggle_lock(self) -> None:
        manager = self.view_manager
        if manager.is_locked:
            manager.unlock_view()
        else:
            manager.lock_view()

    def action_confirm(self) -> None:
        options = self.deck_app.config.modal.build(
            title="Exit Confirm",
            show_close_button=False,
            parameters={MESSAGE_PARAMETER: "Try navigating to another view."},
        )
        self._open_dialog(YesNoDialog, options)

    def action_forecast_dialog(self) -> None:
        options = self.deck_app.config.modal.build(
            title="Fetch Data in a Dialog",
            parameters={MODAL_BODY_CSS_PARAMETER: "p-0", MODAL_CSS_PARAMETER: "modal-xl"},
        )
        self._open_dialog(ForecastDialog, options)

    def action_counter_dialog(self) -> None:
        options = self.deck_app.config.modal.build(
            title="Counter in a Dialog",
            parameters={MODAL_BODY_CSS_PARAMETER: "p-0", MODAL_CSS_PARAMETER: "modal-xl"},
        )
        self._open_dialog(CounterDialog, options)

    @on(Button.Pressed, "#lock-btn")
    def _on_lock_pressed(self) -> None:
        self.action_toggle_lock()

    @on(Button.Pressed, "#confirm-btn")
    def _on_confirm_pressed(self) -> None:
        self.action_confirm()

    @on(Button.Pressed, "#forecast-btn")
    def _on_forecast_pressed(self) -> None:
        self.action_forecast_dialog()

    @on(Button.Pressed, "#counter-btn")
    def _on_counter_pressed(self) -> None:
        self.action_counter_dialog()

    def _open_dialog(self, dialog_type: DialogKey, options: ModalOptions) -> None:
        if self.view_manager.is_modal_open:
            return
        self.run_worker(self._run_dialog(dialog_type, options), group="dialogs")

    async def _run_dialog(self, dialog_type: DialogKey, options: ModalOptions) -> ModalResult:
        manager = self.view_manager
        with manager.locked_view():
            result = await manager.show_modal_async(dialog_type, options)
        self._report(options.title, result)
        return result

    def _report(self, title: str, result: ModalResult) -> None:
        summary = f"{title}: {result.result_type.value}"
        if result.data is not None:
            summary = f"{summary} ({result.data})"
        log.info("Dialog finished", title=title, result=result.result_type.value)
        self.query_one("#last-result", Label).update(summary)
        if result.result_type is ModalResultType.CANCEL:
            self.notify(f"{title} cancelled")

    def _sync_lock(self, locked: bool) -> None:
        self.query_one("#lock-banner", LockBanner).locked = locked
        button = self.query_one("#lock-btn", Button)
        button.label = "Unlock" if locked else "Lock"
        button.variant = "error" if locked else "success"
