"""Counter hosted in a dialog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.widgets import Button

from viewdeck.modal.result import ModalResult
from viewdeck.ui.modals.base import DialogScreen
from viewdeck.ui.widgets.counter import Counter

if TYPE_CHECKING:
    from textual.app import ComposeResult


class CounterDialog(DialogScreen):
    """Runs the Counter widget; Done closes with OK and the final count."""

    def compose_body(self) -> ComposeResult:
        yield Counter(id="dialog-counter")
        yield Button("Done", id="counter-done", variant="success")

    @on(Button.Pressed, "#counter-done")
    def _on_done(self, event: Button.Pressed) -> None:
        event.stop()
        count = self.query_one("#dialog-counter", Counter).count
        self.close_modal(ModalResult.ok(count))
