"""Yes/No confirmation dialog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, Label

from viewdeck.constants import DEFAULT_CONFIRM_MESSAGE, MESSAGE_PARAMETER
from viewdeck.modal.result import ModalResult
from viewdeck.ui.modals.base import DialogScreen

if TYPE_CHECKING:
    from textual.app import ComposeResult


class YesNoDialog(DialogScreen):
    """Asks a question; Yes closes with EXIT, No closes with CANCEL.

    The question is read from the ``Message`` parameter of the options.
    """

    DEFAULT_CSS = """
    YesNoDialog .yes-no-buttons {
        height: auto;
        margin-top: 1;
        align-horizontal: right;
    }
    YesNoDialog .yes-no-buttons Button {
        margin-left: 1;
    }
    """

    BINDINGS = [
        Binding("y", "answer(True)", "Yes"),
        Binding("n", "answer(False)", "No"),
    ]

    @property
    def message(self) -> str:
        return self.options.get_parameter_as_string(MESSAGE_PARAMETER) or DEFAULT_CONFIRM_MESSAGE

    def compose_body(self) -> ComposeResult:
        yield Label(self.message, id="yes-no-message")
        with Horizontal(classes="yes-no-buttons"):
            yield Button("Yes", id="yes-btn", variant="error")
            yield Button("No", id="no-btn", variant="primary")

    def on_options_changed(self) -> None:
        self.query_one("#yes-no-message", Label).update(self.message)

    def action_answer(self, state: bool) -> None:
        self.close_modal(ModalResult.exit() if state else ModalResult.cancel())

    @on(Button.Pressed, "#yes-btn")
    def _on_yes(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_answer(True)

    @on(Button.Pressed, "#no-btn")
    def _on_no(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_answer(False)
