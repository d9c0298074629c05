"""Click counter widget, usable as a page body or inside a dialog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual import on
from textual.containers import Vertical
from textual.reactive import reactive
from textual.widgets import Button, Label

if TYPE_CHECKING:
    from textual.app import ComposeResult


class Counter(Vertical):
    """Shows a count and a button that increments it."""

    DEFAULT_CLASSES = "counter"

    DEFAULT_CSS = """
    Counter {
        height: auto;
    }
    Counter > #counter-value {
        margin-bottom: 1;
    }
    """

    count: reactive[int] = reactive(0)

    def compose(self) -> ComposeResult:
        yield Label(self._format(), id="counter-value")
        yield Button("Click me", id="counter-increment", variant="primary")

    def watch_count(self) -> None:
        if self.is_mounted:
            self.query_one("#counter-value", Label).update(self._format())

    def increment(self) -> None:
        self.count += 1

    @on(Button.Pressed, "#counter-increment")
    def _on_increment(self, event: Button.Pressed) -> None:
        event.stop()
        self.increment()

    def _format(self) -> str:
        return f"Current count: {self.count}"
