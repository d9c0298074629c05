"""Counter page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from viewdeck.ui.screens.base import ViewScreen
from viewdeck.ui.widgets.counter import Counter

if TYPE_CHECKING:
    from textual.app import ComposeResult


class CounterView(ViewScreen):
    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="counter-container"):
            yield Static("Counter", classes="view-title")
            yield Counter(id="page-counter")
        yield Footer()
