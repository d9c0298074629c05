"""Banner showing whether navigation is currently locked."""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static


class LockBanner(Static):
    """Green "Unlocked" or red "Locked" status line."""

    DEFAULT_CSS = """
    LockBanner {
        height: 3;
        padding: 1 2;
    }
    LockBanner.alert-success {
        background: $success 30%;
    }
    LockBanner.alert-danger {
        background: $error 30%;
    }
    """

    locked: reactive[bool] = reactive(False)

    def on_mount(self) -> None:
        self._render_state()

    def watch_locked(self) -> None:
        self._render_state()

    def _render_state(self) -> None:
        self.set_class(self.locked, "alert-danger")
        self.set_class(not self.locked, "alert-success")
        label = "Locked" if self.locked else "Unlocked"
        hint = "navigation is refused" if self.locked else "navigation is allowed"
        self.update(Text.assemble((label, "bold"), f" - {hint}"))
