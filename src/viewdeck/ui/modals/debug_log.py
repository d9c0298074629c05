"""Debug log viewer dialog for in-app debugging."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from rich.markup import escape
from textual.binding import Binding
from textual.widgets import Label, RichLog

from viewdeck.debug_log import (
    LogEntry,
    LogSource,
    clear_log_buffer,
    get_buffer_generation,
    get_log_entries,
)
from viewdeck.ui.modals.base import DialogScreen

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.timer import Timer

LEVEL_COLORS = {
    "DEBUG": "dim",
    "INFO": "blue",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold red",
}


class DebugLogDialog(DialogScreen):
    """Hidden debug log viewer (F12)."""

    BINDINGS = [
        Binding("c", "clear_logs", "Clear"),
    ]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._line_count = 0
        self._buffer_generation = 0
        self._log_refresh_timer: Timer | None = None

    def compose_body(self) -> ComposeResult:
        yield Label("[dim]c to clear | Escape to close[/dim]", classes="modal-subtitle")
        yield RichLog(id="debug-log", highlight=True, markup=True, auto_scroll=True, wrap=True)

    def on_mount(self) -> None:
        self._buffer_generation = get_buffer_generation()
        self._update_logs()
        self._log_refresh_timer = self.set_interval(0.5, self._update_logs)

    def on_unmount(self) -> None:
        if self._log_refresh_timer is not None:
            self._log_refresh_timer.stop()
            self._log_refresh_timer = None

    def _update_logs(self) -> None:
        rich_log = self.query_one("#debug-log", RichLog)
        entries = get_log_entries()
        current_gen = get_buffer_generation()
        # Buffer cleared or shrunk since the last refresh
        if current_gen != self._buffer_generation or len(entries) < self._line_count:
            self._buffer_generation = current_gen
            self._line_count = 0
            rich_log.clear()

        for entry in entries[self._line_count :]:
            rich_log.write(self._format_entry(entry))
        self._line_count = len(entries)

    def _format_entry(self, entry: LogEntry) -> str:
        ts = datetime.fromtimestamp(entry.timestamp).strftime("%H:%M:%S")
        color = LEVEL_COLORS.get(entry.group, "white")
        source_indicator = "" if entry.source == LogSource.VIEWDECK else r" \[PY]"
        return (
            f"[{color}]{ts} \\[{entry.group}]{source_indicator}[/{color}] {escape(entry.message)}"
        )

    def action_clear_logs(self) -> None:
        clear_log_buffer()
        self._buffer_generation = get_buffer_generation()
        self._line_count = 0
        rich_log = self.query_one("#debug-log", RichLog)
        rich_log.clear()
        rich_log.write("[dim]Logs cleared[/dim]")
