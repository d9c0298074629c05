"""Dialogs opened through the ViewManager."""

from viewdeck.ui.modals.base import DialogScreen
from viewdeck.ui.modals.counter import CounterDialog
from viewdeck.ui.modals.debug_log import DebugLogDialog
from viewdeck.ui.modals.forecast import ForecastDialog
from viewdeck.ui.modals.yes_no import YesNoDialog

__all__ = [
    "CounterDialog",
    "DebugLogDialog",
    "DialogScreen",
    "ForecastDialog",
    "YesNoDialog",
]
