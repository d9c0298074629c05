"""Reusable widgets shared by views and dialogs."""

from viewdeck.ui.widgets.counter import Counter
from viewdeck.ui.widgets.forecast_table import ForecastTable
from viewdeck.ui.widgets.lock_banner import LockBanner

__all__ = ["Counter", "ForecastTable", "LockBanner"]
