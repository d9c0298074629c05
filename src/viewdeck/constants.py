"""Constants shared across viewdeck."""

from __future__ import annotations

from viewdeck.paths import get_config_path

DEFAULT_CONFIG_PATH = str(get_config_path())

# Parameter key the Yes/No dialog reads its prompt from
MESSAGE_PARAMETER = "Message"
DEFAULT_CONFIRM_MESSAGE = "Are You Sure?"

# Summaries used by the sample forecast service
FORECAST_SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)
FORECAST_DAYS = 5
FORECAST_HISTORY_DAYS = 14
FORECAST_MIN_C = -20
FORECAST_MAX_C = 55

BLOCKED_NAVIGATION_MESSAGE = "Navigation is locked while this view is busy"
OPEN_DIALOG_MESSAGE = "Close the open dialog first"
