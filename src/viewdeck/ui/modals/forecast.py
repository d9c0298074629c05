"""Forecast data fetched and shown inside a dialog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import Label

from viewdeck.ui.modals.base import DialogScreen
from viewdeck.ui.widgets.forecast_table import ForecastTable

if TYPE_CHECKING:
    from textual.app import ComposeResult


class ForecastDialog(DialogScreen):
    """Loads forecasts from the app's ForecastService when shown."""

    def compose_body(self) -> ComposeResult:
        yield Label("Loading...", id="forecast-status")
        yield ForecastTable(id="forecast-table")

    def on_mount(self) -> None:
        self.run_worker(self._load_forecasts(), exclusive=True)

    async def _load_forecasts(self) -> None:
        forecasts = await self.deck_app.forecast_service.get_forecast_async()
        self.query_one("#forecast-table", ForecastTable).show_forecasts(forecasts)
        self.query_one("#forecast-status", Label).update(
            "This component demonstrates fetching data from a service."
        )
