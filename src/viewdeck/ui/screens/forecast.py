"""Forecast page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from viewdeck.ui.screens.base import ViewScreen
from viewdeck.ui.widgets.forecast_table import ForecastTable

if TYPE_CHECKING:
    from textual.app import ComposeResult


class ForecastView(ViewScreen):
    """Weather forecast page backed by the app's ForecastService."""

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="forecast-container"):
            yield Static("Weather forecast", classes="view-title")
            yield ForecastTable(id="forecast-table")
        yield Footer()

    def on_mount(self) -> None:
        self.run_worker(self._load_forecasts(), exclusive=True)

    async def _load_forecasts(self) -> None:
        forecasts = await self.deck_app.forecast_service.get_forecast_async()
        self.query_one("#forecast-table", ForecastTable).show_forecasts(forecasts)
