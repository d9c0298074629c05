"""Data table rendering sample weather forecasts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widgets import DataTable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from viewdeck.services.forecast import WeatherForecast

FORECAST_COLUMNS = ("Date", "Temp. (C)", "Temp. (F)", "Summary")


class ForecastTable(DataTable):
    """Read-only table of WeatherForecast rows."""

    def on_mount(self) -> None:
        self.cursor_type = "row"
        self._ensure_columns()

    def show_forecasts(self, forecasts: Iterable[WeatherForecast]) -> None:
        self._ensure_columns()
        self.clear()
        for forecast in forecasts:
            self.add_row(
                forecast.date.isoformat(),
                str(forecast.temperature_c),
                str(forecast.temperature_f),
                forecast.summary,
            )

    def _ensure_columns(self) -> None:
        # Rows may arrive before on_mount
        if not self.columns:
            self.add_columns(*FORECAST_COLUMNS)
