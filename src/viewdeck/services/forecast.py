"""Sample weather forecast service backing the forecast views."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, timedelta

from viewdeck.constants import (
    FORECAST_DAYS,
    FORECAST_HISTORY_DAYS,
    FORECAST_MAX_C,
    FORECAST_MIN_C,
    FORECAST_SUMMARIES,
)


@dataclass(frozen=True, slots=True)
class WeatherForecast:
    """One day of sample forecast data."""

    date: date
    temperature_c: int
    summary: str

    @property
    def temperature_f(self) -> int:
        return 32 + int(self.temperature_c / 0.5556)


class ForecastService:
    """Generates random forecasts; stands in for a remote data source."""

    def __init__(self, rng: random.Random | None = None, today: date | None = None) -> None:
        self._rng = rng or random.Random()
        self._today = today

    async def get_forecast_async(self, days: int = FORECAST_DAYS) -> list[WeatherForecast]:
        """Return ``days`` consecutive forecasts starting two weeks ago."""
        start = (self._today or date.today()) - timedelta(days=FORECAST_HISTORY_DAYS)
        return [
            WeatherForecast(
                date=start + timedelta(days=index),
                temperature_c=self._rng.randrange(FORECAST_MIN_C, FORECAST_MAX_C),
                summary=self._rng.choice(FORECAST_SUMMARIES),
            )
            for index in range(1, days + 1)
        ]
