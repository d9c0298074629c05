"""Tests for the sample forecast service."""

from __future__ import annotations

import random
from datetime import date

import pytest

from viewdeck.constants import FORECAST_MAX_C, FORECAST_MIN_C, FORECAST_SUMMARIES
from viewdeck.services.forecast import ForecastService, WeatherForecast

pytestmark = pytest.mark.unit


class TestForecastService:
    async def test_returns_five_days_by_default(self, forecast_service):
        forecasts = await forecast_service.get_forecast_async()
        assert len(forecasts) == 5

    async def test_dates_are_consecutive_from_two_weeks_ago(self, forecast_service):
        forecasts = await forecast_service.get_forecast_async(3)
        assert [f.date for f in forecasts] == [
            date(2024, 1, 2),
            date(2024, 1, 3),
            date(2024, 1, 4),
        ]

    async def test_values_within_range(self, forecast_service):
        for forecast in await forecast_service.get_forecast_async(50):
            assert FORECAST_MIN_C <= forecast.temperature_c < FORECAST_MAX_C
            assert forecast.summary in FORECAST_SUMMARIES

    async def test_seeded_services_agree(self):
        today = date(2024, 6, 1)
        first = ForecastService(rng=random.Random(1), today=today)
        second = ForecastService(rng=random.Random(1), today=today)
        assert await first.get_forecast_async() == await second.get_forecast_async()


class TestWeatherForecast:
    @pytest.mark.parametrize(
        ("celsius", "fahrenheit"),
        [(0, 32), (100, 211), (-20, -3), (37, 98)],
    )
    def test_fahrenheit_conversion(self, celsius, fahrenheit):
        forecast = WeatherForecast(date(2024, 1, 1), celsius, "Mild")
        assert forecast.temperature_f == fahrenheit
