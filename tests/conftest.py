"""Pytest fixtures for viewdeck tests."""

from __future__ import annotations

import random
from datetime import date
from typing import TYPE_CHECKING

import pytest

from tests.helpers.fakes import FakeDialog, RecordingRenderer
from viewdeck.app import ViewDeckApp
from viewdeck.debug_log import clear_log_buffer
from viewdeck.modal.host import ModalHost
from viewdeck.services.forecast import ForecastService
from viewdeck.views.manager import ViewManager

if TYPE_CHECKING:
    from pathlib import Path


# =============================================================================
# Unit Test Fixtures
# =============================================================================


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def host(renderer: RecordingRenderer) -> ModalHost:
    """Modal host with FakeDialog registered as 'fake'."""
    modal_host = ModalHost(renderer)
    modal_host.registry.register(FakeDialog, "fake")
    return modal_host


@pytest.fixture
def view_manager(renderer: RecordingRenderer) -> ViewManager:
    manager = ViewManager(renderer)
    manager.registry.register(FakeDialog, "fake")
    return manager


@pytest.fixture
def forecast_service() -> ForecastService:
    """Deterministic forecast service."""
    return ForecastService(rng=random.Random(7), today=date(2024, 1, 15))


@pytest.fixture(autouse=True)
def _clean_log_buffer():
    clear_log_buffer()
    yield
    clear_log_buffer()


@pytest.fixture(autouse=True)
def _isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep every test away from the user's real config directory."""
    config_dir = tmp_path / "viewdeck-config"
    monkeypatch.setenv("VIEWDECK_CONFIG_DIR", str(config_dir))
    return config_dir


# =============================================================================
# E2E Test Fixtures
# =============================================================================


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "config.toml"


@pytest.fixture
def app(config_path: Path, forecast_service: ForecastService) -> ViewDeckApp:
    """App with an absent config file, so every setting is at its default."""
    return ViewDeckApp(config_path=str(config_path), forecast_service=forecast_service)


@pytest.fixture
def locked_app(config_path: Path, forecast_service: ForecastService) -> ViewDeckApp:
    return ViewDeckApp(
        config_path=str(config_path), start_locked=True, forecast_service=forecast_service
    )
