"""Tests for config loading, saving and modal defaults."""

from __future__ import annotations

import tomllib

import pytest
from pydantic import ValidationError

from viewdeck.config import ModalDefaults, ViewDeckConfig
from viewdeck.paths import get_config_path

pytestmark = pytest.mark.unit


class TestLoad:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = ViewDeckConfig.load(tmp_path / "absent.toml")
        assert config == ViewDeckConfig()
        assert config.general.start_locked is False
        assert config.general.notify_blocked_navigation is True
        assert config.debug.max_log_lines == 2000

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[general]\nstart_locked = true\n")
        config = ViewDeckConfig.load(path)
        assert config.general.start_locked is True
        assert config.modal.show_close_button is True

    def test_invalid_value_raises(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[debug]\nmax_log_lines = 5\n")
        with pytest.raises(ValidationError):
            ViewDeckConfig.load(path)

    def test_default_path_follows_env_override(self, _isolated_config_dir):
        assert get_config_path() == _isolated_config_dir / "config.toml"
        _isolated_config_dir.mkdir()
        get_config_path().write_text("[modal]\nhide_header = true\n")
        assert ViewDeckConfig.load().modal.hide_header is True


class TestSave:
    def test_round_trip(self, tmp_path):
        config = ViewDeckConfig()
        config.general.start_locked = True
        config.modal.modal_css_class = "modal-xl"
        path = tmp_path / "nested" / "config.toml"

        config.save(path)

        assert ViewDeckConfig.load(path) == config

    def test_toml_has_one_table_per_section(self):
        data = tomllib.loads(ViewDeckConfig().to_toml())
        assert set(data) == {"general", "modal", "debug"}


class TestModalDefaults:
    def test_build_applies_defaults(self):
        options = ModalDefaults().build(title="Hi")
        assert options.title == "Hi"
        assert options.hide_header is False
        assert options.show_close_button is True

    def test_overrides_win(self):
        options = ModalDefaults().build(show_close_button=False, parameters={"Message": "m"})
        assert options.show_close_button is False
        assert options.get_parameter("Message") == "m"
