"""Configuration loader for viewdeck."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field

from viewdeck.modal.options import ModalOptions
from viewdeck.paths import get_config_path


class GeneralConfig(BaseModel):
    """General configuration settings."""

    start_locked: bool = Field(default=False, description="Start with navigation locked")
    notify_blocked_navigation: bool = Field(
        default=True, description="Show a notification when the lock refuses navigation"
    )


class ModalDefaults(BaseModel):
    """Chrome applied to dialogs opened from the built-in views."""

    hide_header: bool = Field(default=False)
    show_close_button: bool = Field(default=True)
    modal_css_class: str = Field(default="")
    modal_body_css_class: str = Field(default="")

    def build(self, **overrides: Any) -> ModalOptions:
        """Create ModalOptions from these defaults plus explicit overrides."""
        return ModalOptions(**{**self.model_dump(), **overrides})


class DebugConfig(BaseModel):
    """Debug log settings."""

    max_log_lines: int = Field(default=2000, ge=100, description="Size of the in-app log buffer")


class ViewDeckConfig(BaseModel):
    """Root configuration model."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    modal: ModalDefaults = Field(default_factory=ModalDefaults)
    debug: DebugConfig = Field(default_factory=DebugConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> ViewDeckConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        return cls()

    def to_toml(self) -> str:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("viewdeck configuration"))
        for section, values in self.model_dump().items():
            table = tomlkit.table()
            for key, value in values.items():
                table.add(key, value)
            doc.add(section, table)
        return tomlkit.dumps(doc)

    def save(self, path: Path) -> None:
        """Serialize current config to TOML file.

        Args:
            path: Path to write config file (parent directories are created)
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_toml(), encoding="utf-8")
