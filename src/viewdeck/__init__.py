"""View locking and awaitable modal dialogs for Textual apps."""

from __future__ import annotations

__version__ = "0.3.0"
