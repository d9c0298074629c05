"""Centralized message definitions for viewdeck screens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from textual.message import Message

if TYPE_CHECKING:
    from textual.screen import Screen


@dataclass
class ViewLockChanged(Message):
    """Posted to the active screen when the navigation lock flips."""

    locked: bool


@dataclass
class NavigationBlocked(Message):
    """Posted to the active screen when navigation was refused by the lock."""

    target: Screen | None = None
    reason: str = "View is locked"


@dataclass
class ModalOptionsChanged(Message, bubble=False):
    """Posted to an open dialog after its live options were updated.

    Does not bubble: only the dialog itself re-renders its chrome.
    """
