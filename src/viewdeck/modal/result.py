"""Outcome of a dialog interaction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ModalResultType(StrEnum):
    """Closed set of ways a dialog can end."""

    OK = "ok"
    CANCEL = "cancel"
    EXIT = "exit"
    UNSET = "unset"


@dataclass(frozen=True, slots=True)
class ModalResult:
    """The single result a ``show_async`` call resolves with."""

    result_type: ModalResultType = ModalResultType.UNSET
    data: Any = None

    @classmethod
    def ok(cls, data: Any = None) -> ModalResult:
        return cls(ModalResultType.OK, data)

    @classmethod
    def cancel(cls) -> ModalResult:
        return cls(ModalResultType.CANCEL)

    @classmethod
    def exit(cls, data: Any = None) -> ModalResult:
        return cls(ModalResultType.EXIT, data)

    @property
    def is_ok(self) -> bool:
        return self.result_type is ModalResultType.OK

    @property
    def is_cancel(self) -> bool:
        return self.result_type is ModalResultType.CANCEL
