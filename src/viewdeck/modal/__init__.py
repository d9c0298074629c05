"""Awaitable modal dialogs: options, results and the single-slot host."""

from viewdeck.modal.completion import CompletionSlot
from viewdeck.modal.host import ModalHost
from viewdeck.modal.options import ModalOptions
from viewdeck.modal.registry import DialogRegistry
from viewdeck.modal.renderer import DialogRenderer, TextualRenderer
from viewdeck.modal.result import ModalResult, ModalResultType

__all__ = [
    "CompletionSlot",
    "DialogRegistry",
    "DialogRenderer",
    "ModalHost",
    "ModalOptions",
    "ModalResult",
    "ModalResultType",
    "TextualRenderer",
]
