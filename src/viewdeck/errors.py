"""Exceptions raised by the view and modal layer."""

from __future__ import annotations


class ViewDeckError(Exception):
    """Base class for all viewdeck errors."""


class ModalStateError(ViewDeckError):
    """A modal host operation was called in a state that does not allow it."""


class ModalAlreadyOpenError(ModalStateError):
    """Raised when a dialog is shown while another one is still open."""

    def __init__(self, open_dialog: str, requested: str) -> None:
        self.open_dialog = open_dialog
        self.requested = requested
        super().__init__(
            f"Cannot show {requested}: {open_dialog} is already open on this host"
        )


class ModalNotOpenError(ModalStateError):
    """Raised when a dialog is closed while none is open."""

    def __init__(self, operation: str = "close") -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}: no dialog is open")


class SlotAlreadyResolvedError(ModalStateError):
    """Raised when a completion slot is written a second time."""


class MissingViewManagerError(ViewDeckError):
    """A view was used without a ViewManager injected by its host."""

    def __init__(self, component: object) -> None:
        self.component = component
        super().__init__(
            f"{type(component).__name__} has no ViewManager. "
            "Mount it through ViewManager.attach() or a ModalHost."
        )


class UnknownDialogError(ViewDeckError, KeyError):
    """Raised when a dialog name was never registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No dialog registered under {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidDialogError(ViewDeckError, TypeError):
    """Raised when a dialog factory builds something that is not a view."""
