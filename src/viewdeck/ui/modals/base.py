"""Base dialog class for screens opened through a ModalHost."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from textual import on
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widgets import Button, Label

from viewdeck.errors import ModalStateError
from viewdeck.messages import ModalOptionsChanged
from viewdeck.modal.options import ModalOptions
from viewdeck.modal.result import ModalResult
from viewdeck.views.contract import ViewMixin

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from viewdeck.app import ViewDeckApp
    from viewdeck.modal.host import ModalHost


class DialogScreen(ViewMixin, ModalScreen[ModalResult]):
    """A dialog drawn inside the chrome described by its ModalOptions.

    The owning ModalHost injects itself as ``modal_host`` and the
    ViewManager as ``view_manager`` before the screen is pushed. Subclasses
    yield their content from ``compose_body`` and finish by calling
    ``close_modal`` with a ModalResult. Escape and the close button dismiss
    with CANCEL.
    """

    DEFAULT_CSS = """
    DialogScreen {
        align: center middle;
    }
    DialogScreen > .modal-frame {
        width: 60;
        height: auto;
        max-height: 90%;
        border: thick $primary 80%;
        background: $surface;
    }
    DialogScreen > .modal-frame.modal-xl {
        width: 90%;
    }
    DialogScreen .modal-header {
        height: auto;
        padding: 0 1;
        background: $primary 30%;
    }
    DialogScreen .modal-title {
        width: 1fr;
        text-style: bold;
        content-align: left middle;
    }
    DialogScreen .modal-close {
        min-width: 5;
        width: 5;
    }
    DialogScreen .modal-body {
        height: auto;
        padding: 1 2;
    }
    DialogScreen .modal-body.p-0 {
        padding: 0;
    }
    """

    BINDINGS = [
        Binding("escape", "dismiss_modal", "Close"),
    ]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._modal_host: ModalHost | None = None
        self._frame_classes: list[str] = []
        self._body_classes: list[str] = []

    @property
    def deck_app(self) -> ViewDeckApp:
        """Get the typed ViewDeckApp instance."""
        return cast("ViewDeckApp", self.app)

    @property
    def modal_host(self) -> ModalHost:
        """The host that mounted this dialog.

        Raises:
            ModalStateError: If the dialog was not opened through a ModalHost.
        """
        if self._modal_host is None:
            msg = f"{type(self).__name__} was not opened through a ModalHost"
            raise ModalStateError(msg)
        return self._modal_host

    @modal_host.setter
    def modal_host(self, host: ModalHost) -> None:
        self._modal_host = host

    @property
    def options(self) -> ModalOptions:
        """Live options while this dialog is the host's open dialog."""
        host = self._modal_host
        if host is None or host.dialog is not self:
            return ModalOptions()
        return host.options

    def compose(self) -> ComposeResult:
        options = self.options
        with Vertical(id="modal-frame", classes="modal-frame"):
            with Horizontal(id="modal-header", classes="modal-header"):
                yield Label(options.title, id="modal-title", classes="modal-title")
                yield Button("×", id="modal-close", classes="modal-close", compact=True)
            with Vertical(id="modal-body", classes="modal-body"):
                yield from self.compose_body()

    def compose_body(self) -> ComposeResult:
        """Yield the dialog's own widgets."""
        yield from ()

    def on_mount(self) -> None:
        _ = self.view_manager
        self._apply_chrome()

    def on_unmount(self) -> None:
        # Removed without close_modal (app teardown, popped by someone else)
        if self._modal_host is not None:
            self._modal_host.release(self)

    def on_modal_options_changed(self, message: ModalOptionsChanged) -> None:
        if self._apply_chrome():
            self.on_options_changed()

    def on_options_changed(self) -> None:
        """Called after ModalHost.update merged new options."""

    def close_modal(self, result: ModalResult) -> None:
        """Report ``result`` to the owning host, which unmounts this dialog."""
        self.modal_host.close(result, source=self)

    def dismiss_modal(self) -> None:
        self.close_modal(ModalResult.cancel())

    def action_dismiss_modal(self) -> None:
        self.dismiss_modal()

    @on(Button.Pressed, "#modal-close")
    def _on_close_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss_modal()

    def _apply_chrome(self) -> bool:
        try:
            header = self.query_one("#modal-header")
        except NoMatches:
            # Removed before compose ran
            return False
        options = self.options
        header.display = not options.hide_header
        self.query_one("#modal-close", Button).display = options.show_close_button
        self.query_one("#modal-title", Label).update(options.title)

        frame = self.query_one("#modal-frame")
        frame.remove_class(*self._frame_classes)
        self._frame_classes = options.effective_modal_css_class.split()
        frame.add_class(*self._frame_classes)

        body = self.query_one("#modal-body")
        body.remove_class(*self._body_classes)
        self._body_classes = options.effective_modal_body_css_class.split()
        body.add_class(*self._body_classes)
        return True
