"""Single-slot modal host: show a dialog, await the result it reports."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any

from viewdeck.debug_log import log
from viewdeck.errors import (
    InvalidDialogError,
    ModalAlreadyOpenError,
    ModalNotOpenError,
    ModalStateError,
)
from viewdeck.modal.completion import CompletionSlot
from viewdeck.modal.options import ModalOptions
from viewdeck.modal.registry import DialogRegistry, dialog_name
from viewdeck.modal.result import ModalResult
from viewdeck.views.contract import ViewContract

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Callable

    from viewdeck.modal.registry import DialogKey
    from viewdeck.modal.renderer import DialogRenderer


class ModalHost:
    """Owns the one "currently displayed dialog" slot.

    ``show_async`` mounts a dialog and hands back a future; the future is
    resolved only by ``close`` (or ``dismiss``, or ``release`` when the
    rendering layer removes the dialog itself). At most one dialog is open at
    a time: showing a second one raises ``ModalAlreadyOpenError``.

    Mounted dialogs receive this host as ``modal_host`` and read their
    options from ``modal_host.options``.
    """

    def __init__(
        self,
        renderer: DialogRenderer,
        *,
        registry: DialogRegistry | None = None,
        binder: Callable[[Any], None] | None = None,
    ) -> None:
        self._renderer = renderer
        self._registry = registry if registry is not None else DialogRegistry()
        self._binder = binder
        self._dialog: Any = None
        self._dialog_type: DialogKey | None = None
        self._options: ModalOptions | None = None
        self._slot: CompletionSlot[ModalResult] | None = None

    @property
    def registry(self) -> DialogRegistry:
        return self._registry

    @property
    def is_open(self) -> bool:
        return self._slot is not None

    @property
    def dialog(self) -> Any:
        """The mounted dialog instance, or None."""
        return self._dialog

    @property
    def dialog_type(self) -> DialogKey | None:
        return self._dialog_type

    @property
    def options(self) -> ModalOptions:
        """Live options of the open dialog (empty defaults when closed)."""
        if self._options is None:
            return ModalOptions()
        return self._options

    def show_async(
        self, dialog_type: DialogKey, options: ModalOptions | None = None
    ) -> asyncio.Future[ModalResult]:
        """Mount a dialog and return a future for its result.

        Args:
            dialog_type: A dialog class (or other factory) or a registered name.
            options: Presentation options; becomes the live options instance.

        Returns:
            A future resolved with the ModalResult passed to ``close``.

        Raises:
            ModalAlreadyOpenError: If a dialog is already open.
            UnknownDialogError: If ``dialog_type`` names no registered dialog.
            InvalidDialogError: If the factory does not build a view.
        """
        if self.is_open:
            raise ModalAlreadyOpenError(
                dialog_name(self._dialog_type or "dialog"), dialog_name(dialog_type)
            )

        dialog = self._registry.create(dialog_type)
        if not isinstance(dialog, ViewContract):
            msg = f"{dialog_name(dialog_type)} does not implement ViewContract"
            raise InvalidDialogError(msg)

        if self._binder is not None:
            self._binder(dialog)
        dialog.modal_host = self

        slot: CompletionSlot[ModalResult] = CompletionSlot()
        self._slot = slot
        self._dialog = dialog
        self._dialog_type = dialog_type
        self._options = options if options is not None else ModalOptions()

        try:
            self._renderer.mount(dialog, partial(self.release, dialog))
        except Exception:
            self._clear()
            raise

        log.info(
            "Modal opened",
            dialog=dialog_name(dialog_type),
            title=self._options.title,
            identity=str(dialog.identity),
        )
        return slot.future

    def update(self, options: ModalOptions | None = None) -> None:
        """Merge ``options`` into the live options and re-render the dialog.

        A no-op when no dialog is open.
        """
        if not self.is_open:
            log.warning("Modal update ignored: no dialog is open")
            return
        if options is not None:
            self.options.merge(options)
        self._renderer.refresh(self._dialog)
        log.debug("Modal updated", dialog=dialog_name(self._dialog_type or "dialog"))

    def dismiss(self) -> None:
        """Close the open dialog with a CANCEL result."""
        self.close(ModalResult.cancel())

    def close(self, result: ModalResult, *, source: Any = None) -> None:
        """Resolve the pending show with ``result`` and unmount the dialog.

        Args:
            result: The outcome delivered to the awaiting caller.
            source: The dialog requesting the close. When given it must be
                the mounted dialog.

        Raises:
            ModalNotOpenError: If no dialog is open (including a second close
                for the same show).
            ModalStateError: If ``source`` is not the mounted dialog.
        """
        if self._slot is None:
            raise ModalNotOpenError("close")
        if source is not None and source is not self._dialog:
            msg = f"{type(source).__name__} is not the open dialog and cannot close it"
            raise ModalStateError(msg)

        slot = self._slot
        dialog = self._dialog
        name = dialog_name(self._dialog_type or "dialog")
        self._clear()
        slot.resolve(result)
        self._renderer.unmount(dialog)
        log.info("Modal closed", dialog=name, result=result.result_type.value)

    def release(self, dialog: Any, result: Any = None) -> bool:
        """Close because the rendering layer removed ``dialog`` on its own.

        A ``ModalResult`` passed by the environment is used as is; anything
        else resolves the caller with CANCEL. Stale dialogs are ignored.

        Returns:
            True if the open dialog was closed.
        """
        if self._slot is None or dialog is not self._dialog:
            return False
        if not isinstance(result, ModalResult):
            result = ModalResult.cancel()
        log.debug("Modal released by renderer", dialog=type(dialog).__name__)
        self.close(result)
        return True

    def _clear(self) -> None:
        self._slot = None
        self._dialog = None
        self._dialog_type = None
        self._options = None
