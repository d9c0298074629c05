"""The contract every hostable view and dialog satisfies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable
from uuid import UUID, uuid4

from viewdeck.errors import MissingViewManagerError

if TYPE_CHECKING:
    from viewdeck.views.manager import ViewManager


@runtime_checkable
class ViewContract(Protocol):
    """A stable identity plus the ViewManager injected by the host."""

    @property
    def identity(self) -> UUID: ...

    @property
    def view_manager(self) -> ViewManager: ...


class ViewMixin:
    """Implements ViewContract for Textual screens.

    The identity is generated once per instance and is only meant for
    diagnostics and equality checks. The ViewManager is never looked up:
    the hosting environment assigns it through ``ViewManager.attach``.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._identity = uuid4()
        self._view_manager: ViewManager | None = None

    @property
    def identity(self) -> UUID:
        return self._identity

    @property
    def view_manager(self) -> ViewManager:
        """The ViewManager this view was mounted under.

        Raises:
            MissingViewManagerError: If no host injected one.
        """
        if self._view_manager is None:
            raise MissingViewManagerError(self)
        return self._view_manager

    @view_manager.setter
    def view_manager(self, manager: ViewManager) -> None:
        self._view_manager = manager

    @property
    def has_view_manager(self) -> bool:
        return self._view_manager is not None
