"""Registry of dialog factories keyed by class or name."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias

from viewdeck.errors import UnknownDialogError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

DialogFactory: TypeAlias = "Callable[[], Any]"
DialogKey: TypeAlias = "str | DialogFactory"


def dialog_name(key: DialogKey) -> str:
    """Human-readable name for a dialog key, used in logs and errors."""
    if isinstance(key, str):
        return key
    return getattr(key, "__name__", type(key).__name__)


class DialogRegistry:
    """Maps dialog names to the factories that build them.

    A dialog class can always be passed directly; registration is only needed
    to open a dialog by name without importing its class.
    """

    def __init__(self) -> None:
        self._factories: dict[str, DialogFactory] = {}

    def register(self, factory: DialogFactory, name: str | None = None) -> DialogFactory:
        """Register ``factory`` under ``name`` (default: its ``__name__``).

        Returns the factory unchanged so it can be used as a class decorator.
        """
        key = name or dialog_name(factory)
        self._factories[key] = factory
        return factory

    def unregister(self, name: str) -> None:
        if name not in self._factories:
            raise UnknownDialogError(name)
        del self._factories[name]

    def resolve(self, key: DialogKey) -> DialogFactory:
        """Return the factory for ``key``.

        Raises:
            UnknownDialogError: If ``key`` is a name that was never registered.
        """
        if isinstance(key, str):
            try:
                return self._factories[key]
            except KeyError:
                raise UnknownDialogError(key) from None
        return key

    def create(self, key: DialogKey) -> Any:
        return self.resolve(key)()

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)
