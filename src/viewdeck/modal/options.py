"""Presentation options for a single dialog invocation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Parameter-bag keys that carry styling hints when the explicit fields are empty.
MODAL_CSS_PARAMETER = "ModalCSS"
MODAL_BODY_CSS_PARAMETER = "ModalBodyCSS"


class ModalOptions(BaseModel):
    """How a dialog should be presented, plus free-form parameters for it.

    An instance is built by the calling view for one ``show_async`` call and
    becomes the live options of the open dialog. ``ModalHost.update`` merges
    into that instance rather than replacing it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    title: str = ""
    hide_header: bool = True
    show_close_button: bool = False
    modal_css_class: str = ""
    modal_body_css_class: str = ""
    parameters: dict[str, Any] = Field(default_factory=dict)

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Return the parameter stored under ``key``, or ``default``."""
        return self.parameters.get(key, default)

    def get_parameter_as_string(self, key: str) -> str:
        """Return the parameter as text, or an empty string when it is absent."""
        value = self.parameters.get(key)
        if value is None:
            return ""
        return str(value)

    @property
    def effective_modal_css_class(self) -> str:
        return self.modal_css_class or self.get_parameter_as_string(MODAL_CSS_PARAMETER)

    @property
    def effective_modal_body_css_class(self) -> str:
        return self.modal_body_css_class or self.get_parameter_as_string(
            MODAL_BODY_CSS_PARAMETER
        )

    def merge(self, other: ModalOptions) -> ModalOptions:
        """Merge the fields explicitly set on ``other`` into this instance.

        Scalar fields ``other`` left at their defaults keep their current values
        here. Parameters are always merged key by key, with ``other`` winning on
        conflicts, so a bag filled in place after construction is not lost.

        Returns:
            This instance, for chaining.
        """
        for name in other.model_fields_set - {"parameters"}:
            setattr(self, name, getattr(other, name))
        self.parameters.update(other.parameters)
        return self
