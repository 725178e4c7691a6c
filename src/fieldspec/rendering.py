"""
HTML rendering for parsed fields.

Dispatches on the resolved ``Component`` to one renderer per control type.
Fields whose component could not be resolved render a placeholder.
"""

from html import escape
from typing import Callable

from pydantic import BaseModel, Field

from fieldspec.models.field_info import Component, FieldMetadata

NOT_FOUND_FIELD = "<div class=\"field-not-found\">Not Found Field</div>"


class FieldState(BaseModel):
    """Interaction state of a rendered field."""

    touched: bool = Field(default=False, description="Whether the user has visited the field")
    error: str | None = Field(default=None, description="Current validation error")


def has_error(state: FieldState | None) -> bool:
    """A field shows its error once it was touched and has an error."""
    return bool(state and state.touched and state.error)


def error_message(state: FieldState | None) -> str:
    """Error markup for the field, or an empty string if there is nothing to show."""
    if not has_error(state):
        return ""
    return f"<div class=\"error\">{escape(state.error)}</div>"


def _label(name: str, metadata: FieldMetadata) -> str:
    text = escape(metadata.label or name)
    marker = " <span class=\"required\">*</span>" if metadata.required else ""
    return f"<label for=\"{escape(name)}\">{text}{marker}</label>"


def _help(metadata: FieldMetadata) -> str:
    if not metadata.description:
        return ""
    return f"<small class=\"description\">{escape(metadata.description)}</small>"


def _required_attr(metadata: FieldMetadata) -> str:
    return " required" if metadata.required else ""


def render_text(name: str, metadata: FieldMetadata) -> str:
    value = "" if metadata.default is None else f" value=\"{escape(str(metadata.default))}\""
    return (
        f"{_label(name, metadata)}"
        f"<input type=\"text\" id=\"{escape(name)}\" name=\"{escape(name)}\"{value}{_required_attr(metadata)}>"
        f"{_help(metadata)}"
    )


def render_textarea(name: str, metadata: FieldMetadata) -> str:
    value = "" if metadata.default is None else escape(str(metadata.default))
    return (
        f"{_label(name, metadata)}"
        f"<textarea id=\"{escape(name)}\" name=\"{escape(name)}\"{_required_attr(metadata)}>{value}</textarea>"
        f"{_help(metadata)}"
    )


def render_select(name: str, metadata: FieldMetadata) -> str:
    options = []
    for option in metadata.arguments or []:
        selected = " selected" if option == metadata.default else ""
        options.append(f"<option value=\"{escape(option)}\"{selected}>{escape(option)}</option>")
    return (
        f"{_label(name, metadata)}"
        f"<select id=\"{escape(name)}\" name=\"{escape(name)}\"{_required_attr(metadata)}>"
        f"{''.join(options)}</select>"
        f"{_help(metadata)}"
    )


def render_checkbox(name: str, metadata: FieldMetadata) -> str:
    checked = " checked" if metadata.default is True else ""
    return (
        f"<input type=\"checkbox\" id=\"{escape(name)}\" name=\"{escape(name)}\"{checked}>"
        f"{_label(name, metadata)}"
        f"{_help(metadata)}"
    )


RENDERERS: dict[Component, Callable[[str, FieldMetadata], str]] = {
    Component.TEXT: render_text,
    Component.TEXTAREA: render_textarea,
    Component.SELECT: render_select,
    Component.CHECKBOX: render_checkbox,
}


def render_field(name: str, metadata: FieldMetadata, state: FieldState | None = None) -> str:
    """
    Render one field as an HTML fragment.

    Args:
        name: Field name, used for the ``id`` and ``name`` attributes.
        metadata: Parsed field metadata.
        state: Optional interaction state; its error is appended when shown.

    Returns:
        The field markup wrapped in a ``div.field``, or the "Not Found Field"
        placeholder when the component is unresolved.
    """
    if not metadata.is_resolved:
        return NOT_FOUND_FIELD
    renderer = RENDERERS[metadata.component]
    return f"<div class=\"field\">{renderer(name, metadata)}{error_message(state)}</div>"
