"""
Field information models.

A field specification such as ``text default('English') required`` is
turned into a list of ``Token`` objects and finally into a
``FieldMetadata`` record that the rendering layer consumes.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Component(str, Enum):
    """Closed set of control types a field specification can select."""

    TEXT = "text"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"

    @classmethod
    def from_name(cls, name: str | None) -> "Component | None":
        """Return the component for ``name``, or None if it is not a control type."""
        try:
            return cls(name)
        except ValueError:
            return None


COMPONENT_NAMES = frozenset(c.value for c in Component)


class Token(BaseModel):
    """
    One ``name(args)`` chunk of a field specification.

    ``args`` is None when the chunk had no parentheses at all and an
    empty tuple when the parentheses were empty.
    """

    name: str = Field(..., description="Identifier part of the chunk")
    args: tuple[str, ...] | None = Field(
        default=None,
        description="Quote-stripped arguments, None without parentheses",
    )

    model_config = {"frozen": True}


class FieldMetadata(BaseModel):
    """Structured description of a single form field."""

    component: Component | None = Field(
        default=None, description="Resolved control type, None if unresolved"
    )
    arguments: tuple[str, ...] | None = Field(
        default=None, description="Arguments of the component token"
    )
    label: str | None = Field(default=None, description="Human-readable label")
    description: str | None = Field(default=None, description="Help text")
    required: bool = Field(default=False, description="Whether the field is required")
    default: bool | str | None = Field(
        default=None, description="Default value, a bool for checkboxes"
    )

    model_config = {"frozen": True}

    @property
    def is_resolved(self) -> bool:
        """Whether a control type was found in the specification."""
        return self.component is not None

    def to_dict(self) -> dict:
        """Export as a plain dict, leaving out unset optional fields."""
        data = self.model_dump(mode="json", exclude_none=True)
        data["component"] = self.component.value if self.component else None
        data["arguments"] = list(self.arguments) if self.arguments is not None else None
        return data
