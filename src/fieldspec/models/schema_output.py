"""
JSON Schema output models for parsed field specifications.

These models turn parsed field metadata into a structure that client-side
form libraries like react-jsonschema-form can consume.
"""

from typing import Any

from pydantic import BaseModel, Field

from fieldspec.config import get_config
from fieldspec.models.field_info import Component, FieldMetadata
from fieldspec.models.parse_result import Diagnostic, ParseResult

# JSON Schema type and UI widget per control type
_JSON_TYPES = {
    Component.TEXT: "string",
    Component.TEXTAREA: "string",
    Component.SELECT: "string",
    Component.CHECKBOX: "boolean",
}

_UI_WIDGETS = {
    Component.TEXT: "text",
    Component.TEXTAREA: "textarea",
    Component.SELECT: "select",
    Component.CHECKBOX: "checkbox",
}


class FormFieldSchema(BaseModel):
    """Schema for a single form field."""

    name: str = Field(..., description="Field name/key")
    type: str = Field(..., description="JSON Schema type: string or boolean")
    title: str = Field(..., description="Human-readable label")
    description: str | None = Field(default=None, description="Help text")
    required: bool = Field(default=False, description="Whether field is required")
    default: bool | str | None = Field(default=None, description="Default value")
    enum_values: list[str] | None = Field(default=None, description="Allowed values for select")
    ui_widget: str | None = Field(default=None, description="UI widget type")

    @classmethod
    def from_metadata(cls, name: str, metadata: FieldMetadata) -> "FormFieldSchema":
        """Build a field schema from parsed metadata."""
        component = metadata.component
        return cls(
            name=name,
            type=_JSON_TYPES.get(component, "string"),
            title=metadata.label or name,
            description=metadata.description,
            required=metadata.required,
            default=metadata.default,
            enum_values=list(metadata.arguments) if component is Component.SELECT and metadata.arguments else None,
            ui_widget=_UI_WIDGETS.get(component),
        )


class FormSchema(BaseModel):
    """Complete form schema built from a set of field specifications."""

    form_id: str = Field(..., description="Form identifier")
    title: str = Field(..., description="Form title")
    description: str | None = Field(default=None, description="Form description")
    fields: list[FormFieldSchema] = Field(..., description="List of form fields")
    diagnostics: dict[str, list[Diagnostic]] = Field(
        default_factory=dict, description="Diagnostics keyed by field name"
    )
    submit_button_text: str = Field(default="Submit", description="Submit button text")

    @classmethod
    def from_results(
        cls,
        form_id: str,
        title: str,
        results: dict[str, ParseResult],
        description: str | None = None,
    ) -> "FormSchema":
        """Build a form schema from already parsed field specifications."""
        return cls(
            form_id=form_id,
            title=title,
            description=description,
            fields=[
                FormFieldSchema.from_metadata(name, result.metadata)
                for name, result in results.items()
            ],
            diagnostics={
                name: list(result.diagnostics)
                for name, result in results.items()
                if result.diagnostics
            },
        )

    @classmethod
    def from_specs(
        cls,
        form_id: str,
        title: str,
        fields: dict[str, str],
        description: str | None = None,
    ) -> "FormSchema":
        """Parse ``fields`` (field name -> specification) and build the form schema."""
        from fieldspec.parser import parse_form

        return cls.from_results(form_id, title, parse_form(fields), description)

    def to_json_schema(self) -> dict[str, Any]:
        """Export as JSON Schema dict."""
        properties = {}
        required = []

        for field in self.fields:
            prop: dict[str, Any] = {
                "type": field.type,
                "title": field.title,
            }
            if field.description:
                prop["description"] = field.description
            if field.default is not None:
                prop["default"] = field.default
            if field.enum_values:
                prop["enum"] = field.enum_values

            properties[field.name] = prop

            if field.required:
                required.append(field.name)

        return {
            "$schema": get_config().json_schema_version,
            "type": "object",
            "title": self.title,
            "description": self.description,
            "properties": properties,
            "required": required,
        }

    def to_ui_schema(self) -> dict[str, Any]:
        """Export as UI Schema dict."""
        ui_schema: dict[str, Any] = {}

        for field in self.fields:
            if field.ui_widget:
                ui_schema[field.name] = {"ui:widget": field.ui_widget}

        return ui_schema

    def to_form_config(self) -> dict[str, Any]:
        """Export complete form configuration for client libraries."""
        return {
            "formId": self.form_id,
            "schema": self.to_json_schema(),
            "uiSchema": self.to_ui_schema(),
            "submitButtonText": self.submit_button_text,
            "diagnostics": {
                name: [d.model_dump() for d in items]
                for name, items in self.diagnostics.items()
            },
        }
