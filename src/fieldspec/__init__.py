"""
fieldspec: one-line field specifications for form fields.

A field specification is a compact line such as
``text label('Language') default('English') required``. The parser turns it
into structured field metadata plus non-fatal diagnostics.

Simple Usage:
    from fieldspec import parse_field_spec

    result = parse_field_spec("select('TR', 'US') label('Country') required")
    result.metadata.component   # Component.SELECT
    result.metadata.arguments   # ['TR', 'US']
    result.diagnostics          # []

Forms:
    from fieldspec import FormSchema

    schema = FormSchema.from_specs(
        form_id="profile",
        title="Profile",
        fields={
            "language": "text default('English')",
            "newsletter": "checkbox default('true')",
        },
    )
    json_schema = schema.to_json_schema()
    ui_schema = schema.to_ui_schema()

Rendering:
    from fieldspec.rendering import render_field

    html = render_field("language", result.metadata)
"""

from fieldspec.models.field_info import (
    Component,
    FieldMetadata,
    Token,
)
from fieldspec.models.parse_result import (
    Diagnostic,
    ParseResult,
)
from fieldspec.models.schema_output import (
    FormFieldSchema,
    FormSchema,
)
from fieldspec.parser import (
    FieldSpecParser,
    parse_field_spec,
    parse_form,
    tokenize,
)

__all__ = [
    # Main interface
    "FieldSpecParser",
    "parse_field_spec",
    "parse_form",
    "tokenize",
    # Field information
    "Component",
    "FieldMetadata",
    "Token",
    # Results
    "Diagnostic",
    "ParseResult",
    # Schema output
    "FormFieldSchema",
    "FormSchema",
]

__version__ = "0.1.0"
