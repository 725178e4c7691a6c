"""
Data models for fieldspec.

This module contains Pydantic models for:
- Tokens and field metadata
- Parse results and diagnostics
- JSON Schema output
"""

from fieldspec.models.field_info import (
    COMPONENT_NAMES,
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

__all__ = [
    # Field information
    "COMPONENT_NAMES",
    "Component",
    "FieldMetadata",
    "Token",
    # Parse results
    "Diagnostic",
    "ParseResult",
    # Schema output
    "FormFieldSchema",
    "FormSchema",
]
