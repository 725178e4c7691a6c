"""
MCP Tool definitions for fieldspec.

Exposes the field specification parser as MCP tools.
"""

import logging
from typing import Any

from fieldspec.models.schema_output import FormSchema
from fieldspec.parser import parse_field_spec, parse_form

logger = logging.getLogger("fieldspec-mcp")


def mcp_parse_field_spec(spec: str) -> dict[str, Any]:
    """
    Parse a single field specification.

    Args:
        spec: Field specification, e.g. "text default('English') required".

    Returns:
        Dictionary with the input, its metadata and diagnostics.
    """
    result = parse_field_spec(spec)
    if not result.is_valid:
        logger.info(f"Diagnostics for {spec!r}: {result.to_error_dict()}")
    return result.to_dict()


def mcp_parse_form(
    fields: dict[str, str],
    form_id: str = "form",
    title: str = "Form",
    description: str | None = None,
) -> dict[str, Any]:
    """
    Parse a form definition and build its form configuration.

    Args:
        fields: Field name -> field specification.
        form_id: Form identifier.
        title: Form title.
        description: Optional form description.

    Returns:
        Form configuration with JSON Schema, UI Schema and diagnostics.

    Raises:
        ValueError: If fields is empty.
    """
    if not fields:
        raise ValueError("fields must not be empty")

    schema = FormSchema.from_results(form_id, title, parse_form(fields), description)
    return schema.to_form_config()


def get_mcp_tools() -> list[dict[str, Any]]:
    """
    Get MCP tool definitions.

    Returns:
        List of tool definitions in MCP format.
    """
    return [
        {
            "name": "parse_field_spec",
            "description": (
                "Parse a one-line field specification such as "
                "\"select('a', 'b') label('Pick') required\" into field metadata: "
                "component (text, textarea, select, checkbox), arguments, label, "
                "description, required and default. Problems are reported as "
                "diagnostics, never as errors."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "spec": {
                        "type": "string",
                        "description": "The field specification",
                    },
                },
                "required": ["spec"],
            },
        },
        {
            "name": "parse_form",
            "description": (
                "Parse a form definition (field name -> field specification) and "
                "return a form configuration with JSON Schema and UI Schema."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "fields": {
                        "type": "object",
                        "additionalProperties": {"type": "string"},
                        "description": "Field name -> field specification",
                    },
                    "form_id": {
                        "type": "string",
                        "description": "Form identifier",
                        "default": "form",
                    },
                    "title": {
                        "type": "string",
                        "description": "Form title",
                        "default": "Form",
                    },
                    "description": {
                        "type": "string",
                        "description": "Optional form description",
                    },
                },
                "required": ["fields"],
            },
        },
    ]
