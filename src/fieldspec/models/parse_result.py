"""
Parse result models.

A parse never fails: structural problems are skipped and semantic problems
are reported as ``Diagnostic`` entries next to the metadata.
"""

from typing import Any

from pydantic import BaseModel, Field

from fieldspec.models.field_info import FieldMetadata


class Diagnostic(BaseModel):
    """Non-fatal finding about a field specification."""

    title: str = Field(..., description="What the finding is about, e.g. a component name")
    message: str = Field(..., description="Human-readable message")


class ParseResult(BaseModel):
    """Metadata and diagnostics derived from one field specification."""

    spec: str = Field(..., description="The field specification that was parsed")
    metadata: FieldMetadata = Field(..., description="Derived field metadata")
    diagnostics: list[Diagnostic] = Field(
        default_factory=list, description="Non-fatal findings"
    )

    @property
    def is_valid(self) -> bool:
        """True when no diagnostics were collected."""
        return not self.diagnostics

    @property
    def error_count(self) -> int:
        """Get the number of diagnostics."""
        return len(self.diagnostics)

    def get_diagnostics(self, title: str) -> list[Diagnostic]:
        """Get all diagnostics with a given title."""
        return [d for d in self.diagnostics if d.title == title]

    def to_error_dict(self) -> dict[str, list[str]]:
        """Convert diagnostics to a dict mapping titles to messages."""
        result: dict[str, list[str]] = {}
        for diagnostic in self.diagnostics:
            result.setdefault(diagnostic.title, []).append(diagnostic.message)
        return result

    def to_dict(self) -> dict[str, Any]:
        """Export as a JSON-ready dict."""
        return {
            "spec": self.spec,
            "metadata": self.metadata.to_dict(),
            "diagnostics": [d.model_dump() for d in self.diagnostics],
        }
