"""
Field specification parser.

Turns one line such as ``text default('English') required`` into a
``FieldMetadata`` record plus a list of non-fatal diagnostics.

Usage:
    from fieldspec.parser import FieldSpecParser

    parser = FieldSpecParser("select('a', 'b') label('Pick one') required")
    metadata = parser.get_data()
    diagnostics = parser.errors
"""

import logging

from fieldspec.models.field_info import COMPONENT_NAMES, Component, FieldMetadata, Token
from fieldspec.models.parse_result import Diagnostic, ParseResult
from fieldspec.parser import constants
from fieldspec.parser.lexer import remove_quote, tokenize
from fieldspec.parser.views import TokenViews

logger = logging.getLogger("fieldspec")


def string_to_boolean(value: str) -> bool | None:
    """
    Read a canonical boolean word.

    Returns True or False for the recognized words (case-insensitive,
    surrounding whitespace ignored) and None for anything else.
    """
    word = value.strip().lower()
    if word in constants.TRUE_STRINGS:
        return True
    if word in constants.FALSE_STRINGS:
        return False
    return None


def normalize_string(args: tuple[str, ...] | None) -> str | None:
    """First argument, trimmed, with one layer of quotes removed."""
    if not args:
        return None
    return remove_quote(args[0].strip())


class FieldSpecParser:
    """
    Parser for a single field specification.

    The token sequence, its two views and the diagnostics list are owned by
    the instance and derived once from the input string. Only the
    diagnostics list grows, and only while the metadata is being built.
    """

    def __init__(self, spec: str):
        """
        Tokenize ``spec`` and build the token views.

        Args:
            spec: The field specification, e.g. ``"text required"``.

        Raises:
            TypeError: If ``spec`` is not a string.
        """
        if not isinstance(spec, str):
            raise TypeError(f"Field specification must be a string, got {type(spec).__name__}")

        self.spec = spec
        self.views = TokenViews(tokenize(spec))
        self._errors: list[Diagnostic] = []
        self._metadata: FieldMetadata | None = None

        logger.debug(f"Tokenized {spec!r} into {[t.name for t in self.views.ordered]}")

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Tokens in source order."""
        return self.views.ordered

    @property
    def token_map(self):
        """Token name -> arguments, later duplicates winning."""
        return self.views.mapping

    @property
    def errors(self) -> list[Diagnostic]:
        """Diagnostics collected so far."""
        return list(self._errors)

    def add_error(self, title: str, message: str) -> None:
        """Record a non-fatal diagnostic."""
        logger.debug(f"Diagnostic for {self.spec!r}: {title}: {message}")
        self._errors.append(Diagnostic(title=title, message=message))

    def component_name(self) -> Component | None:
        """Control type of the first component token in source order."""
        token = self.views.first(COMPONENT_NAMES)
        return Component.from_name(token.name) if token else None

    def component_args(self) -> tuple[str, ...] | None:
        """
        Arguments of the resolved component.

        The name comes from the first component token, the arguments from
        the last token carrying that same name.
        """
        component = self.component_name()
        if component is None:
            return None
        return self.views.args(component.value)

    def get_data(self) -> FieldMetadata:
        """
        Build the field metadata.

        The result is computed once per instance, so calling this again
        neither rebuilds the record nor repeats diagnostics.
        """
        if self._metadata is None:
            self._metadata = self._build()
        return self._metadata

    def parse(self) -> ParseResult:
        """Build the metadata and return it together with the diagnostics."""
        metadata = self.get_data()
        return ParseResult(spec=self.spec, metadata=metadata, diagnostics=self.errors)

    def _build(self) -> FieldMetadata:
        views = self.views
        required = False

        component = self.component_name()
        arguments = self.component_args()

        if component is Component.SELECT and arguments is None:
            self.add_error(Component.SELECT.value, constants.SELECT_REQUIRES_ARGUMENTS)

        force_not_required = False
        default: bool | str | None = normalize_string(views.args(constants.DEFAULT))

        if component is Component.CHECKBOX:
            force_not_required = True
            if default is not None:
                default = self._coerce_checkbox_default(default)

        label = normalize_string(views.args(constants.LABEL))
        description = normalize_string(views.args(constants.DESCRIPTION))

        if views.has(constants.REQUIRED):
            required = True
        if force_not_required or views.has(constants.NOT_REQUIRED):
            required = False

        return FieldMetadata(
            component=component,
            arguments=arguments,
            label=label,
            description=description,
            required=required,
            default=default,
        )

    def _coerce_checkbox_default(self, value: str) -> bool:
        coerced = string_to_boolean(value)
        if coerced is None:
            self.add_error(
                Component.CHECKBOX.value,
                constants.CHECKBOX_DEFAULT_NOT_BOOLEAN.format(value=value),
            )
            return False
        return coerced


def parse_field_spec(spec: str) -> ParseResult:
    """
    Parse one field specification.

    Example:
        >>> result = parse_field_spec("text default('English') required")
        >>> result.metadata.default
        'English'
    """
    return FieldSpecParser(spec).parse()


def parse_form(fields: dict[str, str]) -> dict[str, ParseResult]:
    """
    Parse a whole form definition.

    Args:
        fields: Field name -> field specification, in display order.

    Returns:
        Field name -> parse result, in the same order.
    """
    results = {name: parse_field_spec(spec) for name, spec in fields.items()}
    invalid = [name for name, result in results.items() if not result.is_valid]
    if invalid:
        logger.info(f"Form has diagnostics for fields: {invalid}")
    return results
