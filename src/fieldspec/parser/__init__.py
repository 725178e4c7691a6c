"""
Field specification parser.

Tokenizer, argument extractor, token views and the metadata builder.
"""

from fieldspec.parser.info import (
    FieldSpecParser,
    normalize_string,
    parse_field_spec,
    parse_form,
    string_to_boolean,
)
from fieldspec.parser.lexer import (
    RawToken,
    extract_arguments,
    remove_quote,
    scan,
    split_arguments,
    tokenize,
)
from fieldspec.parser.views import TokenViews

__all__ = [
    "FieldSpecParser",
    "parse_field_spec",
    "parse_form",
    "normalize_string",
    "string_to_boolean",
    "RawToken",
    "extract_arguments",
    "remove_quote",
    "scan",
    "split_arguments",
    "tokenize",
    "TokenViews",
]
