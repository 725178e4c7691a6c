"""
Constants for the field specification parser.

Grammar characters and the words recognized by the boolean coercion
live here so the lexer and the metadata builder agree on them.
"""

# Characters allowed in a token name besides letters and digits
IDENTIFIER_EXTRA_CHARS = frozenset("_-")

ARGS_OPEN = "("
ARGS_CLOSE = ")"
ARGS_SEPARATOR = ","

# A parenthesized group never spans a line break
LINE_BREAKS = frozenset("\n\r\u2028\u2029")

QUOTE_CHARS = frozenset("'\"")

# Modifier flag names
LABEL = "label"
DESCRIPTION = "description"
REQUIRED = "required"
NOT_REQUIRED = "not-required"
DEFAULT = "default"

# Canonical boolean words, compared case-insensitively
TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
FALSE_STRINGS = frozenset({"false", "no", "off", "0", ""})

# Diagnostic messages
SELECT_REQUIRES_ARGUMENTS = "Requires arguments"
CHECKBOX_DEFAULT_NOT_BOOLEAN = "Default value '{value}' is not a boolean"
