"""
Lexer for field specifications.

Grammar, scanned left to right without overlap::

    token      := identifier [ "(" span ")" ]
    identifier := ( letter | digit | "_" | "-" )+
    span       := any characters except ")" and line breaks

Any character that cannot start an identifier is a separator, so
whitespace, stray punctuation and quotes outside parentheses are skipped.
An identifier run is always taken whole. A ``(`` directly after an
identifier opens an argument span only if a ``)`` follows before the next
line break; otherwise the ``(`` is just another separator. The span ends at
the first ``)``.

Malformed input never raises: stretches that do not match produce no
tokens.
"""

from dataclasses import dataclass

from fieldspec.models.field_info import Token
from fieldspec.parser.constants import (
    ARGS_CLOSE,
    ARGS_OPEN,
    ARGS_SEPARATOR,
    IDENTIFIER_EXTRA_CHARS,
    LINE_BREAKS,
    QUOTE_CHARS,
)


@dataclass(frozen=True)
class RawToken:
    """A scanned chunk before argument extraction.

    Attributes:
        name: The identifier part.
        span: Text between the parentheses, or None without parentheses.
    """

    name: str
    span: str | None


def _is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch in IDENTIFIER_EXTRA_CHARS


def _find_close(source: str, start: int) -> int:
    """Index of the ``)`` closing a span that starts at ``start``, or -1."""
    for index in range(start, len(source)):
        ch = source[index]
        if ch == ARGS_CLOSE:
            return index
        if ch in LINE_BREAKS:
            return -1
    return -1


def scan(source: str) -> list[RawToken]:
    """Split ``source`` into raw ``(name, span)`` chunks."""
    tokens: list[RawToken] = []
    pos = 0
    length = len(source)

    while pos < length:
        if not _is_identifier_char(source[pos]):
            pos += 1
            continue

        start = pos
        while pos < length and _is_identifier_char(source[pos]):
            pos += 1
        name = source[start:pos]

        span = None
        if pos < length and source[pos] == ARGS_OPEN:
            close = _find_close(source, pos + 1)
            if close != -1:
                span = source[pos + 1:close]
                pos = close + 1

        tokens.append(RawToken(name=name, span=span))

    return tokens


def remove_quote(value: str) -> str:
    """
    Strip one layer of matching quotes.

    ``'a'`` and ``"a"`` become ``a``. Values whose ends do not carry the
    same quote character are returned unchanged.
    """
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[0] == value[-1]:
        return value[1:-1]
    return value


def split_arguments(span: str) -> list[str]:
    """
    Split a span on commas that are not inside a quoted argument.

    A quote opens only as the first non-blank character of an argument
    and closes at the next identical quote character, so apostrophes in
    unquoted text do not swallow separators. An unclosed quote runs to
    the end of the span.
    """
    parts: list[str] = []
    current: list[str] = []
    quote = None
    started = False

    for ch in span:
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch == ARGS_SEPARATOR:
            parts.append("".join(current))
            current = []
            started = False
            continue
        elif not started and ch in QUOTE_CHARS:
            quote = ch
        if not ch.isspace():
            started = True
        current.append(ch)

    parts.append("".join(current))
    return parts


def extract_arguments(span: str | None) -> tuple[str, ...] | None:
    """
    Turn a raw argument span into a tuple of argument strings.

    Args:
        span: Text between a token's parentheses, or None.

    Returns:
        None if there were no parentheses, an empty tuple for blank
        parentheses, otherwise the comma-separated parts, trimmed and
        with one layer of quotes removed. Commas inside a quoted argument
        do not separate.

    Example:
        >>> extract_arguments("'English'")
        ('English',)
        >>> extract_arguments(" 'a', \\"b\\" ,c")
        ('a', 'b', 'c')
        >>> extract_arguments("'a,b', c")
        ('a,b', 'c')
    """
    if span is None:
        return None
    if not span.strip():
        return ()
    return tuple(remove_quote(part.strip()) for part in split_arguments(span))


def tokenize(source: str) -> tuple[Token, ...]:
    """
    Tokenize a field specification.

    Example:
        >>> tokenize("text default('English') required")
        (Token(name='text', args=None), Token(name='default', args=('English',)), Token(name='required', args=None))
    """
    return tuple(
        Token(name=raw.name, args=extract_arguments(raw.span))
        for raw in scan(source)
    )
