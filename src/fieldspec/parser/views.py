"""
Ordered and mapped views over a token sequence.

Component resolution looks for the first control-type token in the
ordered view, while every other lookup (including the component's own
arguments) goes through the mapping, where a later token with the same
name replaces an earlier one.
"""

from types import MappingProxyType
from typing import Iterable, Mapping

from fieldspec.models.field_info import Token


class TokenViews:
    """Two read-only views derived once from one token sequence."""

    __slots__ = ("ordered", "mapping")

    def __init__(self, tokens: Iterable[Token]):
        self.ordered: tuple[Token, ...] = tuple(tokens)

        mapping: dict[str, tuple[str, ...] | None] = {}
        for token in self.ordered:
            mapping[token.name] = token.args
        self.mapping: Mapping[str, tuple[str, ...] | None] = MappingProxyType(mapping)

    def first(self, names: Iterable[str]) -> Token | None:
        """First token in source order whose name is in ``names``."""
        wanted = frozenset(names)
        for token in self.ordered:
            if token.name in wanted:
                return token
        return None

    def has(self, name: str) -> bool:
        return name in self.mapping

    def args(self, name: str) -> tuple[str, ...] | None:
        """Arguments of the last token called ``name``."""
        return self.mapping.get(name)
