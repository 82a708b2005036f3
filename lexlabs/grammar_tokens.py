"""Tokens of a grammar description language: rules, terminals and keywords."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .diagnostics import Fragment

__all__ = ["DomainTag", "Token", "format_token"]


class DomainTag(enum.Enum):
    """Kinds of tokens in a grammar description."""

    NONTERMINAL = "NONTERMINAL"
    TERMINAL = "TERMINAL"
    OP_ARROW = "OP_ARROW"
    KW_AXIOM = "KW_AXIOM"
    KW_EPSILON = "KW_EPSILON"
    KW_OR = "KW_OR"
    KW_END = "KW_END"
    END_OF_PROGRAM = "END_OF_PROGRAM"

    def __str__(self) -> str:
        return self.value


_NAMED_TAGS = frozenset({DomainTag.NONTERMINAL, DomainTag.TERMINAL})


@dataclass(frozen=True)
class Token:
    """A token; nonterminals and terminals carry their text."""

    tag: DomainTag
    coords: Fragment = field(default_factory=Fragment)
    value: str | None = None

    def __post_init__(self) -> None:
        if self.tag in _NAMED_TAGS:
            if not isinstance(self.value, str):
                raise TypeError(f"a {self.tag} token needs a string value")
        elif self.value is not None:
            raise ValueError(f"a {self.tag} token carries no value")

    @property
    def attr_text(self) -> str:
        """The token's attribute as printed: its text, or nothing."""
        return self.value if self.value is not None else ""

    def __str__(self) -> str:
        return format_token(self)


def format_token(token: Token) -> str:
    """Render a token as ``(l, p)-(l, p) TAG: attribute``."""
    return f"{token.coords} {token.tag}: {token.attr_text}"