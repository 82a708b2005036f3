"""Tokens of a small functional language: operators, brackets, keywords,
identifiers and integer constants."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .diagnostics import Fragment

__all__ = ["DomainTag", "Token", "make_token"]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class DomainTag(enum.Enum):
    """Kinds of tokens of the functional language."""

    PLUS = "PLUS"
    MINUS = "MINUS"
    STAR = "STAR"
    SLASH = "SLASH"
    EQUAL = "EQUAL"
    COMMA = "COMMA"
    COLON = "COLON"
    COLON_COLON = "COLON_COLON"
    SEMICOLON = "SEMICOLON"
    PARENTHESIS_LEFT = "PARENTHESIS_LEFT"
    PARENTHESIS_RIGHT = "PARENTHESIS_RIGHT"
    CURLY_BRACKET_LEFT = "CURLY_BRACKET_LEFT"
    CURLY_BRACKET_RIGHT = "CURLY_BRACKET_RIGHT"
    SQUARE_BRACKET_LEFT = "SQUARE_BRACKET_LEFT"
    SQUARE_BRACKET_RIGHT = "SQUARE_BRACKET_RIGHT"
    INT = "INT"
    IS = "IS"
    END = "END"
    IDENT = "IDENT"
    INT_CONST = "INT_CONST"
    END_OF_PROGRAM = "END_OF_PROGRAM"

    def __str__(self) -> str:
        return self.value


_VALUED_TAGS = frozenset({DomainTag.IDENT, DomainTag.INT_CONST})


@dataclass(frozen=True)
class Token:
    """A token; identifiers carry their name code, constants their value."""

    tag: DomainTag
    coords: Fragment = field(default_factory=Fragment)
    value: int | None = None

    def __post_init__(self) -> None:
        if self.tag in _VALUED_TAGS:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise TypeError(f"a {self.tag} token needs an integer value")
            if self.tag is DomainTag.IDENT and self.value < 0:
                raise ValueError("a name code cannot be negative")
            if self.tag is DomainTag.INT_CONST and not (
                _INT64_MIN <= self.value <= _INT64_MAX
            ):
                raise OverflowError(f"integer constant {self.value} is out of range")
        elif self.value is not None:
            raise ValueError(f"a {self.tag} token carries no value")

    @property
    def code(self) -> int:
        """The name code of an identifier token."""
        if self.tag is not DomainTag.IDENT:
            raise AttributeError(f"a {self.tag} token has no name code")
        return self.value

    def __str__(self) -> str:
        text = f"{self.coords} {self.tag}"
        if self.value is not None:
            text += f" {self.value}"
        return text


def make_token(tag: DomainTag, attr: int | None, coords: Fragment) -> Token:
    """Build the token for ``tag``; ``attr`` is used only by valued tags."""
    if tag in _VALUED_TAGS:
        return Token(tag, coords, attr)
    return Token(tag, coords)