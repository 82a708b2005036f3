"""Tokens of chemical reaction equations: substances, coefficients, ``+`` and ``->``."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .diagnostics import Fragment

__all__ = ["DomainTag", "Token", "format_token"]


class DomainTag(enum.Enum):
    """Kinds of tokens in a reaction equation."""

    ARROW = "ARROW"
    END_OF_PROGRAM = "END_OF_PROGRAM"
    COEFFICIENT = "COEFFICIENT"
    PLUS = "PLUS"
    SUBSTANCE = "SUBSTANCE"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A token; coefficients carry an integer, substances their formula text."""

    tag: DomainTag
    coords: Fragment = field(default_factory=Fragment)
    value: int | str | None = None

    def __post_init__(self) -> None:
        if self.tag is DomainTag.COEFFICIENT:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise TypeError("a coefficient token needs an integer value")
        elif self.tag is DomainTag.SUBSTANCE:
            if not isinstance(self.value, str):
                raise TypeError("a substance token needs a string value")
        elif self.value is not None:
            raise ValueError(f"a {self.tag} token carries no value")

    def __str__(self) -> str:
        return format_token(self)


def format_token(token: Token) -> str:
    """Render a token as ``(l, p)-(l, p) TAG`` followed by its value, if any."""
    text = f"{token.coords} {token.tag}"
    if token.value is not None:
        text += f" {token.value}"
    return text