"""Scanner for binary and decimal numbers, symbolic identifiers and back-quoted strings.

Tokens are found with one regular expression. Text that nothing matches is
reported as a syntax error and skipped.
"""

from __future__ import annotations

import enum
import re
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .cursor import TextCursor
from .diagnostics import Compiler, MessageType, Position, format_message

__all__ = ["SYNTAX_ERROR", "DomainTag", "Token", "Scanner", "format_token", "main"]

SYNTAX_ERROR = "syntax error"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_PATTERN = re.compile(
    r"(?P<BINARY>[01]+b)"
    r"|(?P<DECIMAL>[0-9]+)"
    r"|(?P<IDENT>[?*|][?*|0-9]*)"
    r"|(?P<STRING>`(?:[\x00-\x5F\x61-\x7F]|``)*`)"
)


class DomainTag(enum.Enum):
    """Kinds of tokens this scanner produces."""

    END_OF_PROGRAM = "END_OF_PROGRAM"
    IDENT = "IDENT"
    NUMBER = "NUMBER"
    STRING = "STRING"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A token with its starting position.

    ``value`` is the name code for identifiers, the number for numbers and
    the decoded text for strings.
    """

    tag: DomainTag
    starting: Position
    value: int | str | None = None


def _to_int(digits: str, base: int) -> int:
    value = int(digits, base)
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"integer constant {digits!r} is out of range")
    return value


class Scanner:
    """Splits a program text into :class:`Token` objects."""

    def __init__(self, program: str, compiler: Compiler) -> None:
        self._program = program
        self._compiler = compiler
        self._cursor = TextCursor(program)

    def next_token(self) -> Token:
        """Return the next token; ``END_OF_PROGRAM`` once the text is used up."""
        cur = self._cursor
        while not cur.is_end() and cur.is_whitespace():
            cur.advance()

        if cur.is_end():
            return Token(DomainTag.END_OF_PROGRAM, cur.snapshot())

        match = _PATTERN.search(self._program, cur.index)
        if match is None:
            self._compiler.add_message(MessageType.ERROR, cur.snapshot(), SYNTAX_ERROR)
            return Token(DomainTag.END_OF_PROGRAM, cur.snapshot())

        if cur.index != match.start():
            self._compiler.add_message(MessageType.ERROR, cur.snapshot(), SYNTAX_ERROR)
            while cur.index < match.start():
                cur.advance()

        token = self._make_token(match, cur.snapshot())

        while cur.index < match.end():
            cur.advance()

        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including ``END_OF_PROGRAM``."""
        while True:
            token = self.next_token()
            yield token
            if token.tag is DomainTag.END_OF_PROGRAM:
                return

    def _make_token(self, match: re.Match[str], start: Position) -> Token:
        text = match.group(0)
        kind = match.lastgroup
        if kind == "DECIMAL":
            return Token(DomainTag.NUMBER, start, _to_int(text, 10))
        if kind == "BINARY":
            return Token(DomainTag.NUMBER, start, _to_int(text[:-1], 2))
        if kind == "IDENT":
            return Token(DomainTag.IDENT, start, self._compiler.add_name(text))
        if kind == "STRING":
            return Token(DomainTag.STRING, start, text[1:-1].replace("``", "`"))
        raise RuntimeError(f"unexpected match group {kind!r}")


def format_token(token: Token, compiler: Compiler) -> str:
    """Render a token as ``(line, pos) TAG value``."""
    head = f"{token.starting} {token.tag} "
    if token.tag is DomainTag.IDENT:
        return head + compiler.get_name(token.value)
    if token.value is None:
        return head
    return head + str(token.value)


def main(argv: Sequence[str] | None = None) -> int:
    """Scan the file named on the command line and print tokens and messages."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write("Usage: backquote <filename>\n")
        return 1

    path = args[0]
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            program = handle.read()
    except OSError:
        sys.stderr.write(f"Cannot open file {path}\n")
        return 1

    compiler = Compiler()
    tokens = list(Scanner(program, compiler))

    out = sys.stdout
    out.write("TOKENS:\n")
    for token in tokens:
        out.write(f"\t{format_token(token, compiler)}\n")

    sys.stderr.write("MESSAGES:\n")
    for position, message in compiler.messages():
        out.write(f"\t{format_message(message, position)}\n")
    return 0