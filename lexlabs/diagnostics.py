"""Source positions, fragments, diagnostic messages and the shared compiler state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

__all__ = [
    "Position",
    "Fragment",
    "MessageType",
    "Message",
    "Compiler",
    "format_message",
]


@dataclass(frozen=True, order=True)
class Position:
    """A point in the source text.

    Positions compare, order and hash by their character index only, so two
    positions at the same offset are the same key.
    """

    line: int = field(default=1, compare=False)
    pos: int = field(default=1, compare=False)
    index: int = 0

    def __str__(self) -> str:
        return f"({self.line}, {self.pos})"


@dataclass(frozen=True)
class Fragment:
    """A span of source text from ``starting`` up to ``following``."""

    starting: Position = field(default_factory=Position)
    following: Position = field(default_factory=Position)

    def __str__(self) -> str:
        return f"{self.starting}-{self.following}"


class MessageType(enum.Enum):
    """Severity of a diagnostic message."""

    ERROR = "Error"
    WARNING = "Warning"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Message:
    """A diagnostic: its severity and text."""

    type: MessageType = MessageType.OTHER
    text: str = ""


def format_message(message: Message, position: Position) -> str:
    """Render a message as ``<Type> (line, pos): text``."""
    return f"{message.type} {position}: {message.text}"


class Compiler:
    """Holds the identifier name table and the diagnostics of one run."""

    def __init__(self) -> None:
        self._messages: dict[Position, Message] = {}
        self._name_codes: dict[str, int] = {}
        self._names: list[str] = []

    def add_name(self, name: str) -> int:
        """Return the code of ``name``, giving it the next free code if new."""
        code = self._name_codes.get(name)
        if code is None:
            code = len(self._names)
            self._names.append(name)
            self._name_codes[name] = code
        return code

    def get_name(self, code: int) -> str:
        """Return the name registered under ``code``."""
        if not 0 <= code < len(self._names):
            raise IndexError(f"unknown name code {code}")
        return self._names[code]

    def add_message(self, type: MessageType, position: Position, text: str) -> None:
        """Record a message; a later message at the same position replaces it."""
        self._messages[position] = Message(type, text)

    def messages(self) -> list[tuple[Position, Message]]:
        """All recorded messages ordered by their position in the text."""
        return sorted(self._messages.items(), key=lambda item: item[0])

    def format_messages(self) -> str:
        """The ``MESSAGES:`` report, one tab-indented line per message."""
        lines = ["MESSAGES:\n"]
        lines.extend(
            f"\t{format_message(message, position)}\n"
            for position, message in self.messages()
        )
        return "".join(lines)