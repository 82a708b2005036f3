"""Table-driven LL(1) parser for the grammar description language.

The parser reads tokens from :mod:`lexlabs.grammar_tokens` and builds a
concrete syntax tree whose inner nodes are nonterminals and whose leaves
hold the tokens that were matched.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Union

from .diagnostics import Fragment
from .grammar_tokens import DomainTag, Token

__all__ = [
    "NonTerminal",
    "ParseError",
    "InnerNode",
    "LeafNode",
    "AnalyzerTable",
    "Parser",
]

INDENT = ".  "


class NonTerminal(enum.Enum):
    """Nonterminals of the grammar description language."""

    PROGRAM = "Program"
    RULES = "Rules"
    RULE = "Rule"
    RULE_LHS = "RuleLHS"
    RULE_RHS = "RuleRHS"
    EXPR = "Expr"
    EXPR1 = "Expr1"
    TERM = "Term"
    TERM1 = "Term1"
    SYMBOL = "Symbol"
    DUMMY = "Dummy"

    def __str__(self) -> str:
        return self.value


Symbol = Union[NonTerminal, DomainTag]


class ParseError(RuntimeError):
    """Raised when the token stream does not fit the grammar."""

    def __init__(self, token: Token, expected: Symbol) -> None:
        super().__init__(f"{token.coords}: expected {expected}, got {token.tag}")
        self.token = token
        self.expected = expected


@dataclass
class LeafNode:
    """A tree leaf holding one matched token."""

    token: Token

    def render(self, indent: str = "") -> str:
        """The leaf as ``TAG: attribute`` on one line."""
        return f"{indent}{self.token.tag}: {self.token.attr_text}\n"


@dataclass
class InnerNode:
    """A tree node for a nonterminal and the nodes it derives."""

    non_terminal: NonTerminal
    children: list[Union["InnerNode", LeafNode]] = field(default_factory=list)

    def add_child(self, node: Union["InnerNode", LeafNode]) -> Union["InnerNode", LeafNode]:
        """Append ``node`` and return it."""
        self.children.append(node)
        return node

    def render(self, indent: str = "") -> str:
        """The subtree as indented text, children nested in braces."""
        parts = [f"{indent}{self.non_terminal} {{\n"]
        parts.extend(child.render(indent + INDENT) for child in self.children)
        parts.append(f"{indent}}}\n")
        return "".join(parts)


_N = NonTerminal
_T = DomainTag

_FORMS: tuple[tuple[Symbol, ...], ...] = (
    (_N.RULES,),  # 0
    (_N.RULE, _N.RULES),  # 1
    (),  # 2: epsilon
    (_N.RULE_LHS, _T.OP_ARROW, _N.RULE_RHS),  # 3
    (_T.KW_AXIOM, _T.NONTERMINAL),  # 4
    (_T.NONTERMINAL,),  # 5
    (_N.EXPR, _T.KW_END),  # 6
    (_N.TERM, _N.EXPR1),  # 7
    (_T.KW_OR, _N.TERM, _N.EXPR1),  # 8
    (_N.SYMBOL, _N.TERM1),  # 9
    (_T.TERMINAL,),  # 10
    (_T.KW_EPSILON,),  # 11
)

_TABLE: dict[tuple[NonTerminal, DomainTag], tuple[Symbol, ...]] = {
    (_N.PROGRAM, _T.NONTERMINAL): _FORMS[0],
    (_N.PROGRAM, _T.KW_AXIOM): _FORMS[0],
    (_N.PROGRAM, _T.END_OF_PROGRAM): _FORMS[0],
    (_N.RULES, _T.NONTERMINAL): _FORMS[1],
    (_N.RULES, _T.KW_AXIOM): _FORMS[1],
    (_N.RULES, _T.END_OF_PROGRAM): _FORMS[2],
    (_N.RULE, _T.NONTERMINAL): _FORMS[3],
    (_N.RULE, _T.KW_AXIOM): _FORMS[3],
    (_N.RULE_LHS, _T.NONTERMINAL): _FORMS[5],
    (_N.RULE_LHS, _T.KW_AXIOM): _FORMS[4],
    (_N.RULE_RHS, _T.NONTERMINAL): _FORMS[6],
    (_N.RULE_RHS, _T.TERMINAL): _FORMS[6],
    (_N.RULE_RHS, _T.KW_EPSILON): _FORMS[6],
    (_N.EXPR, _T.NONTERMINAL): _FORMS[7],
    (_N.EXPR, _T.TERMINAL): _FORMS[7],
    (_N.EXPR, _T.KW_EPSILON): _FORMS[7],
    (_N.EXPR1, _T.KW_OR): _FORMS[8],
    (_N.EXPR1, _T.KW_END): _FORMS[2],
    (_N.TERM, _T.NONTERMINAL): _FORMS[9],
    (_N.TERM, _T.TERMINAL): _FORMS[9],
    (_N.TERM, _T.KW_EPSILON): _FORMS[11],
    (_N.TERM1, _T.NONTERMINAL): _FORMS[9],
    (_N.TERM1, _T.TERMINAL): _FORMS[9],
    (_N.TERM1, _T.KW_OR): _FORMS[2],
    (_N.TERM1, _T.KW_END): _FORMS[2],
    (_N.SYMBOL, _T.NONTERMINAL): _FORMS[5],
    (_N.SYMBOL, _T.TERMINAL): _FORMS[10],
}


class AnalyzerTable:
    """The LL(1) prediction table of the grammar description language."""

    def find(self, non_terminal: NonTerminal, tag: DomainTag) -> tuple[Symbol, ...] | None:
        """The right-hand side to expand ``non_terminal`` with on ``tag``, if any."""
        return _TABLE.get((non_terminal, tag))


def _token_stream(tokens: Iterable[Token]) -> Iterator[Token]:
    """Yield the tokens, then ``END_OF_PROGRAM`` tokens forever."""
    last_coords = Fragment()
    for token in tokens:
        last_coords = token.coords
        yield token
    end = Fragment(last_coords.following, last_coords.following)
    while True:
        yield Token(DomainTag.END_OF_PROGRAM, end)


class Parser:
    """Predictive top-down parser driven by an :class:`AnalyzerTable`."""

    def __init__(self, table: AnalyzerTable | None = None) -> None:
        self._table = table if table is not None else AnalyzerTable()

    def parse(self, tokens: Iterable[Token]) -> InnerNode:
        """Parse a token sequence and return the ``Program`` node.

        Raises :class:`ParseError` at the first token that does not fit.
        """
        stream = _token_stream(tokens)
        dummy = InnerNode(NonTerminal.DUMMY)
        stack: list[tuple[Symbol, InnerNode]] = [
            (DomainTag.END_OF_PROGRAM, dummy),
            (NonTerminal.PROGRAM, dummy),
        ]

        token = next(stream)
        while stack:
            symbol, parent = stack[-1]
            if isinstance(symbol, DomainTag):
                if token.tag is not symbol:
                    raise ParseError(token, symbol)
                stack.pop()
                parent.add_child(LeafNode(token))
                token = next(stream)
                continue

            form = self._table.find(symbol, token.tag)
            if form is None:
                raise ParseError(token, symbol)
            stack.pop()
            child = parent.add_child(InnerNode(symbol))
            stack.extend((item, child) for item in reversed(form))

        root = dummy.children[0]
        assert isinstance(root, InnerNode)
        return root