"""Abstract syntax tree of the functional language and its JSON form."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any

from .funclang_tokens import DomainTag

__all__ = [
    "DISCRIMINATOR",
    "JsonNode",
    "Pattern",
    "Result",
    "Type",
    "Program",
    "Func",
    "FuncType",
    "ElementaryType",
    "ListType",
    "TupleType",
    "FuncBody",
    "Sentence",
    "PatternBinary",
    "PatternTuple",
    "EmptyList",
    "Var",
    "Const",
    "ResultBinary",
    "ResultTuple",
    "FuncCall",
]

DISCRIMINATOR = "discriminator_type"

Json = dict[str, Any]


class JsonNode(abc.ABC):
    """A tree node that can be turned into JSON-ready data."""

    @abc.abstractmethod
    def to_json(self) -> Json:
        """The node as a dictionary of JSON-compatible values."""


class Pattern(JsonNode):
    """A node that may stand on the left of a sentence."""


class Result(JsonNode):
    """A node that may stand on the right of a sentence."""


class Type(JsonNode):
    """A node describing a type."""


@dataclass
class ElementaryType(Type):
    tag: DomainTag = DomainTag.INT

    def to_json(self) -> Json:
        return {DISCRIMINATOR: "elementary_type", "tag": str(self.tag)}


@dataclass
class ListType(Type):
    type: Type

    def to_json(self) -> Json:
        return {DISCRIMINATOR: "list_type", "type": self.type.to_json()}


@dataclass
class TupleType(Type):
    types: list[Type] = field(default_factory=list)

    def to_json(self) -> Json:
        return {
            DISCRIMINATOR: "tuple_type",
            "types": [item.to_json() for item in self.types],
        }


@dataclass
class FuncType(JsonNode):
    input: Type
    output: Type

    def to_json(self) -> Json:
        return {"input": self.input.to_json(), "output": self.output.to_json()}


@dataclass
class PatternBinary(Pattern):
    lhs: Pattern
    rhs: Pattern
    op: DomainTag = DomainTag.COLON

    def to_json(self) -> Json:
        return {
            DISCRIMINATOR: "pattern_binary",
            "op": str(self.op),
            "lhs": self.lhs.to_json(),
            "rhs": self.rhs.to_json(),
        }


@dataclass
class PatternTuple(Pattern):
    patterns: list[Pattern] = field(default_factory=list)

    def to_json(self) -> Json:
        return {
            DISCRIMINATOR: "pattern_tuple",
            "patterns": [item.to_json() for item in self.patterns],
        }


@dataclass
class EmptyList(Pattern, Result):
    def to_json(self) -> Json:
        return {DISCRIMINATOR: "empty_list"}


@dataclass
class Var(Pattern, Result):
    ident_code: int

    def to_json(self) -> Json:
        return {DISCRIMINATOR: "var", "ident_code": self.ident_code}


@dataclass
class Const(Pattern, Result):
    value: int
    tag: DomainTag = DomainTag.INT_CONST

    def to_json(self) -> Json:
        return {DISCRIMINATOR: "int_const", "value": self.value}


@dataclass
class ResultBinary(Result):
    lhs: Result
    rhs: Result
    op: DomainTag = DomainTag.COLON

    def to_json(self) -> Json:
        return {
            DISCRIMINATOR: "result_binary",
            "op": str(self.op),
            "lhs": self.lhs.to_json(),
            "rhs": self.rhs.to_json(),
        }


@dataclass
class ResultTuple(Result):
    results: list[Result] = field(default_factory=list)

    def to_json(self) -> Json:
        return {
            DISCRIMINATOR: "result_tuple",
            "results": [item.to_json() for item in self.results],
        }


@dataclass
class FuncCall(Result):
    arg: Result
    ident_code: int

    def to_json(self) -> Json:
        return {
            DISCRIMINATOR: "func_call",
            "ident_code": self.ident_code,
            "arg": self.arg.to_json(),
        }


@dataclass
class Sentence(JsonNode):
    pattern: Pattern
    result: Result

    def to_json(self) -> Json:
        return {"pattern": self.pattern.to_json(), "result": self.result.to_json()}


@dataclass
class FuncBody(JsonNode):
    sents: list[Sentence] = field(default_factory=list)

    def to_json(self) -> Json:
        return {"sents": [sent.to_json() for sent in self.sents]}


@dataclass
class Func(JsonNode):
    type: FuncType
    body: FuncBody
    ident_code: int

    def to_json(self) -> Json:
        return {
            "ident_code": self.ident_code,
            "type": self.type.to_json(),
            "body": self.body.to_json(),
        }


@dataclass
class Program(JsonNode):
    funcs: list[Func] = field(default_factory=list)

    def to_json(self) -> Json:
        return {"funcs": [func.to_json() for func in self.funcs]}