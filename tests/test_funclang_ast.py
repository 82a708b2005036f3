import json

from lexlabs.funclang_ast import (
    DISCRIMINATOR,
    Const,
    ElementaryType,
    EmptyList,
    Func,
    FuncBody,
    FuncCall,
    FuncType,
    ListType,
    PatternBinary,
    PatternTuple,
    Program,
    ResultBinary,
    ResultTuple,
    Sentence,
    TupleType,
    Var,
)
from lexlabs.funclang_tokens import DomainTag


def _sample_program():
    func_type = FuncType(
        TupleType([ListType(ElementaryType()), ElementaryType()]),
        ElementaryType(),
    )
    body = FuncBody(
        [
            Sentence(PatternTuple([EmptyList(), Var(1)]), Const(0)),
            Sentence(
                PatternTuple([PatternBinary(Var(2), Var(3)), Var(1)]),
                ResultBinary(
                    Var(2),
                    FuncCall(ResultTuple([Var(3), Var(1)]), 0),
                    DomainTag.PLUS,
                ),
            ),
        ]
    )
    return Program([Func(func_type, body, 0)])


def test_empty_program():
    assert Program().to_json() == {"funcs": []}


def test_elementary_type():
    assert ElementaryType().to_json() == {DISCRIMINATOR: "elementary_type", "tag": "INT"}


def test_list_type_nests():
    data = ListType(ElementaryType()).to_json()
    assert data[DISCRIMINATOR] == "list_type"
    assert data["type"] == ElementaryType().to_json()


def test_tuple_type_empty():
    assert TupleType().to_json() == {DISCRIMINATOR: "tuple_type", "types": []}


def test_empty_list():
    assert EmptyList().to_json() == {DISCRIMINATOR: "empty_list"}


def test_var_and_const():
    assert Var(3).to_json() == {DISCRIMINATOR: "var", "ident_code": 3}
    assert Const(7).to_json() == {DISCRIMINATOR: "int_const", "value": 7}


def test_pattern_binary_uses_colon_by_default():
    data = PatternBinary(Var(0), EmptyList()).to_json()
    assert data["op"] == "COLON"
    assert data[DISCRIMINATOR] == "pattern_binary"
    assert data["lhs"] == Var(0).to_json()
    assert data["rhs"] == EmptyList().to_json()


def test_result_binary_operator():
    data = ResultBinary(Const(1), Const(2), DomainTag.STAR).to_json()
    assert data["op"] == "STAR"
    assert data[DISCRIMINATOR] == "result_binary"


def test_func_call():
    data = FuncCall(Var(4), 2).to_json()
    assert data == {DISCRIMINATOR: "func_call", "ident_code": 2, "arg": Var(4).to_json()}


def test_func_key_order():
    data = _sample_program().to_json()["funcs"][0]
    assert list(data) == ["ident_code", "type", "body"]


def test_sentence_keys():
    data = Sentence(Var(0), Const(1)).to_json()
    assert data == {"pattern": Var(0).to_json(), "result": Const(1).to_json()}


def test_tuples_keep_order():
    patterns = PatternTuple([Var(0), Var(1), Var(2)]).to_json()["patterns"]
    assert [p["ident_code"] for p in patterns] == [0, 1, 2]
    results = ResultTuple([Const(5), Const(6)]).to_json()["results"]
    assert [r["value"] for r in results] == [5, 6]


def test_program_json_round_trip():
    data = _sample_program().to_json()
    assert json.loads(json.dumps(data)) == data
    assert len(data["funcs"][0]["body"]["sents"]) == 2


def test_empty_list_is_pattern_and_result():
    from lexlabs.funclang_ast import Pattern, Result

    node = EmptyList()
    assert isinstance(node, Pattern) and isinstance(node, Result)
    assert node.to_json()[DISCRIMINATOR] == "empty_list"