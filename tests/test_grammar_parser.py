import pytest

from lexlabs.grammar_parser import (
    AnalyzerTable,
    InnerNode,
    LeafNode,
    NonTerminal,
    ParseError,
    Parser,
)
from lexlabs.grammar_tokens import DomainTag, Token


def tok(tag, value=None):
    return Token(tag, value=value)


def leaves(node):
    if isinstance(node, LeafNode):
        return [node.token]
    result = []
    for child in node.children:
        result.extend(leaves(child))
    return result


SIMPLE = [
    tok(DomainTag.NONTERMINAL, "A"),
    tok(DomainTag.OP_ARROW),
    tok(DomainTag.TERMINAL, "x"),
    tok(DomainTag.KW_END),
    tok(DomainTag.END_OF_PROGRAM),
]


def test_empty_program_render():
    root = Parser().parse([tok(DomainTag.END_OF_PROGRAM)])
    assert root.non_terminal is NonTerminal.PROGRAM
    assert root.render() == "Program {\n.  Rules {\n.  }\n}\n"


def test_simple_rule_structure():
    root = Parser().parse(SIMPLE)
    rules = root.children[0]
    assert rules.non_terminal is NonTerminal.RULES
    assert [c.non_terminal for c in rules.children] == [NonTerminal.RULE, NonTerminal.RULES]
    rule = rules.children[0]
    assert isinstance(rule.children[1], LeafNode)
    assert rule.children[1].token.tag is DomainTag.OP_ARROW


def test_leaves_preserve_token_order():
    tokens = [
        tok(DomainTag.KW_AXIOM),
        tok(DomainTag.NONTERMINAL, "E"),
        tok(DomainTag.OP_ARROW),
        tok(DomainTag.NONTERMINAL, "T"),
        tok(DomainTag.TERMINAL, "+"),
        tok(DomainTag.KW_OR),
        tok(DomainTag.KW_EPSILON),
        tok(DomainTag.KW_END),
        tok(DomainTag.NONTERMINAL, "T"),
        tok(DomainTag.OP_ARROW),
        tok(DomainTag.TERMINAL, "n"),
        tok(DomainTag.KW_END),
        tok(DomainTag.END_OF_PROGRAM),
    ]
    root = Parser().parse(tokens)
    assert leaves(root) == tokens[:-1]


def test_leaf_render_line():
    root = Parser().parse(SIMPLE)
    text = root.render()
    assert ".  .  .  .  NONTERMINAL: A\n" in text
    assert "OP_ARROW: \n" in text
    assert text.startswith("Program {\n")
    assert text.endswith("}\n")


def test_missing_end_of_program_in_iterable_is_supplied():
    root = Parser().parse(SIMPLE[:-1])
    assert leaves(root) == SIMPLE[:-1]


def test_error_on_nonterminal_expansion():
    with pytest.raises(ParseError) as info:
        Parser().parse([tok(DomainTag.OP_ARROW), tok(DomainTag.END_OF_PROGRAM)])
    assert str(info.value) == "(1, 1)-(1, 1): expected Program, got OP_ARROW"
    assert info.value.expected is NonTerminal.PROGRAM


def test_error_on_terminal_mismatch():
    tokens = [
        tok(DomainTag.NONTERMINAL, "A"),
        tok(DomainTag.TERMINAL, "x"),
        tok(DomainTag.KW_END),
        tok(DomainTag.END_OF_PROGRAM),
    ]
    with pytest.raises(ParseError, match="expected OP_ARROW, got TERMINAL"):
        Parser().parse(tokens)


def test_truncated_input_raises():
    with pytest.raises(ParseError, match="expected OP_ARROW, got END_OF_PROGRAM"):
        Parser().parse([tok(DomainTag.NONTERMINAL, "A")])


def test_table_find():
    table = AnalyzerTable()
    assert table.find(NonTerminal.EXPR1, DomainTag.KW_END) == ()
    assert table.find(NonTerminal.RULES, DomainTag.TERMINAL) is None
    assert table.find(NonTerminal.RULE_LHS, DomainTag.KW_AXIOM) == (
        DomainTag.KW_AXIOM,
        DomainTag.NONTERMINAL,
    )


def test_inner_node_add_child_returns_node():
    parent = InnerNode(NonTerminal.RULE)
    child = InnerNode(NonTerminal.EXPR)
    assert parent.add_child(child) is child
    assert parent.children == [child]
    assert parent.render("") == "Rule {\n.  Expr {\n.  }\n}\n"