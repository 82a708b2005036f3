# lexlabs

Small lexical analysers, token models and parsers for a handful of toy
languages. Positions are tracked as line, column and character offset, and
scanners record diagnostics instead of stopping at the first bad character.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The `lexlabs-backquote` command

```
lexlabs-backquote program.txt
```

Takes exactly one argument, the path of a source file, and scans it for:

- identifiers built from `?`, `*` and `|`, with digits allowed after the
  first character (`?*1`, `|2`);
- binary numbers ending in `b` (`101b` is 5);
- decimal numbers (`42`);
- strings quoted with back quotes, where a doubled back quote stands for one
  back quote (`` `a``b` `` is `` a`b ``).

Whitespace separates tokens. Text that matches none of these is reported as
`syntax error` at the point where it starts and is skipped. Numbers outside
the 32-bit signed range raise `OverflowError`.

The command prints `TOKENS:` and one tab-indented line per token, each as
`(line, pos) TAG value`, ending with `END_OF_PROGRAM`. It then writes
`MESSAGES:` to standard error and prints each recorded message to standard
output as `Error (line, pos): syntax error`. For a file holding the single
line `` ?*1 101b 42 `a``b` `` with no trailing newline, the token listing is:

```
TOKENS:
	(1, 1) IDENT ?*1
	(1, 5) NUMBER 5
	(1, 10) NUMBER 42
	(1, 13) STRING a`b
	(1, 19) END_OF_PROGRAM 
```

With the wrong number of arguments, or a file that cannot be opened, it
prints a message to standard error and exits with status 1.

## Library modules

- `lexlabs.diagnostics`: `Position` (ordered and hashed by character
  offset), `Fragment`, `MessageType`, `Message`, `format_message`, and
  `Compiler`, which holds the table of identifier names (`add_name`,
  `get_name`) and the diagnostics of a run (`add_message`, `messages`,
  `format_messages`).
- `lexlabs.cursor`: `TextCursor`, which walks a text one character at a time,
  counting lines and columns and treating `\r\n` as one line break.
- `lexlabs.backquote`: the scanner behind the command above; `Scanner` can be
  iterated for its tokens, and `format_token` renders one.
- `lexlabs.reaction`: the token model for chemical reaction equations
  (substances, coefficients, `+` and `->`) and `format_token`.
- `lexlabs.grammar_tokens`: the token model for a notation of grammar rules.
- `lexlabs.grammar_parser`: a table-driven LL(1) `Parser` for that notation.
  It builds a tree of `InnerNode` and `LeafNode` objects whose `render()`
  gives an indented outline, and raises `ParseError` at the first token that
  does not fit.
- `lexlabs.funclang_tokens`: the token model for a small functional language.
- `lexlabs.funclang_ast`: the abstract syntax tree of that language; every
  node's `to_json()` returns plain dictionaries and lists ready for
  `json.dumps`.

```python
from lexlabs.backquote import Scanner, format_token
from lexlabs.diagnostics import Compiler

compiler = Compiler()
for token in Scanner("?* 101b", compiler):
    print(format_token(token, compiler))
```

```python
from lexlabs.grammar_parser import Parser
from lexlabs.grammar_tokens import DomainTag, Token

tokens = [
    Token(DomainTag.NONTERMINAL, value="E"),
    Token(DomainTag.OP_ARROW),
    Token(DomainTag.TERMINAL, value="x"),
    Token(DomainTag.KW_END),
]
print(Parser().parse(tokens).render())
```

## What the package does not do

- Only the back-quote language has a scanner and a command. Reaction
  equations, grammar rules and the functional language have token models
  but no scanner that reads them from text; tokens must be built by the
  caller.
- The grammar parser takes a sequence of tokens; there is no command for it.
- The functional language has its tokens and its syntax tree with JSON
  output, but no parser that builds the tree from tokens.