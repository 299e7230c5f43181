"""Parser and reader for Lispy.

Parsing happens in two stages:

1. **Parsing**: the raw text is fed into a Lark parser configured with
   the Lispy grammar. Every token is kept, so the parse tree contains
   the bracket delimiters as well as the numbers and symbols.

2. **Reading**: the parse tree is converted into Lispy values by a
   transformer. Numbers and symbols become leaves; `sexpr` and `qexpr`
   nodes become containers holding their children in order, with the
   delimiter tokens dropped. The root of the tree is read as an
   S-expression holding every top-level form.

`read_source` is the public entry point combining both stages. Malformed
input raises `LispyParseError`; nothing is evaluated in that case.
"""

from __future__ import annotations

from typing import Any, Iterable, List

from lark import Lark, Token, Transformer, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from .errors import LispyParseError
from .types import (
    ErrorVal, ExprVal, NumberVal, QExprVal, SExprVal, SymbolVal,
    NUMBER_MIN, NUMBER_MAX,
)


LISPY_GRAMMAR = r"""
    lispy: expr*

    ?expr: NUMBER
         | SYMBOL
         | sexpr
         | qexpr

    sexpr: "(" expr* ")"
    qexpr: "{" expr* "}"

    // A digit run is tried as a number before it is tried as a symbol,
    // so "5abc" reads as 5 followed by abc and a lone "-" is a symbol.
    NUMBER.2: /-?[0-9]+/
    SYMBOL: /[a-zA-Z0-9_+\-*\/\\=<>!&]+/

    %import common.WS
    %ignore WS
"""


LISPY_PARSER = Lark(
    LISPY_GRAMMAR,
    start='lispy',
    parser='lalr',
    lexer='basic',
    keep_all_tokens=True,
    propagate_positions=True,
    maybe_placeholders=False,
)


DELIMITERS = ('(', ')', '{', '}')

# Display names for terminals in parse error messages.
TERMINAL_NAMES = {
    'LPAR': "'('",
    'RPAR': "')'",
    'LBRACE': "'{'",
    'RBRACE': "'}'",
    'NUMBER': 'number',
    'SYMBOL': 'symbol',
    '$END': 'end of input',
}


def read_number(text: str) -> Any:
    """Read a base-10 integer, refusing anything outside the Number range."""
    digits = text.lstrip('-').lstrip('0') or '0'
    # Anything longer than 19 digits is out of range before conversion.
    if len(digits) > 19:
        return ErrorVal('invalid number')
    value = int(digits, 10)
    if text.startswith('-'):
        value = -value
    if value < NUMBER_MIN or value > NUMBER_MAX:
        return ErrorVal('invalid number')
    return NumberVal(value)


class ValueTransformer(Transformer):
    """Transforms the raw parse tree into Lispy values."""

    def NUMBER(self, token):
        return read_number(str(token))

    def SYMBOL(self, token):
        return SymbolVal(str(token))

    def lispy(self, items):
        return self.group(SExprVal(), items)

    def sexpr(self, items):
        return self.group(SExprVal(), items)

    def qexpr(self, items):
        return self.group(QExprVal(), items)

    def group(self, container: ExprVal, items: List[Any]) -> ExprVal:
        for item in items:
            # Brackets are kept in the tree; they carry no value of their own.
            if isinstance(item, Token) and str(item) in DELIMITERS:
                continue
            container.add(item)
        return container


def describe_expected(names: Iterable[str]) -> str:
    shown = sorted({TERMINAL_NAMES.get(name, name.lower()) for name in names})
    if len(shown) == 1:
        return shown[0]
    return 'one of ' + ', '.join(shown)


def format_parse_error(e: UnexpectedInput, filename: str) -> str:
    """Render a Lark parse failure as a single `file:line:col: error: ...` line."""
    if isinstance(e, UnexpectedCharacters):
        found = repr(e.char)
        expected = e.allowed or ()
    elif isinstance(e, UnexpectedToken):
        found = 'end of input' if e.token.type == '$END' else repr(str(e.token))
        expected = e.expected or ()
    else:
        found = 'end of input'
        expected = getattr(e, 'expected', None) or ()
    where = f"{filename}:{e.line}:{e.column}"
    if expected:
        return f"{where}: error: expected {describe_expected(expected)} at {found}"
    return f"{where}: error: unexpected {found}"


def parse(source: str, filename: str = '<stdin>') -> Tree:
    """Parse Lispy source text into a Lark parse tree."""
    try:
        return LISPY_PARSER.parse(source)
    except UnexpectedInput as e:
        raise LispyParseError(format_parse_error(e, filename), e.line, e.column) from e


def read(tree: Tree) -> Any:
    """Convert a parse tree (or any subtree of it) into a Lispy value."""
    if isinstance(tree, Token):
        return ValueTransformer().transform(Tree('lispy', [tree])).take(0)
    return ValueTransformer().transform(tree)


def read_source(source: str, filename: str = '<stdin>') -> SExprVal:
    """Parse and read source text. The result holds every top-level form."""
    return read(parse(source, filename))
