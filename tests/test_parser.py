import pytest
from lark import Tree

from lispy.errors import LispyParseError
from lispy.parser import parse, read, read_number, read_source
from lispy.types import ErrorVal, NumberVal, QExprVal, SExprVal, SymbolVal, to_string


def test_empty_input_reads_as_empty_sexpr():
    assert read_source('') == SExprVal()
    assert read_source('   ') == SExprVal()


def test_root_holds_every_top_level_form():
    value = read_source('+ 1 2')
    assert value == SExprVal([SymbolVal('+'), NumberVal(1), NumberVal(2)])


def test_nested_groups():
    value = read_source('(head {1 (2 3)})')
    assert value == SExprVal([
        SExprVal([
            SymbolVal('head'),
            QExprVal([NumberVal(1), SExprVal([NumberVal(2), NumberVal(3)])]),
        ])
    ])


def test_parse_tree_keeps_delimiters():
    tree = parse('(1)')
    sexpr = tree.children[0]
    assert isinstance(sexpr, Tree)
    assert sexpr.data == 'sexpr'
    assert [str(child) for child in sexpr.children] == ['(', '1', ')']


def test_read_subtree():
    tree = parse('{a b}')
    assert read(tree.children[0]) == QExprVal([SymbolVal('a'), SymbolVal('b')])


@pytest.mark.parametrize(
    "source,expected",
    [
        ('-5', [NumberVal(-5)]),
        ('-', [SymbolVal('-')]),
        ('- 5', [SymbolVal('-'), NumberVal(5)]),
        ('5abc', [NumberVal(5), SymbolVal('abc')]),
        ('abc5', [SymbolVal('abc5')]),
        ('1-2', [NumberVal(1), NumberVal(-2)]),
        ('<= == !x &y \\z', [SymbolVal('<='), SymbolVal('=='), SymbolVal('!x'), SymbolVal('&y'), SymbolVal('\\z')]),
        ('007', [NumberVal(7)]),
    ]
)
def test_numbers_are_tried_before_symbols(source, expected):
    assert read_source(source).cells == expected


def test_number_range():
    assert read_number('9223372036854775807') == NumberVal(9223372036854775807)
    assert read_number('-9223372036854775808') == NumberVal(-9223372036854775808)
    assert read_number('9223372036854775808') == ErrorVal('invalid number')
    assert read_number('-9223372036854775809') == ErrorVal('invalid number')


def test_very_long_literals_read_as_errors():
    assert read_number('1' * 5000) == ErrorVal('invalid number')
    assert read_number('-' + '9' * 5000) == ErrorVal('invalid number')
    assert read_number('0' * 5000 + '42') == NumberVal(42)
    assert read_number('-' + '0' * 30 + '7') == NumberVal(-7)


def test_out_of_range_literal_reads_as_error():
    value = read_source('{1 99999999999999999999}')
    assert value.cells[0].cells[1] == ErrorVal('invalid number')


@pytest.mark.parametrize("source", ['(+ 1 2', '}', '(1 . 2)', '{1 2)', '%'])
def test_malformed_input_raises(source):
    with pytest.raises(LispyParseError) as excinfo:
        read_source(source)
    assert excinfo.value.message.startswith('<stdin>:')
    assert ': error: ' in excinfo.value.message


def test_parse_error_names_the_file():
    with pytest.raises(LispyParseError) as excinfo:
        parse('(', filename='repl')
    assert excinfo.value.message.startswith('repl:')


@pytest.mark.parametrize("source", ['{1 -2 {a b} ()}', '{}', '{+ - * /}', '{{{}}}'])
def test_printed_literals_read_back_identically(source):
    printed = to_string(read_source(source).take(0))
    assert printed == source
    assert to_string(read_source(printed).take(0)) == printed
