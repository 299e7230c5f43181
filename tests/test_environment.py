from lispy.environment import Environment
from lispy.interpreter import Interpreter
from lispy.std import BUILTINS, populate_builtin_environment
from lispy.types import ErrorVal, FunctionVal, NumberVal, QExprVal, to_string


def test_get_unbound_symbol():
    env = Environment()
    assert env.get('x') == ErrorVal('unbound symbol')


def test_put_then_get_returns_a_copy():
    env = Environment()
    env.put('xs', QExprVal([NumberVal(1)]))
    value = env.get('xs')
    value.add(NumberVal(2))
    assert to_string(env.get('xs')) == '{1}'


def test_put_copies_the_value():
    env = Environment()
    xs = QExprVal([NumberVal(1)])
    env.put('xs', xs)
    xs.add(NumberVal(2))
    assert to_string(env.get('xs')) == '{1}'


def test_put_overwrites_existing_binding():
    env = Environment()
    env.put('x', NumberVal(1))
    env.put('x', NumberVal(2))
    assert env.get('x') == NumberVal(2)
    assert env.names() == ['x']


def test_lookup_falls_back_to_parent():
    outer = Environment()
    outer.put('x', NumberVal(1))
    inner = Environment(parent=outer)
    inner.put('y', NumberVal(2))
    assert inner.get('x') == NumberVal(1)
    assert 'x' in inner
    assert 'y' not in outer
    assert outer.get('y') == ErrorVal('unbound symbol')


def test_builtins_are_bound_as_functions():
    env = populate_builtin_environment()
    assert sorted(env.names()) == sorted(BUILTINS)
    head = env.get('head')
    assert isinstance(head, FunctionVal)
    assert head.builtin is BUILTINS['head']
    assert to_string(head) == '<function>'


def test_interpreter_global_environment_has_builtins():
    interp = Interpreter()
    for name in ('list', 'head', 'tail', 'join', 'eval', '+', '-', '*', '/'):
        assert name in interp.global_env
