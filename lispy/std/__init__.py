from typing import Dict, Optional

from lispy.builtin_function import BuiltinFunction
from lispy.environment import Environment
from lispy.types import FunctionVal
from .arith import OPERATORS, make_operator
from .lists import builtin_eval, builtin_head, builtin_join, builtin_list, builtin_tail


# Operator names are matched exactly against this table.
BUILTINS: Dict[str, BuiltinFunction] = {
    'list': BuiltinFunction('list', None, builtin_list),
    'head': BuiltinFunction('head', 1, builtin_head),
    'tail': BuiltinFunction('tail', 1, builtin_tail),
    'join': BuiltinFunction('join', None, builtin_join),
    'eval': BuiltinFunction('eval', 1, builtin_eval),
}
for _op in OPERATORS:
    BUILTINS[_op] = BuiltinFunction(_op, None, make_operator(_op))


def populate_builtin_environment(env: Optional[Environment] = None) -> Environment:
    """Bind a function handle for every builtin into `env` (or a new environment)."""
    if env is None:
        env = Environment()
    for name, builtin in BUILTINS.items():
        env.put(name, FunctionVal(builtin))
    return env


__all__ = ['BUILTINS', 'populate_builtin_environment']
