"""List primitives: list, head, tail, join and eval.

Each primitive receives the evaluated argument container and consumes
it. Argument count has already been checked against the primitive's
arity by the interpreter.
"""

from typing import Any
from lispy.types import ErrorVal, QExprVal, SExprVal


def builtin_list(interp, args: SExprVal, env) -> Any:
    # The argument container itself becomes the list.
    return args.as_qexpr()


def builtin_head(interp, args: SExprVal, env) -> Any:
    if not isinstance(args.cells[0], QExprVal):
        return ErrorVal("Function 'head' passed incorrect type!")
    if args.cells[0].count == 0:
        return ErrorVal("Function 'head' passed {}!")
    qexpr = args.take(0)
    while qexpr.count > 1:
        qexpr.pop(1)
    return qexpr


def builtin_tail(interp, args: SExprVal, env) -> Any:
    if not isinstance(args.cells[0], QExprVal):
        return ErrorVal("Function 'tail' passed incorrect type!")
    if args.cells[0].count == 0:
        return ErrorVal("Function 'tail' passed {}!")
    qexpr = args.take(0)
    qexpr.pop(0)
    return qexpr


def builtin_join(interp, args: SExprVal, env) -> Any:
    if args.count == 0:
        return ErrorVal("Function 'join' passed no arguments!")
    for cell in args.cells:
        if not isinstance(cell, QExprVal):
            return ErrorVal("Function 'join' passed incorrect type.")
    joined = args.pop(0)
    while args.count:
        joined.join(args.pop(0))
    return joined


def builtin_eval(interp, args: SExprVal, env) -> Any:
    if not isinstance(args.cells[0], QExprVal):
        return ErrorVal("Function 'eval' passed incorrect type!")
    # The only place quoted data becomes executable.
    return interp.evaluate(args.take(0).as_sexpr(), env)
