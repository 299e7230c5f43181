from typing import Any, Callable
from lispy.types import ErrorVal, NumberVal, SExprVal, NUMBER_MIN, NUMBER_MAX

OPERATORS = ('+', '-', '*', '/')


def truncating_divide(a: int, b: int) -> int:
    """Integer division rounding toward zero, as C does."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def checked(value: int) -> Any:
    if value < NUMBER_MIN or value > NUMBER_MAX:
        return ErrorVal('Integer overflow')
    return NumberVal(value)


def builtin_op(op: str, args: SExprVal) -> Any:
    """Fold `op` left to right over the numeric arguments."""
    for cell in args.cells:
        if not isinstance(cell, NumberVal):
            return ErrorVal('Cannot operate on non-number!')

    x = args.pop(0)
    if op == '-' and args.count == 0:
        return checked(-x.value)

    while args.count > 0:
        y = args.pop(0)
        if op == '+':
            x = checked(x.value + y.value)
        elif op == '-':
            x = checked(x.value - y.value)
        elif op == '*':
            x = checked(x.value * y.value)
        elif op == '/':
            if y.value == 0:
                args.clear()
                return ErrorVal('Division by zero')
            x = checked(truncating_divide(x.value, y.value))
        else:
            raise ValueError(f'unknown operator {op}')
        if isinstance(x, ErrorVal):
            args.clear()
            return x
    return x


def make_operator(op: str) -> Callable:
    def builtin(interp, args: SExprVal, env) -> Any:
        return builtin_op(op, args)
    builtin.__name__ = f'builtin_op{op}'
    return builtin
