"""Evaluator for the Lispy language.

This module turns values read by `lispy.parser` into results. Evaluation
is substitutive: an S-expression's cells are replaced by their evaluated
forms, then the S-expression is replaced by the result of applying its
leading symbol to the rest. Every failure is an `ErrorVal` returned in
place of the intended result; the first error among the evaluated cells
of an S-expression becomes the result of the whole expression.
"""

from __future__ import annotations

from typing import Any, Optional

from .environment import Environment
from .errors import LispyParseError
from .parser import read_source
from .std import BUILTINS, populate_builtin_environment
from .types import ErrorVal, SExprVal, SymbolVal, is_error, to_string, type_name


class Interpreter:
    """Core interpreter that evaluates Lispy values."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.global_env = populate_builtin_environment(Environment())
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def eval_source(self, source: str, filename: str = '<stdin>') -> Any:
        """Read and evaluate a line of source text.

        Malformed text raises LispyParseError before anything is
        evaluated.
        """
        return self.evaluate(read_source(source, filename))

    def eval_line(self, line: str) -> str:
        """Evaluate one line of input and return the text to print for it."""
        if self.debug_level >= 1:
            self.debug(f"input {line!r}")
        try:
            result = to_string(self.eval_source(line))
        except LispyParseError as e:
            result = e.message
        if self.debug_level >= 1:
            self.debug(f"result {result}")
        return result

    def evaluate(self, value: Any, env: Optional[Environment] = None) -> Any:
        if env is None:
            env = self.global_env
        if isinstance(value, SExprVal):
            return self.evaluate_sexpr(value, env)
        return value

    def evaluate_sexpr(self, sexpr: SExprVal, env: Environment) -> Any:
        sexpr.cells = [self.evaluate(cell, env) for cell in sexpr.cells]

        for i, cell in enumerate(sexpr.cells):
            if is_error(cell):
                if self.debug_level >= 2:
                    self.debug(f"error at cell {i}: {cell.message}")
                return sexpr.take(i)

        if sexpr.count == 0:
            return sexpr
        if sexpr.count == 1:
            return sexpr.take(0)

        head = sexpr.pop(0)
        if not isinstance(head, SymbolVal):
            if self.debug_level >= 3:
                self.debug(f"cannot apply {type_name(head)} {to_string(head)}")
            sexpr.clear()
            return ErrorVal('S-expression does not start with a symbol')

        result = self.call_builtin(head.name, sexpr, env)
        if self.debug_level >= 3:
            self.debug(f"reduce ({head.name} ...) -> {to_string(result)}")
        return result

    def call_builtin(self, name: str, args: SExprVal, env: Environment) -> Any:
        builtin = BUILTINS.get(name)
        if builtin is None:
            args.clear()
            return ErrorVal('Unknown Function!')
        if self.debug_level >= 2:
            self.debug(f"call {name} with {args.count} argument(s)")
        # None means variadic
        if builtin.arity is not None and args.count != builtin.arity:
            args.clear()
            return ErrorVal(f"Function '{name}' passed too many arguments!")
        return builtin.fn(self, args, env)


def run_program(source: str, debug_level: int = 0) -> Any:
    """Convenience function to read and evaluate a line of Lispy source."""
    interpreter = Interpreter(debug_level=debug_level)
    try:
        return interpreter.eval_source(source)
    finally:
        interpreter.close()
