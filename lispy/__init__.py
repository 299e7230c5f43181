# Lispy language package
# This package provides a reader and evaluator for the Lispy language.
from .interpreter import run_program, Interpreter
from .errors import LispyError, LispyParseError

__version__ = '0.0.0.0.1'

__all__ = [
    'run_program',
    'Interpreter',
    'LispyError',
    'LispyParseError',
]
