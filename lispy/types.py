"""Value definitions and printing helpers for Lispy.

Every runtime value is one of six tagged variants: numbers, errors,
symbols, builtin function handles, S-expressions and Q-expressions.
Errors are first-class values rather than exceptions; they travel through
evaluation like any other result.

S- and Q-expressions exclusively own their cells. Nothing is ever shared
between two containers: anything placed into a new owner (an environment
binding, a lookup result) is a deep copy, and the container operations
below move cells from one owner to another rather than aliasing them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .builtin_function import BuiltinFunction


# Range of the integers the reader accepts (a signed 64-bit long).
NUMBER_MIN = -2 ** 63
NUMBER_MAX = 2 ** 63 - 1


@dataclass
class NumberVal:
    """A signed integer, the only numeric type."""
    value: int

    def copy(self) -> 'NumberVal':
        return NumberVal(self.value)


@dataclass
class ErrorVal:
    """Represents a Lispy error value.

    Errors carry a human-readable message and nothing else. They are the
    result of the evaluation step that failed and supersede any
    S-expression they appear in.
    """
    message: str

    def copy(self) -> 'ErrorVal':
        return ErrorVal(self.message)

    def __repr__(self) -> str:
        return f"Error(message={self.message!r})"


@dataclass
class SymbolVal:
    name: str

    def copy(self) -> 'SymbolVal':
        return SymbolVal(self.name)


@dataclass
class FunctionVal:
    """Opaque handle to one of the builtin primitives."""
    builtin: 'BuiltinFunction'

    def copy(self) -> 'FunctionVal':
        # Primitives are immutable; the handle is what gets copied.
        return FunctionVal(self.builtin)

    def __repr__(self) -> str:
        return f"Function({self.builtin.name!r})"


@dataclass
class ExprVal:
    """Common base for S-expressions and Q-expressions.

    The container owns the values in `cells`. `add`, `pop`, `take` and
    `join` transfer ownership of cells; none of them copies.
    """
    cells: List[Any] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.cells)

    def add(self, value: Any) -> 'ExprVal':
        """Append `value` to the end of the container and return the container."""
        self.cells.append(value)
        return self

    def pop(self, index: int) -> Any:
        """Remove and return the cell at `index`, shifting later cells down.

        `index` must be less than `count`; anything else is a programming
        error and raises IndexError.
        """
        if not 0 <= index < len(self.cells):
            raise IndexError(f"pop index {index} out of range for {len(self.cells)} cells")
        return self.cells.pop(index)

    def take(self, index: int) -> Any:
        """Pop the cell at `index` and consume the rest of the container."""
        value = self.pop(index)
        self.clear()
        return value

    def join(self, other: 'ExprVal') -> 'ExprVal':
        """Move every cell of `other`, in order, onto the end of this container."""
        while other.cells:
            self.add(other.pop(0))
        return self

    def clear(self) -> None:
        self.cells = []

    def as_qexpr(self) -> 'QExprVal':
        return self._retag(QExprVal)

    def as_sexpr(self) -> 'SExprVal':
        return self._retag(SExprVal)

    def _retag(self, cls):
        if type(self) is cls:
            return self
        # The cell list itself moves; this shell is left empty.
        moved = cls(self.cells)
        self.cells = []
        return moved

    def copy(self) -> 'ExprVal':
        return type(self)([copy(cell) for cell in self.cells])


class SExprVal(ExprVal):
    """An expression awaiting evaluation."""

    def __repr__(self) -> str:
        return f"SExpr({self.cells!r})"


class QExprVal(ExprVal):
    """A quoted list. Its cells are never evaluated implicitly."""

    def __repr__(self) -> str:
        return f"QExpr({self.cells!r})"


def copy(value: Any) -> Any:
    """Return a fully independent deep copy of a value."""
    return value.copy()


def is_error(value: Any) -> bool:
    return isinstance(value, ErrorVal)


def type_name(value: Any) -> str:
    """Return the Lispy type name of a runtime value."""
    if isinstance(value, NumberVal):
        return 'Number'
    if isinstance(value, ErrorVal):
        return 'Error'
    if isinstance(value, SymbolVal):
        return 'Symbol'
    if isinstance(value, FunctionVal):
        return 'Function'
    if isinstance(value, SExprVal):
        return 'S-Expression'
    if isinstance(value, QExprVal):
        return 'Q-Expression'
    return type(value).__name__


def to_string(value: Any) -> str:
    """Convert a Lispy value to its printed representation."""
    if isinstance(value, NumberVal):
        return str(value.value)
    if isinstance(value, ErrorVal):
        return f"Error: {value.message}"
    if isinstance(value, SymbolVal):
        return value.name
    if isinstance(value, FunctionVal):
        return '<function>'
    if isinstance(value, SExprVal):
        return '(' + ' '.join(to_string(cell) for cell in value.cells) + ')'
    if isinstance(value, QExprVal):
        return '{' + ' '.join(to_string(cell) for cell in value.cells) + '}'
    raise TypeError(f"cannot print {type(value).__name__}")
