from typing import Any, Dict, List, Optional
from lispy.types import ErrorVal, copy


class Environment:
    """Maps symbol names to owned values, with an optional parent scope for lookups."""
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Any] = {}

    def __contains__(self, name: str) -> bool:
        if name in self.values:
            return True
        return self.parent is not None and name in self.parent

    def names(self) -> List[str]:
        return list(self.values.keys())

    def get(self, name: str) -> Any:
        # Callers always receive their own copy; the binding stays owned here.
        if name in self.values:
            return copy(self.values[name])
        if self.parent:
            return self.parent.get(name)
        return ErrorVal('unbound symbol')

    def put(self, name: str, value: Any) -> None:
        # Overwriting replaces the previous value; the key stays unique.
        self.values[name] = copy(value)
