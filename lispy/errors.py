class LispyError(Exception):
    """Base class for host-level Lispy failures.

    Language-level failures never use this: they are `ErrorVal` values
    returned from evaluation.
    """


class LispyParseError(LispyError):
    """Raised when input text does not match the Lispy grammar."""
    def __init__(self, message: str, line: int = -1, column: int = -1):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
