from typing import Optional


class StakError(Exception):
    """Base exception for the compiler and runtime."""

    pass


class StackUnderflow(StakError):
    """Raised when a statement is applied to a stack that is too shallow."""

    def __init__(self, needed: int, available: int, what: str = "statement"):
        super().__init__(
            f"Stack Error: {what} needs {needed} value(s), stack holds {available}."
        )
        self.needed = needed
        self.available = available


class DivisionByZero(StakError):
    """Raised by `/` and `%` when the divisor is zero."""

    pass


class MalformedInput(StakError):
    """Raised when the input source cannot produce an integer."""

    pass


class UnknownToken(StakError):
    """Raised by strict compilation on a token that is neither literal nor built-in."""

    def __init__(self, token: str, line: Optional[int] = None, column: Optional[int] = None):
        where = f" at line {line}, column {column}" if line is not None else ""
        super().__init__(f"Compile Error: Unknown token '{token}'{where}.")
        self.token = token
        self.line = line
        self.column = column


class ConfigError(StakError):
    """Raised when a configuration file is missing or invalid."""

    pass


class InvalidLiteral(StakError):
    """Raised when an integer literal cannot be converted, e.g. it has too many digits."""

    def __init__(self, token: str, line: Optional[int] = None, column: Optional[int] = None):
        where = f" at line {line}, column {column}" if line is not None else ""
        shown = token if len(token) <= 20 else token[:17] + "..."
        super().__init__(f"Compile Error: Integer literal '{shown}'{where} is out of range.")
        self.token = token
        self.line = line
        self.column = column
