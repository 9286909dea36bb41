# macipr/core/errors.py
from typing import Optional


class ParseError(ValueError):
    """
    Base class for every error raised while compiling a format string or
    resolving its arguments. Nothing is retried; the caller has to fix the
    input.

    Args:
        message (str): Human readable description, including the expected grammar.
        argument (Optional[str]): The offending format string or argument text.
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.argument = argument

    def __str__(self) -> str:
        if self.argument is None:
            return self.message
        return f"{self.message}: {self.argument!r}"


class UnknownDirective(ParseError):
    pass


class UnknownEscape(ParseError):
    pass


class ArgumentCountMismatch(ParseError):
    def __init__(self, expected: int, actual: int):
        if actual < expected:
            message = f"Insufficient number of arguments (format expects {expected}, got {actual})"
        else:
            message = f"Unexpected argument (format expects {expected}, got {actual})"
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class InvalidAddress(ParseError):
    pass


class InvalidMac(InvalidAddress):
    pass


class InvalidIPv4(InvalidAddress):
    pass


class InvalidIPv6(InvalidAddress):
    pass


class InvalidRange(ParseError):
    pass


class InvalidNumberArgument(ParseError):
    pass
