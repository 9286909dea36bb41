# macipr/core/__init__.py
from .errors import (
    ArgumentCountMismatch,
    InvalidAddress,
    InvalidIPv4,
    InvalidIPv6,
    InvalidMac,
    InvalidNumberArgument,
    InvalidRange,
    ParseError,
    UnknownDirective,
    UnknownEscape,
)
from .models import (
    AddressCycle,
    AddressDirective,
    AddressKind,
    AddressValue,
    Direction,
    DirectiveKind,
    FormatToken,
    LiteralText,
    NumberDirective,
    PadChar,
    PercentLiteral,
)

__all__ = [
    "ArgumentCountMismatch",
    "InvalidAddress",
    "InvalidIPv4",
    "InvalidIPv6",
    "InvalidMac",
    "InvalidNumberArgument",
    "InvalidRange",
    "ParseError",
    "UnknownDirective",
    "UnknownEscape",
    "AddressCycle",
    "AddressDirective",
    "AddressKind",
    "AddressValue",
    "Direction",
    "DirectiveKind",
    "FormatToken",
    "LiteralText",
    "NumberDirective",
    "PadChar",
    "PercentLiteral",
]
