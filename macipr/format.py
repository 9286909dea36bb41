# macipr/format.py
"""
Compiles a printf-style format string into tokens.

    %m  MAC address            %i  IPv4 address
    %x  IPv6 address (compact) %X  IPv6 address (eight full groups)
    %n  number; %5n pads with spaces, %05n pads with zeros
    %%  a literal '%'
    \\n newline, \\\\ backslash
"""
import logging
from typing import List, Sequence, Tuple

from .core.errors import ArgumentCountMismatch, UnknownDirective, UnknownEscape
from .core.models import (
    AddressCycle,
    AddressDirective,
    Directive,
    DirectiveKind,
    FormatToken,
    LiteralText,
    NumberDirective,
    PadChar,
    PercentLiteral,
)
from .ranges import parse_argument

logger = logging.getLogger(__name__)

MAX_PAD_WIDTH = 4096

ESCAPES = {
    "n": "\n",
    "\\": "\\",
}


def compile_format(fmt: str) -> List[FormatToken]:
    tokens: List[FormatToken] = []
    buf: List[str] = []

    def flush() -> None:
        if buf:
            tokens.append(LiteralText(text="".join(buf)))
            buf.clear()

    i = 0
    while i < len(fmt):
        c = fmt[i]
        if c == "\\":
            escaped = fmt[i + 1:i + 2]
            if escaped not in ESCAPES:
                raise UnknownEscape(f"Unexpected character after \\ at position {i}, expected \\n or \\\\", fmt)
            buf.append(ESCAPES[escaped])
            i += 2
        elif c == "%":
            j = i + 1
            while j < len(fmt) and fmt[j] in "0123456789":
                j += 1
            digits = fmt[i + 1:j]
            directive = fmt[j:j + 1]
            if directive == "%" and not digits:
                flush()
                tokens.append(PercentLiteral())
            elif directive == "n":
                flush()
                significant = digits.lstrip("0")
                if len(significant) > len(str(MAX_PAD_WIDTH)) or int(significant or "0") > MAX_PAD_WIDTH:
                    raise UnknownDirective(
                        f"Pad width at position {i} exceeds {MAX_PAD_WIDTH}", fmt
                    )
                pad_char = PadChar.ZERO if digits.startswith("0") else PadChar.SPACE
                tokens.append(NumberDirective(pad_width=int(significant or "0"), pad_char=pad_char))
            elif directive and not digits and directive in "mixX":
                flush()
                tokens.append(AddressDirective(kind=DirectiveKind(directive)))
            else:
                raise UnknownDirective(
                    f"Unexpected character after % at position {i}, expected one of %m %i %x %X %n %%", fmt
                )
            i = j + 1
        else:
            buf.append(c)
            i += 1
    flush()
    return tokens


def directives(tokens: Sequence[FormatToken]) -> List[Directive]:
    """The argument-consuming tokens, in the order their arguments appear."""
    return [t for t in tokens if isinstance(t, (AddressDirective, NumberDirective))]


def check_arguments(tokens: Sequence[FormatToken], args: Sequence[str]) -> None:
    expected = len(directives(tokens))
    if expected != len(args):
        raise ArgumentCountMismatch(expected, len(args))


class Format:
    """A format string compiled once; binds argument lists to cycles."""

    def __init__(self, fmt: str):
        self.source = fmt
        self.tokens: Tuple[FormatToken, ...] = tuple(compile_format(fmt))
        self.directives: Tuple[Directive, ...] = tuple(directives(self.tokens))
        logger.debug(f"Compiled format {fmt!r} into {len(self.tokens)} tokens, {len(self.directives)} directives")

    def bind(self, args: Sequence[str]) -> List[AddressCycle]:
        """
        Resolves every argument into a cycle, in order. The k-th argument is
        parsed with the kind of the k-th directive.
        """
        check_arguments(self.tokens, args)
        cycles = []
        for position, (text, directive) in enumerate(zip(args, self.directives), start=1):
            logger.debug(f"Resolving argument {position} ({text!r}) as {directive.address_kind.value}")
            cycles.append(parse_argument(text, directive))
        return cycles

    def __repr__(self) -> str:
        return f"Format({self.source!r})"
