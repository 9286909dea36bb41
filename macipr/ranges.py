# macipr/ranges.py
"""
Turns one argument into an AddressCycle.

Accepted shapes, tried in this order:

    START+OFFSET   OFFSET is a signed decimal integer (10+-9 walks down to 1)
    START-END      walks backward when END < START
    ADDRESS        a single value
"""
import logging
import re
from typing import Optional

from .addr import invalid_address, parse_address, parse_decimal
from .core.errors import InvalidNumberArgument, InvalidRange, ParseError
from .core.models import AddressCycle, AddressKind, AddressValue, Direction, Directive

logger = logging.getLogger(__name__)

OFFSET_PATTERN = re.compile(r"-?[0-9]+")

RANGE_GRAMMAR = "START-END or START+OFFSET"


def _try_parse(text: str, kind: AddressKind) -> Optional[AddressValue]:
    try:
        return parse_address(text, kind)
    except ParseError:
        return None


def _range_error(text: str, kind: AddressKind, recognised: bool) -> ParseError:
    """
    `recognised` tells whether at least one side of a split parsed as `kind`.
    Without that, the text is not a range at all and is reported as a bad
    address of the bound kind.
    """
    if kind is AddressKind.NUMBER:
        return InvalidNumberArgument(f"Invalid number or number range, expected an integer or {RANGE_GRAMMAR}", text)
    if recognised:
        return InvalidRange(f"Invalid {kind.value} range, expected {RANGE_GRAMMAR}", text)
    return invalid_address(text, kind)


def parse_offset_range(text: str, kind: AddressKind) -> AddressCycle:
    start_text, _, offset_text = text.rpartition("+")
    start = _try_parse(start_text, kind)
    offset_ok = OFFSET_PATTERN.fullmatch(offset_text) is not None
    if start is None or not offset_ok:
        raise _range_error(text, kind, start is not None or offset_ok)

    offset = -parse_decimal(offset_text[1:]) if offset_text.startswith("-") else parse_decimal(offset_text)
    direction = Direction.BACKWARD if offset < 0 else Direction.FORWARD
    return AddressCycle(start=start, direction=direction, count=abs(offset) + 1)


def parse_span_range(text: str, kind: AddressKind) -> AddressCycle:
    recognised = False
    # Rightmost separator first; none of the address grammars contain '-'
    positions = [i for i, c in enumerate(text) if c == "-"]
    for i in reversed(positions):
        start = _try_parse(text[:i], kind)
        end = _try_parse(text[i + 1:], kind)
        if start is not None and end is not None:
            return span(start, end)
        recognised = recognised or start is not None or end is not None
    raise _range_error(text, kind, recognised)


def span(start: AddressValue, end: AddressValue) -> AddressCycle:
    """The cycle from `start` to `end` inclusive, walking backward when end < start."""
    if end.value < start.value:
        return AddressCycle(start=start, direction=Direction.BACKWARD, count=start.value - end.value + 1)
    return AddressCycle(start=start, direction=Direction.FORWARD, count=end.value - start.value + 1)


def parse_range(text: str, kind: AddressKind) -> AddressCycle:
    if "+" in text:
        cycle = parse_offset_range(text, kind)
    elif "-" in text:
        cycle = parse_span_range(text, kind)
    else:
        cycle = AddressCycle(start=parse_address(text, kind))
    # count may be too long for str(), so it is formatted lazily
    logger.debug("Parsed %r as %s cycle: start=%s %s count=%s", text, kind.value, cycle.start.value, cycle.direction.value, cycle.count)
    return cycle


def parse_argument(text: str, directive: Directive) -> AddressCycle:
    """Parses `text` with the kind bound to `directive` (IPv6Full parses as IPv6)."""
    return parse_range(text, directive.address_kind)
