# macipr/addr.py
"""
Parsing, rendering and wrapping arithmetic for the fixed-width address kinds.

Every kind also accepts a bare integer literal (decimal, or hex with a `0x`
prefix). Integers that do not fit are reduced modulo 2**width, so
`parse_ipv4("180000000")` is `10.186.149.0`.
"""
import ipaddress
import logging
import re
from typing import Optional

from .core.errors import InvalidIPv4, InvalidIPv6, InvalidMac, InvalidNumberArgument, ParseError
from .core.models import AddressKind, AddressValue, DirectiveKind, PadChar

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"0[xX][0-9a-fA-F]+|[0-9]+")
MAC_PATTERN = re.compile(r"[0-9a-fA-F]{2}(?::[0-9a-fA-F]{2}){5}")
DECIMAL_CHUNK = 4000

MAC_GRAMMAR = "six colon-separated hex octets (aa:bb:cc:dd:ee:ff) or an integer"
IPV4_GRAMMAR = "a dotted quad (192.0.2.1) or an integer"
IPV6_GRAMMAR = "colon-separated hex groups with optional :: (2001:db8::1) or an integer"
NUMBER_GRAMMAR = "an integer"

ERRORS = {
    AddressKind.MAC: (InvalidMac, "Invalid MAC address", MAC_GRAMMAR),
    AddressKind.IPV4: (InvalidIPv4, "Invalid IPv4 address", IPV4_GRAMMAR),
    AddressKind.IPV6: (InvalidIPv6, "Invalid IPv6 address", IPV6_GRAMMAR),
    AddressKind.NUMBER: (InvalidNumberArgument, "Invalid number", NUMBER_GRAMMAR),
}


def invalid_address(text: str, kind: AddressKind) -> ParseError:
    """Builds the kind-specific error for `text`; the caller raises it."""
    error_cls, what, grammar = ERRORS[kind]
    return error_cls(f"{what}, expected {grammar}", text)


def parse_decimal(text: str, modulus: Optional[int] = None) -> int:
    """
    Converts a string of decimal digits of any length. `int()` refuses long
    decimal strings (sys.get_int_max_str_digits), so the digits are folded in
    chunks, reducing modulo `modulus` along the way when one is given.
    """
    n = 0
    for i in range(0, len(text), DECIMAL_CHUNK):
        chunk = text[i:i + DECIMAL_CHUNK]
        n = n * 10 ** len(chunk) + int(chunk, 10)
        if modulus is not None:
            n %= modulus
    return n


def parse_integer(text: str, modulus: Optional[int] = None) -> Optional[int]:
    """Returns the value of a bare decimal or 0x-prefixed hex literal, or None."""
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    if text[:2] in ("0x", "0X"):
        n = int(text[2:], 16)
        return n if modulus is None else n % modulus
    return parse_decimal(text, modulus)


def _from_integer(text: str, kind: AddressKind) -> Optional[AddressValue]:
    n = parse_integer(text, kind.modulus)
    if n is None:
        return None
    return AddressValue(kind=kind, value=n)


def parse_mac(text: str) -> AddressValue:
    value = _from_integer(text, AddressKind.MAC)
    if value is not None:
        return value
    if MAC_PATTERN.fullmatch(text):
        return AddressValue(kind=AddressKind.MAC, value=int(text.replace(":", ""), 16))
    raise invalid_address(text, AddressKind.MAC)


def parse_ipv4(text: str) -> AddressValue:
    value = _from_integer(text, AddressKind.IPV4)
    if value is not None:
        return value
    try:
        addr = ipaddress.IPv4Address(text)
    except ipaddress.AddressValueError:
        raise invalid_address(text, AddressKind.IPV4) from None
    return AddressValue(kind=AddressKind.IPV4, value=int(addr))


def parse_ipv6(text: str) -> AddressValue:
    value = _from_integer(text, AddressKind.IPV6)
    if value is not None:
        return value
    # ipaddress accepts scoped addresses (fe80::1%eth0); a zone is not part of the value
    if "%" in text:
        raise invalid_address(text, AddressKind.IPV6)
    try:
        addr = ipaddress.IPv6Address(text)
    except ipaddress.AddressValueError:
        raise invalid_address(text, AddressKind.IPV6) from None
    return AddressValue(kind=AddressKind.IPV6, value=int(addr))


def parse_number(text: str) -> AddressValue:
    value = _from_integer(text, AddressKind.NUMBER)
    if value is None:
        raise invalid_address(text, AddressKind.NUMBER)
    return value


PARSERS = {
    AddressKind.MAC: parse_mac,
    AddressKind.IPV4: parse_ipv4,
    AddressKind.IPV6: parse_ipv6,
    AddressKind.NUMBER: parse_number,
}


def parse_address(text: str, kind: AddressKind) -> AddressValue:
    return PARSERS[kind](text)


def render(value: AddressValue, kind: Optional[DirectiveKind] = None) -> str:
    """
    Renders `value` as text.

    Args:
        value (AddressValue): The value to render.
        kind (Optional[DirectiveKind]): Selects the IPv6 style (`IPV6` compact,
            `IPV6_FULL` eight 4-digit groups). Defaults to the natural form of
            `value.kind`.
    """
    n = value.value
    if value.kind is AddressKind.MAC:
        return ":".join(f"{(n >> shift) & 0xFF:02x}" for shift in range(40, -1, -8))
    if value.kind is AddressKind.IPV4:
        return str(ipaddress.IPv4Address(n))
    if value.kind is AddressKind.IPV6:
        addr = ipaddress.IPv6Address(n)
        return addr.exploded if kind is DirectiveKind.IPV6_FULL else addr.compressed
    return str(n)


def render_number(value: int, pad_width: int = 0, pad_char: PadChar = PadChar.SPACE) -> str:
    """Decimal text left-padded to `pad_width`; longer text is never truncated."""
    return str(value).rjust(pad_width, PadChar(pad_char).value)


def add(value: AddressValue, offset: int) -> AddressValue:
    return AddressValue(kind=value.kind, value=(value.value + offset) % value.kind.modulus)


def increment(value: AddressValue) -> AddressValue:
    return add(value, 1)


def decrement(value: AddressValue) -> AddressValue:
    return add(value, -1)
