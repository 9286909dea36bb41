# macipr/__init__.py
"""Print MAC, IPv4 and IPv6 address sequences through a printf-style format."""
from .addr import add, parse_address, parse_ipv4, parse_ipv6, parse_mac, parse_number, render, render_number
from .driver import format_lines, iter_rows, render_row, total_rows, write_rows
from .format import Format, compile_format
from .ranges import parse_argument, parse_range

__version__ = "0.1.0"

__all__ = [
    "Format",
    "add",
    "compile_format",
    "format_lines",
    "iter_rows",
    "parse_address",
    "parse_argument",
    "parse_ipv4",
    "parse_ipv6",
    "parse_mac",
    "parse_number",
    "parse_range",
    "render",
    "render_number",
    "render_row",
    "total_rows",
    "write_rows",
]
