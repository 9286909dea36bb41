# macipr/driver.py
"""
Drives the argument cycles in lock-step.

The longest cycle sets the number of rows; row `r` takes element
`r mod count` from every cycle, so shorter cycles repeat. Every row is a
pure function of its index.
"""
import logging
from typing import IO, Iterator, List, Optional, Sequence, Tuple

import tqdm

from .addr import render, render_number
from .core.models import (
    AddressCycle,
    AddressDirective,
    AddressValue,
    FormatToken,
    LiteralText,
    NumberDirective,
    PercentLiteral,
)
from .format import Format

logger = logging.getLogger(__name__)


def total_rows(cycles: Sequence[AddressCycle]) -> int:
    return max((cycle.count for cycle in cycles), default=1)


def row_values(cycles: Sequence[AddressCycle], row: int) -> Tuple[AddressValue, ...]:
    return tuple(cycle.value_at(row % cycle.count) for cycle in cycles)


def render_token(token: FormatToken, value: Optional[AddressValue] = None) -> str:
    if isinstance(token, (LiteralText, PercentLiteral)):
        return token.text
    if isinstance(token, NumberDirective):
        return render_number(value.value, token.pad_width, token.pad_char)
    if isinstance(token, AddressDirective):
        return render(value, token.kind)
    raise TypeError(f"Unknown format token: {token!r}")


def render_row(tokens: Sequence[FormatToken], cycles: Sequence[AddressCycle], row: int) -> str:
    values = iter(row_values(cycles, row))
    parts: List[str] = []
    for token in tokens:
        if isinstance(token, (AddressDirective, NumberDirective)):
            parts.append(render_token(token, next(values)))
        else:
            parts.append(render_token(token))
    return "".join(parts)


def iter_rows(tokens: Sequence[FormatToken], cycles: Sequence[AddressCycle]) -> Iterator[str]:
    rows = total_rows(cycles)
    logger.debug("Rendering %s rows from %d cycles", rows, len(cycles))
    for row in range(rows):
        yield render_row(tokens, cycles, row)


def write_rows(
    tokens: Sequence[FormatToken],
    cycles: Sequence[AddressCycle],
    stream: IO[str],
    progress: bool = False,
) -> int:
    """
    Writes every row to `stream`, each terminated by a newline.

    Args:
        tokens (Sequence[FormatToken]): Compiled format.
        cycles (Sequence[AddressCycle]): One cycle per directive, in order.
        stream (IO[str]): Destination for the rendered rows.
        progress (bool): Show a tqdm progress bar (on stderr) while writing.

    Returns:
        int: The number of rows written.
    """
    rows = iter_rows(tokens, cycles)
    if progress:
        total = total_rows(cycles)
        rows = tqdm.tqdm(rows, total=total, desc="Rendering", unit="row", miniters=max(1, total // 100))

    written = 0
    for line in rows:
        stream.write(line)
        stream.write("\n")
        written += 1
    return written


def format_lines(fmt: str, args: Sequence[str]) -> Iterator[str]:
    """
    Compiles `fmt`, resolves `args` and yields the rendered rows.
    All parsing happens before the first row is yielded.
    """
    compiled = Format(fmt)
    cycles = compiled.bind(args)
    return iter_rows(compiled.tokens, cycles)
