# macipr/cli/main.py
import argparse
import logging
import pathlib
import sys
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from macipr.core.errors import ParseError
from macipr.driver import write_rows
from macipr.format import Format

# --- Global Variables ---
logger = logging.getLogger("macipr.cli")

PROG = "macipr"

EPILOG = """\
directives:
  %m   MAC address              %i   IPv4 address
  %x   IPv6 address (compact)   %X   IPv6 address (full)
  %n   number (%5n space padded, %05n zero padded)
  %%   literal '%'              \\n  newline, \\\\ backslash

arguments:
  ADDRESS         a single value (an integer is taken modulo the address width)
  START-END       every value from START to END, backward when END < START
  START+OFFSET    OFFSET+1 values from START, backward for a negative OFFSET

examples:
  macipr 'host-%02n %i' 1-3 192.168.0.10-192.168.0.12
  macipr '%m' 00:00:5e:00:53:00+3
"""


class CliOptions(BaseModel):
    """Everything the command line configures, collected before any work is done."""
    model_config = ConfigDict(frozen=True)

    format: str
    args: List[str] = Field(default_factory=list)
    output_file: Optional[pathlib.Path] = None
    progress: bool = False
    log_level: str = "WARNING"
    log_file: Optional[pathlib.Path] = None


# --- Utility Functions ---
def setup_cli_logging(log_level_str: str = "WARNING", log_file: Optional[pathlib.Path] = None):
    """Configures logging for the CLI. Records go to stderr so stdout only carries rows."""
    numeric_level = getattr(logging, log_level_str.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level_str}")

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode='a'))
        except OSError as e:
            logging.error(f"Failed to set up log file at {log_file}: {e}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s [%(levelname)s] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True
    )
    logger.debug(f"CLI logging initialized at level {log_level_str.upper()}.")
    if log_file:
        logger.debug(f"Logging additionally to file: {log_file}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Print MAC, IPv4 and IPv6 address sequences through a printf-style format.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("format", help="Format string, see directives below.")
    parser.add_argument("args", nargs="*", metavar="ARG", help="One address, range or number per directive.")
    parser.add_argument(
        "-o", "--output", type=pathlib.Path, dest="output_file",
        help="File path to write rows to. If omitted, prints to stdout."
    )
    parser.add_argument(
        "--progress", action="store_true",
        help="Show a progress bar on stderr while writing rows."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_const", const="DEBUG", dest="log_level",
        help="Enable verbose (DEBUG level) logging to stderr."
    )
    parser.add_argument(
        "--log-file", type=pathlib.Path,
        help="Path to a file for logging (appends)."
    )
    parser.set_defaults(log_level="WARNING")
    return parser


def parse_options(argv: Optional[List[str]] = None) -> CliOptions:
    args = build_parser().parse_args(argv)
    return CliOptions(
        format=args.format,
        args=args.args,
        output_file=args.output_file,
        progress=args.progress,
        log_level=args.log_level,
        log_file=args.log_file,
    )


def run(options: CliOptions) -> int:
    """Compiles, resolves and writes. Returns the number of rows written."""
    compiled = Format(options.format)
    # Every argument is resolved before the first row is written
    cycles = compiled.bind(options.args)

    if options.output_file:
        logger.info(f"Writing rows to: {options.output_file}")
        options.output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(options.output_file, "w") as f:
            return write_rows(compiled.tokens, cycles, f, progress=options.progress)

    return write_rows(compiled.tokens, cycles, sys.stdout, progress=options.progress)


# --- Main CLI Entry Point ---
def main(argv: Optional[List[str]] = None) -> int:
    options = parse_options(argv)
    setup_cli_logging(options.log_level, options.log_file)

    try:
        written = run(options)
    except ParseError as e:
        logger.debug(f"Aborting on {type(e).__name__}", exc_info=True)
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"Failed to write output: {e}")
        return 1

    logger.info(f"Wrote {written} rows.")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
