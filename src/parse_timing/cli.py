"""Command-line entry point.

Usage:
    parse-timing FILE
    parse-timing FILE --log-level DEBUG
    parse-timing -- -FILE

Prints two lines on stdout: the parse verdict and the processor time the
parse took. Logs and fault messages go to stderr.

A path starting with "-" must follow "--", otherwise it is read as an option.
"""

import argparse
import logging
import sys
from pathlib import Path

from parse_timing.benchmark import BenchmarkConfig, BenchmarkRunner, ProcessClock, load_buffer
from parse_timing.errors import FormatterInvariantError, ParseTimingError
from parse_timing.parsers import ModuleParser

logger = logging.getLogger("parse_timing")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="parse-timing",
        description="Parse one Python source file and report the processor time it took",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="A FILE starting with '-' must follow '--', e.g. parse-timing -- -mod.py",
    )
    arg_parser.add_argument(
        "file",
        type=Path,
        help="Source file to parse (put '--' before paths starting with '-')",
    )
    arg_parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level on stderr (default: WARNING)",
    )
    return arg_parser


def parse_config(argv: list[str] | None = None) -> BenchmarkConfig:
    """Build the run configuration from command-line arguments.

    Exits with status 2 on a wrong argument count.
    """
    args = build_arg_parser().parse_args(argv)
    return BenchmarkConfig(path=args.file, log_level=args.log_level)


def run(config: BenchmarkConfig) -> list[str]:
    """Load, time and format a single parse."""
    buffer = load_buffer(config.path)
    runner = BenchmarkRunner(ModuleParser(), ProcessClock(), config.parser_config)
    result = runner.run(buffer)
    return runner.format_result(result)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    config = parse_config(argv)
    setup_logging(config.log_level)

    try:
        lines = run(config)
    except ParseTimingError as e:
        logger.error("%s", e)
        return e.exit_code
    except FormatterInvariantError as e:
        logger.error("Internal error: %s", e)
        return e.exit_code

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
