"""Benchmark runner for a single timed parse."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from parse_timing.benchmark.clock import Clock
from parse_timing.benchmark.formatting import format_duration_line
from parse_timing.models import ParserConfig, SourceBuffer
from parse_timing.parsers.base import BaseParser

logger = logging.getLogger(__name__)

SUCCESS_LINE = "Parse success"
FAILURE_LINE = "Parse fail"


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run."""
    path: Path
    log_level: str = "WARNING"
    parser_config: ParserConfig = field(default_factory=ParserConfig.default)


@dataclass
class BenchmarkResult:
    """Result of one timed parse."""
    parser_name: str
    source_name: str
    success: bool
    duration: int
    unit: str


def report_outcome(success: bool) -> str:
    """Return the fixed outcome line for a parse verdict."""
    return SUCCESS_LINE if success else FAILURE_LINE


class BenchmarkRunner:
    """Times exactly one parse of one buffer."""

    def __init__(
        self,
        parser: BaseParser,
        clock: Clock,
        parser_config: ParserConfig | None = None,
    ):
        """Initialize the benchmark runner.

        Args:
            parser: Parser to time.
            clock: Clock bracketing the parse call.
            parser_config: Configuration handed to the parser.
        """
        self.parser = parser
        self.clock = clock
        self.parser_config = parser_config or ParserConfig.default()

    def run(self, buffer: SourceBuffer) -> BenchmarkResult:
        """Parse ``buffer`` once and measure the processor time it took.

        Only the parse call sits between the two clock samples.

        Args:
            buffer: Source to parse.

        Returns:
            BenchmarkResult with the verdict and the elapsed time.

        Raises:
            MeasurementError: If the clock went backwards.
        """
        logger.debug("Parsing %s with %r, config %r", buffer.name, self.parser, self.parser_config)

        start = self.clock.sample()
        outcome = self.parser.parse_module(self.parser_config, buffer)
        end = self.clock.sample()

        logger.debug("Clock samples: start=%d end=%d", start, end)
        duration = self.clock.elapsed(start, end)

        if not outcome.succeeded:
            logger.info("Parse of %s failed: %s", buffer.name, outcome.diagnostic)

        result = BenchmarkResult(
            parser_name=self.parser.name,
            source_name=buffer.name,
            success=outcome.succeeded,
            duration=duration,
            unit=self.clock.unit,
        )
        logger.info("%s: success=%s duration=%d %s", buffer.name, result.success, duration, result.unit)
        return result

    def format_result(self, result: BenchmarkResult) -> list[str]:
        """Format a result as the two output lines.

        Args:
            result: Result of a run.

        Returns:
            The outcome line followed by the grouped duration line.
        """
        return [
            report_outcome(result.success),
            format_duration_line(result.duration, result.unit),
        ]
