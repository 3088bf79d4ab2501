"""Timing harness for a single module parse."""

from .clock import Clock, ProcessClock
from .formatting import format_duration, format_duration_line, group_digits
from .loader import load_buffer
from .runner import BenchmarkConfig, BenchmarkResult, BenchmarkRunner, report_outcome

__all__ = [
    "Clock",
    "ProcessClock",
    "format_duration",
    "format_duration_line",
    "group_digits",
    "load_buffer",
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkRunner",
    "report_outcome",
]
