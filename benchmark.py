#!/usr/bin/env python
"""
Parse Timing

Parses a single Python source file once and reports whether it parsed,
followed by the processor time the parse took.

Usage:
    python benchmark.py path/to/module.py
    python benchmark.py path/to/module.py --log-level DEBUG

Output:
    Parse success
    1,234,000 ps
"""

import sys

sys.path.insert(0, 'src')

from parse_timing.cli import main


if __name__ == "__main__":
    sys.exit(main())
