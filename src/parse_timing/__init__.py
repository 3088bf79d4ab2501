"""Single-file parse timing harness.

Loads one Python source file, parses it once as a module and reports the
outcome together with the processor time the parse consumed.
"""

__version__ = "0.1.0"
