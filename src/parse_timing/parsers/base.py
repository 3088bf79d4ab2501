"""Abstract base class for all parser implementations."""

from abc import ABC, abstractmethod

from parse_timing.models import ParserConfig, ParseOutcome, SourceBuffer


class BaseParser(ABC):
    """Abstract base class that all parsers must inherit from.

    Defines the single entry point the harness times.

    Example:
        class MyParser(BaseParser):
            @property
            def name(self) -> str:
                return "my-parser"

            def parse_module(self, config, buffer) -> ParseOutcome:
                # Implementation here
                pass
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for this parser.

        Used in benchmark results and logging.
        """
        pass

    @abstractmethod
    def parse_module(self, config: ParserConfig, buffer: SourceBuffer) -> ParseOutcome:
        """Parse the whole buffer as one module, exactly once.

        Args:
            config: Parser configuration.
            buffer: Source to parse.

        Returns:
            Parsed on success, Failed with a diagnostic otherwise.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
