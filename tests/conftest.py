"""Shared fixtures: scripted clocks and stub parsers."""

import pytest

from parse_timing.benchmark import Clock
from parse_timing.models import Failed, Parsed
from parse_timing.parsers import BaseParser


class ScriptedClock(Clock):
    """Clock returning preset samples and recording when it was read."""

    def __init__(self, samples, events=None):
        self.samples = list(samples)
        self.events = events if events is not None else []

    @property
    def unit(self) -> str:
        return "ps"

    def sample(self) -> int:
        self.events.append("sample")
        return self.samples.pop(0)


class StubParser(BaseParser):
    """Parser with a fixed verdict that records each call."""

    def __init__(self, succeed=True, events=None):
        self.succeed = succeed
        self.events = events if events is not None else []
        self.calls = []

    @property
    def name(self) -> str:
        return "stub"

    def parse_module(self, config, buffer):
        self.events.append("parse")
        self.calls.append((config, buffer))
        if self.succeed:
            return Parsed(tree=None)
        return Failed(error=SyntaxError("stub failure", ("<parse-module>", 1, 1, "")))


@pytest.fixture
def scripted_clock():
    """Factory for clocks returning preset samples."""
    return ScriptedClock


@pytest.fixture
def stub_parser():
    """Factory for parsers with a fixed verdict."""
    return StubParser


@pytest.fixture
def events():
    return []


@pytest.fixture
def valid_module(tmp_path):
    path = tmp_path / "valid.py"
    path.write_text("import os\n\n\ndef main():\n    print(os.getcwd())\n", encoding="utf-8")
    return path


@pytest.fixture
def broken_module(tmp_path):
    path = tmp_path / "broken.py"
    path.write_text('def main():\n    print("unterminated)\n', encoding="utf-8")
    return path
