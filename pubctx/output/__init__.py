"""Output abstraction layer."""

from .console import (
    ActionsConsole,
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .sink import ConsoleSink, GithubActionsSink, MockSink, OutputSink

__all__ = [
    "ActionsConsole",
    "ConsoleProtocol",
    "ConsoleSink",
    "GithubActionsSink",
    "MockConsole",
    "MockSink",
    "OutputSink",
    "RichConsole",
    "Style",
]
