"""Console output abstraction.

This module provides a protocol for console output that can be implemented
by different backends (Rich for terminals, GitHub Actions workflow commands
for CI, mock for testing). Services log through it instead of printing.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "ActionsConsole",
    "MockConsole",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    WARNING = auto()  # Yellow, warning message
    INFO = auto()  # Cyan, informational
    NOTICE = auto()  # Highlighted outcome
    DIM = auto()  # Dimmed/muted text
    HEADER = auto()  # Section header

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print
            style: The style to apply
        """
        ...

    def warning(self, message: str) -> None:
        """Print a warning message."""
        ...

    def info(self, message: str) -> None:
        """Print an info message."""
        ...

    def notice(self, message: str) -> None:
        """Print an outcome that should stand out in CI annotations."""
        ...

    def header(self, message: str) -> None:
        """Print a section header."""
        ...

    def newline(self) -> None:
        """Print an empty line."""
        ...

    def group(self, title: str) -> AbstractContextManager[None]:
        """Collapse everything printed inside the block under a title."""
        ...


class RichConsole:
    """Console implementation using Rich library."""

    def __init__(self, *, stderr: bool = False) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = Console(stderr=stderr, soft_wrap=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.WARNING: "yellow",
            Style.INFO: "cyan",
            Style.NOTICE: "magenta",
            Style.DIM: "dim",
            Style.HEADER: "blue bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]warning:[/yellow] {_escape(message)}")

    def info(self, message: str) -> None:
        self._console.print(f"[cyan]info:[/cyan] {_escape(message)}")

    def notice(self, message: str) -> None:
        self._console.print(f"[magenta]notice:[/magenta] {_escape(message)}")

    def header(self, message: str) -> None:
        self._console.print(f"\n[blue bold]{_escape(message)}[/blue bold]")

    def newline(self) -> None:
        self._console.print()

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        self.header(title)
        yield


def _escape(message: str) -> str:
    from rich.markup import escape

    return escape(message)


class ActionsConsole:
    """Console that speaks GitHub Actions workflow commands.

    Warnings and notices become run annotations; groups become
    collapsible log sections.
    """

    def __init__(self, *, stderr: bool = False) -> None:
        from rich.console import Console

        self._console = Console(
            stderr=stderr, highlight=False, soft_wrap=True, markup=False, emoji=False
        )

    def _command(self, name: str, message: str) -> None:
        self._console.print(f"::{name}::{escape_command_data(message)}")

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self._console.print(message)

    def warning(self, message: str) -> None:
        self._command("warning", message)

    def info(self, message: str) -> None:
        self._console.print(message)

    def notice(self, message: str) -> None:
        self._command("notice", message)

    def header(self, message: str) -> None:
        self._console.print(message)

    def newline(self) -> None:
        self._console.print()

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        self._command("group", title)
        try:
            yield
        finally:
            self._console.print("::endgroup::")


def escape_command_data(message: str) -> str:
    """Escape a workflow command payload so it stays on one line."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    """Factory for empty outputs list (helps type inference)."""
    return []


def _empty_groups() -> list[str]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)
    groups: list[str] = field(default_factory=_empty_groups)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def notice(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"notice: {message}", Style.NOTICE))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        self.groups.append(title)
        yield

    # Test helper methods

    def clear(self) -> None:
        """Clear all captured output."""
        self.outputs.clear()
        self.groups.clear()

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """Get all output as a single newline-separated string."""
        return "\n".join(self.messages)

    def has_warning(self) -> bool:
        return any(o.style == Style.WARNING for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]

    def count(self, style: Style) -> int:
        """Count outputs with a specific style."""
        return sum(1 for o in self.outputs if o.style == style)
