"""Destinations for step outputs and the job summary.

In GitHub Actions, outputs are appended to the file named by ``$GITHUB_OUTPUT``
and the summary to ``$GITHUB_STEP_SUMMARY``. Locally the same data goes to
the console.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from pubctx.output.console import ConsoleProtocol, Style

__all__ = [
    "OutputSink",
    "GithubActionsSink",
    "ConsoleSink",
    "MockSink",
    "format_output_record",
]


class OutputSink(Protocol):
    """Where named outputs and the rendered summary end up."""

    def set_output(self, name: str, value: str) -> None: ...

    def write_summary(self, markdown: str) -> None: ...


def format_output_record(name: str, value: str, *, delimiter: str | None = None) -> str:
    """Format one ``$GITHUB_OUTPUT`` record.

    Single-line values use ``name=value``; multi-line values use the heredoc
    form with a delimiter that must not occur in the value.
    """
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    marker = delimiter or f"ghadelimiter_{uuid.uuid4()}"
    if marker in value:
        raise ValueError(f"output delimiter occurs in value of {name!r}")
    return f"{name}<<{marker}\n{value}\n{marker}\n"


@dataclass(frozen=True, slots=True)
class GithubActionsSink:
    """Appends records to the runner-provided files.

    Attributes:
        output_path: File from ``$GITHUB_OUTPUT`` (None: outputs are dropped)
        summary_path: File from ``$GITHUB_STEP_SUMMARY`` (None: summary is dropped)
    """

    output_path: Path | None
    summary_path: Path | None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GithubActionsSink:
        env = os.environ if environ is None else environ
        output = env.get("GITHUB_OUTPUT")
        summary = env.get("GITHUB_STEP_SUMMARY")
        return cls(
            output_path=Path(output) if output else None,
            summary_path=Path(summary) if summary else None,
        )

    def set_output(self, name: str, value: str) -> None:
        if self.output_path is None:
            return
        with self.output_path.open("a", encoding="utf-8") as f:
            f.write(format_output_record(name, value))

    def write_summary(self, markdown: str) -> None:
        if self.summary_path is None:
            return
        with self.summary_path.open("a", encoding="utf-8") as f:
            f.write(markdown)
            if not markdown.endswith("\n"):
                f.write("\n")


class ConsoleSink:
    """Prints outputs and summary for local runs."""

    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console

    def set_output(self, name: str, value: str) -> None:
        self._console.print(f"{name}={value}", Style.DIM)

    def write_summary(self, markdown: str) -> None:
        self._console.newline()
        self._console.print(markdown)


def _empty_outputs() -> dict[str, str]:
    return {}


def _empty_summaries() -> list[str]:
    return []


@dataclass
class MockSink:
    """Sink that records everything for tests."""

    outputs: dict[str, str] = field(default_factory=_empty_outputs)
    summaries: list[str] = field(default_factory=_empty_summaries)

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value

    def write_summary(self, markdown: str) -> None:
        self.summaries.append(markdown)
