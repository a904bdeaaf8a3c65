from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import typer

from pubctx.core.config import CONFIG_FILENAME, Config, load_config
from pubctx.core.errors import ErrorCode
from pubctx.core.result import Err
from pubctx.output.console import ActionsConsole, ConsoleProtocol, RichConsole
from pubctx.output.sink import ConsoleSink, GithubActionsSink, OutputSink


@dataclass(frozen=True, slots=True)
class CLIContext:
    cwd: Path
    config: Config
    console: ConsoleProtocol
    sink: OutputSink
    environ: Mapping[str, str]


def in_github_actions(environ: Mapping[str, str]) -> bool:
    return environ.get("GITHUB_ACTIONS", "").lower() == "true"


def build_context(config_path: Path | None = None, *, quiet_stdout: bool = False) -> CLIContext:
    """Assemble config, console and output sink for one run.

    An explicit ``--config`` must load; the implicit ``pubctx.toml`` is
    optional but, when present, must still be valid.
    """
    environ = dict(os.environ)
    cwd = Path.cwd()

    path = config_path if config_path is not None else cwd / CONFIG_FILENAME
    config = Config()
    if config_path is not None or path.exists():
        config_result = load_config(path)
        if isinstance(config_result, Err):
            typer.echo(f"error: {config_result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        config = config_result.value

    console: ConsoleProtocol
    sink: OutputSink
    if in_github_actions(environ):
        console = ActionsConsole(stderr=quiet_stdout)
        sink = GithubActionsSink.from_env(environ)
    else:
        console = RichConsole(stderr=quiet_stdout)
        sink = ConsoleSink(console)

    return CLIContext(cwd=cwd, config=config, console=console, sink=sink, environ=environ)
