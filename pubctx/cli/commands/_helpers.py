"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import NoReturn, TypeVar

import typer

from pubctx.core.errors import ErrorCode
from pubctx.core.result import Ok, Result

T = TypeVar("T")
E = TypeVar("E")

USAGE = (
    "Usage: pubctx --package <pkg> --registry <url> [--tag-prefix <prefix>] [--ref <ref>]"
)


def unwrap_or_usage(result: Result[T, E]) -> T:
    """Return the Ok value, or print the error and usage to stderr and exit 1.

    Expects error objects to have a 'message' and optional 'hint' attribute.
    """
    if isinstance(result, Ok):
        return result.value

    error = result.error
    message: str = getattr(error, "message", str(error))
    hint: str | None = getattr(error, "hint", None)
    typer.echo(f"error: {message}", err=True)
    if hint:
        typer.echo(f"hint: {hint}", err=True)
    typer.echo(USAGE, err=True)
    exit_with_code(int(ErrorCode.USER_ERROR))


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
