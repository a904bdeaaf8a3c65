from __future__ import annotations

import typer

from pubctx.cli.commands.context_cmd import publish_context


app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    help="Resolve the publishing context of the current git ref.",
)

app.command()(publish_context)


def main() -> None:
    app()
