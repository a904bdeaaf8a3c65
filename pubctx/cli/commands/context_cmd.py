from __future__ import annotations

import json
from pathlib import Path

import typer

from pubctx import __version__
from pubctx.cli.commands._helpers import unwrap_or_usage
from pubctx.cli.context import build_context
from pubctx.services.publish.emit import emit
from pubctx.services.publish.ref_probes import detect_ref
from pubctx.services.publish.registry import make_registry_lookup
from pubctx.services.publish.report import build_report
from pubctx.services.publish.resolver import make_inputs, resolve


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def publish_context(
    package: str | None = typer.Option(
        None, "--package", envvar="PACKAGE", help="Package name as known to the registry."
    ),
    registry: str | None = typer.Option(
        None,
        "--registry",
        "--registry-url",
        envvar="REGISTRY_URL",
        help="Registry URL to query for the latest published version.",
    ),
    tag_prefix: str | None = typer.Option(
        None,
        "--tag-prefix",
        envvar="TAG_PREFIX",
        help="Prefix before the version in tag names [default: v].",
    ),
    ref: str | None = typer.Option(
        None, "--ref", help="Git ref to classify (default: detected from env or git)."
    ),
    config_path: Path | None = typer.Option(
        None, "--config", help="Config file (default: ./pubctx.toml if present)."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print the outputs as JSON on stdout; logs go to stderr."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Decide whether the current ref is a version tag that should be published."""
    ctx = build_context(config_path, quiet_stdout=json_output)
    config = ctx.config

    inputs = unwrap_or_usage(
        make_inputs(
            package=package or config.package,
            registry_url=registry or config.registry,
            tag_prefix=tag_prefix if tag_prefix is not None else config.tag_prefix,
            ref=ref,
        )
    )

    client = config.registry_client
    resolution = resolve(
        inputs,
        ref_provider=lambda: detect_ref(ctx.cwd, ctx.environ),
        registry_lookup=make_registry_lookup(tool=client.tool, cwd=ctx.cwd, timeout=client.timeout),
        console=ctx.console,
    )
    report = build_report(inputs, resolution, tool=client.tool)
    emit(inputs, resolution, report, sink=ctx.sink, console=ctx.console)

    if json_output:
        typer.echo(json.dumps(resolution.decision.as_json_dict(), indent=2))
