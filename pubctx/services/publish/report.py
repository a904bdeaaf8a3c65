"""Human-readable report of a resolver run.

``build_report`` turns a Resolution into plain data (rows, status line,
warnings); ``render_markdown`` formats it for a job summary.
"""

from __future__ import annotations

from dataclasses import dataclass

from pubctx.core.config import RegistryTool
from pubctx.services.publish.model import PublishInputs, PublishState, Resolution
from pubctx.services.publish.registry import publish_command

REPORT_TITLE = "Publishing Context"
NOT_PUBLISHED = "—"
STEP_ID = "publish-context"


@dataclass(frozen=True, slots=True)
class Report:
    title: str
    rows: tuple[tuple[str, str], ...]
    state: PublishState
    status: str
    warnings: tuple[str, ...] = ()
    next_steps: str | None = None


def status_line(state: PublishState, inputs: PublishInputs, resolution: Resolution) -> str:
    decision = resolution.decision
    match state:
        case PublishState.NOT_A_TAG:
            return "**Not a version tag**: publishing skipped for non-tag triggers"
        case PublishState.ALREADY_PUBLISHED:
            return (
                f"**Already Published**: version `{decision.tag_version}` "
                "already exists in registry"
            )
        case PublishState.READY_TO_PUBLISH:
            return (
                f"**Ready to Publish**: version `{decision.tag_version}` will be published "
                f"(current: `{decision.published_version}`)"
            )
        case PublishState.FIRST_PUBLISH:
            return (
                f"**First Publish**: package `{inputs.package}` "
                "will be published for the first time"
            )


def build_report(
    inputs: PublishInputs,
    resolution: Resolution,
    *,
    tool: RegistryTool = "bun",
) -> Report:
    decision = resolution.decision
    rows: list[tuple[str, str]] = [
        ("Trigger", "Version Tag" if decision.is_tag else "Branch/PR"),
        ("Reference", f"`{resolution.ref}`"),
    ]
    if decision.is_tag:
        latest = f"`{decision.published_version}`" if decision.is_published else NOT_PUBLISHED
        rows += [
            ("Tag Version", f"`{decision.tag_version}`"),
            ("Registry", f"`{inputs.registry_url}`"),
            ("Package", f"`{inputs.package}`"),
            ("Latest Published", latest),
        ]

    state = resolution.state
    next_steps = None
    if decision.should_publish:
        next_steps = (
            "To publish this package:\n\n"
            "```yaml\n"
            "- name: Publish to registry\n"
            f"  if: steps.{STEP_ID}.outputs.should-publish == 'true'\n"
            f"  run: {publish_command(tool, inputs.registry_url)}\n"
            "```"
        )

    return Report(
        title=REPORT_TITLE,
        rows=tuple(rows),
        state=state,
        status=status_line(state, inputs, resolution),
        warnings=resolution.warnings,
        next_steps=next_steps,
    )


def _cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\n", " ")


def render_markdown(report: Report) -> str:
    lines = [f"## {report.title}", ""]
    for warning in report.warnings:
        lines += [f"> **Warning:** {warning}", ""]

    lines += ["| Property | Value |", "| --- | --- |"]
    lines += [f"| {_cell(key)} | {_cell(value)} |" for key, value in report.rows]

    lines += ["", "### Status", "", report.status, ""]

    if report.next_steps:
        lines += [
            "<details>",
            "<summary>Next Steps</summary>",
            "",
            report.next_steps,
            "",
            "</details>",
            "",
        ]
    return "\n".join(lines)


def closing_notice(inputs: PublishInputs, resolution: Resolution) -> str | None:
    decision = resolution.decision
    target = f"{inputs.package}@{decision.tag_version}"
    if decision.should_publish:
        return f"Package {target} is ready to be published"
    if decision.already_published:
        return f"Package {target} is already published - skipping"
    return None
