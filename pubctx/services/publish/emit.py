from __future__ import annotations

import json

from pubctx.output.console import ConsoleProtocol
from pubctx.output.sink import OutputSink
from pubctx.services.publish.model import PublishInputs, Resolution
from pubctx.services.publish.report import Report, closing_notice, render_markdown

OUTPUTS_GROUP = "Publishing Context Outputs"


def emit(
    inputs: PublishInputs,
    resolution: Resolution,
    report: Report,
    *,
    sink: OutputSink,
    console: ConsoleProtocol,
) -> None:
    """Hand a finished resolution to the outside world.

    Order: named outputs, summary, outputs dump, closing notice.
    """
    for name, value in resolution.decision.as_outputs().items():
        sink.set_output(name, value)

    sink.write_summary(render_markdown(report))

    with console.group(OUTPUTS_GROUP):
        console.print(json.dumps(resolution.decision.as_json_dict(), indent=2))

    notice = closing_notice(inputs, resolution)
    if notice is not None:
        console.notice(notice)
