from __future__ import annotations

from collections.abc import Callable

from pubctx.core.config import DEFAULT_TAG_PREFIX
from pubctx.core.result import Err, Ok, Result
from pubctx.output.console import ConsoleProtocol
from pubctx.services.publish.errors import PublishError
from pubctx.services.publish.model import Decision, PublishInputs, Resolution
from pubctx.services.publish.ref_probes import DetectedRef
from pubctx.services.publish.refs import classify
from pubctx.services.publish.registry import RegistryLookup, classify_lookup
from pubctx.services.publish.semver import validate

RefProvider = Callable[[], DetectedRef]

INPUT_SOURCE = "input"


def make_inputs(
    *,
    package: str | None,
    registry_url: str | None,
    tag_prefix: str | None = None,
    ref: str | None = None,
) -> Result[PublishInputs, PublishError]:
    """Validate raw inputs before anything talks to git or the registry."""
    package = (package or "").strip()
    registry_url = (registry_url or "").strip()
    if not package:
        return Err(
            PublishError(
                kind="missing_input",
                message="Package name is required",
                hint="Pass --package <name>",
            )
        )
    if not registry_url:
        return Err(
            PublishError(
                kind="missing_input",
                message="Registry URL is required",
                hint="Pass --registry <url>",
            )
        )

    return Ok(
        PublishInputs(
            package=package,
            registry_url=registry_url,
            tag_prefix=DEFAULT_TAG_PREFIX if tag_prefix is None else tag_prefix,
            ref=(ref or "").strip() or None,
        )
    )


def resolve(
    inputs: PublishInputs,
    *,
    ref_provider: RefProvider,
    registry_lookup: RegistryLookup,
    console: ConsoleProtocol,
) -> Resolution:
    """Decide whether the current ref should be published.

    The registry is consulted only for tag refs. Nothing is written anywhere
    except log lines on ``console``; emitting outputs is the caller's job.
    """
    if inputs.ref is not None:
        ref, source = inputs.ref, INPUT_SOURCE
    else:
        detected = ref_provider()
        ref, source = detected.ref, detected.source
    console.info(f"Ref: {ref} (from {source})")

    parsed = classify(ref, inputs.tag_prefix)
    if not parsed.is_tag:
        console.info("Not a version tag; skipping registry check")
        return Resolution(
            ref=ref,
            ref_source=source,
            decision=Decision.not_a_tag(),
            version_check=None,
            lookup=None,
        )

    warnings: list[str] = []

    version_check = validate(parsed.tag_version)
    if version_check.warning:
        console.warning(version_check.warning)
        warnings.append(version_check.warning)

    console.info(f"Checking registry for {inputs.package}@{parsed.tag_version}...")
    lookup = classify_lookup(registry_lookup(inputs.package, inputs.registry_url))
    if lookup.fault is not None:
        message = f"Failed to check registry: {lookup.fault}"
        console.warning(message)
        warnings.append(message)
    elif lookup.found:
        console.info(f"Found published version: {lookup.published_version}")
    else:
        console.info(f"Package {inputs.package} not found in registry")

    return Resolution(
        ref=ref,
        ref_source=source,
        decision=Decision.for_tag(parsed.tag_version, lookup),
        version_check=version_check,
        lookup=lookup,
        warnings=tuple(warnings),
    )
