"""Publishing context: is this ref a release tag, and is it already out?"""

from pubctx.services.publish.emit import emit
from pubctx.services.publish.errors import PublishError
from pubctx.services.publish.model import (
    OUTPUT_NAMES,
    Decision,
    ParsedRef,
    PublishInputs,
    PublishState,
    RegistryLookupResult,
    Resolution,
    VersionCheck,
)
from pubctx.services.publish.ref_probes import DetectedRef, NamedProbe, detect_ref, first_match
from pubctx.services.publish.refs import classify
from pubctx.services.publish.registry import (
    RegistryLookup,
    classify_lookup,
    make_registry_lookup,
)
from pubctx.services.publish.report import Report, build_report, render_markdown
from pubctx.services.publish.resolver import RefProvider, make_inputs, resolve
from pubctx.services.publish.semver import validate

__all__ = [
    "OUTPUT_NAMES",
    "Decision",
    "DetectedRef",
    "NamedProbe",
    "ParsedRef",
    "PublishError",
    "PublishInputs",
    "PublishState",
    "RefProvider",
    "RegistryLookup",
    "RegistryLookupResult",
    "Report",
    "Resolution",
    "VersionCheck",
    "build_report",
    "classify",
    "classify_lookup",
    "detect_ref",
    "emit",
    "first_match",
    "make_inputs",
    "make_registry_lookup",
    "render_markdown",
    "resolve",
    "validate",
]
