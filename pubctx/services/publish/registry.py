"""Ask a package registry for the latest published version.

The lookup shells out to a package manager CLI and returns its raw outcome;
``classify_lookup`` then decides what that outcome means:

- exit 0 with output: the package is published at that version
- exit non-zero, or no output: the package is not published
- the command could not run (missing binary, timeout, killed): logged as a
  fault and otherwise treated like "not published"

The last rule fails open on purpose. A registry blip must not block a
first release, and it must not be mistaken for "already published" either.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from pubctx.core.config import DEFAULT_REGISTRY_TIMEOUT_SECONDS, RegistryTool
from pubctx.core.result import Err, Ok, Result
from pubctx.platform.process import ProcessError
from pubctx.platform.process import run as run_process
from pubctx.services.publish.model import RegistryLookupResult

RegistryLookup = Callable[[str, str], Result[str, ProcessError]]


def registry_command(tool: RegistryTool, package: str, registry_url: str) -> list[str]:
    match tool:
        case "bun":
            return ["bun", "info", package, "version", "latest", "--registry", registry_url]
        case "npm":
            return ["npm", "view", f"{package}@latest", "version", "--registry", registry_url]
        case _:
            raise AssertionError(f"unexpected registry tool: {tool}")


def publish_command(tool: RegistryTool, registry_url: str) -> str:
    return f"{tool} publish --registry {registry_url}"


def make_registry_lookup(
    *,
    tool: RegistryTool,
    cwd: Path,
    timeout: float = DEFAULT_REGISTRY_TIMEOUT_SECONDS,
) -> RegistryLookup:
    def lookup(package: str, registry_url: str) -> Result[str, ProcessError]:
        return run_process(registry_command(tool, package, registry_url), cwd=cwd, timeout=timeout)

    return lookup


def classify_lookup(outcome: Result[str, ProcessError]) -> RegistryLookupResult:
    match outcome:
        case Ok(stdout):
            version = stdout.strip()
            if version:
                return RegistryLookupResult(found=True, published_version=version)
            return RegistryLookupResult(found=False)
        case Err(error):
            if error.is_execution_fault:
                detail = error.stderr.strip() or str(error)
                return RegistryLookupResult(found=False, fault=detail)
            return RegistryLookupResult(found=False)
