"""Work out the current ref when none was given.

Sources are tried in order and the first one that answers wins:

1. ``GITHUB_REF`` environment variable
2. ``git symbolic-ref -q HEAD`` (branch checkouts)
3. ``git describe --tags --exact-match`` (detached tag checkouts)
4. ``refs/heads/main``

Each source is a named probe returning a ref or None; ``first_match``
combines them. The last step is not a probe and cannot fail.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from pubctx.core.result import Ok
from pubctx.git.repository import Repository
from pubctx.services.publish.refs import TAGS_NAMESPACE

DEFAULT_REF = "refs/heads/main"
DEFAULT_SOURCE = "default"
REF_ENV_VAR = "GITHUB_REF"

RefProbe = Callable[[], str | None]


@dataclass(frozen=True, slots=True)
class NamedProbe:
    name: str
    probe: RefProbe


@dataclass(frozen=True, slots=True)
class DetectedRef:
    ref: str
    source: str


def first_match(probes: Iterable[NamedProbe], default: str = DEFAULT_REF) -> DetectedRef:
    """Return the first non-empty probe answer, else the default ref."""
    for named in probes:
        value = named.probe()
        if value and value.strip():
            return DetectedRef(ref=value.strip(), source=named.name)
    return DetectedRef(ref=default, source=DEFAULT_SOURCE)


def env_probe(name: str = REF_ENV_VAR, environ: Mapping[str, str] | None = None) -> NamedProbe:
    env = os.environ if environ is None else environ

    def probe() -> str | None:
        return env.get(name)

    return NamedProbe(name=f"env:{name}", probe=probe)


def symbolic_ref_probe(repo: Repository) -> NamedProbe:
    def probe() -> str | None:
        result = repo.symbolic_ref()
        return result.value if isinstance(result, Ok) else None

    return NamedProbe(name="git:symbolic-ref", probe=probe)


def exact_tag_probe(repo: Repository) -> NamedProbe:
    def probe() -> str | None:
        result = repo.exact_tag()
        if isinstance(result, Ok):
            return f"{TAGS_NAMESPACE}{result.value}"
        return None

    return NamedProbe(name="git:exact-tag", probe=probe)


def default_probes(cwd: Path, environ: Mapping[str, str] | None = None) -> tuple[NamedProbe, ...]:
    repo = Repository(cwd)
    return (
        env_probe(REF_ENV_VAR, environ),
        symbolic_ref_probe(repo),
        exact_tag_probe(repo),
    )


def detect_ref(cwd: Path, environ: Mapping[str, str] | None = None) -> DetectedRef:
    return first_match(default_probes(cwd, environ))
