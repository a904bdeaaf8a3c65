from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pubctx.core.config import DEFAULT_TAG_PREFIX

# Output names, in the order they are emitted.
OUTPUT_NAMES = (
    "is-tag",
    "tag-version",
    "is-published",
    "published-version",
    "already-published",
    "should-publish",
)


@dataclass(frozen=True, slots=True)
class PublishInputs:
    package: str
    registry_url: str
    tag_prefix: str = DEFAULT_TAG_PREFIX
    # None: ask the ref provider.
    ref: str | None = None


@dataclass(frozen=True, slots=True)
class ParsedRef:
    is_tag: bool
    tag_version: str


@dataclass(frozen=True, slots=True)
class VersionCheck:
    valid: bool
    warning: str | None = None


@dataclass(frozen=True, slots=True)
class RegistryLookupResult:
    """What the registry said about the package's latest version.

    ``found=False`` means the package has never been published. ``fault`` is
    set when the lookup itself could not run; the result is still "not found".
    """

    found: bool
    published_version: str = ""
    fault: str | None = None


@dataclass(frozen=True, slots=True)
class Decision:
    is_tag: bool
    tag_version: str
    is_published: bool
    published_version: str
    already_published: bool
    should_publish: bool

    def __post_init__(self) -> None:
        if self.already_published and not self.is_published:
            raise ValueError("already_published requires is_published")
        if self.should_publish and not self.is_tag:
            raise ValueError("should_publish requires is_tag")

    @classmethod
    def not_a_tag(cls) -> Decision:
        return cls(
            is_tag=False,
            tag_version="",
            is_published=False,
            published_version="",
            already_published=False,
            should_publish=False,
        )

    @classmethod
    def for_tag(cls, tag_version: str, lookup: RegistryLookupResult) -> Decision:
        # Exact string equality: "1.2.3" and "1.2.3.0" are different versions.
        already = lookup.found and tag_version == lookup.published_version
        return cls(
            is_tag=True,
            tag_version=tag_version,
            is_published=lookup.found,
            published_version=lookup.published_version if lookup.found else "",
            already_published=already,
            should_publish=not already,
        )

    def as_outputs(self) -> dict[str, str]:
        """Named outputs as strings, booleans spelled ``true``/``false``."""
        return {
            name: _flag(value) if isinstance(value, bool) else value
            for name, value in self.as_json_dict().items()
        }

    def as_json_dict(self) -> dict[str, str | bool]:
        return {
            "is-tag": self.is_tag,
            "tag-version": self.tag_version,
            "is-published": self.is_published,
            "published-version": self.published_version,
            "already-published": self.already_published,
            "should-publish": self.should_publish,
        }


def _flag(value: bool) -> str:
    return "true" if value else "false"


class PublishState(Enum):
    """Which status line the report shows. Exactly one applies per Decision."""

    NOT_A_TAG = "not-a-tag"
    ALREADY_PUBLISHED = "already-published"
    READY_TO_PUBLISH = "ready-to-publish"
    FIRST_PUBLISH = "first-publish"

    @classmethod
    def from_decision(cls, decision: Decision) -> PublishState:
        if not decision.is_tag:
            return cls.NOT_A_TAG
        if decision.already_published:
            return cls.ALREADY_PUBLISHED
        if decision.is_published:
            return cls.READY_TO_PUBLISH
        return cls.FIRST_PUBLISH

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Resolution:
    """Everything one resolver run produced.

    Attributes:
        ref: The ref that was classified (given or detected)
        ref_source: Which probe supplied the ref ("input" when given)
        decision: The publish decision
        version_check: Semver check of the tag version (None for non-tags)
        lookup: Registry answer (None when the registry was not consulted)
        warnings: Non-fatal problems, in the order they were found
    """

    ref: str
    ref_source: str
    decision: Decision
    version_check: VersionCheck | None
    lookup: RegistryLookupResult | None
    warnings: tuple[str, ...] = ()

    @property
    def state(self) -> PublishState:
        return PublishState.from_decision(self.decision)
