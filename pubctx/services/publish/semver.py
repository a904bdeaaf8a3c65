from __future__ import annotations

import re

from pubctx.services.publish.model import VersionCheck

# MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]
_SEMVER_RE = re.compile(
    r"[0-9]+\.[0-9]+\.[0-9]+"
    r"(-[0-9A-Za-z-]+(\.[0-9A-Za-z-]+)*)?"
    r"(\+[0-9A-Za-z-]+)?"
)


def is_semver(version: str) -> bool:
    return _SEMVER_RE.fullmatch(version) is not None


def validate(tag_version: str) -> VersionCheck:
    """Check a tag version against the semver grammar.

    Informational only: an invalid version never changes the publish decision.
    """
    if is_semver(tag_version):
        return VersionCheck(valid=True)
    return VersionCheck(
        valid=False,
        warning=f'Tag version "{tag_version}" doesn\'t match semver format',
    )
