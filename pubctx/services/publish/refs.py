"""Classify a git ref as a version tag or not.

The match is a literal prefix test on ``refs/tags/<tag_prefix>``, and the
version is whatever follows the prefix. There is no delimiter check: with the
default prefix ``v`` the ref ``refs/tags/version2`` is a tag with version
``ersion2``. The semver check reports such versions as a warning.
"""

from __future__ import annotations

from pubctx.core.config import DEFAULT_TAG_PREFIX
from pubctx.services.publish.model import ParsedRef

TAGS_NAMESPACE = "refs/tags/"


def tag_pattern(tag_prefix: str = DEFAULT_TAG_PREFIX) -> str:
    return f"{TAGS_NAMESPACE}{tag_prefix}"


def classify(ref: str, tag_prefix: str = DEFAULT_TAG_PREFIX) -> ParsedRef:
    pattern = tag_pattern(tag_prefix)
    if not ref.startswith(pattern):
        return ParsedRef(is_tag=False, tag_version="")
    return ParsedRef(is_tag=True, tag_version=ref.removeprefix(pattern))
