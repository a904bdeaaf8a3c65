from __future__ import annotations

from pubctx.services.publish.model import ParsedRef
from pubctx.services.publish.refs import classify, tag_pattern


def test_branch_is_not_a_tag() -> None:
    assert classify("refs/heads/main") == ParsedRef(is_tag=False, tag_version="")


def test_pull_request_ref_is_not_a_tag() -> None:
    assert classify("refs/pull/42/merge").is_tag is False


def test_version_tag() -> None:
    assert classify("refs/tags/v1.2.3") == ParsedRef(is_tag=True, tag_version="1.2.3")


def test_tag_without_prefix_is_not_a_version_tag() -> None:
    assert classify("refs/tags/1.2.3").is_tag is False


def test_custom_prefix() -> None:
    assert classify("refs/tags/release-2.0.0", "release-") == ParsedRef(True, "2.0.0")
    assert classify("refs/tags/v2.0.0", "release-").is_tag is False


def test_empty_prefix_matches_every_tag() -> None:
    assert tag_pattern("") == "refs/tags/"
    assert classify("refs/tags/1.0.0", "") == ParsedRef(True, "1.0.0")


def test_prefix_is_matched_literally_not_as_regex() -> None:
    assert classify("refs/tags/v1.0.0", ".").is_tag is False
    assert classify("refs/tags/.1.0.0", ".") == ParsedRef(True, "1.0.0")


def test_prefix_without_delimiter_accepts_word_tags() -> None:
    # Literal prefix match: "version2" starts with "v", so it is a tag.
    # The semver check flags the resulting version.
    assert classify("refs/tags/version2") == ParsedRef(is_tag=True, tag_version="ersion2")


def test_only_leading_prefix_is_removed() -> None:
    assert classify("refs/tags/v1.0.0-refs/tags/v") == ParsedRef(True, "1.0.0-refs/tags/v")
