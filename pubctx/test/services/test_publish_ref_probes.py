from __future__ import annotations

from pathlib import Path

import pytest

from pubctx.core.result import Err, Ok, Result
from pubctx.git.repository import GitError, Repository
from pubctx.services.publish import ref_probes
from pubctx.services.publish.ref_probes import (
    DEFAULT_REF,
    DetectedRef,
    NamedProbe,
    env_probe,
    exact_tag_probe,
    first_match,
    symbolic_ref_probe,
)


def _probe(name: str, value: str | None, calls: list[str]) -> NamedProbe:
    def probe() -> str | None:
        calls.append(name)
        return value

    return NamedProbe(name=name, probe=probe)


class FakeRepository(Repository):
    def __init__(
        self,
        *,
        symbolic: Result[str, GitError],
        tag: Result[str, GitError],
    ) -> None:
        super().__init__(Path("."))
        self._symbolic = symbolic
        self._tag = tag

    def symbolic_ref(self) -> Result[str, GitError]:
        return self._symbolic

    def exact_tag(self) -> Result[str, GitError]:
        return self._tag


def _git_err(command: str) -> Err[GitError]:
    return Err(GitError(command=command, message="failed"))


class TestFirstMatch:
    def test_first_answer_wins_and_stops(self) -> None:
        calls: list[str] = []
        probes = [
            _probe("a", None, calls),
            _probe("b", "refs/heads/dev", calls),
            _probe("c", "refs/tags/v1.0.0", calls),
        ]

        assert first_match(probes) == DetectedRef(ref="refs/heads/dev", source="b")
        assert calls == ["a", "b"]

    def test_blank_answers_are_skipped(self) -> None:
        calls: list[str] = []
        probes = [_probe("a", "", calls), _probe("b", "  \n", calls), _probe("c", " x ", calls)]

        assert first_match(probes) == DetectedRef(ref="x", source="c")

    def test_fallback_when_nothing_answers(self) -> None:
        calls: list[str] = []
        result = first_match([_probe("a", None, calls)])

        assert result == DetectedRef(ref=DEFAULT_REF, source="default")
        assert result.ref == "refs/heads/main"

    def test_no_probes(self) -> None:
        assert first_match([]).ref == "refs/heads/main"


class TestProbes:
    def test_env_probe(self) -> None:
        probe = env_probe("GITHUB_REF", {"GITHUB_REF": "refs/tags/v2.0.0"})
        assert probe.name == "env:GITHUB_REF"
        assert probe.probe() == "refs/tags/v2.0.0"

    def test_env_probe_unset(self) -> None:
        assert env_probe("GITHUB_REF", {}).probe() is None

    def test_symbolic_ref_probe(self) -> None:
        repo = FakeRepository(symbolic=Ok("refs/heads/feature"), tag=_git_err("describe"))
        assert symbolic_ref_probe(repo).probe() == "refs/heads/feature"

    def test_symbolic_ref_probe_error_is_no_value(self) -> None:
        repo = FakeRepository(symbolic=_git_err("symbolic-ref"), tag=_git_err("describe"))
        assert symbolic_ref_probe(repo).probe() is None

    def test_exact_tag_probe_builds_full_ref(self) -> None:
        repo = FakeRepository(symbolic=_git_err("symbolic-ref"), tag=Ok("v1.4.0"))
        assert exact_tag_probe(repo).probe() == "refs/tags/v1.4.0"

    def test_exact_tag_probe_error_is_no_value(self) -> None:
        repo = FakeRepository(symbolic=_git_err("symbolic-ref"), tag=_git_err("describe"))
        assert exact_tag_probe(repo).probe() is None


class TestDetectRef:
    def _patch_repo(self, monkeypatch: pytest.MonkeyPatch, repo: FakeRepository) -> None:
        monkeypatch.setattr(ref_probes, "Repository", lambda _cwd: repo)

    def test_env_wins_over_git(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        self._patch_repo(
            monkeypatch, FakeRepository(symbolic=Ok("refs/heads/main"), tag=Ok("v9.9.9"))
        )

        detected = ref_probes.detect_ref(tmp_path, {"GITHUB_REF": "refs/tags/v1.0.0"})

        assert detected == DetectedRef(ref="refs/tags/v1.0.0", source="env:GITHUB_REF")

    def test_branch_before_tag(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        self._patch_repo(
            monkeypatch, FakeRepository(symbolic=Ok("refs/heads/main"), tag=Ok("v9.9.9"))
        )

        detected = ref_probes.detect_ref(tmp_path, {})

        assert detected == DetectedRef(ref="refs/heads/main", source="git:symbolic-ref")

    def test_detached_tag_checkout(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        self._patch_repo(
            monkeypatch, FakeRepository(symbolic=_git_err("symbolic-ref"), tag=Ok("v1.2.3"))
        )

        detected = ref_probes.detect_ref(tmp_path, {})

        assert detected == DetectedRef(ref="refs/tags/v1.2.3", source="git:exact-tag")

    def test_everything_fails(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        self._patch_repo(
            monkeypatch,
            FakeRepository(symbolic=_git_err("symbolic-ref"), tag=_git_err("describe")),
        )

        detected = ref_probes.detect_ref(tmp_path, {"GITHUB_REF": ""})

        assert detected == DetectedRef(ref="refs/heads/main", source="default")
