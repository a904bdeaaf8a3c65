"""Git repository abstraction.

Read-only queries used to work out which ref the current checkout points at.
All operations return Result types.

Usage:
    repo = Repository(Path("."))

    match repo.symbolic_ref():
        case Ok(ref):
            print(f"On {ref}")
        case Err(e):
            print(f"Detached or not a repo: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pubctx.core.result import Err, Ok, Result
from pubctx.platform.process import ProcessError
from pubctx.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """Git repository abstraction.

    Attributes:
        path: Path to the repository (any directory inside the work tree)
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def symbolic_ref(self) -> Result[str, GitError]:
        """Get the full ref HEAD points at (e.g. ``refs/heads/main``).

        Fails on a detached HEAD, which is the normal state of a tag checkout.
        """
        return self._query(["symbolic-ref", "-q", "HEAD"], "symbolic-ref")

    def exact_tag(self) -> Result[str, GitError]:
        """Get the tag name pointing exactly at HEAD (e.g. ``v1.2.3``)."""
        return self._query(["describe", "--tags", "--exact-match"], "describe --exact-match")

    def _query(self, args: list[str], name: str) -> Result[str, GitError]:
        result = self._run(args)
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command=name,
                        message=e.stderr.strip() or f"git {name} failed",
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                value = stdout.strip()
                if not value:
                    return Err(GitError(command=name, message=f"git {name}: empty output"))
                return Ok(value)

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(
            ["git", "-C", str(self.path), *args],
            cwd=self.path,
            timeout=_GIT_TIMEOUT_SECONDS,
        )
