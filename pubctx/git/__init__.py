"""Git operations module.

Usage:
    from pubctx.git import Repository

    repo = Repository(Path("."))
    ref = repo.symbolic_ref()
    if ref.is_ok():
        print(ref.unwrap())
"""

from pubctx.git.repository import GitError, Repository

__all__ = [
    "GitError",
    "Repository",
]
