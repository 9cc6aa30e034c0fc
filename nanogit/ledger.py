"""
Commit ledger - append-only commit table.

Holds every commit a repository has recorded, indexed by id. Commits are
never modified or removed once appended, and a commit may only be appended
after its parent, so every recorded chain resolves all the way to a root.
"""

from typing import Iterator

from loguru import logger

from nanogit.commit import Commit
from nanogit.errors import CommitNotFound, InvalidArgument


class CommitLedger:
    """
    In-memory, content-addressable commit storage.
    
    Because ids are derived from content, appending a commit whose id is
    already present is a no-op: identical content is stored once.
    """
    
    def __init__(self) -> None:
        self._commits: dict[str, Commit] = {}
    
    def append_commit(self, commit: Commit) -> str:
        """
        Append a commit to the ledger.
        
        Args:
            commit: The commit to append. Its parent, if any, must already
                be recorded.
        
        Returns:
            The commit ID.
        
        Raises:
            InvalidArgument: If the commit's parent is not in the ledger.
        """
        if commit.parent_id is not None and commit.parent_id not in self._commits:
            raise InvalidArgument(
                f"Parent {commit.parent_id} of commit {commit.id} is not recorded"
            )
        
        if commit.id not in self._commits:
            self._commits[commit.id] = commit
            logger.debug(f"Recorded commit {commit.id} (parent: {commit.parent_id})")
        
        return commit.id
    
    def get_commit(self, commit_id: str) -> Commit | None:
        """Retrieve a commit by ID, or None if it was never recorded."""
        return self._commits.get(commit_id)
    
    def commit_exists(self, commit_id: str) -> bool:
        """Check if a commit exists."""
        return commit_id in self._commits
    
    def list_commits(self) -> list[str]:
        """List all commit IDs in insertion order."""
        return list(self._commits)
    
    def iter_commits(self) -> Iterator[Commit]:
        """Iterate over all commits in insertion order."""
        yield from self._commits.values()
    
    def count_commits(self) -> int:
        """Count total commits in the ledger."""
        return len(self._commits)
    
    def get_commit_history(self, commit_id: str, max_commits: int | None = None) -> list[Commit]:
        """
        Get the history of commits leading to a given commit.
        
        Traverses parent links from the given commit back to the root. The
        walk always ends: a parent has to be recorded before any child can
        reference it, so no chain can loop back on itself.
        
        Args:
            commit_id: Starting commit ID.
            max_commits: Stop after this many commits (None for all).
        
        Returns:
            List of commits from newest to oldest.
        
        Raises:
            CommitNotFound: If ``commit_id`` is not recorded.
        """
        history: list[Commit] = []
        current_id: str | None = commit_id
        
        while current_id is not None:
            if max_commits is not None and len(history) >= max_commits:
                break
            commit = self._commits.get(current_id)
            if commit is None:
                raise CommitNotFound(current_id)
            history.append(commit)
            current_id = commit.parent_id
        
        return history
    
    def __contains__(self, commit_id: object) -> bool:
        return commit_id in self._commits
    
    def __len__(self) -> int:
        return len(self._commits)
