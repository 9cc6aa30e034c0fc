"""
Repository - branches, commits and history.

The repository owns the only mutable state in nanogit: which commit each
branch points at and which branch is current. Commits themselves are
immutable and live in a CommitLedger.
"""

import threading

from loguru import logger

from nanogit.author import Author
from nanogit.commit import Commit, validate_commit_args
from nanogit.errors import BranchNotFound, CommitNotFound, InvalidArgument
from nanogit.ledger import CommitLedger

DEFAULT_BRANCH = "main"


class Repository:
    """
    An in-memory commit graph organized into named branches.
    
    A fresh repository has a single, empty ``main`` branch. Each commit is
    appended to the current branch and moves only that branch's head.
    Creating a branch copies the current head; the two branches then move
    independently.
    
    Every public operation either completes fully or raises before changing
    anything. Mutations are serialized by an internal lock so one instance
    can be shared between threads.
    """
    
    def __init__(self) -> None:
        self._branches: dict[str, str | None] = {DEFAULT_BRANCH: None}
        self._current_branch = DEFAULT_BRANCH
        self.ledger = CommitLedger()
        self._lock = threading.RLock()
    
    # =========================================================================
    # Branches
    # =========================================================================
    
    @property
    def branches(self) -> dict[str, str | None]:
        """Snapshot of branch name -> head commit id (None when empty)."""
        with self._lock:
            return dict(self._branches)
    
    @property
    def current_branch(self) -> str:
        """Name of the branch new commits are appended to."""
        return self._current_branch
    
    def list_branches(self) -> list[str]:
        """List branch names, sorted."""
        with self._lock:
            return sorted(self._branches)
    
    def create_branch(self, name: str) -> None:
        """
        Create a new branch at the current branch's head.
        
        The current branch is not changed.
        
        Args:
            name: Name of the new branch.
        
        Raises:
            InvalidArgument: If the name is empty or already taken.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument("Branch name must be a non-empty string")
        
        with self._lock:
            if name in self._branches:
                raise InvalidArgument(f"Branch already exists: {name!r}")
            head = self._branches[self._current_branch]
            self._branches[name] = head
        
        logger.debug(f"Created branch {name} at {head or 'empty'}")
    
    def branch(self, name: str) -> str | None:
        """
        Get the head commit id of a branch.
        
        Returns:
            The head id, or None if the branch has no commits yet.
        
        Raises:
            BranchNotFound: If the branch does not exist.
        """
        with self._lock:
            if not isinstance(name, str) or name not in self._branches:
                raise BranchNotFound(name)
            return self._branches[name]
    
    def switch(self, name: str) -> None:
        """
        Make ``name`` the current branch. No branch head moves.
        
        Raises:
            BranchNotFound: If the branch does not exist.
        """
        with self._lock:
            if not isinstance(name, str) or name not in self._branches:
                raise BranchNotFound(name)
            self._current_branch = name
        
        logger.debug(f"Switched to branch {name}")
    
    # =========================================================================
    # Commits
    # =========================================================================
    
    @property
    def head(self) -> Commit | None:
        """The commit at the head of the current branch, if any."""
        with self._lock:
            head_id = self._branches[self._current_branch]
            return self.ledger.get_commit(head_id) if head_id else None
    
    @property
    def commit_count(self) -> int:
        """Number of distinct commits recorded."""
        return self.ledger.count_commits()
    
    def commit(self, message: str, author: Author) -> Commit:
        """
        Record a new commit on the current branch.
        
        The new commit's parent is the current head (None on an empty
        branch), and the current branch is advanced to it.
        
        Args:
            message: Commit message.
            author: Who is committing.
        
        Returns:
            The new commit.
        
        Raises:
            InvalidArgument: If the message is blank or the author is missing.
        """
        validate_commit_args(message, author)
        
        with self._lock:
            branch_name = self._current_branch
            head_id = self._branches[branch_name]
            parent = self.ledger.get_commit(head_id) if head_id else None
            commit = Commit(message=message, author=author, parent=parent)
            commit = self.ledger.get_commit(self.ledger.append_commit(commit))
            self._branches[branch_name] = commit.id

        logger.debug(f"Committed {commit.id} on {branch_name}: {message}")
        return commit
    
    def get_commit(self, commit_id: str) -> Commit:
        """
        Look up a recorded commit.
        
        Raises:
            CommitNotFound: If no commit with this id was recorded.
        """
        commit = self.ledger.get_commit(commit_id)
        if commit is None:
            raise CommitNotFound(commit_id)
        return commit
    
    # =========================================================================
    # History
    # =========================================================================
    
    def log(self, branch_name: str | None = None, max_commits: int | None = None) -> list[Commit]:
        """
        Get commit history for a branch.
        
        Args:
            branch_name: Branch to walk (default: current branch).
            max_commits: Maximum number of commits to return (default: all).
        
        Returns:
            List of commits from newest to oldest; empty for an empty branch.
        
        Raises:
            BranchNotFound: If the branch does not exist.
            InvalidArgument: If max_commits is less than 1.
        """
        if max_commits is not None and max_commits < 1:
            raise InvalidArgument("max_commits must be at least 1")
        
        with self._lock:
            name = self._current_branch if branch_name is None else branch_name
            if not isinstance(name, str) or name not in self._branches:
                raise BranchNotFound(name)
            head_id = self._branches[name]
            if head_id is None:
                return []
            return self.ledger.get_commit_history(head_id, max_commits)
    
    def __repr__(self) -> str:
        return (
            f"Repository(current_branch={self._current_branch}, "
            f"branches={len(self._branches)}, commits={self.commit_count})"
        )
