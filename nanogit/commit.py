"""Commit data structure."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from nanogit.author import Author
from nanogit.errors import InvalidArgument
from nanogit.hash import compute_hash

# Stands in for the parent id of a root commit when hashing.
ROOT_PARENT = "<root>"


@dataclass(frozen=True, eq=False)
class Commit:
    """
    A commit in the repository history.
    
    Each commit points to at most one parent, fixed at construction, so the
    history forms a chain that can only grow at its head. The id is derived
    from the message, the author and the parent id, which makes it
    deterministic: the same inputs always produce the same id.
    
    Attributes:
        message: Human-readable description (must not be blank).
        author: Who made the commit.
        parent: The previous commit, or None for a root commit.
        timestamp: When this commit object was created (not part of the id).
        id: Content-addressable hash, 12 hex characters (computed automatically).
    """
    
    message: str
    author: Author
    parent: "Commit | None" = None
    timestamp: datetime = field(default_factory=datetime.now)
    
    id: str = field(default="", init=False)
    
    def __post_init__(self) -> None:
        """Validate inputs, then compute the content-addressable ID."""
        validate_commit_args(self.message, self.author)
        if self.parent is not None and not isinstance(self.parent, Commit):
            raise InvalidArgument(
                f"Commit parent must be a Commit or None, got {type(self.parent).__name__}"
            )
        object.__setattr__(self, "id", self._compute_id())
    
    def _compute_id(self) -> str:
        """Compute SHA256 hash of commit content."""
        content = {
            "message": self.message,
            "author_name": self.author.name,
            "author_email": self.author.email,
            "parent_id": self.parent_id or ROOT_PARENT,
        }
        return compute_hash(content)
    
    @property
    def parent_id(self) -> str | None:
        """ID of the parent commit (None for a root commit)."""
        return self.parent.id if self.parent is not None else None
    
    @property
    def short_id(self) -> str:
        return self.id[:8]
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for display or export."""
        return {
            "id": self.id,
            "message": self.message,
            "author": {"name": self.author.name, "email": self.author.email},
            "parent_id": self.parent_id,
            "timestamp": self.timestamp.isoformat(),
        }
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Commit):
            return NotImplemented
        return self.id == other.id
    
    def __hash__(self) -> int:
        return hash(self.id)
    
    def __str__(self) -> str:
        """Human-readable representation."""
        return f"{self.short_id} {self.message}"
    
    def __repr__(self) -> str:
        """Debug representation."""
        parent = self.parent.short_id if self.parent is not None else None
        return f"Commit(id={self.id}, parent={parent}, message={self.message!r})"


def validate_commit_args(message: Any, author: Any) -> None:
    """
    Check the caller-supplied parts of a commit.
    
    Raises:
        InvalidArgument: If the message is blank or the author is missing.
    """
    if not isinstance(message, str) or not message.strip():
        raise InvalidArgument("Commit message must be a non-empty string")
    if author is None:
        raise InvalidArgument("Commit author is required")
    if not isinstance(author, Author):
        raise InvalidArgument(
            f"Commit author must be an Author, got {type(author).__name__}"
        )
