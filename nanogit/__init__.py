"""
nanogit - a tiny in-memory version-control model.

Tracks authored commits organized into named branches:
- Content-addressable commit ids (12-char SHA256 prefix)
- Branch heads that move only on commit
- Newest-to-oldest history traversal over parent links
"""

__version__ = "0.1.0"
__logo__ = "🌱"

from nanogit.errors import NanogitError, InvalidArgument, BranchNotFound, CommitNotFound
from nanogit.author import Author
from nanogit.commit import Commit
from nanogit.ledger import CommitLedger
from nanogit.repository import Repository

__all__ = [
    "Author",
    "Commit",
    "CommitLedger",
    "Repository",
    "NanogitError",
    "InvalidArgument",
    "BranchNotFound",
    "CommitNotFound",
]
