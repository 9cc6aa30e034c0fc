"""Exceptions raised by nanogit."""


class NanogitError(Exception):
    """Base class for every error nanogit raises on purpose."""


class InvalidArgument(NanogitError, ValueError):
    """Raised when a caller passes input that fails validation."""


class BranchNotFound(NanogitError, LookupError):
    """Raised when an operation names a branch that does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Branch not found: {name!r}")


class CommitNotFound(NanogitError, LookupError):
    """Raised when a commit id is not recorded in the repository."""

    def __init__(self, commit_id: str):
        self.commit_id = commit_id
        super().__init__(f"Commit not found: {commit_id!r}")
