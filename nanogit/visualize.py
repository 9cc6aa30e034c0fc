"""
Repository visualization utilities.

Plain-text renderings of history and branches in the style of git's own
output.
"""

from nanogit.commit import Commit
from nanogit.repository import Repository


def format_commit_log(
    repo: Repository,
    branch: str | None = None,
    max_commits: int = 20,
) -> str:
    """
    Format commit history similar to `git log`.
    
    Args:
        repo: The repository.
        branch: Branch to show (default: current branch).
        max_commits: Maximum commits to show.
    
    Returns:
        Formatted log string.
    """
    history = repo.log(branch, max_commits)
    
    if not history:
        return "No commits yet."
    
    lines = []
    for commit in history:
        lines.append(f"commit {commit.id}")
        lines.append(f"Author: {commit.author}")
        lines.append(f"Date:   {commit.timestamp.strftime('%Y-%m-%d %H:%M:%S')}")
        if commit.parent_id:
            lines.append(f"Parent: {commit.parent_id}")
        lines.append("")
        lines.append(f"    {commit.message}")
        lines.append("")
    
    return "\n".join(lines).rstrip("\n")


def format_commit_oneline(
    repo: Repository,
    branch: str | None = None,
    max_commits: int = 20,
) -> str:
    """
    Format commit history in one-line format similar to `git log --oneline`.
    
    Returns:
        Formatted log string.
    """
    name = branch or repo.current_branch
    history = repo.log(name, max_commits)
    
    if not history:
        return "No commits yet."
    
    lines = []
    for i, commit in enumerate(history):
        prefix = "* " if i == 0 else "  "
        head_marker = f" ({name})" if i == 0 else ""
        lines.append(f"{prefix}{commit.id}{head_marker} {commit.message}")
    
    return "\n".join(lines)


def format_branches(repo: Repository) -> str:
    """Format branch list similar to `git branch -v`."""
    lines = []
    branches = repo.branches
    current = repo.current_branch
    
    for name in sorted(branches):
        marker = "* " if name == current else "  "
        head = branches[name] or "empty"
        lines.append(f"{marker}{name} -> {head}")
    
    return "\n".join(lines)


def format_commit_detail(commit: Commit) -> str:
    """Format detailed information about a single commit."""
    lines = [
        f"Commit:  {commit.id}",
        f"Author:  {commit.author}",
        f"Date:    {commit.timestamp.isoformat()}",
        f"Parent:  {commit.parent_id or '(root)'}",
        "",
        f"    {commit.message}",
    ]
    return "\n".join(lines)
