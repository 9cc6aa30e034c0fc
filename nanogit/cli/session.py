"""Line-oriented command dispatch over one in-memory repository."""

import shlex

from loguru import logger

from nanogit.author import Author
from nanogit.config.schema import Config
from nanogit.errors import InvalidArgument
from nanogit.repository import Repository
from nanogit.visualize import (
    format_branches,
    format_commit_detail,
    format_commit_log,
    format_commit_oneline,
)

HELP_TEXT = """\
Commands:
  commit <message>         Record a commit on the current branch
  author <name> <email>    Set the author for following commits
  branch                   List branches
  branch <name>            Create a branch at the current head
  switch <name>            Make <name> the current branch
  log [branch]             Show history, newest first
  show <commit-id>         Show one commit
  status                   Show the current branch and head
  help                     Show this message
  exit                     Leave the shell"""


class Session:
    """
    Executes text commands against a Repository.
    
    Used by both the interactive shell and script runner; each call to
    ``execute`` handles one line and returns the text to print.
    """
    
    def __init__(self, config: Config | None = None, repo: Repository | None = None):
        self.config = config or Config()
        self.repo = repo or Repository()
        self.finished = False
        self._author: Author | None = None
    
    @property
    def author(self) -> Author:
        """Author for new commits; defaults to the configured identity."""
        if self._author is None:
            self._author = Author(self.config.author.name, self.config.author.email)
        return self._author
    
    def execute(self, line: str) -> str:
        """
        Run a single command line.
        
        Returns:
            Output text (may be empty).
        
        Raises:
            NanogitError: If the command or its arguments are invalid.
        """
        try:
            parts = [] if line.lstrip().startswith("#") else shlex.split(line)
        except ValueError as e:
            raise InvalidArgument(f"Cannot parse command: {e}") from e
        
        if not parts:
            return ""
        
        command, args = parts[0].lower(), parts[1:]
        handler = getattr(self, f"_cmd_{command}", None)
        if handler is None:
            raise InvalidArgument(f"Unknown command: {command} (try 'help')")
        
        logger.debug(f"Executing {command} with {args}")
        return handler(args)
    
    def _cmd_commit(self, args: list[str]) -> str:
        commit = self.repo.commit(" ".join(args), self.author)
        return f"[{self.repo.current_branch} {commit.id}] {commit.message}"
    
    def _cmd_author(self, args: list[str]) -> str:
        if len(args) != 2:
            raise InvalidArgument("Usage: author <name> <email>")
        self._author = Author(args[0], args[1])
        return f"Author set to {self._author}"
    
    def _cmd_branch(self, args: list[str]) -> str:
        if not args:
            return format_branches(self.repo)
        if len(args) > 1:
            raise InvalidArgument("Usage: branch [name]")
        self.repo.create_branch(args[0])
        return f"Created branch {args[0]}"
    
    def _cmd_switch(self, args: list[str]) -> str:
        if len(args) != 1:
            raise InvalidArgument("Usage: switch <name>")
        self.repo.switch(args[0])
        return f"Switched to branch '{args[0]}'"
    
    def _cmd_log(self, args: list[str]) -> str:
        if len(args) > 1:
            raise InvalidArgument("Usage: log [branch]")
        branch = args[0] if args else None
        max_commits = self.config.log.max_commits
        if self.config.log.oneline:
            return format_commit_oneline(self.repo, branch, max_commits)
        return format_commit_log(self.repo, branch, max_commits)
    
    def _cmd_show(self, args: list[str]) -> str:
        if len(args) != 1:
            raise InvalidArgument("Usage: show <commit-id>")
        return format_commit_detail(self.repo.get_commit(args[0]))
    
    def _cmd_status(self, args: list[str]) -> str:
        head = self.repo.head
        lines = [f"On branch {self.repo.current_branch}"]
        lines.append(f"HEAD: {head}" if head else "No commits yet")
        return "\n".join(lines)
    
    def _cmd_help(self, args: list[str]) -> str:
        return HELP_TEXT
    
    def _cmd_exit(self, args: list[str]) -> str:
        self.finished = True
        return ""
    
    _cmd_quit = _cmd_exit
