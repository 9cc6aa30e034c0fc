"""Commit author value object."""

import re
from dataclasses import dataclass

from nanogit.errors import InvalidArgument

# local@domain, neither side empty, no whitespace anywhere
EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+")


@dataclass(frozen=True)
class Author:
    """
    The person credited with a commit.
    
    Authors are plain values: two authors with the same name and email are
    equal, and one instance may be shared by any number of commits.
    
    Attributes:
        name: Display name (must not be blank).
        email: Address in ``local@domain`` form.
    """
    
    name: str
    email: str
    
    def __post_init__(self) -> None:
        """Validate fields; an invalid Author is never constructed."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidArgument("Author name must be a non-empty string")
        if not isinstance(self.email, str) or not self.email.strip():
            raise InvalidArgument("Author email must be a non-empty string")
        if not EMAIL_PATTERN.fullmatch(self.email):
            raise InvalidArgument(f"Malformed author email: {self.email!r}")
    
    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
