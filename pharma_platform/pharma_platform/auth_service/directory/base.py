from typing import Optional, Protocol

from ..domain import User


class AccountDirectory(Protocol):
    """Protocol defining the interface for account storage."""

    is_persistent: bool

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, case-insensitively. Return User or None if not found."""
        ...

    def insert(self, candidate: User) -> int:
        """Store a new user and return its id. Raise ConflictError if the email is taken."""
        ...


def require_password_hash(candidate: User) -> None:
    if not candidate.password_hash:
        raise ValueError("Refusing to store a user without a password hash")
