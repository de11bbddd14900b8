"""Auth service: signup, login and status lookup.

Pure business logic with no HTTP dependencies. Raises the errors in
errors.py; main.py maps them to status codes.
"""

import logging
import uuid
from dataclasses import replace
from typing import Callable, Optional

from .auth import PasswordHasher, PasswordVerificationResult
from .directory.base import AccountDirectory
from .domain import AccountStatus, AccountSummary, DEFAULT_ROLE, StatusSummary, User
from .errors import AuthError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def new_token() -> str:
    """Opaque placeholder credential. Nothing stores or verifies it."""
    return str(uuid.uuid4())


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _is_encodable(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _require_credentials(email: Optional[str], password: Optional[str]) -> None:
    if _is_blank(email) or _is_blank(password):
        raise ValidationError()
    # JSON may carry lone surrogates, which cannot be hashed or stored
    if not _is_encodable(email) or not _is_encodable(password):
        raise ValidationError("Email and password must be valid text.")


class AuthService:
    def __init__(
        self,
        directory: AccountDirectory,
        hasher: Optional[PasswordHasher] = None,
        token_factory: Callable[[], str] = new_token,
    ):
        self.directory = directory
        self.hasher = hasher or PasswordHasher()
        self.token_factory = token_factory

    def signup(
        self,
        email: Optional[str],
        password: Optional[str],
        full_name: Optional[str] = None,
        role: Optional[str] = None,
    ) -> AccountSummary:
        """
        Register a new account.

        Raises:
            ValidationError: email or password missing or blank
            ConflictError: an account with this email already exists
        """
        _require_credentials(email, password)

        candidate = User(
            email=email.lower(),
            password_hash="",
            full_name=full_name or "",
            role=role or DEFAULT_ROLE,
            status=AccountStatus.ACTIVE,
        )
        candidate = replace(candidate, password_hash=self.hasher.hash(candidate, password))

        user_id = self.directory.insert(candidate)
        logger.info("[Signup] Account created: user_id=%s, email=%s, role=%s", user_id, candidate.email, candidate.role)
        return self._summary(candidate)

    def login(self, email: Optional[str], password: Optional[str]) -> AccountSummary:
        """
        Verify credentials and issue a fresh token.

        Raises:
            ValidationError: email or password missing or blank
            AuthError: unknown email or wrong password (same error for both)
        """
        _require_credentials(email, password)

        user = self.directory.find_by_email(email.lower())
        if user is None:
            raise AuthError()

        result = self.hasher.verify(user, user.password_hash, password)
        if result == PasswordVerificationResult.FAILED:
            raise AuthError()

        logger.info("[Login] Successful login: user_id=%s, email=%s", user.id, user.email)
        return self._summary(user)

    def get_status(self, email: str) -> StatusSummary:
        # Looked up as given; signup and login lowercase, this path does not.
        user = self.directory.find_by_email(email)
        if user is None:
            raise NotFoundError()
        return StatusSummary(status=user.status, role=user.role)

    def _summary(self, user: User) -> AccountSummary:
        return AccountSummary(
            full_name=user.full_name,
            role=user.role,
            token=self.token_factory(),
            status=user.status,
            email=user.email,
        )
