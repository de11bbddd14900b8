from enum import Enum
from passlib.context import CryptContext

from .domain import User

# Use pbkdf2_sha256 to avoid external bcrypt backend issues in some environments
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class PasswordVerificationResult(Enum):
    FAILED = 0
    SUCCESS = 1


class PasswordHasher:
    """
    One-way password hashing with the salt embedded in the hash string.

    The user is part of the contract so a per-user keyed scheme can be
    swapped in; pbkdf2_sha256 does not consume it.
    """

    def __init__(self, context: CryptContext = pwd_context):
        self._context = context

    def hash(self, user: User, password: str) -> str:
        return self._context.hash(password)

    def verify(self, user: User, hashed_password: str, password: str) -> PasswordVerificationResult:
        if not hashed_password or password is None:
            return PasswordVerificationResult.FAILED
        try:
            matched = self._context.verify(password, hashed_password)
        except (ValueError, TypeError):
            # Unrecognized or malformed hash
            return PasswordVerificationResult.FAILED
        return PasswordVerificationResult.SUCCESS if matched else PasswordVerificationResult.FAILED
