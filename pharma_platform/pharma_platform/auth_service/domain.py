from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_ROLE = "customer"


class AccountStatus(str, Enum):
    ACTIVE = "Active"
    PENDING = "Pending"
    BLOCKED = "Blocked"


@dataclass(frozen=True)
class User:
    """Domain model representing a directory account."""
    email: str
    password_hash: str
    full_name: str = ""
    role: str = DEFAULT_ROLE
    status: AccountStatus = AccountStatus.ACTIVE
    id: Optional[int] = None


@dataclass(frozen=True)
class AccountSummary:
    full_name: str
    role: str
    token: str
    status: AccountStatus
    email: str


@dataclass(frozen=True)
class StatusSummary:
    status: AccountStatus
    role: str
