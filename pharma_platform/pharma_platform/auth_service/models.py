from sqlalchemy import Column, Integer, String, Index, func
from .db import Base
from .domain import AccountStatus, DEFAULT_ROLE, User


class UserRecord(Base):
    __tablename__ = "users"
    # SQLite would otherwise hand out the id of a deleted highest row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Free text and free-form role, no length limit
    full_name = Column(String, nullable=False, default="")
    email = Column(String, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default=DEFAULT_ROLE)
    status = Column(String(20), nullable=False, default=AccountStatus.ACTIVE.value)

    @classmethod
    def from_domain(cls, user: User) -> "UserRecord":
        return cls(
            full_name=user.full_name,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role,
            status=user.status.value
        )

    def to_domain(self) -> User:
        return User(
            id=self.id,
            full_name=self.full_name or "",
            email=self.email,
            password_hash=self.password_hash,
            role=self.role,
            status=AccountStatus(self.status)
        )


# Email uniqueness is case-insensitive
Index("uq_users_email_lower", func.lower(UserRecord.email), unique=True)
