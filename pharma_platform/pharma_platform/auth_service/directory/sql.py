"""SQLAlchemy implementation of the account directory."""

import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import sessionmaker

from ..domain import User
from ..errors import ConflictError, UnavailableError
from ..models import UserRecord
from .base import require_password_hash

logger = logging.getLogger(__name__)


class SqlDirectory:
    is_persistent = True

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @property
    def engine(self) -> Engine:
        return self.session_factory.kw["bind"]

    def find_by_email(self, email: str) -> Optional[User]:
        db = self.session_factory()
        try:
            record = (
                db.query(UserRecord)
                .filter(func.lower(UserRecord.email) == email.lower())
                .first()
            )
            return record.to_domain() if record else None
        except (OperationalError, InterfaceError) as e:
            logger.error("[Directory] Lookup failed, database unreachable: %s", e)
            raise UnavailableError() from e
        finally:
            db.close()

    def insert(self, candidate: User) -> int:
        """
        Insert the candidate in a single transaction.

        The unique index on lower(email) decides races; the losing commit
        is rolled back and reported as ConflictError.
        """
        require_password_hash(candidate)
        db = self.session_factory()
        try:
            record = UserRecord.from_domain(candidate)
            db.add(record)
            db.commit()
            logger.debug("[Directory] Persistent insert: user_id=%s", record.id)
            return record.id
        except IntegrityError as e:
            db.rollback()
            logger.info("[Directory] Persistent insert rejected, email already exists: %s", candidate.email)
            raise ConflictError() from e
        except (OperationalError, InterfaceError) as e:
            db.rollback()
            logger.error("[Directory] Insert failed, database unreachable: %s", e)
            raise UnavailableError() from e
        finally:
            db.close()
