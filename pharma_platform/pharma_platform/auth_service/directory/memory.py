"""In-memory account directory used when no database is configured."""

import logging
import threading
from dataclasses import replace
from typing import Dict, Optional

from ..domain import User
from ..errors import ConflictError
from .base import require_password_hash

logger = logging.getLogger(__name__)


class InMemoryDirectory:
    is_persistent = False

    def __init__(self):
        self._lock = threading.Lock()
        self._users: Dict[str, User] = {}
        self._next_id = 1

    def find_by_email(self, email: str) -> Optional[User]:
        # Stored users are frozen and only published once fully built
        return self._users.get(email.lower())

    def insert(self, candidate: User) -> int:
        require_password_hash(candidate)
        key = candidate.email.lower()
        with self._lock:
            if key in self._users:
                logger.info("[Directory] In-memory insert rejected, email already exists: %s", candidate.email)
                raise ConflictError()
            user_id = self._next_id
            self._next_id += 1
            self._users[key] = replace(candidate, id=user_id)
        logger.debug("[Directory] In-memory insert: user_id=%s", user_id)
        return user_id
