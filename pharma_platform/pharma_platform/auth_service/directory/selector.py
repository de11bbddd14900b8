import logging

from ..config import Settings
from ..db import create_db_engine, create_session_factory
from .base import AccountDirectory
from .memory import InMemoryDirectory
from .sql import SqlDirectory

logger = logging.getLogger(__name__)


def select_directory(settings: Settings) -> AccountDirectory:
    """
    Choose the account directory for the lifetime of the process.

    A non-blank DATABASE_URL binds the SQL directory; anything else binds
    the in-memory directory. There is no fallback between the two once chosen.
    """
    url = settings.durable_storage_url
    if url is None:
        logger.warning(
            "No DATABASE_URL configured. Using the in-memory directory; "
            "accounts will not survive a restart."
        )
        return InMemoryDirectory()

    engine = create_db_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        echo=settings.DB_ECHO
    )
    logger.info("Using persistent directory on %s", engine.url.render_as_string(hide_password=True))
    return SqlDirectory(create_session_factory(engine))
