"""
Logging setup and the authentication event log.
"""
from datetime import datetime, timezone
from typing import Optional
from fastapi import Request
import sys
import logging
import os

logger = logging.getLogger(__name__)


ALLOWED_EVENT_TYPES = {
    "signup_success",
    "signup_conflict",
    "login_success",
    "login_failure"
}


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """
    Configure stdout logging, plus a file handler when log_dir is set.

    If the log directory cannot be created the service keeps running with
    stdout logging only.
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_dir:
        try:
            os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(os.path.join(log_dir, "auth_events.log")))
        except (OSError, PermissionError) as e:
            print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers
    )


def client_ip(request: Request) -> Optional[str]:
    ip_address = None
    if request.client:
        ip_address = request.client.host

    # X-Forwarded-For can contain multiple IPs, take the first one
    if not ip_address and request.headers.get("x-forwarded-for"):
        ip_address = request.headers.get("x-forwarded-for").split(",")[0].strip()

    return ip_address


def log_auth_event(event_type: str, email: Optional[str], request: Request) -> None:
    """
    Write one authentication event line to the auth event log.

    Args:
        event_type: One of: signup_success, signup_conflict,
                    login_success, login_failure
        email: Email the request was made for, as submitted
        request: FastAPI Request object

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    logger.info(
        "AUTH %s email=%s ip=%s user_agent=%s timestamp=%s",
        event_type, email, client_ip(request), request.headers.get("user-agent"),
        datetime.now(timezone.utc).isoformat()
    )
