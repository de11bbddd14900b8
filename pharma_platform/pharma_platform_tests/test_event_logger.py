"""
Unit tests for event logger utility.
"""
import logging
import pytest
from unittest.mock import Mock
from pharma_platform.pharma_platform.auth_service.utils.event_logger import (
    client_ip,
    configure_logging,
    log_auth_event,
)

LOGGER_NAME = "pharma_platform.pharma_platform.auth_service.utils.event_logger"


@pytest.fixture
def mock_request():
    """Create a mock FastAPI Request object."""
    request = Mock()
    request.client = Mock()
    request.client.host = "192.168.1.1"
    request.headers = {"user-agent": "Mozilla/5.0 Test Browser"}
    return request


def test_log_auth_event_writes_line(caplog, mock_request):
    """Test that log_auth_event writes an AUTH line with the event details."""
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        log_auth_event("login_success", "a@b.com", mock_request)

    assert len(caplog.records) == 1
    message = caplog.records[0].getMessage()
    assert message.startswith("AUTH login_success")
    assert "email=a@b.com" in message
    assert "ip=192.168.1.1" in message
    assert "user_agent=Mozilla/5.0 Test Browser" in message


def test_log_auth_event_invalid_type(mock_request):
    """Test that ValueError is raised for invalid event type."""
    with pytest.raises(ValueError) as exc_info:
        log_auth_event("invalid_event", "a@b.com", mock_request)

    assert "Invalid event_type" in str(exc_info.value)
    assert "invalid_event" in str(exc_info.value)


def test_client_ip_missing():
    """Test that None is returned when the IP address cannot be extracted."""
    request = Mock()
    request.client = None
    request.headers = {"user-agent": "Test Browser"}

    assert client_ip(request) is None


def test_client_ip_uses_forwarded_header():
    request = Mock()
    request.client = None
    request.headers = {"x-forwarded-for": "203.0.113.7, 10.0.0.1"}

    assert client_ip(request) == "203.0.113.7"


def test_signup_and_login_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        client.post("/signup", json={"email": "log@b.com", "password": "pw"})
        client.post("/signup", json={"email": "log@b.com", "password": "pw"})
        client.post("/login", json={"email": "log@b.com", "password": "bad"})
        client.post("/login", json={"email": "log@b.com", "password": "pw"})

    events = [r.getMessage().split()[1] for r in caplog.records if r.name == LOGGER_NAME]
    assert events == ["signup_success", "signup_conflict", "login_failure", "login_success"]


def test_passwords_are_never_logged(client, caplog):
    with caplog.at_level(logging.DEBUG):
        client.post("/signup", json={"email": "quiet@b.com", "password": "hunter2-secret"})
        client.post("/login", json={"email": "quiet@b.com", "password": "hunter2-secret"})

    assert "hunter2-secret" not in caplog.text


def test_configure_logging_creates_log_file(tmp_path):
    log_dir = tmp_path / "logs"
    configure_logging("INFO", str(log_dir))
    assert (log_dir / "auth_events.log").exists()


def test_configure_logging_survives_bad_log_dir(tmp_path, capsys):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    configure_logging("INFO", str(blocker / "logs"))
    assert "Could not set up file logging" in capsys.readouterr().err
