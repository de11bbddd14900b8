"""Account routes (signup, login, status)."""

from fastapi import APIRouter, Depends, Request, status

from ..domain import AccountSummary
from ..errors import AuthError, ConflictError
from ..schemas import AccountResponse, LoginRequest, SignupRequest, StatusResponse
from ..service import AuthService
from ..utils.event_logger import log_auth_event

router = APIRouter(tags=["auth"])


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def _account_response(message: str, summary: AccountSummary) -> AccountResponse:
    return AccountResponse(
        message=message,
        full_name=summary.full_name,
        role=summary.role,
        token=summary.token,
        status=summary.status.value,
        email=summary.email
    )


@router.post("/signup", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def signup(payload: SignupRequest, request: Request, service: AuthService = Depends(get_auth_service)):
    try:
        summary = service.signup(payload.email, payload.password, payload.full_name, payload.role)
    except ConflictError:
        log_auth_event("signup_conflict", payload.email, request)
        raise

    log_auth_event("signup_success", summary.email, request)
    message = "User registered successfully"
    if not service.directory.is_persistent:
        message += " (in-memory)"
    return _account_response(message, summary)


@router.post("/login", response_model=AccountResponse)
def login(payload: LoginRequest, request: Request, service: AuthService = Depends(get_auth_service)):
    try:
        summary = service.login(payload.email, payload.password)
    except AuthError:
        log_auth_event("login_failure", payload.email, request)
        raise

    log_auth_event("login_success", summary.email, request)
    return _account_response("Login successful", summary)


@router.get("/status/{email}", response_model=StatusResponse)
def get_status(email: str, service: AuthService = Depends(get_auth_service)):
    result = service.get_status(email)
    return StatusResponse(status=result.status.value, role=result.role)
