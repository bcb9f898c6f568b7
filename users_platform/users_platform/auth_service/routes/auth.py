"""
Request handler for the authentication operations.

Each route coerces its input and delegates straight to ``AuthService``.
"""
from fastapi import APIRouter, Depends, Request
import re

from ..errors import BadRequest
from ..schemas import (
    MAX_ID,
    MIN_ID,
    LoginRequest,
    LoginResponse,
    RefreshTokenResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
    ValidateRefreshTokenRequest,
    ValidateRefreshTokenResponse,
)
from ..service import AuthService

AUTH_PATTERNS = {
    "LOGIN": "auth.login",
    "REGISTER": "auth.register",
    "ME": "auth.me",
    "REFRESH": "auth.refresh",
    "VALIDATE_REFRESH_TOKEN": "auth.validate_refresh_token",
}

_INT_RE = re.compile(r"-?\d+")

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def parse_int(value: str) -> int:
    if not _INT_RE.fullmatch(value) or not MIN_ID <= int(value) <= MAX_ID:
        raise BadRequest("Validation failed (numeric string is expected)")
    return int(value)


@router.post("/login", response_model=LoginResponse, name=AUTH_PATTERNS["LOGIN"])
def handle_login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    return service.login(payload)


@router.post("/register", response_model=RegisterResponse, name=AUTH_PATTERNS["REGISTER"])
def handle_register(payload: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    return service.register(payload)


@router.get("/me/{user_id}", response_model=UserResponse, name=AUTH_PATTERNS["ME"])
def handle_me(user_id: str, service: AuthService = Depends(get_auth_service)):
    return service.find_user_by_id(parse_int(user_id))


@router.post("/refresh/{user_id}", response_model=RefreshTokenResponse, name=AUTH_PATTERNS["REFRESH"])
def handle_refresh(user_id: str, service: AuthService = Depends(get_auth_service)):
    return service.refresh(parse_int(user_id))


@router.post(
    "/validate-refresh-token",
    response_model=ValidateRefreshTokenResponse,
    name=AUTH_PATTERNS["VALIDATE_REFRESH_TOKEN"],
)
def handle_validate_refresh_token(
    payload: ValidateRefreshTokenRequest,
    service: AuthService = Depends(get_auth_service),
):
    return service.validate_refresh_token(payload)
