"""
Authentication workflow: credential checks, token issuance and refresh-token
rotation.

Only hashes of passwords and refresh tokens are ever persisted. Login and
refresh-token validation fail with the same message whether the user is
missing or the secret is wrong, so responses never reveal which accounts
exist.
"""
import logging
import secrets

from .errors import BadRequest, DuplicateEmailError, NotFound, Unauthorized
from .hashing import HashService
from .models import User
from .repository import UserRepository
from .schemas import (
    LoginRequest,
    LoginResponse,
    RefreshTokenResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
    ValidateRefreshTokenRequest,
    ValidateRefreshTokenResponse,
)
from .tokens import REFRESH, TokenService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
INVALID_REFRESH_TOKEN = "Invalid refresh token"
USER_EXISTS = "User already exists"
USER_NOT_FOUND = "User not found"


class AuthService:
    def __init__(
        self,
        users: UserRepository,
        hash_service: HashService,
        token_service: TokenService,
    ):
        self.users = users
        self.hash_service = hash_service
        self.token_service = token_service
        # verified against when the email is unknown so both failures cost one hash check
        self._dummy_hash = hash_service.hash_password(secrets.token_urlsafe(16))

    def login(self, payload: LoginRequest) -> LoginResponse:
        user = self.users.find_by_email(payload.email)
        stored_hash = user.password if user else self._dummy_hash
        if not self.hash_service.compare_passwords(payload.password, stored_hash) or not user:
            logger.warning("Login failed")
            raise Unauthorized(INVALID_CREDENTIALS)

        tokens = self._issue_tokens(user.id)
        logger.info("Login succeeded: user_id=%s", user.id)
        return LoginResponse(access_token=tokens.access_token, refresh_token=tokens.refresh_token)

    def register(self, payload: RegisterRequest) -> RegisterResponse:
        if self.users.find_by_email(payload.email):
            logger.info("Registration rejected, email already in use")
            raise BadRequest(USER_EXISTS)

        hashed_password = self.hash_service.hash_password(payload.password)
        try:
            user = self.users.create(
                email=payload.email,
                password=hashed_password,
                full_name=payload.full_name,
            )
        except DuplicateEmailError as exc:
            # lost a race with a concurrent registration
            logger.info("Registration rejected by unique constraint")
            raise BadRequest(USER_EXISTS) from exc

        logger.info("Registered user: user_id=%s", user.id)
        return UserResponse.model_validate(user)

    def find_user_by_id(self, user_id: int) -> UserResponse:
        user = self.users.find_by_id(user_id)
        if not user:
            raise NotFound(USER_NOT_FOUND)
        return UserResponse.model_validate(user)

    def refresh(self, user_id: int) -> RefreshTokenResponse:
        """
        Issue a new token pair and replace the stored refresh-token hash.

        The previous refresh token is not checked here; callers run
        ``validate_refresh_token`` first.
        """
        tokens = self._issue_tokens(user_id)
        logger.info("Refresh issued: user_id=%s", user_id)
        return RefreshTokenResponse(access_token=tokens.access_token, refresh_token=tokens.refresh_token)

    def validate_refresh_token(self, payload: ValidateRefreshTokenRequest) -> ValidateRefreshTokenResponse:
        user = self.users.find_by_id(payload.user_id)
        if not user or not user.hashed_refresh_token:
            logger.warning("Refresh token rejected: user_id=%s has no active token", payload.user_id)
            raise Unauthorized(INVALID_REFRESH_TOKEN)

        if not self.hash_service.compare_hash(payload.refresh_token, user.hashed_refresh_token):
            logger.warning("Refresh token rejected: user_id=%s hash mismatch", payload.user_id)
            raise Unauthorized(INVALID_REFRESH_TOKEN)

        try:
            claims = self.token_service.decode_token(payload.refresh_token, REFRESH)
        except Unauthorized as exc:
            logger.warning("Refresh token rejected: user_id=%s expired or malformed", payload.user_id)
            raise Unauthorized(INVALID_REFRESH_TOKEN) from exc
        if claims["sub"] != str(payload.user_id):
            logger.warning("Refresh token rejected: user_id=%s subject mismatch", payload.user_id)
            raise Unauthorized(INVALID_REFRESH_TOKEN)

        return ValidateRefreshTokenResponse(user_id=payload.user_id)

    def update_hashed_refresh_token(self, user_id: int, hashed_refresh_token: str) -> User:
        user = self.users.update(user_id, hashed_refresh_token=hashed_refresh_token)
        if not user:
            raise NotFound(USER_NOT_FOUND)
        return user

    def _issue_tokens(self, user_id: int):
        tokens = self.token_service.generate_token_pair(user_id)
        hashed = self.hash_service.hash_string(tokens.refresh_token)
        self.update_hashed_refresh_token(user_id, hashed)
        return tokens
