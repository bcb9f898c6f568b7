"""
Error types raised by the auth workflow.

They subclass FastAPI's HTTPException so the framework renders them as
``{"detail": message}`` with the matching status code.
"""
from fastapi import HTTPException, status


class AuthServiceError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code, detail=detail)


class Unauthorized(AuthServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class BadRequest(AuthServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(AuthServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class DuplicateEmailError(Exception):
    """Raised by a credential store when a new user's email is already taken."""
