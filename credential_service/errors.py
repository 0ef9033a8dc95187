"""
Errors raised by the credential workflow.

Each error carries the HTTP status and the message returned to the caller;
the application converts them to ``{"error": message}`` responses.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from typing import Optional


class CredentialError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class RegistrationFailedError(CredentialError):
    message = "Registration failed"


class DuplicateEmailError(CredentialError):
    status_code = status.HTTP_409_CONFLICT
    message = "Email already registered"


class UserNotFoundError(CredentialError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found"


class InvalidCredentialsError(CredentialError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid credentials"


class LoginFailedError(CredentialError):
    message = "Login failed"


async def credential_error_handler(request: Request, exc: CredentialError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
