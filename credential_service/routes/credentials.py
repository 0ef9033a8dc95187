"""
Register / login endpoints.

Handlers are plain ``def`` so FastAPI runs them in its thread pool and the
bcrypt work never blocks the event loop.
"""
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas import ErrorResponse, LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from ..service import CredentialService

router = APIRouter(prefix="/api/auth", tags=["auth"])


def get_credential_service(request: Request) -> CredentialService:
    return request.app.state.credential_service


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    service: CredentialService = Depends(get_credential_service),
):
    service.register(db, payload)
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    service: CredentialService = Depends(get_credential_service),
):
    token = service.login(db, payload)
    return TokenResponse(token=token)
