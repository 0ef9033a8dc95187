"""
Registration and login workflow.
"""
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from datetime import timedelta
import logging
import time

from .auth import create_access_token, create_password_context, hash_password, verify_password
from .config import Settings
from .errors import (
    CredentialError,
    DuplicateEmailError,
    InvalidCredentialsError,
    LoginFailedError,
    RegistrationFailedError,
    UserNotFoundError,
)
from .models import User
from .schemas import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class CredentialService:
    """
    Stores new user credentials and exchanges valid ones for a signed token.

    Holds no per-user state: every call works against the session it is given.
    """

    def __init__(
        self,
        pwd_context: CryptContext,
        secret_key: str,
        algorithm: str,
        token_ttl: timedelta,
        report_duplicate_email: bool = False,
    ):
        self.pwd_context = pwd_context
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.token_ttl = token_ttl
        self.report_duplicate_email = report_duplicate_email

    @classmethod
    def from_settings(cls, settings: Settings) -> "CredentialService":
        return cls(
            pwd_context=create_password_context(settings.BCRYPT_ROUNDS),
            secret_key=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            token_ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            report_duplicate_email=settings.REPORT_DUPLICATE_EMAIL,
        )

    def register(self, db: Session, payload: RegisterRequest) -> User:
        """
        Hash the password and persist a new user.

        Raises:
            RegistrationFailedError: any persistence or hashing failure
            DuplicateEmailError: email already taken, only when
                report_duplicate_email is enabled
        """
        try:
            hashed_pw = hash_password(self.pwd_context, payload.password)
            user = User(name=payload.name, email=payload.email, password=hashed_pw)
            db.add(user)
            db.commit()
            db.refresh(user)
        except IntegrityError as e:
            db.rollback()
            logger.error(f"Error during registration for {payload.email}: {e.orig}")
            if self.report_duplicate_email:
                raise DuplicateEmailError() from e
            raise RegistrationFailedError() from e
        except Exception as e:
            db.rollback()
            logger.error(f"Error during registration for {payload.email}: {e}")
            raise RegistrationFailedError() from e

        logger.info(f"User registered successfully: user_id={user.id}, email={user.email}")
        return user

    def login(self, db: Session, payload: LoginRequest) -> str:
        """
        Verify credentials and return a signed access token.

        Raises:
            UserNotFoundError: no user has this email
            InvalidCredentialsError: password does not match the stored hash
            LoginFailedError: unexpected store or crypto failure
        """
        start = time.perf_counter()
        try:
            user = db.query(User).filter(User.email == payload.email).first()
            logger.debug(f"User lookup took {_elapsed_ms(start):.1f} ms")

            if user is None:
                logger.info("Login failed: user not found")
                raise UserNotFoundError()

            check_start = time.perf_counter()
            is_valid = verify_password(self.pwd_context, payload.password, user.password)
            logger.debug(f"Password verification took {_elapsed_ms(check_start):.1f} ms")

            if not is_valid:
                logger.info(f"Login failed: invalid credentials for user_id={user.id}")
                raise InvalidCredentialsError()

            token = create_access_token(
                str(user.id),
                self.secret_key,
                algorithm=self.algorithm,
                expires_delta=self.token_ttl,
            )
        except CredentialError:
            raise
        except Exception as e:
            logger.error(f"Error during login: {e}")
            raise LoginFailedError() from e

        logger.info(f"Login successful: user_id={user.id}, total {_elapsed_ms(start):.1f} ms")
        return token
