from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import jwt

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60
BCRYPT_ROUNDS = 10


def create_password_context(rounds: int = BCRYPT_ROUNDS) -> CryptContext:
    """
    Build a bcrypt context with a fixed work factor; every hash gets its own salt.

    bcrypt only reads the first 72 bytes of a password.
    """
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(pwd_context: CryptContext, password: str) -> str:
    return pwd_context.hash(password)


def verify_password(pwd_context: CryptContext, plain_password: str, hashed_password: str) -> bool:
    """Passwords bcrypt cannot accept (NUL bytes) can never match a stored hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except PasswordValueError:
        return False


def create_access_token(
    user_id: str,
    secret_key: str,
    algorithm: str = ALGORITHM,
    expires_delta: Optional[timedelta] = None,
    issued_at: Optional[datetime] = None,
) -> str:
    """
    Sign a token carrying the user identifier.

    Args:
        user_id: Identifier assigned by the store, as a string
        secret_key: Server-held signing secret
        algorithm: JWT signing algorithm
        expires_delta: Token lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES
        issued_at: Issue time, defaults to now (UTC)

    Returns:
        Encoded JWT string
    """
    issued = issued_at or datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = issued + expires_delta
    payload = {"sub": user_id, "userId": user_id, "iat": issued, "exp": expire}
    return jwt.encode(payload, secret_key, algorithm=algorithm)


def decode_access_token(token: str, secret_key: str, algorithm: str = ALGORITHM) -> Dict[str, Any]:
    """
    Verify signature and expiry (no leeway) and return the claims.

    Raises:
        jwt.ExpiredSignatureError: token is past its expiry
        jwt.InvalidTokenError: any other verification failure
    """
    return jwt.decode(
        token,
        secret_key,
        algorithms=[algorithm],
        options={"require": ["exp", "sub"]},
    )
