# server/core/security.py

import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext

from core import config
from core.errors import HashingError, ComparisonError, InvalidTokenError


logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=config.BCRYPT_ROUNDS,
)


# -------------------------------
# Password Hashing
# -------------------------------

def get_password_hash(password: str) -> str:
    try:
        return pwd_context.hash(password)
    except Exception as e:
        raise HashingError() from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Checks a plaintext password against a stored hash.
    A mismatch returns False; an unreadable hash raises ComparisonError.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except Exception as e:
        raise ComparisonError() from e


# -------------------------------
# Access Tokens
# -------------------------------

def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    to_encode["iat"] = int(now.timestamp())
    if expires_delta is None and config.ACCESS_TOKEN_EXPIRE_MINUTES > 0:
        expires_delta = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    if expires_delta is not None:
        to_encode["exp"] = now + expires_delta
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def decode_token(token: str) -> dict:
    """
    Verifies the signature (and expiry, when present) of a token.
    Returns the decoded claims or raises InvalidTokenError.
    """
    try:
        return jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except JWTError as e:
        logger.warning(f"Token verification failed: {e}")
        raise InvalidTokenError(str(e)) from e
