# server/api/auth.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from database import get_db
from api.schemas import Message
from core.errors import (
    AuthError,
    HashingFault,
    InvalidTokenError,
    StoreFault,
    ValidationError,
)
from core.security import create_access_token, decode_token, get_password_hash, verify_password
from models.user import User as UserModel


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])

DUPLICATE_EMAIL = "User with this email already exists"
INVALID_CREDENTIALS = "Invalid credentials"


class SignupRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class Token(BaseModel):
    token: str


# -------------------------------
# Token Guard
# -------------------------------

def require_token(request: Request) -> dict:
    """
    Reads the raw Authorization header and verifies it as a token.
    No "Bearer " prefix is stripped. The decoded claims are stored on
    request.state.user and returned.
    """
    token = request.headers.get("Authorization")
    if not token:
        raise AuthError("Unauthorized", status.HTTP_401_UNAUTHORIZED)

    try:
        claims = decode_token(token)
    except InvalidTokenError as e:
        raise AuthError("Forbidden", status.HTTP_403_FORBIDDEN) from e

    request.state.user = claims
    return claims


def find_user_by_email(db: Session, email: str) -> UserModel | None:
    try:
        return db.query(UserModel).filter(UserModel.email == email).first()
    except SQLAlchemyError as e:
        logger.error(f"Error looking up user {email}: {e}", exc_info=True)
        raise StoreFault() from e


# -------------------------------
# Endpoints
# -------------------------------

@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=Message)
def signup(req: SignupRequest, db: Session = Depends(get_db)):
    if not req.name or not req.email or not req.password:
        raise ValidationError()

    if find_user_by_email(db, req.email):
        logger.warning(f"Signup rejected: {req.email} is already registered.")
        raise ValidationError(DUPLICATE_EMAIL)

    try:
        hashed = get_password_hash(req.password)
    except HashingFault:
        logger.error("Error hashing password", exc_info=True)
        raise

    new_user = UserModel(name=req.name, email=req.email, password=hashed)
    try:
        db.add(new_user)
        db.commit()
    except IntegrityError as e:
        # the unique index caught a concurrent signup with the same email
        db.rollback()
        logger.warning(f"Signup rejected by unique constraint for {req.email}: {e}")
        raise ValidationError(DUPLICATE_EMAIL) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error inserting user {req.email}: {e}", exc_info=True)
        raise StoreFault() from e

    logger.info(f"User registered: {req.email}")
    return {"message": "User registered successfully"}


@router.post("/login", response_model=Token)
def login(req: LoginRequest, db: Session = Depends(get_db)):
    if not req.email or not req.password:
        raise ValidationError()

    user = find_user_by_email(db, req.email)
    if not user:
        logger.warning(f"Login failed for {req.email}")
        raise AuthError(INVALID_CREDENTIALS)

    try:
        valid = verify_password(req.password, user.password)
    except HashingFault:
        logger.error(f"Error comparing passwords for {req.email}", exc_info=True)
        raise

    if not valid:
        logger.warning(f"Login failed for {req.email}")
        raise AuthError(INVALID_CREDENTIALS)

    logger.info(f"Login succeeded for user id {user.id}")
    return {"token": create_access_token({"userId": user.id})}
