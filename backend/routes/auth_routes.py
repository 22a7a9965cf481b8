import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.orm import Session

from backend.auth import jwt_handler
from backend.auth.dependencies import get_current_user
from backend.auth.passwords import hash_password, verify_password
from backend.core.responses import ApiResponse, ok
from backend.database import get_db
from backend.models.user import SELF_REGISTER_ROLES, User
from backend.routes.user_routes import (
    MIN_PASSWORD_LENGTH,
    UserResponse,
    normalize_email,
    user_to_response,
    users,
)

router = APIRouter(tags=["auth"])

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return value.strip().lower()


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    role: str = "student"

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("role")
    @classmethod
    def validate_role(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in SELF_REGISTER_ROLES:
            raise ValueError(f"Role must be one of: {', '.join(SELF_REGISTER_ROLES)}.")
        return normalized


class AuthPayload(BaseModel):
    user: UserResponse
    token: str


def issue_token(user: User) -> str:
    return jwt_handler.create_access_token(
        user_id=user.id,
        email=user.email,
        role=(user.role or "").lower(),
    )


def authenticate(db: Session, email: str, password: str) -> User | None:
    user = db.query(User).filter(User.email == email).first()
    if not verify_password(password, user.password_hash if user else None):
        return None
    return user


@router.post("/login", response_model=ApiResponse[AuthPayload])
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate(db, payload.email, payload.password)
    if user is None:
        logger.info("Rejected login for %s", payload.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    return ok({"user": user_to_response(user), "token": issue_token(user)}, "Login successful")


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[AuthPayload],
)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    if db.query(User).filter(User.email == payload.email).first() is not None:
        raise HTTPException(status_code=400, detail="User already exists")

    user = users.create_from_columns(
        db,
        {
            "name": payload.name.strip(),
            "email": payload.email,
            "password_hash": hash_password(payload.password),
            "role": payload.role,
        },
    )
    logger.info("Registered user %s", user.email)
    return ok(
        {"user": user_to_response(user), "token": issue_token(user)},
        "User registered successfully",
    )


@router.get("/me", response_model=ApiResponse[UserResponse])
def me(current_user: User = Depends(get_current_user)):
    return ok(user_to_response(current_user))
