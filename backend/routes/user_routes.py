from datetime import datetime
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.orm import Session

from backend.auth.dependencies import require_admin
from backend.auth.passwords import hash_password
from backend.models.user import User
from backend.routes.crud import CrudResource, add_crud_routes

router = APIRouter(prefix="/users", tags=["users"])

Role = Literal["admin", "editor", "student", "instructor", "applicant"]
MIN_PASSWORD_LENGTH = 6


def normalize_email(value: str) -> str:
    normalized = value.strip().lower()
    if not normalized or "@" not in normalized:
        raise ValueError("A valid email address is required.")
    return normalized


def _normalize_role(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


class CreateUserRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    role: Role = "student"
    avatar: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("role", mode="before")
    @classmethod
    def validate_role(cls, value):
        return _normalize_role(value)


class UpdateUserRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    email: str | None = None
    password: str | None = Field(default=None, min_length=MIN_PASSWORD_LENGTH)
    role: Role | None = None
    avatar: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str | None) -> str | None:
        return normalize_email(value) if value is not None else None

    @field_validator("role", mode="before")
    @classmethod
    def validate_role(cls, value):
        return _normalize_role(value)


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    avatar: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


def user_to_response(user: User) -> UserResponse:
    response = UserResponse.model_validate(user)
    response.role = (user.role or "").lower()
    return response


def _hash_password_column(columns: dict) -> dict:
    password = columns.pop("password", None)
    if password:
        columns["password_hash"] = hash_password(password)
    return columns


class UserResource(CrudResource):
    def _ensure_email_free(self, db: Session, email: str | None, user_id: str | None = None) -> None:
        if not email:
            return
        existing = db.query(User).filter(User.email == email).first()
        if existing is not None and existing.id != user_id:
            raise HTTPException(status_code=400, detail="User already exists")

    def create(self, db, payload):
        self._ensure_email_free(db, payload.email)
        return super().create(db, payload)

    def update(self, db, record_id, payload):
        self._ensure_email_free(db, payload.email, record_id)
        return super().update(db, record_id, payload)


users = UserResource(
    User,
    "user",
    UserResponse,
    order_by=(User.created_at.desc(),),
    create_columns=lambda payload: _hash_password_column(payload.model_dump()),
    update_columns=lambda payload: _hash_password_column(payload.model_dump(exclude_unset=True)),
    serializer=user_to_response,
)

add_crud_routes(
    router,
    users,
    CreateUserRequest,
    UpdateUserRequest,
    read_dependencies=[Depends(require_admin)],
    write_dependencies=[Depends(require_admin)],
)
