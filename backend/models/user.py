"""User model definitions."""

from sqlalchemy import Column, String

from backend.database import Base
from backend.models.mixins import IdMixin, TimestampMixin

ROLES = ("admin", "editor", "student", "instructor", "applicant")
SELF_REGISTER_ROLES = ("student", "instructor", "applicant")
STAFF_ROLES = ("admin", "editor")


class User(IdMixin, TimestampMixin, Base):
    """Represents an application user."""
    __tablename__ = "users"

    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default="student")  # see ROLES
    avatar = Column(String, nullable=True)
