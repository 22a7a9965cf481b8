"""Contact info model definitions."""

from sqlalchemy import Boolean, Column, Integer, String

from backend.database import Base
from backend.models.mixins import IdMixin, TimestampMixin

CONTACT_INFO_TYPES = ("address", "phone", "email", "hours")


class ContactInfo(IdMixin, TimestampMixin, Base):
    """One line of the contact page (address, phone, email or hours)."""
    __tablename__ = "contact_info"

    type = Column(String, nullable=False)
    title = Column(String, nullable=False)
    value = Column(String, nullable=False)
    icon = Column(String, nullable=False, default="")
    is_active = Column(Boolean, nullable=False, default=True)
    order = Column(Integer, nullable=False, default=0)
