"""Contact message model definitions."""

from sqlalchemy import Column, DateTime, String, Text

from backend.database import Base
from backend.models.mixins import IdMixin, TimestampMixin

MESSAGE_STATUSES = ("new", "read", "replied", "archived")
MESSAGE_PRIORITIES = ("low", "medium", "high")


class ContactMessage(IdMixin, TimestampMixin, Base):
    """A message submitted through the public contact form."""
    __tablename__ = "contact_messages"

    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    subject = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String, nullable=False, default="new")
    priority = Column(String, nullable=False, default="medium")
    reply = Column(Text, nullable=True)
    replied_at = Column(DateTime(timezone=True), nullable=True)
    replied_by = Column(String, nullable=True)
