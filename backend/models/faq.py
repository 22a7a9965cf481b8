"""FAQ model definitions."""

from sqlalchemy import JSON, Boolean, Column, Integer, String, Text

from backend.database import Base
from backend.models.mixins import IdMixin, TimestampMixin


class FAQ(IdMixin, TimestampMixin, Base):
    __tablename__ = "faqs"

    question = Column(String, nullable=False)
    answer = Column(Text, nullable=False)
    category = Column(String, nullable=False, default="")
    order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    tags = Column(JSON, nullable=False, default=list)
