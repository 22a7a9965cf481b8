"""Course model definitions."""

from sqlalchemy import JSON, Boolean, Column, Float, ForeignKey, Integer, String, Text

from backend.database import Base
from backend.models.mixins import IdMixin, TimestampMixin

COURSE_LEVELS = ("beginner", "intermediate", "advanced")


class Course(IdMixin, TimestampMixin, Base):
    """Represents a training course."""
    __tablename__ = "courses"

    title = Column(String, nullable=False)
    short_description = Column(String, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    thumbnail = Column(String, nullable=True)
    price = Column(Float, nullable=False, default=0)
    discount_price = Column(Float, nullable=True)
    duration = Column(String, nullable=True)
    level = Column(String, nullable=False, default="beginner")
    category = Column(String, nullable=False, default="")
    instructor_id = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    curriculum = Column(JSON, nullable=False, default=list)
    rating = Column(Float, nullable=False, default=0)
    review_count = Column(Integer, nullable=False, default=0)
    enrollment_count = Column(Integer, nullable=False, default=0)
    is_published = Column(Boolean, nullable=False, default=False)
