"""Job posting model definitions."""

from sqlalchemy import JSON, Boolean, Column, Date, Integer, String, Text

from backend.database import Base
from backend.models.mixins import IdMixin, TimestampMixin

JOB_TYPES = ("full-time", "part-time", "contract", "remote")


class Job(IdMixin, TimestampMixin, Base):
    """Represents an open position on the careers page."""
    __tablename__ = "jobs"

    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    requirements = Column(JSON, nullable=False, default=list)
    responsibilities = Column(JSON, nullable=False, default=list)
    location = Column(String, nullable=False, default="")
    type = Column(String, nullable=False, default="full-time")
    salary_min = Column(Integer, nullable=True)
    salary_max = Column(Integer, nullable=True)
    salary_currency = Column(String(10), nullable=False, default="USD")
    category = Column(String, nullable=False, default="")
    department = Column(String, nullable=False, default="")
    experience = Column(String, nullable=False, default="")
    deadline = Column(Date, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
