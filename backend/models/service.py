"""Service model definitions."""

from sqlalchemy import JSON, Column, Float, Integer, String, Text

from backend.database import Base
from backend.models.mixins import IdMixin, TimestampMixin

SERVICE_STATUSES = ("active", "inactive", "draft")
DEFAULT_SERVICE_ICON = "🛠️"


class Service(IdMixin, TimestampMixin, Base):
    """A consulting or delivery offering listed on the services page."""
    __tablename__ = "services"

    title = Column(String, nullable=False)
    short_description = Column(String, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    icon = Column(String, nullable=False, default=DEFAULT_SERVICE_ICON)
    features = Column(JSON, nullable=False, default=list)
    category = Column(String, nullable=False, default="")
    status = Column(String, nullable=False, default="active")
    basic_price = Column(Float, nullable=False, default=0)
    premium_price = Column(Float, nullable=False, default=0)
    enterprise_price = Column(Float, nullable=False, default=0)
    popularity = Column(Integer, nullable=False, default=0)
    clients = Column(Integer, nullable=False, default=0)
    rating = Column(Float, nullable=False, default=0)
