"""Global office model definitions."""

from sqlalchemy import Boolean, Column, Float, String

from backend.database import Base
from backend.models.mixins import IdMixin, TimestampMixin


class GlobalOffice(IdMixin, TimestampMixin, Base):
    __tablename__ = "global_offices"

    name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    city = Column(String, nullable=False)
    country = Column(String, nullable=False)
    phone = Column(String, nullable=False, default="")
    email = Column(String, nullable=False, default="")
    timezone = Column(String, nullable=False, default="")
    is_headquarters = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    working_hours = Column(String, nullable=False, default="")
