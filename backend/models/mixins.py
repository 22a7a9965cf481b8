"""Column mixins shared by every persisted entity."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String


def generate_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IdMixin:
    id = Column(String(36), primary_key=True, default=generate_id)


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
