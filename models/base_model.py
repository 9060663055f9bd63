#!/usr/bin/env python3
"""
Shared SQLAlchemy base and mixins for Chirpy.

- TimestampMixin: created_at / updated_at, set from Python (UTC, microsecond
  precision so rows created in the same second still order correctly) with
  server-side defaults as a fallback
- BaseModel: adds a UUID String(36) primary key plus save()/delete() wired
  to DBStorage

All timestamps go through UTCDateTime, so they load as aware UTC values on
SQLite as well as Postgres.

Tables with a natural primary key (refresh_tokens) use TimestampMixin only.
"""

from __future__ import annotations

from datetime import datetime, timezone
import uuid

# Importing 'models' gives access to the global 'storage' instance (DBStorage)
# defined in models/__init__.py
import models

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func
from sqlalchemy.types import TypeDecorator

# Declarative base for all models
Base = declarative_base()


def _uuid_str() -> str:
    """Return a canonical UUIDv4 string (36 chars, with hyphens)."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands DateTime(timezone=True) columns back naive; treat those as UTC."""
    if value is None:
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UTCDateTime(TypeDecorator):
    """DateTime column that always loads as an aware UTC datetime."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return as_utc(value)

    def process_result_value(self, value, dialect):
        return as_utc(value)


class TimestampMixin:
    created_at = Column(UTCDateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(
        UTCDateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=False,
    )


class BaseModel(TimestampMixin):
    """
    Base mixin for persistent entities addressed by a UUID id.

    - id, created_at, updated_at
    - save(), delete() wired to DBStorage
    """

    id = Column(String(36), primary_key=True, default=_uuid_str, nullable=False)

    def __init__(self, *args, **kwargs):
        """
        Allow attribute initialization via kwargs without requiring a session here.
        Timestamps are filled on insert unless passed explicitly (e.g., in tests).
        """
        for key, value in kwargs.items():
            if key != "__class__":
                setattr(self, key, value)
        # Ensure an id exists if user passed none
        if getattr(self, "id", None) is None:
            self.id = _uuid_str()

    def __str__(self) -> str:
        """Human-friendly representation including id and fields."""
        return f"[{self.__class__.__name__}] ({self.id}) {self.__dict__}"

    def save(self):
        """Stamp updated_at and persist the instance using DBStorage."""
        self.updated_at = utcnow()
        models.storage.new(self)
        models.storage.save()

    def delete(self):
        """Hard delete the current instance and commit."""
        models.storage.delete(self)
        models.storage.save()
