"""
RefreshToken model: stores opaque refresh tokens so they can be checked and revoked
Fields:
- token (primary key, 64 hex chars)
- user_id (String(36)) - FK to users.id, cascade on delete
- created_at, updated_at, expires_at
- revoked_at (null until revoked)
"""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship

from models.base_model import Base, TimestampMixin, UTCDateTime, as_utc, utcnow


class RefreshToken(TimestampMixin, Base):
    __tablename__ = "refresh_tokens"

    token = Column(String(64), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    expires_at = Column(UTCDateTime(timezone=True), nullable=False)
    revoked_at = Column(UTCDateTime(timezone=True), nullable=True)

    user = relationship("User", back_populates="refresh_tokens")

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or utcnow()) >= as_utc(self.expires_at)

    def is_revoked(self) -> bool:
        return self.revoked_at is not None

    def is_active(self, now: datetime | None = None) -> bool:
        """Usable only while unexpired and unrevoked."""
        return not self.is_expired(now) and not self.is_revoked()

    def __repr__(self):
        return f"<RefreshToken user={self.user_id} expires_at={self.expires_at}>"
