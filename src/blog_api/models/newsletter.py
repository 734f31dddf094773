"""Newsletter subscription list."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from ..core.db.database import Base
from ._timestamps import utcnow


class NewsletterSubscription(Base):
    __tablename__ = "newsletter_subscriptions"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(254), unique=True, index=True, nullable=False)
    subscribed = Column(Boolean, nullable=False, default=True)
    subscribed_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    unsubscribed_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
