"""Newsletter subscribe/unsubscribe bookkeeping."""

import logging
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import BadRequestException, DuplicateValueException, NotFoundException
from ..models import NewsletterSubscription
from .identity import normalize_email

LOGGER = logging.getLogger(__name__)


class NewsletterService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find(self, email: str) -> NewsletterSubscription | None:
        result = await self.db.execute(
            select(NewsletterSubscription).where(NewsletterSubscription.email == email)
        )
        return result.scalar_one_or_none()

    async def subscribe(self, email: str | None) -> tuple[NewsletterSubscription, bool]:
        """Subscribe ``email``; returns the row and whether it was newly created."""
        if not email or not email.strip():
            raise BadRequestException("Please provide an email")
        email = normalize_email(email)

        existing = await self._find(email)
        if existing is not None:
            if existing.subscribed:
                raise DuplicateValueException("Email already subscribed")
            existing.subscribed = True
            existing.subscribed_at = datetime.now(UTC)
            existing.unsubscribed_at = None
            await self.db.commit()
            LOGGER.info(f"Subscription {existing.id} resubscribed")
            return existing, False

        subscription = NewsletterSubscription(email=email, subscribed=True)
        self.db.add(subscription)
        await self.db.commit()
        await self.db.refresh(subscription)
        LOGGER.info(f"Subscription {subscription.id} created")
        return subscription, True

    async def unsubscribe(self, email: str | None) -> NewsletterSubscription:
        if not email or not email.strip():
            raise BadRequestException("Please provide an email")

        subscription = await self._find(normalize_email(email))
        if subscription is None:
            raise NotFoundException("Email not found")

        subscription.subscribed = False
        subscription.unsubscribed_at = datetime.now(UTC)
        await self.db.commit()
        LOGGER.info(f"Subscription {subscription.id} unsubscribed")
        return subscription
