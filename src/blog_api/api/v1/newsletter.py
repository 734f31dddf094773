"""API endpoints for newsletter subscriptions."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ...schemas.base import MessageResponse
from ...schemas.newsletter import NewsletterRequest
from ...services import NewsletterService
from ..dependencies import get_newsletter_service

router = APIRouter(prefix="/newsletter", tags=["Newsletter"])


@router.post("", response_model=MessageResponse, summary="Subscribe")
async def subscribe(
    data: NewsletterRequest,
    service: NewsletterService = Depends(get_newsletter_service),
):
    """201 for a new address, 200 when a past subscriber comes back."""
    _, created = await service.subscribe(data.email)
    if created:
        message = MessageResponse(message="Successfully subscribed to newsletter")
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=message.model_dump(by_alias=True))
    return MessageResponse(message="Successfully resubscribed to newsletter")


@router.delete("", response_model=MessageResponse, summary="Unsubscribe")
async def unsubscribe(
    data: NewsletterRequest,
    service: NewsletterService = Depends(get_newsletter_service),
) -> MessageResponse:
    await service.unsubscribe(data.email)
    return MessageResponse(message="Successfully unsubscribed from newsletter")
