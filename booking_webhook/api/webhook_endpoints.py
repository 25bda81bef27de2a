"""
Webhook receivers for partner booking callbacks
"""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse

from ..config import settings
from ..storage import BookingStore
from .dependencies import get_booking_store, get_log_store
from .limiter import limiter

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/webhook", tags=["webhooks"])


def store_booking(payload: Dict[str, Any], store: BookingStore) -> str:
    """Create or update the booking file for a webhook payload"""
    booking_id = payload.get("bookingId")
    if booking_id is None or booking_id == "":
        raise HTTPException(status_code=400, detail="Missing bookingId in request body")

    try:
        store.upsert(booking_id, payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OSError as e:
        logger.error(f"Error processing request: {e}")
        raise HTTPException(status_code=500, detail="Error processing request")

    logger.info(f"Stored booking {booking_id} in {store.directory}")
    return f"File created/updated with bookingId: {booking_id}.json"


@router.get("/zapier", response_class=PlainTextResponse)
def zapier_status() -> str:
    return "GET request to the /zapier endpoint"


@router.post("/zapier", response_class=PlainTextResponse)
@limiter.limit(f"{settings.rate_limit_per_minute}/minute")
def zapier_webhook(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    store: BookingStore = Depends(get_booking_store)
) -> str:
    """Create or update a booking file from a Zapier callback"""
    return store_booking(payload, store)


@router.get("/bokun", response_class=PlainTextResponse)
def bokun_status() -> str:
    return "GET request to the /bokun endpoint"


@router.post("/bokun", response_class=PlainTextResponse)
@limiter.limit(f"{settings.rate_limit_per_minute}/minute")
def bokun_webhook(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    store: BookingStore = Depends(get_log_store)
) -> str:
    """Create or update a raw booking log file from a Bokun callback"""
    return store_booking(payload, store)
