"""
Booking listing and lookup endpoints
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import settings
from ..bookings import booking_detail, select_bookings
from ..storage import BookingStore, BookingStoreError
from ..utils.dates import resolve_date_range, to_iso, utc_now
from ..utils.pagination import paginate, parse_int
from .dependencies import get_booking_store
from .models import BookingListResponse

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(tags=["bookings"])


@router.get("/api/bookings", response_model=BookingListResponse)
def list_bookings(
    page: Optional[str] = Query(None, description="Page number, defaults to 1"),
    limit: Optional[str] = Query(None, description="Bookings per page"),
    date_filter: Optional[str] = Query(None, alias="filter", description="today, tomorrow or this_week"),
    start_date_time: Optional[str] = Query(None, alias="startDateTime", description="ISO lower bound on activity start"),
    end_date_time: Optional[str] = Query(None, alias="endDateTime", description="ISO upper bound on activity end"),
    store: BookingStore = Depends(get_booking_store)
) -> BookingListResponse:
    """
    Paginated list of bookings whose first activity falls in the date range

    Bookings are read newest file first, then sorted by activity start.
    """
    query_date = utc_now()

    try:
        date_range = resolve_date_range(date_filter, start_date_time, end_date_time, now=query_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid date range: {e}")

    try:
        records = [record for _, record in store.iter_records()]
    except BookingStoreError:
        raise HTTPException(status_code=500, detail="Internal server error")

    bookings = select_bookings(records, date_range)
    result = paginate(
        bookings,
        page=parse_int(page),
        limit=parse_int(limit),
        default_limit=settings.default_page_size
    )

    return BookingListResponse(queryDate=to_iso(query_date), **result)


@router.get("/api/booking/single")
def get_single_booking(
    booking_id: Optional[str] = Query(None, alias="bookingId", description="Booking ID to look up"),
    store: BookingStore = Depends(get_booking_store)
) -> dict:
    """Retrieve one booking by id, without partner-internal fields"""
    if not booking_id:
        raise HTTPException(status_code=400, detail="Booking ID required")

    try:
        record = store.find(booking_id)
    except BookingStoreError:
        raise HTTPException(status_code=500, detail="Internal server error")

    if record is None:
        raise HTTPException(status_code=404, detail="Booking not found")

    return booking_detail(record)
