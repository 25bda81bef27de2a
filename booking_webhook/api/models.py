"""
Pydantic models for API responses
"""
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field


class BookingSummary(BaseModel):
    """Listing entry for one booking"""
    bookingId: Optional[Union[int, str]] = Field(None, description="Partner booking ID")
    creationDateISO: str = Field(..., description="When the booking was created")
    startDateTimeISO: str = Field(..., description="Start of the first activity")
    endDateTimeISO: str = Field(..., description="End of the first activity")
    status: Optional[Any] = Field(None, description="Booking status as sent by the partner")


class BookingListResponse(BaseModel):
    """Response model for the paginated booking listing"""
    queryDate: str = Field(..., description="Server time the listing was built")
    total: int = Field(..., description="Bookings matching the date filter")
    nextPage: Optional[int] = None
    prevPage: Optional[int] = None
    page: int
    totalPages: int
    data: List[BookingSummary] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    version: str
    service: str
    data_dir_exists: bool
    timestamp: int
