"""
Booking record views built on top of the repair engine
"""

from .views import (
    EXCLUDED_FIELDS,
    booking_detail,
    load_activity_bookings,
    select_bookings,
    summarize_booking,
)

__all__ = [
    'EXCLUDED_FIELDS',
    'booking_detail',
    'load_activity_bookings',
    'select_bookings',
    'summarize_booking',
]
