"""
FastAPI dependencies providing the booking stores
"""
from ..config import settings
from ..storage import BookingStore


def get_booking_store() -> BookingStore:
    """Store for bookings received through the Zapier webhook"""
    return BookingStore(settings.bookings_data_dir)


def get_log_store() -> BookingStore:
    """Store for raw payloads received through the Bokun webhook"""
    return BookingStore(settings.bookings_logs_dir)
