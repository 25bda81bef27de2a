"""
File-per-record persistence for booking payloads
"""

from .booking_store import BookingStore, BookingStoreError

__all__ = ['BookingStore', 'BookingStoreError']
