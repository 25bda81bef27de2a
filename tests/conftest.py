"""
Pytest configuration and fixtures for booking webhook tests
"""
import pytest
import json
import os
from pathlib import Path
from typing import Dict, Any

from booking_webhook.storage import BookingStore

# Epoch milliseconds
JAN_01_10AM = 1767261600000   # 2026-01-01T10:00:00Z
JAN_01_NOON = 1767268800000   # 2026-01-01T12:00:00Z
JAN_03_9AM = 1767430800000    # 2026-01-03T09:00:00Z
JAN_03_NOON = 1767441600000   # 2026-01-03T12:00:00Z
DEC_30_2PM = 1767103200000    # 2025-12-30T14:00:00Z
DEC_30_3PM = 1767106800000    # 2025-12-30T15:00:00Z
CREATED = "1767000000000"     # 2025-12-29T09:20:00Z


def activity_bookings_literal(start: int, end: int) -> str:
    """Activity bookings the way the partner forwards them: a Python list literal"""
    return (
        f"[{{'id': 55123, 'productTitle': 'Kayak Sunset Tour', "
        f"'startDateTime': {start}, 'endDateTime': {end}, "
        f"'status': 'CONFIRMED', 'notes': '<p class=\"note\">Guest's first time</p>', "
        f"'pickup': True, 'extras': None}}]"
    )


def make_booking(booking_id: Any, start: int, end: int, status: str = "CONFIRMED") -> Dict[str, Any]:
    """Build a stored booking record"""
    return {
        "bookingId": booking_id,
        "creationDate": CREATED,
        "status": status,
        "activityBookings": activity_bookings_literal(start, end),
        "accommodationBookings": "[]",
        "affiliate": "Harbour Partners",
        "bookingChannel": "Website",
        "customer": {"firstName": "Ann", "lastName": "O'Neil"},
    }


SAMPLE_BOOKINGS = [
    make_booking(1001, JAN_01_10AM, JAN_01_NOON),
    make_booking(1002, JAN_03_9AM, JAN_03_NOON, status="PENDING"),
    make_booking(1003, DEC_30_2PM, DEC_30_3PM),
]

# Activity bookings the repair engine cannot disambiguate
BROKEN_BOOKING = {
    "bookingId": 1004,
    "creationDate": CREATED,
    "status": "CONFIRMED",
    "activityBookings": "[{'notes': ''tis the season', 'startDateTime': 1767261600000}]",
}

BASE_MTIME = 1_700_000_000


def write_booking(directory: Path, record: Dict[str, Any], mtime: int) -> Path:
    """Write a booking file and pin its modification time"""
    file_path = directory / f"{record['bookingId']}.json"
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(record, f, indent=2)
    os.utime(file_path, (mtime, mtime))
    return file_path


@pytest.fixture
def sample_booking():
    """Provide one stored booking record"""
    return make_booking(1001, JAN_01_10AM, JAN_01_NOON)


@pytest.fixture
def booking_dir(tmp_path):
    """Create a booking directory; newest file is 1004, oldest 1001"""
    directory = tmp_path / "booking_data"
    directory.mkdir()

    for offset, record in enumerate(SAMPLE_BOOKINGS + [BROKEN_BOOKING]):
        write_booking(directory, record, BASE_MTIME + offset * 100)

    broken_file = directory / "broken.json"
    broken_file.write_text("{not json", encoding='utf-8')
    os.utime(broken_file, (BASE_MTIME + 50, BASE_MTIME + 50))

    (directory / "README.txt").write_text("not a booking", encoding='utf-8')
    return directory


@pytest.fixture
def store(booking_dir):
    """Booking store over the sample directory"""
    return BookingStore(booking_dir)


@pytest.fixture
def logs_dir(tmp_path):
    """Directory for Bokun webhook payloads (created on first write)"""
    return tmp_path / "booking_logs"
