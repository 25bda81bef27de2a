"""
Listing and detail views of stored booking records

Partners send ``activityBookings`` as Python literal text, so every view
runs it through the repair engine before reading from it.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..repair import clean_data
from ..utils.dates import epoch_millis_to_iso, in_range, parse_iso

logger = logging.getLogger(__name__)

# Partner-internal fields never exposed by the single booking view
EXCLUDED_FIELDS = ("accommodationBookings", "affiliate", "bookingChannel")


def load_activity_bookings(record: Dict[str, Any]) -> Any:
    """Return the record's activity bookings as structured data, or None"""
    raw = record.get("activityBookings")
    if not raw:
        return None
    if isinstance(raw, (list, dict)):
        return raw
    if not isinstance(raw, str):
        logger.warning(f"Unexpected activityBookings type for booking {record.get('bookingId')}: {type(raw).__name__}")
        return None
    return clean_data(raw, log=logger)


def summarize_booking(record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Build the listing entry for a booking, or None if its dates are unusable"""
    activities = load_activity_bookings(record)
    first = activities[0] if isinstance(activities, list) and activities else activities

    try:
        start_iso = epoch_millis_to_iso(first["startDateTime"])
        end_iso = epoch_millis_to_iso(first["endDateTime"])
        creation_iso = epoch_millis_to_iso(record["creationDate"])
    except (KeyError, TypeError, ValueError, OverflowError, OSError) as e:
        logger.error(f"Skipping booking {record.get('bookingId')}: {type(e).__name__}: {e}")
        return None

    return {
        "bookingId": record.get("bookingId"),
        "creationDateISO": creation_iso,
        "startDateTimeISO": start_iso,
        "endDateTimeISO": end_iso,
        "status": record.get("status"),
    }


def select_bookings(
    records: Iterable[Dict[str, Any]],
    date_range: Tuple[datetime, datetime]
) -> List[Dict[str, Any]]:
    """Summarize records, keep those inside the date range, sort by start time"""
    selected = []
    for record in records:
        summary = summarize_booking(record)
        if summary is None:
            continue
        start = parse_iso(summary["startDateTimeISO"])
        end = parse_iso(summary["endDateTimeISO"])
        if in_range(start, end, date_range):
            selected.append(summary)

    selected.sort(key=lambda summary: summary["startDateTimeISO"])
    return selected


def booking_detail(record: Dict[str, Any]) -> Dict[str, Any]:
    """Full booking minus partner-internal fields, with bookingId first"""
    filtered = {key: value for key, value in record.items() if key not in EXCLUDED_FIELDS}

    if filtered.get("activityBookings"):
        filtered["activityBookings"] = load_activity_bookings(filtered)

    return {
        "bookingId": filtered.get("bookingId"),
        **filtered,
    }
