"""
Booking store keeping one JSON file per booking
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..utils.dates import to_iso, utc_now

logger = logging.getLogger(__name__)


class BookingStoreError(Exception):
    """Raised when the booking directory itself cannot be read"""
    pass


class BookingStore:
    """Read and write booking records stored as <bookingId>.json files"""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, booking_id: Any) -> Path:
        """Get the file path for a booking id"""
        name = str(booking_id).strip()
        if not name or name in (".", "..") or "/" in name or "\\" in name:
            raise ValueError(f"Invalid bookingId: {booking_id!r}")
        return self.directory / f"{name}.json"

    def list_files(self) -> List[Path]:
        """List booking files, most recently modified first"""
        try:
            files = [
                path for path in self.directory.iterdir()
                if path.is_file() and path.suffix == ".json"
            ]
            return sorted(files, key=lambda path: path.stat().st_mtime, reverse=True)
        except OSError as e:
            logger.error(f"Could not list the directory {self.directory}: {e}")
            raise BookingStoreError(f"Could not list the directory {self.directory}") from e

    def read(self, file_path: Path) -> Optional[Dict[str, Any]]:
        """Read and parse one booking file, returning None if it is unusable"""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading or parsing file {file_path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Skipping {file_path}: expected a JSON object, got {type(data).__name__}")
            return None
        return data

    def iter_records(self) -> Iterator[Tuple[Path, Dict[str, Any]]]:
        """Yield (path, record) pairs in listing order, skipping unreadable files"""
        for file_path in self.list_files():
            record = self.read(file_path)
            if record is not None:
                yield file_path, record

    def find(self, booking_id: Any) -> Optional[Dict[str, Any]]:
        """Find a booking by id; 123 and "123" are treated as the same id"""
        wanted = str(booking_id)
        for _, record in self.iter_records():
            if str(record.get("bookingId")) == wanted:
                return record
        return None

    def upsert(self, booking_id: Any, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create or update a booking file

        Incoming fields overwrite stored ones and ``updateDate`` is refreshed.

        Returns:
            The record as written to disk
        """
        file_path = self.path_for(booking_id)
        self.directory.mkdir(parents=True, exist_ok=True)

        existing: Dict[str, Any] = {}
        if file_path.exists():
            existing = self.read(file_path) or {}
        else:
            logger.info(f"File does not exist, creating new file: {file_path}")

        record = {
            **existing,
            **payload,
            "updateDate": to_iso(utc_now()),
        }

        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(record, f, indent=2, ensure_ascii=False)

        return record
