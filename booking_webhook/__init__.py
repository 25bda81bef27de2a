"""
Booking webhook backend

Receives partner booking callbacks, stores each booking as a JSON file and
serves paginated, date-filtered listings. Partner payloads arrive as Python
literal text and are normalized by the repair engine in ``repair``.
"""

__version__ = "1.0.0"
