"""
Exception classes raised by the repair engine
"""
from typing import Any, Dict, Optional

# Characters of rewritten text shown on each side of a parse failure
PREVIEW_RADIUS = 40


class RepairError(Exception):
    """Base exception for payloads the repair engine cannot normalize"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }


class UnparseableError(RepairError):
    """Raised when the rewritten text still fails strict JSON parsing.

    Attributes:
        reason: Diagnostic from the JSON decoder
        position: Character offset of the failure in the rewritten text
        lineno: 1-based line of the failure, when known
        colno: 1-based column of the failure, when known
    """

    def __init__(
        self,
        reason: str,
        position: int = 0,
        lineno: Optional[int] = None,
        colno: Optional[int] = None,
        text: Optional[str] = None,
    ):
        self.reason = reason
        self.position = position
        self.lineno = lineno
        self.colno = colno

        details: Dict[str, Any] = {
            "reason": reason,
            "position": position,
            "lineno": lineno,
            "colno": colno,
        }
        if text is not None:
            start = max(0, position - PREVIEW_RADIUS)
            details["preview"] = text[start:position + PREVIEW_RADIUS]

        super().__init__(f"Unparseable payload at position {position}: {reason}", details)
