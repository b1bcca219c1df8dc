"""Domain exceptions.

Both errors are terminal for a single invocation. The service layer maps
them onto :class:`~elapsed.services.result.ServiceError` codes.
"""

from __future__ import annotations

DATE_FORMAT_MESSAGE = "Date should follow the YYYY-MM-DD format"
ORDERING_MESSAGE = "'from' date should be less or equal to 'to' date"


class ElapsedError(Exception):
    """Base class for all elapsed domain errors."""

    code = "ELAPSED_ERROR"


class DateParseError(ElapsedError, ValueError):
    """Raised when a date string is malformed or names an impossible date."""

    code = "INVALID_DATE"

    def __init__(self, text: str | None = None) -> None:
        super().__init__(DATE_FORMAT_MESSAGE)
        self.text = text


class OrderingError(ElapsedError, ValueError):
    """Raised when the 'from' date falls strictly after the 'to' date."""

    code = "INVALID_ORDER"

    def __init__(self) -> None:
        super().__init__(ORDERING_MESSAGE)
