"""SinceService: elapsed time since a date, as a ServiceResult.

Parses the raw ``YYYY-MM-DD`` inputs, computes the Duration and renders it
in the requested mode.  Domain errors become structured ServiceErrors;
anything else propagates.
"""

from __future__ import annotations

import logging

from elapsed.config.models import SinceConfig
from elapsed.domain.dates import CalendarDate
from elapsed.domain.duration import elapsed
from elapsed.domain.errors import ElapsedError
from elapsed.domain.formats import FormatMode
from elapsed.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class SinceService:
    """Compute and format elapsed time between two dates.

    Usage::

        result = SinceService().since("2020-01-30", "2020-03-01")
        result.data["text"]  # "1 month 1 day (30 days)"
    """

    def __init__(self, config: SinceConfig | None = None) -> None:
        self._config = config or SinceConfig()

    def since(
        self,
        date: str,
        now: str | None = None,
        *,
        mode: FormatMode | str | None = None,
    ) -> ServiceResult:
        """Elapsed time from *date* to *now* (today when omitted)."""
        op = "since"
        try:
            from_date = CalendarDate.parse(date)
            to_date = self._resolve_now(now)
            format_mode = self._resolve_mode(mode)
            duration = elapsed(from_date, to_date)
        except ElapsedError as exc:
            logger.debug("since failed: %s", exc, exc_info=True)
            return _error(op, exc)

        logger.debug(
            "Computed duration %s -> %s: %s",
            from_date,
            to_date,
            duration.model_dump(),
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "from": from_date.isoformat(),
                "to": to_date.isoformat(),
                "format": format_mode.value,
                "text": duration.format(format_mode),
                "duration": duration.model_dump(),
            },
        )

    def _resolve_now(self, now: str | None) -> CalendarDate:
        if now is None:
            today = CalendarDate.today(utc=self._config.utc_today)
            logger.debug("No reference date given, using today: %s", today)
            return today
        return CalendarDate.parse(now)

    def _resolve_mode(self, mode: FormatMode | str | None) -> FormatMode:
        if mode is None:
            return self._config.format
        if isinstance(mode, FormatMode):
            return mode
        return FormatMode.parse(mode)


def _error(op: str, exc: ElapsedError) -> ServiceResult:
    detail: dict[str, str] = {}
    text = getattr(exc, "text", None)
    if text is not None:
        detail["input"] = text
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail=detail),
    )
