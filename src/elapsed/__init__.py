"""elapsed: human-readable time elapsed between two calendar dates."""

from __future__ import annotations

from elapsed.domain.duration import Duration, elapsed
from elapsed.domain.formats import FormatMode

__version__ = "0.4.0"

__all__ = ["Duration", "FormatMode", "__version__", "elapsed"]
