"""Abstract interfaces (Protocol classes) for the compliance readiness engine.

The report generator depends on these rather than on concrete sources so
that tests can inject deterministic implementations.
"""

from datetime import datetime, timezone
from typing import Protocol, runtime_checkable


@runtime_checkable
class IClock(Protocol):
    """Time source used to stamp generated reports."""

    def __call__(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...


def utc_now() -> datetime:
    """Default clock: the current wall-clock time in UTC."""
    return datetime.now(tz=timezone.utc)
