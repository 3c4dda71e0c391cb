"""
Daily request quota for the STANDS4 APIs.

The free STANDS4 plan allows a fixed number of calls per day. Instead of a
module-level counter, the quota is an object handed to each source that
needs it, so the API app, the CLI and tests each own their own instance.

Responsibilities
----------------
- **Reserve**: ``try_acquire()`` claims one call slot before the request is
  sent; check and increment happen under one lock.
- **Refund**: ``release()`` gives the slot back when the call failed.
- **Report**: ``status()`` summarises usage for the ``/api/status`` endpoint.

The in-memory :class:`DailyQuota` resets itself the first time it is touched
on a new calendar day. It is volatile; a restart resets the count.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import date
from typing import Protocol

from pydantic import BaseModel


class QuotaStatus(BaseModel):
    """Snapshot of API configuration and usage."""

    configured: bool
    enabled: bool
    request_count: int
    daily_limit: int
    remaining_requests: int


class RequestQuota(Protocol):
    """Interface used by sources to respect the daily request budget."""

    def try_acquire(self) -> bool: ...

    def release(self) -> None: ...

    def status(self) -> QuotaStatus: ...


class DailyQuota:
    """Lock-protected, in-memory request counter with a per-day reset."""

    def __init__(
        self,
        limit: int,
        *,
        configured: bool = True,
        enabled: bool = True,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.limit = limit
        self.configured = configured
        self.enabled = enabled
        self._today = today
        self._day = today()
        self._count = 0
        self._lock = threading.Lock()

    def _roll_over(self) -> None:
        current = self._today()
        if current != self._day:
            self._day = current
            self._count = 0

    def try_acquire(self) -> bool:
        """Reserve one call for today; False once ``limit`` slots are taken."""
        with self._lock:
            self._roll_over()
            if self._count >= self.limit:
                return False
            self._count += 1
            return True

    def release(self) -> None:
        with self._lock:
            # A slot reserved yesterday was already wiped by the roll-over.
            if self._today() == self._day and self._count > 0:
                self._count -= 1

    def status(self) -> QuotaStatus:
        with self._lock:
            self._roll_over()
            return QuotaStatus(
                configured=self.configured,
                enabled=self.enabled,
                request_count=self._count,
                daily_limit=self.limit,
                remaining_requests=max(0, self.limit - self._count),
            )


__all__ = ["DailyQuota", "QuotaStatus", "RequestQuota"]
