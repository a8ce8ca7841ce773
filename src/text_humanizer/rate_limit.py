"""Rate limiter de ventana fija por cliente (IP u otro identificador)."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .config import get_rate_limit_max, get_rate_limit_window
from .timestamps import iso_from_epoch

log = logging.getLogger(__name__)

MIN_INTERVAL = 2.0
SWEEP_EVERY = 1000

REASON_TOO_FREQUENT = "too_frequent"
REASON_LIMIT_EXCEEDED = "limit_exceeded"


@dataclass
class _Window:
    count: int
    reset_time: float
    last_request: float | None = None


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    limit: int
    remaining: int
    reset_at: float
    retry_after: float = 0.0
    reason: Optional[str] = None

    @property
    def reset_iso(self) -> str:
        return iso_from_epoch(self.reset_at)

    def headers(self) -> Dict[str, str]:
        return {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": self.reset_iso,
        }


class RateLimiter:
    """
    Contador por clave con ventana fija.

    Se crea una vez por proceso (o por test) y se inyecta donde haga falta.
    Las entradas solo se eliminan en el barrido periódico de ventanas
    expiradas.
    """

    def __init__(
        self,
        limit: int | None = None,
        window: float | None = None,
        min_interval: float = MIN_INTERVAL,
        sweep_every: int = SWEEP_EVERY,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.limit = limit if limit is not None else get_rate_limit_max()
        self.window = window if window is not None else get_rate_limit_window()
        self.min_interval = min_interval
        self._sweep_every = max(1, sweep_every)
        self._clock = clock
        self._store: Dict[str, _Window] = {}
        self._checks = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._store)

    def check(self, key: str, now: float | None = None) -> RateLimitResult:
        if now is None:
            now = self._clock()
        key = key or "anonymous"

        with self._lock:
            entry = self._store.get(key)
            if entry is None or entry.reset_time < now:
                entry = _Window(
                    count=0,
                    reset_time=now + self.window,
                    last_request=entry.last_request if entry else None,
                )
                self._store[key] = entry

            self._checks += 1
            if self._checks % self._sweep_every == 0:
                self._sweep_locked(now)

            if (
                entry.last_request is not None
                and now - entry.last_request < self.min_interval
            ):
                wait = self.min_interval - (now - entry.last_request)
                return RateLimitResult(
                    allowed=False,
                    limit=self.limit,
                    remaining=max(0, self.limit - entry.count),
                    reset_at=entry.reset_time,
                    retry_after=wait,
                    reason=REASON_TOO_FREQUENT,
                )

            entry.count += 1
            entry.last_request = now
            remaining = max(0, self.limit - entry.count)

            if entry.count > self.limit:
                log.warning("Rate limit exceeded for %s (%s requests)", key, entry.count)
                return RateLimitResult(
                    allowed=False,
                    limit=self.limit,
                    remaining=remaining,
                    reset_at=entry.reset_time,
                    retry_after=max(0.0, entry.reset_time - now),
                    reason=REASON_LIMIT_EXCEEDED,
                )

            return RateLimitResult(
                allowed=True,
                limit=self.limit,
                remaining=remaining,
                reset_at=entry.reset_time,
            )

    def sweep(self, now: float | None = None) -> int:
        """Elimina las ventanas expiradas. Devuelve cuántas se borraron."""

        if now is None:
            now = self._clock()
        with self._lock:
            return self._sweep_locked(now)

    def _sweep_locked(self, now: float) -> int:
        expired = [key for key, entry in self._store.items() if entry.reset_time < now]
        for key in expired:
            del self._store[key]
        return len(expired)
