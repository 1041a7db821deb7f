"""Keyed in-process storage with per-entry expiry."""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")

Clock = Callable[[], float]


@dataclass
class _Entry(Generic[V]):
    value: V
    expires_at: float


class KeyedTTLStore(Generic[V]):
    """Map from string keys to values that expire after a fixed lifetime.

    Expired entries are dropped lazily on access. ``set()`` also purges the
    whole store at most once per TTL interval, so it never holds more than
    the keys written during the last two intervals. The store is local to
    one process; it is not shared between workers.
    """

    def __init__(self, ttl_seconds: float, clock: Clock = time.monotonic) -> None:
        """Initialize store.

        Args:
            ttl_seconds: Lifetime of an entry from its last write
            clock: Monotonic time source, in seconds
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _Entry[V]] = {}
        self._next_sweep_at = 0.0

    def get(self, key: str) -> V | None:
        entry = self._live_entry(key)
        return entry.value if entry else None

    def set(self, key: str, value: V) -> None:
        """Store a value, restarting its lifetime."""
        now = self._clock()
        if now >= self._next_sweep_at:
            self.purge()
            self._next_sweep_at = now + self.ttl_seconds
        self._entries[key] = _Entry(value, now + self.ttl_seconds)

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def remaining(self, key: str) -> float:
        """Seconds until the entry expires, or 0 if absent."""
        entry = self._live_entry(key)
        return max(entry.expires_at - self._clock(), 0.0) if entry else 0.0

    def purge(self) -> int:
        """Drop every expired entry.

        Returns:
            Number of entries dropped
        """
        now = self._clock()
        expired = [k for k, e in self._entries.items() if e.expires_at <= now]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._entries)

    def _live_entry(self, key: str) -> _Entry[V] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[key]
            return None
        return entry


class FailedAttemptTracker:
    """Counts failed attempts per client and locks clients out.

    A client is locked once it reaches ``max_attempts`` failures; the lock
    lasts until ``lockout_seconds`` after its most recent failure.
    """

    def __init__(self, store: KeyedTTLStore[int], max_attempts: int) -> None:
        """Initialize tracker.

        Args:
            store: Failure counters, whose TTL is the lockout window
            max_attempts: Failures allowed before lockout
        """
        self.store = store
        self.max_attempts = max_attempts

    def is_locked(self, client: str) -> float | None:
        """Check whether a client is locked out.

        Returns:
            Seconds until the lock lifts, or None if not locked
        """
        failures = self.store.get(client) or 0
        if failures < self.max_attempts:
            return None
        return self.store.remaining(client)

    def record_failure(self, client: str) -> int:
        """Record a failed attempt.

        Returns:
            Failures recorded for the client within the current window
        """
        failures = (self.store.get(client) or 0) + 1
        self.store.set(client, failures)
        return failures

    def reset(self, client: str) -> None:
        self.store.delete(client)
