"""Unit tests for KeyedTTLStore and FailedAttemptTracker."""

from persona.util.ttl_store import FailedAttemptTracker, KeyedTTLStore


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class TestKeyedTTLStore:
    def test_entries_expire_after_ttl(self):
        clock = FakeClock()
        store: KeyedTTLStore[str] = KeyedTTLStore(ttl_seconds=60, clock=clock)
        store.set("a", "value")

        clock.advance(59)
        assert store.get("a") == "value"
        assert store.remaining("a") == 1

        clock.advance(1)
        assert store.get("a") is None
        assert store.remaining("a") == 0

    def test_set_restarts_lifetime(self):
        clock = FakeClock()
        store: KeyedTTLStore[int] = KeyedTTLStore(ttl_seconds=10, clock=clock)
        store.set("a", 1)
        clock.advance(8)
        store.set("a", 2)
        clock.advance(8)

        assert store.get("a") == 2

    def test_purge_drops_only_expired(self):
        clock = FakeClock()
        store: KeyedTTLStore[int] = KeyedTTLStore(ttl_seconds=10, clock=clock)
        store.set("old", 1)
        clock.advance(5)
        store.set("new", 2)
        clock.advance(5)

        assert store.purge() == 1
        assert len(store) == 1
        assert store.get("new") == 2

    def test_writes_from_many_keys_stay_bounded(self):
        clock = FakeClock()
        store: KeyedTTLStore[int] = KeyedTTLStore(ttl_seconds=10, clock=clock)

        for i in range(1000):
            store.set(f"10.0.{i // 256}.{i % 256}", 1)
            clock.advance(1)

        assert len(store) <= 20
        assert store.get("10.0.0.0") is None

    def test_idle_key_is_dropped_by_later_writes(self):
        clock = FakeClock()
        store: KeyedTTLStore[int] = KeyedTTLStore(ttl_seconds=10, clock=clock)
        store.set("idle", 1)

        clock.advance(25)
        store.set("busy", 1)

        assert len(store) == 1


class TestFailedAttemptTracker:
    def test_locks_after_max_attempts(self):
        clock = FakeClock()
        tracker = FailedAttemptTracker(
            KeyedTTLStore(ttl_seconds=900, clock=clock), max_attempts=3
        )

        for _ in range(2):
            tracker.record_failure("1.2.3.4")
        assert tracker.is_locked("1.2.3.4") is None

        tracker.record_failure("1.2.3.4")
        assert tracker.is_locked("1.2.3.4") == 900
        assert tracker.is_locked("5.6.7.8") is None

    def test_lock_lifts_after_window(self):
        clock = FakeClock()
        tracker = FailedAttemptTracker(
            KeyedTTLStore(ttl_seconds=900, clock=clock), max_attempts=1
        )
        tracker.record_failure("1.2.3.4")

        clock.advance(600)
        assert tracker.is_locked("1.2.3.4") == 300

        clock.advance(300)
        assert tracker.is_locked("1.2.3.4") is None

    def test_reset_clears_failures(self):
        tracker = FailedAttemptTracker(KeyedTTLStore(ttl_seconds=900), max_attempts=2)
        tracker.record_failure("1.2.3.4")

        tracker.reset("1.2.3.4")

        assert tracker.record_failure("1.2.3.4") == 1
