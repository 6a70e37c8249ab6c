from __future__ import annotations

import asyncio
import json

import pytest

from genapi.store import InMemoryTTLStore


def run_async(coro):
    return asyncio.run(coro)


class _ManualClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_put_then_get_without_ttl_returns_value():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        await store.put("test-key", "test-value")
        assert await store.get("test-key") == "test-value"
        await store.close()

    run_async(scenario())


def test_get_unknown_key_returns_none():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        assert await store.get("non-existent") is None

    run_async(scenario())


def test_delete_unknown_key_is_noop():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        await store.delete("never-set")
        await store.delete("never-set")
        assert store.size() == 0

    run_async(scenario())


def test_delete_removes_value_and_cancels_expiry():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        await store.put("k", "v", ttl_s=30)
        assert "k" in store._timers  # noqa: SLF001
        await store.delete("k")
        assert await store.get("k") is None
        assert "k" not in store._timers  # noqa: SLF001

    run_async(scenario())


def test_value_expires_after_ttl():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        await store.put("expire-key", "expire-value", ttl_s=1)
        assert await store.get("expire-key") == "expire-value"

        await asyncio.sleep(1.5)

        assert await store.get("expire-key") is None

    run_async(scenario())


def test_scheduled_expiry_reclaims_memory_without_reads():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        await store.put("k", "v", ttl_s=0.2)
        await asyncio.sleep(0.4)
        assert "k" not in store._rows  # noqa: SLF001
        assert "k" not in store._timers  # noqa: SLF001

    run_async(scenario())


def test_second_put_replaces_shorter_ttl():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        await store.put("update-key", "value1", ttl_s=10)
        await store.put("update-key", "value2", ttl_s=1)
        assert await store.get("update-key") == "value2"

        await asyncio.sleep(1.5)
        assert await store.get("update-key") is None
        await store.close()

    run_async(scenario())


def test_stale_expiry_does_not_delete_overwritten_value():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        await store.put("k", "v1", ttl_s=0.2)
        await store.put("k", "v2", ttl_s=10)

        await asyncio.sleep(0.4)

        assert await store.get("k") == "v2"
        await store.close()

    run_async(scenario())


def test_put_without_ttl_clears_previous_expiry():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        await store.put("k", "v1", ttl_s=0.2)
        await store.put("k", "v2")

        await asyncio.sleep(0.4)

        assert await store.get("k") == "v2"
        assert "k" not in store._timers  # noqa: SLF001

    run_async(scenario())


def test_expiry_is_enforced_at_read_time():
    async def scenario() -> None:
        clock = _ManualClock()
        store = InMemoryTTLStore(clock=clock)
        await store.put("k", "v", ttl_s=5)
        assert await store.get("k") == "v"

        # The scheduled callback has not fired yet; the read must still miss.
        clock.now += 6
        assert await store.get("k") is None
        assert store.size() == 0
        await store.close()

    run_async(scenario())


def test_zero_ttl_means_no_expiry():
    async def scenario() -> None:
        clock = _ManualClock()
        store = InMemoryTTLStore(clock=clock)
        await store.put("k", "v", ttl_s=0)
        clock.now += 10**9
        assert await store.get("k") == "v"
        assert "k" not in store._timers  # noqa: SLF001

    run_async(scenario())


def test_negative_ttl_is_rejected():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        with pytest.raises(ValueError, match="ttl_s"):
            await store.put("k", "v", ttl_s=-1)
        assert await store.get("k") is None

    run_async(scenario())


def test_keys_and_size_report_live_entries():
    async def scenario() -> None:
        clock = _ManualClock()
        store = InMemoryTTLStore(clock=clock)
        await store.put("a", "1")
        await store.put("b", "2", ttl_s=5)
        assert sorted(store.keys()) == ["a", "b"]

        clock.now += 10
        assert store.keys() == ["a"]
        assert store.size() == 1
        await store.close()

    run_async(scenario())


def test_stores_serialized_json():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        data = {"name": "Test", "value": 123}
        await store.put("json-key", json.dumps(data))
        assert json.loads(await store.get("json-key")) == data

    run_async(scenario())


def test_concurrent_writers_on_distinct_keys():
    async def scenario() -> None:
        store = InMemoryTTLStore()
        await asyncio.gather(
            *(store.put(f"key-{i}", str(i), ttl_s=30) for i in range(50))
        )
        values = await asyncio.gather(*(store.get(f"key-{i}") for i in range(50)))
        assert values == [str(i) for i in range(50)]
        await store.close()
        assert store.size() == 0

    run_async(scenario())
