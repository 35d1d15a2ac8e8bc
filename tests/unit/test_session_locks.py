"""
Unit tests for per-session locks.
"""

import asyncio

import pytest

from app.services.session_locks import SessionLocks


@pytest.mark.asyncio
async def test_same_key_runs_one_at_a_time():
    locks = SessionLocks()
    order: list[str] = []

    async def worker(name: str):
        async with locks.hold("s1"):
            order.append(f"{name}-in")
            await asyncio.sleep(0.01)
            order.append(f"{name}-out")

    await asyncio.gather(worker("a"), worker("b"))

    assert order == ["a-in", "a-out", "b-in", "b-out"]


@pytest.mark.asyncio
async def test_different_keys_overlap():
    locks = SessionLocks()
    inside = asyncio.Event()

    async def first():
        async with locks.hold("s1"):
            await asyncio.wait_for(inside.wait(), timeout=1)

    async def second():
        async with locks.hold("s2"):
            inside.set()

    await asyncio.gather(first(), second())


@pytest.mark.asyncio
async def test_locks_are_released_after_use():
    locks = SessionLocks()

    async with locks.hold("s1"):
        assert len(locks) == 1

    assert len(locks) == 0


@pytest.mark.asyncio
async def test_lock_released_when_body_raises():
    locks = SessionLocks()

    with pytest.raises(RuntimeError):
        async with locks.hold("s1"):
            raise RuntimeError("boom")

    assert len(locks) == 0
    async with locks.hold("s1"):
        pass
