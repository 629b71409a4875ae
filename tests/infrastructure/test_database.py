"""Tests for shared engine initialization."""

import threading

import pytest
import pytest_asyncio

from showroom.infrastructure import database
from showroom.infrastructure.database import (
    create_tables,
    dispose_engine,
    get_engine,
    get_session_factory,
)
from showroom.infrastructure.product_store import SqlProductStore


@pytest_asyncio.fixture
async def sqlite_url(tmp_path):
    await dispose_engine()
    yield f"sqlite+aiosqlite:///{tmp_path / 'shared.db'}"
    await dispose_engine()


@pytest.mark.asyncio
async def test_engine_created_once(sqlite_url) -> None:
    engine = get_engine(sqlite_url)
    assert get_engine() is engine
    assert get_engine("sqlite+aiosqlite:///ignored.db") is engine


@pytest.mark.asyncio
async def test_concurrent_first_use_creates_one_engine(sqlite_url) -> None:
    engines = []
    barrier = threading.Barrier(8)

    def first_use() -> None:
        barrier.wait()
        engines.append(get_engine(sqlite_url))

    threads = [threading.Thread(target=first_use) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len({id(e) for e in engines}) == 1


@pytest.mark.asyncio
async def test_dispose_resets(sqlite_url) -> None:
    engine = get_engine(sqlite_url)
    await dispose_engine()
    assert database._engine is None
    assert get_engine(sqlite_url) is not engine


@pytest.mark.asyncio
async def test_create_tables_and_store(sqlite_url) -> None:
    get_engine(sqlite_url)
    await create_tables()

    store = SqlProductStore(get_session_factory())
    await store.ping()
    assert await store.list_products() == []
