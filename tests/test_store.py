"""Unit tests for the in-memory coaster store."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from coaster_api.app.schemas.coaster import CoasterCreate
from coaster_api.app.services.coaster_store import CoasterStore


def make_coaster(name="Taron"):
    return CoasterCreate.model_validate(
        {"name": name, "inPark": "Phantasialand", "manufacturer": "Intamin", "height": 30}
    )


def test_put_then_get():
    store = CoasterStore()
    coaster_id = store.put(make_coaster())
    coaster = store.get(coaster_id)
    assert coaster.id == coaster_id
    assert coaster.name == "Taron"
    assert coaster.in_park == "Phantasialand"


def test_get_missing_returns_none():
    assert CoasterStore().get("nope") is None


def test_list_is_a_snapshot():
    store = CoasterStore()
    store.put(make_coaster("a"))
    snapshot = store.list()
    store.put(make_coaster("b"))
    assert len(snapshot) == 1
    assert len(store.list()) == 2
    assert len(store) == 2


def test_ids_follow_the_clock():
    store = CoasterStore(clock=lambda: 1234)
    assert store.put(make_coaster()) == "1234"


def test_ids_increase_when_clock_stalls():
    store = CoasterStore(clock=lambda: 1000)
    ids = [store.put(make_coaster()) for _ in range(3)]
    assert ids == ["1000", "1001", "1002"]


def test_ids_increase_when_clock_goes_backwards():
    readings = iter([500, 400, 300])
    store = CoasterStore(clock=lambda: next(readings))
    ids = [int(store.put(make_coaster())) for _ in range(3)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_concurrent_puts_produce_unique_ids():
    # A frozen clock forces every writer onto the collision path.
    store = CoasterStore(clock=lambda: 42)
    writers, per_writer = 16, 50
    barrier = threading.Barrier(writers)

    def write(n):
        barrier.wait()
        return [store.put(make_coaster(f"{n}-{i}")) for i in range(per_writer)]

    with ThreadPoolExecutor(max_workers=writers) as pool:
        results = list(pool.map(write, range(writers)))

    ids = [coaster_id for batch in results for coaster_id in batch]
    assert len(ids) == writers * per_writer
    assert len(set(ids)) == len(ids)
    assert sorted(store.ids()) == sorted(ids)
    for coaster_id in ids:
        assert store.get(coaster_id).id == coaster_id


def test_stored_records_are_immutable():
    store = CoasterStore()
    coaster = store.get(store.put(make_coaster()))
    with pytest.raises(ValidationError):
        coaster.id = "other"
