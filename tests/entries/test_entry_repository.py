from __future__ import annotations

import json

import pytest

from factories import FailingStore, hourly, piece, run
from picker_log.core.enums import PayType, PieceUnit
from picker_log.entries.model import WorkRecord
from picker_log.entries.repository import EntryRepository
from picker_log.storage.memory_store import InMemoryKeyValueStore


def test_key_carries_schema_version(repo):
    assert repo.key == "picker_log_entries_v3"


def test_missing_payload_loads_empty(repo):
    assert run(repo.load_all()) == []


@pytest.mark.parametrize("raw", ["", "not json", "{\"id\": \"1\"}", "42", "null"])
def test_bad_payload_loads_empty(raw):
    repo = EntryRepository(InMemoryKeyValueStore({"picker_log_entries_v3": raw}))

    assert run(repo.load_all()) == []


def test_malformed_items_are_skipped():
    good = piece("1", "2025-10-03").to_dict()
    raw = json.dumps([1, "x", {"id": "2"}, {"id": "3", "date": "2025-10-01", "payType": "daily"}, good])
    repo = EntryRepository(InMemoryKeyValueStore({"picker_log_entries_v3": raw}))

    assert [r.id for r in run(repo.load_all())] == ["1"]


def test_read_failure_loads_empty():
    repo = EntryRepository(FailingStore(fail_get=True))

    assert run(repo.load_all()) == []


def test_upsert_then_load_round_trips_every_field(repo):
    r = WorkRecord(
        id="1729400000000-abcd1234",
        date="2025-10-20",
        category="Raspberry",
        pay_type=PayType.PIECE,
        unit_rate=2.75,
        tax_percent=15,
        quantity_unit=PieceUnit.PUNNET,
        punnet_count=48,
        comment="north block",
    )

    result = run(repo.upsert(r))

    assert result.ok
    assert run(repo.load_all()) == [r]


def test_upsert_twice_keeps_one_record(repo):
    r = piece("1", "2025-10-03")

    run(repo.upsert(r))
    run(repo.upsert(r))

    assert [e.id for e in run(repo.load_all())] == ["1"]


def test_upsert_replaces_whole_record(repo):
    run(repo.upsert(piece("1", "2025-10-03")))
    run(repo.upsert(piece("2", "2025-10-04")))

    changed = hourly("1", "2025-10-10", hours=8)
    run(repo.upsert(changed))

    entries = run(repo.load_all())
    assert [e.id for e in entries] == ["1", "2"]
    assert entries[0] == changed
    assert entries[0].kg_amount is None


@pytest.mark.parametrize(
    "order",
    [
        ["a", "b", "c", "d", "e"],
        ["e", "d", "c", "b", "a"],
        ["c", "a", "e", "b", "d"],
    ],
)
def test_load_all_is_date_desc_then_id_desc(store, order):
    records = {
        "a": piece("100", "2025-10-01"),
        "b": piece("200", "2025-10-01"),
        "c": piece("150", "2025-10-05"),
        "d": piece("050", "2024-12-31"),
        "e": hourly("300", "2025-10-05"),
    }
    repo = EntryRepository(store)
    for name in order:
        run(repo.upsert(records[name]))

    expected = [("2025-10-05", "300"), ("2025-10-05", "150"), ("2025-10-01", "200"), ("2025-10-01", "100"), ("2024-12-31", "050")]
    assert [(e.date, e.id) for e in run(repo.load_all())] == expected

    persisted = json.loads(run(store.get(repo.key)))
    assert [(e["date"], e["id"]) for e in persisted] == expected


def test_remove_unknown_id_is_a_noop(repo):
    run(repo.upsert(piece("1", "2025-10-03")))
    before = run(repo.load_all())

    result = run(repo.remove("nonexistent-id"))

    assert result.ok
    assert run(repo.load_all()) == before


def test_remove_drops_record(repo):
    run(repo.upsert(piece("1", "2025-10-03")))
    run(repo.upsert(piece("2", "2025-10-04")))

    run(repo.remove("1"))

    assert [e.id for e in run(repo.load_all())] == ["2"]
    assert run(repo.get_by_id("1")) is None
    assert run(repo.get_by_id("2")).date == "2025-10-04"


def test_write_failure_is_reported_not_raised():
    store = FailingStore(fail_set=True)
    repo = EntryRepository(store)

    upserted = run(repo.upsert(piece("1", "2025-10-03")))
    removed = run(repo.remove("1"))

    assert not upserted.ok
    assert "disk full" in upserted.error
    assert not removed.ok
    assert store.set_calls == 2
    assert run(repo.load_all()) == []


def test_persisted_layout_uses_camel_case_and_omits_unset_fields(store, repo):
    run(repo.upsert(hourly("1", "2025-10-03")))

    persisted = json.loads(run(store.get(repo.key)))

    assert persisted == [
        {
            "id": "1",
            "date": "2025-10-03",
            "category": "Strawberry",
            "payType": "hourly",
            "hoursWorked": 3.5,
            "unitRate": 20,
            "taxPercent": 0,
        }
    ]


def _stored(*records) -> str:
    return json.dumps([r.to_dict() for r in records])


@pytest.mark.parametrize("action", ["upsert", "remove"])
def test_read_failure_blocks_mutation(action):
    initial = _stored(piece("3", "2025-10-03"), piece("2", "2025-10-02"), piece("1", "2025-10-01"))
    store = FailingStore(fail_get=True, fail_set=False, initial=initial)
    repo = EntryRepository(store)

    if action == "upsert":
        result = run(repo.upsert(piece("9", "2025-10-09")))
    else:
        result = run(repo.remove("1"))

    assert not result.ok
    assert "storage unavailable" in result.error
    assert store.set_calls == 0
    assert store.value == initial


def test_unparsable_items_survive_other_mutations(store):
    legacy = {"id": "legacy", "date": "2025-10-01", "payType": "daily", "unitRate": 30}
    raw = json.dumps([legacy, "stray", piece("1", "2025-10-03").to_dict()])
    run(store.set("picker_log_entries_v3", raw))
    repo = EntryRepository(store)

    run(repo.upsert(piece("2", "2025-10-04")))
    run(repo.remove("1"))

    persisted = json.loads(run(store.get(repo.key)))
    assert persisted[0]["id"] == "2"
    assert legacy in persisted
    assert "stray" in persisted
    assert [e.id for e in run(repo.load_all())] == ["2"]


def test_upsert_replaces_unparsable_item_with_same_id(store):
    raw = json.dumps([{"id": "legacy", "date": "2025-10-01", "payType": "daily"}])
    run(store.set("picker_log_entries_v3", raw))
    repo = EntryRepository(store)

    fixed = hourly("legacy", "2025-10-01")
    run(repo.upsert(fixed))

    persisted = json.loads(run(store.get(repo.key)))
    assert persisted == [fixed.to_dict()]


def test_remove_drops_unparsable_item_with_that_id(store):
    raw = json.dumps([{"id": "legacy", "payType": "daily"}, piece("1", "2025-10-03").to_dict()])
    run(store.set("picker_log_entries_v3", raw))
    repo = EntryRepository(store)

    run(repo.remove("legacy"))

    assert [e["id"] for e in json.loads(run(store.get(repo.key)))] == ["1"]
