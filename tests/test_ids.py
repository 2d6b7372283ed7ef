from types import SimpleNamespace

from drivingschool.utils import ids

FROZEN = SimpleNamespace(time=lambda: 1717236000.123)


def test_ids_increase_within_a_process(monkeypatch):
    monkeypatch.setattr(ids, 'time', FROZEN)
    monkeypatch.setattr(ids, '_last_id', 0)
    first, second = ids.new_id(), ids.new_id()
    assert first.startswith('1717236000123')
    assert second.startswith('1717236000124')


def test_workers_in_the_same_millisecond_get_distinct_ids(monkeypatch):
    monkeypatch.setattr(ids, 'time', FROZEN)
    issued = set()
    for _ in range(50):
        # A fresh worker process starts without any memory of earlier ids
        monkeypatch.setattr(ids, '_last_id', 0)
        issued.add(ids.new_id('v'))
    assert len(issued) == 50
    assert all(value.startswith('v1717236000123') for value in issued)


def test_timestamp_is_utc_with_milliseconds():
    stamp = ids.utc_timestamp()
    assert stamp.endswith('Z')
    assert len(stamp) == len('2024-06-01T10:00:00.000Z')
