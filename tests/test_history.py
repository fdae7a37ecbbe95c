from datetime import datetime

from taixiu_api.core.labels import FeedType
from taixiu_api.db.history import HistoryStore


def test_record_entry():
    store = HistoryStore()
    e = store.record(FeedType.hu, 1001, "Tài", 73)
    assert e.phien == "1001" and e.du_doan == "tai" and e.ti_le == "73%" and e.id == "@mryanhdz"
    assert datetime.fromisoformat(e.timestamp).tzinfo is not None
    assert store.entries(FeedType.hu) == [e]


def test_newest_first_and_capacity():
    store = HistoryStore(max_entries=100)
    for i in range(150):
        store.record(FeedType.md5, i, "xiu", 60)
        assert store.count(FeedType.md5) <= 100
    items = store.entries(FeedType.md5)
    assert len(items) == 100
    assert items[0].phien == "149" and items[-1].phien == "50"


def test_feeds_are_independent():
    store = HistoryStore()
    store.record(FeedType.hu, 1, "XỈU", 55)
    assert store.count(FeedType.hu) == 1
    assert store.count(FeedType.md5) == 0
    assert store.entries("md5") == []


def test_entries_is_a_copy():
    store = HistoryStore()
    store.record(FeedType.hu, 1, "tai", 55)
    store.entries(FeedType.hu).clear()
    assert store.count(FeedType.hu) == 1
