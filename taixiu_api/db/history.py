from collections import deque
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict

from taixiu_api.core.labels import FeedType, normalize_label


class HistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    phien: str
    du_doan: str  # 'tai' | 'xiu'
    ti_le: str
    id: str
    timestamp: str


class HistoryStore:
    """Per-feed in-memory log of served predictions, newest first.

    Holds at most `max_entries` per feed; the oldest entry falls off when a
    new one is recorded past capacity.
    """

    def __init__(self, max_entries: int = 100, predictor_id: str = "@mryanhdz"):
        self.max_entries = max_entries
        self.predictor_id = predictor_id
        self._entries = {f: deque(maxlen=max_entries) for f in FeedType}

    def record(self, feed_type: FeedType, round_id, label: str, confidence: int) -> HistoryEntry:
        entry = HistoryEntry(
            phien=str(round_id),
            du_doan=normalize_label(label),
            ti_le=f"{confidence}%",
            id=self.predictor_id,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
        self._entries[FeedType(feed_type)].appendleft(entry)
        return entry

    def entries(self, feed_type: FeedType) -> list[HistoryEntry]:
        return list(self._entries[FeedType(feed_type)])

    def count(self, feed_type: FeedType) -> int:
        return len(self._entries[FeedType(feed_type)])
