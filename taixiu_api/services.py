from taixiu_api.analytics.engine import PredictionEngine
from taixiu_api.core.labels import FeedType
from taixiu_api.core.models import OutcomeRecord
from taixiu_api.db.history import HistoryStore
from taixiu_api.feed import FeedClient, parse_records


class FeedUnavailableError(Exception):
    """Upstream fetch failed or the feed carried no usable rounds."""


async def load_records(feed: FeedClient, feed_type: FeedType) -> list[OutcomeRecord]:
    document = await feed.fetch()
    records = parse_records(document, feed_type) if document is not None else None
    if not records:
        raise FeedUnavailableError(f"no rounds available for {feed_type.value}")
    return records


async def predict_next(feed: FeedClient, engine: PredictionEngine, store: HistoryStore, feed_type: FeedType):
    records = await load_records(feed, feed_type)
    next_round = records[0].round_id + 1
    pred = engine.predict(records)
    entry = store.record(feed_type, next_round, pred.label, pred.confidence)
    return {'phien': entry.phien, 'du_doan': entry.du_doan, 'ti_le': entry.ti_le, 'id': entry.id}


def get_history(store: HistoryStore, feed_type: FeedType):
    return {
        'type': feed_type.display_name,
        'history': store.entries(feed_type),
        'total': store.count(feed_type),
    }


async def analyze(feed: FeedClient, engine: PredictionEngine, feed_type: FeedType):
    records = await load_records(feed, feed_type)
    pred = engine.predict(records)
    return {
        'prediction': pred.label,
        'confidence': pred.confidence,
        'factors': list(pred.factors),
        'analysis': pred.analysis,
    }
