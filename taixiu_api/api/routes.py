import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from taixiu_api.analytics.engine import PredictionEngine
from taixiu_api.api.schemas import AnalysisOut, ErrorOut, HistoryOut, PredictOut
from taixiu_api.core.labels import FeedType
from taixiu_api.db.history import HistoryStore
from taixiu_api.feed import FeedClient
from taixiu_api.services import FeedUnavailableError, analyze, get_history, predict_next

logger = logging.getLogger(__name__)

router = APIRouter()

FETCH_ERROR = "Không thể lấy dữ liệu"
SERVER_ERROR = "Lỗi server"

_errors = {500: {"model": ErrorOut}}


def get_feed(request: Request) -> FeedClient:
    return request.app.state.feed


def get_engine(request: Request) -> PredictionEngine:
    return request.app.state.engine


def get_store(request: Request) -> HistoryStore:
    return request.app.state.store


def _fail(message: str):
    return JSONResponse({"error": message}, status_code=500)


@router.get('/{feed_type}', response_model=PredictOut, responses=_errors)
async def predict(feed_type: FeedType, feed: FeedClient = Depends(get_feed),
                  engine: PredictionEngine = Depends(get_engine), store: HistoryStore = Depends(get_store)):
    try:
        return await predict_next(feed, engine, store, feed_type)
    except FeedUnavailableError:
        return _fail(FETCH_ERROR)
    except Exception:
        logger.exception("prediction failed for %s", feed_type.value)
        return _fail(SERVER_ERROR)


@router.get('/{feed_type}/lichsu', response_model=HistoryOut)
async def history(feed_type: FeedType, store: HistoryStore = Depends(get_store)):
    return get_history(store, feed_type)


@router.get('/{feed_type}/analysis', response_model=AnalysisOut, responses=_errors)
async def analysis(feed_type: FeedType, feed: FeedClient = Depends(get_feed),
                   engine: PredictionEngine = Depends(get_engine)):
    try:
        return await analyze(feed, engine, feed_type)
    except FeedUnavailableError:
        return _fail(FETCH_ERROR)
    except Exception:
        logger.exception("analysis failed for %s", feed_type.value)
        return _fail(SERVER_ERROR)
