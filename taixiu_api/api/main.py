import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from taixiu_api.analytics.engine import PredictionEngine
from taixiu_api.api.routes import router
from taixiu_api.config import Settings, settings as default_settings
from taixiu_api.db.history import HistoryStore
from taixiu_api.feed import FeedClient

logger = logging.getLogger(__name__)

ENDPOINTS = (
    ("/", "Homepage"),
    ("/hu", "Dự đoán Tài Xỉu Hũ"),
    ("/md5", "Dự đoán Tài Xỉu MD5"),
    ("/hu/lichsu", "Lịch sử dự đoán Hũ"),
    ("/md5/lichsu", "Lịch sử dự đoán MD5"),
    ("/hu/analysis", "Phân tích chi tiết Hũ"),
    ("/md5/analysis", "Phân tích chi tiết MD5"),
)


def create_app(settings: Settings | None = None, feed: FeedClient | None = None,
               engine: PredictionEngine | None = None, store: HistoryStore | None = None) -> FastAPI:
    cfg = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logging.basicConfig(level=cfg.log_level.upper(), format="%(asctime)s - %(levelname)s - %(message)s")
        logger.info("Upstream feed: %s", cfg.upstream_url)
        logger.info("Endpoints:")
        for path, desc in ENDPOINTS:
            logger.info("  %s - %s", path, desc)
        yield

    app = FastAPI(title="TaiXiu Predictor", lifespan=lifespan)
    app.state.feed = feed if feed is not None else FeedClient(cfg.upstream_url, timeout=cfg.request_timeout)
    app.state.engine = engine if engine is not None else PredictionEngine(
        window=cfg.window,
        base_confidence=cfg.base_confidence,
        min_confidence=cfg.min_confidence,
        max_confidence=cfg.max_confidence,
        jitter=cfg.jitter,
    )
    app.state.store = store if store is not None else HistoryStore(max_entries=cfg.history_max, predictor_id=cfg.predictor_id)

    @app.get("/", response_class=PlainTextResponse)
    def home():
        return PlainTextResponse(cfg.homepage_text, media_type="text/plain; charset=utf-8")

    app.include_router(router)
    return app


app = create_app()
