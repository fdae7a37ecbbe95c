from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    upstream_url: str = os.getenv("UPSTREAM_URL", "https://sun-win.onrender.com/api/history")
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", 10.0))
    window: int = int(os.getenv("WINDOW", 50))
    history_max: int = int(os.getenv("HISTORY_MAX", 100))
    base_confidence: int = int(os.getenv("BASE_CONFIDENCE", 50))
    min_confidence: int = int(os.getenv("MIN_CONFIDENCE", 50))
    max_confidence: int = int(os.getenv("MAX_CONFIDENCE", 85))
    jitter: float = float(os.getenv("JITTER", 3))
    predictor_id: str = os.getenv("PREDICTOR_ID", "@mryanhdz")
    homepage_text: str = os.getenv("HOMEPAGE_TEXT", "t.me/CuTools")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", 5000))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
