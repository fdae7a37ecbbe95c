import logging

import httpx
from pydantic import ValidationError

from taixiu_api.core.labels import FeedType
from taixiu_api.core.models import OutcomeRecord

logger = logging.getLogger(__name__)


class FeedClient:
    """Reads the upstream round-history document. Returns None instead of raising."""

    def __init__(self, url: str, timeout: float = 10.0, transport: httpx.AsyncBaseTransport | None = None):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def fetch(self) -> dict | None:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.get(self.url)
                r.raise_for_status()
                return r.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Error fetching data from %s: %s", self.url, e)
            return None
        except ValueError as e:
            logger.warning("Upstream %s returned invalid JSON: %s", self.url, e)
            return None


def parse_records(document, feed_type: FeedType) -> list[OutcomeRecord] | None:
    """Validate the feed's rounds (newest first); None if missing, empty or malformed."""
    if not isinstance(document, dict):
        logger.warning("Upstream document is not a JSON object: %s", type(document).__name__)
        return None
    raw = document.get(feed_type.upstream_key)
    if not isinstance(raw, list) or not raw:
        logger.warning("Upstream document has no rounds for %s", feed_type.value)
        return None
    try:
        return [OutcomeRecord.model_validate(item) for item in raw]
    except ValidationError as e:
        logger.warning("Malformed %s round in upstream document: %s", feed_type.value, e)
        return None
