import logging
from abc import ABC, abstractmethod

import httpx

from core.config import settings
from core.errors import LexiconUnavailableError

logger = logging.getLogger(__name__)


class LexiconClient(ABC):
    """Source of words that commonly follow a given word in a two-word phrase."""

    @abstractmethod
    async def lookup_associations(self, word: str) -> list[str]:
        """Return raw candidates in rank order, or an empty list on any failure."""


class DatamuseLexiconClient(LexiconClient):
    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        url: str = settings.LEXICON_URL,
        relation: str = settings.LEXICON_RELATION,
        max_results: int = settings.LEXICON_MAX_RESULTS,
        timeout: float = settings.LEXICON_TIMEOUT_SECONDS,
    ):
        self.client = client
        self.url = url
        self.relation = relation
        self.max_results = max_results
        self.timeout = timeout

    async def lookup_associations(self, word: str) -> list[str]:
        query = (word or "").strip().lower()
        if not query:
            return []
        try:
            words = await self._fetch(query)
        except LexiconUnavailableError as exc:
            logger.warning("Association lookup for %r failed: %s", query, exc)
            return []
        logger.debug("Association lookup for %r returned %d words", query, len(words))
        return words

    async def _fetch(self, query: str) -> list[str]:
        params = {self.relation: query, "max": self.max_results}
        try:
            if self.client is None:
                async with httpx.AsyncClient() as client:
                    r = await client.get(self.url, params=params, timeout=self.timeout)
            else:
                r = await self.client.get(self.url, params=params, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPError as exc:
            raise LexiconUnavailableError(f"{type(exc).__name__}: {exc}") from exc
        except RuntimeError as exc:
            # closed shared client after shutdown
            raise LexiconUnavailableError(str(exc)) from exc
        except ValueError as exc:
            raise LexiconUnavailableError("response is not valid JSON") from exc

        if not isinstance(data, list):
            raise LexiconUnavailableError(f"expected a list, got {type(data).__name__}")
        return [
            item["word"]
            for item in data
            if isinstance(item, dict) and isinstance(item.get("word"), str)
        ]
