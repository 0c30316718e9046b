import logging
import random
from typing import Sequence

from core.config import settings
from core.errors import DeadEndError
from repositories.fallback_repo import FallbackChainRepository
from services.candidate_filter import CHAIN_LENGTH, filter_candidates
from services.lexicon_client import LexiconClient

logger = logging.getLogger(__name__)

SEED_WORDS: tuple[str, ...] = (
    "Fire",
    "Water",
    "Snow",
    "Sun",
    "Book",
    "Head",
    "Hand",
    "House",
    "Light",
    "Ball",
    "Home",
    "Door",
    "Time",
    "Sea",
)


class ChainBuilder:
    """Builds one word chain by walking the association graph from a random seed.

    A dead end never triggers backtracking or a second walk: the partial chain
    is dropped and a curated chain from the fallback table is returned instead,
    so a request costs at most ``max_attempts`` lookups.
    """

    def __init__(
        self,
        lexicon: LexiconClient,
        fallback: FallbackChainRepository,
        rng: random.Random | None = None,
        *,
        seed_words: Sequence[str] = SEED_WORDS,
        chain_length: int = CHAIN_LENGTH,
        max_attempts: int = settings.CHAIN_MAX_ATTEMPTS,
        candidate_limit: int = settings.CANDIDATE_LIMIT,
    ):
        self.lexicon = lexicon
        self.fallback = fallback
        self.rng = rng or random.Random()
        self.seed_words = tuple(seed_words)
        self.chain_length = chain_length
        self.max_attempts = max_attempts
        self.candidate_limit = candidate_limit
        self.last_source: str | None = None

    async def build(self) -> tuple[str, ...]:
        chain = [self.rng.choice(self.seed_words)]
        try:
            await self._extend(chain)
        except DeadEndError as exc:
            self.last_source = "fallback"
            logger.info(
                "Chain source=%s after %s (partial chain: %s)",
                self.last_source,
                exc.reason,
                " -> ".join(exc.partial),
            )
            return self.fallback.random_chain()

        self.last_source = "generated"
        logger.info("Chain source=%s: %s", self.last_source, " -> ".join(chain))
        return tuple(chain)

    async def _extend(self, chain: list[str]) -> None:
        attempts = self.max_attempts
        while len(chain) < self.chain_length:
            if attempts <= 0:
                raise DeadEndError("attempts exhausted", chain)
            last = chain[-1]
            raw = await self.lexicon.lookup_associations(last)
            candidates = filter_candidates(raw, chain, limit=self.candidate_limit)
            if not candidates:
                raise DeadEndError(f"no usable words after {last!r}", chain)
            word = self.rng.choice(candidates)
            logger.debug("Extending %r with %r (%d candidates)", last, word, len(candidates))
            chain.append(word)
            attempts -= 1
