import random

from fastapi import APIRouter, Depends, Request

from core.config import settings
from repositories.fallback_repo import FallbackChainRepository
from schemas.chain import ErrorOut, WordChainOut
from services.chain_builder import ChainBuilder
from services.lexicon_client import DatamuseLexiconClient, LexiconClient

router = APIRouter(prefix="/api", tags=["chain"])


def get_rng() -> random.Random:
    return random.Random(settings.CHAIN_RANDOM_SEED)


def get_lexicon_client(request: Request) -> LexiconClient:
    return DatamuseLexiconClient(
        getattr(request.app.state, "http_client", None),
        url=settings.LEXICON_URL,
        relation=settings.LEXICON_RELATION,
        max_results=settings.LEXICON_MAX_RESULTS,
        timeout=settings.LEXICON_TIMEOUT_SECONDS,
    )


def get_fallback_repository(rng: random.Random = Depends(get_rng)) -> FallbackChainRepository:
    return FallbackChainRepository(rng=rng)


def get_chain_builder(
    lexicon: LexiconClient = Depends(get_lexicon_client),
    fallback: FallbackChainRepository = Depends(get_fallback_repository),
    rng: random.Random = Depends(get_rng),
) -> ChainBuilder:
    return ChainBuilder(lexicon, fallback, rng)


@router.get("/chain", response_model=WordChainOut, responses={500: {"model": ErrorOut}})
async def get_chain(builder: ChainBuilder = Depends(get_chain_builder)):
    chain = await builder.build()
    return list(chain)
