import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import settings
from core.errors import FallbackUnavailableError
from core.logging_config import configure_logging
from routers import chain as chain_router, health as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    app.state.http_client = httpx.AsyncClient(timeout=settings.LEXICON_TIMEOUT_SECONDS)
    logger.info("Word chain service ready, lexicon at %s", settings.LEXICON_URL)
    try:
        yield
    finally:
        await app.state.http_client.aclose()


app = FastAPI(title="WordChain", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chain_router.router)
app.include_router(health_router.router)


@app.exception_handler(FallbackUnavailableError)
async def fallback_unavailable_handler(request: Request, exc: FallbackUnavailableError):
    logger.error("Cannot serve %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Word chain unavailable"},
    )


if __name__ == "__main__":
    uvicorn.run("main:app", reload=True, host=settings.HOST, port=settings.PORT)
