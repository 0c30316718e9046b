from datetime import datetime, timezone

from fastapi import APIRouter

from schemas.chain import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc)}
