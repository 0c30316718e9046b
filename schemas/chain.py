from datetime import datetime
from typing import Literal

from pydantic import BaseModel, conlist, constr

ChainWord = constr(pattern=r"^[A-Z][a-z]+$")
WordChainOut = conlist(ChainWord, min_length=6, max_length=6)


class HealthOut(BaseModel):
    status: Literal["ok"] = "ok"
    timestamp: datetime


class ErrorOut(BaseModel):
    detail: str
