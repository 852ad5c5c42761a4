"""FastAPI service for backtrace parsing."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from stackframes import FAMILIES, UnknownFamilyError, family_by_name, parse_frame
from stackframes import config

logger = logging.getLogger(__name__)


class _CountingLogger:
    """Forwards unparsed-line warnings and counts them."""

    def __init__(self, target: logging.Logger):
        self.target = target
        self.count = 0

    def warning(self, message: str):
        self.count += 1
        self.target.warning(message)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    logging.basicConfig(level=config.LOG_LEVEL)
    yield


app = FastAPI(title="Backtrace Parsing API", lifespan=lifespan)


# Request/Response Models
class ParseRequest(BaseModel):
    backtrace: Optional[list[str]] = None
    family: str = "native"


class Frame(BaseModel):
    file: Optional[str] = None
    line: Optional[int] = None
    function: str = ""


class ParseResponse(BaseModel):
    family: str
    frames: list[Frame]
    unparsed: int = 0


# Endpoints
@app.post("/parse", response_model=ParseResponse)
async def parse_backtrace(request: ParseRequest):
    """Parse backtrace lines with the requested pattern family."""
    try:
        family = family_by_name(request.family)
    except UnknownFamilyError:
        raise HTTPException(status_code=400, detail=f"Unknown family: {request.family}")

    sink = _CountingLogger(logger)
    frames = [
        Frame(**parse_frame(family, line, sink).to_dict())
        for line in request.backtrace or []
    ]

    return ParseResponse(family=family.name.value, frames=frames, unparsed=sink.count)


@app.get("/families")
async def list_families():
    """List pattern family names."""
    return {"families": [name.value for name in FAMILIES]}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
