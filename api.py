"""
Kansuji — FastAPI Server
========================

RESTful API for converting kanji numerals to integers.

Endpoints:
    POST /parse             Parse one kanji numeral
    POST /parse/batch       Parse many kanji numerals in one request
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from kansuji import __version__
from kansuji.config import ParserSettings, configure_logging, get_settings
from kansuji.models import ParseErrorInfo, ParseOutcome
from kansuji.parser import parse_outcome

logger = logging.getLogger(__name__)


# ─── Application Lifespan (load settings) ───────────────────────────

_settings: ParserSettings | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and configure logging on startup."""
    global _settings  # noqa: PLW0603
    _settings = get_settings()
    configure_logging(_settings)
    logger.info(
        "Kansuji API ready (allow_incomplete_sequence=%s)",
        _settings.allow_incomplete_sequence,
    )
    yield
    _settings = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Kansuji API",
    description=(
        "Exact conversion of Japanese kanji numerals to integers, "
        "from 零 up to 無量大数 (10^68) with no loss of precision."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ParseRequest(BaseModel):
    """Request body for the /parse endpoint."""

    text: str = Field(
        ...,
        description="The kanji numeral to convert.",
        json_schema_extra={"example": "一億五千万"},
    )


class BatchParseRequest(BaseModel):
    """Request body for the /parse/batch endpoint."""

    texts: list[str] = Field(
        ...,
        min_length=1,
        description="Kanji numerals to convert, in order.",
        json_schema_extra={"example": ["四千三百二十一", "一兆五千億", "数ではない"]},
    )


class ParseResponse(BaseModel):
    """One parse result as returned by the API."""

    text: str
    is_valid: bool
    value: Optional[int] = None
    value_str: Optional[str] = Field(
        default=None,
        description="Decimal string of the value, safe for clients without big integers",
    )
    error: Optional[ParseErrorInfo] = None

    model_config = {"json_schema_extra": {"example": {
        "text": "一億五千万",
        "is_valid": True,
        "value": 150000000,
        "value_str": "150000000",
        "error": None,
    }}}


class BatchParseResponse(BaseModel):
    results: list[ParseResponse]
    valid_count: int
    invalid_count: int


class HealthResponse(BaseModel):
    status: str
    version: str
    allow_incomplete_sequence: bool


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_settings() -> ParserSettings:
    if _settings is None:
        raise HTTPException(status_code=503, detail="Settings not initialised")
    return _settings


def _check_length(text: str, settings: ParserSettings) -> None:
    if len(text) > settings.max_input_length:
        raise HTTPException(
            status_code=413,
            detail=f"Numeral too long (max {settings.max_input_length} characters)",
        )


def _build_response(outcome: ParseOutcome) -> ParseResponse:
    """Convert the internal ParseOutcome to the API response schema."""
    return ParseResponse(
        text=outcome.text,
        is_valid=outcome.is_valid,
        value=outcome.value,
        value_str=str(outcome.value) if outcome.value is not None else None,
        error=outcome.error,
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/parse",
    summary="Parse a kanji numeral",
    tags=["Parsing"],
    responses={
        413: {"description": "Numeral longer than the configured limit"},
        503: {"description": "Settings not yet initialised"},
    },
)
def parse_numeral(request: ParseRequest) -> ParseResponse:
    """Convert one kanji numeral to an integer.

    An invalid numeral is NOT an HTTP error: the response has
    **is_valid** = `false` and an **error** describing the rejected character.
    """
    settings = _get_settings()
    _check_length(request.text, settings)
    return _build_response(parse_outcome(request.text, settings))


@app.post(
    "/parse/batch",
    summary="Parse several kanji numerals",
    tags=["Parsing"],
    responses={
        413: {"description": "Too many items, or an item longer than the limit"},
        503: {"description": "Settings not yet initialised"},
    },
)
def parse_numerals(request: BatchParseRequest) -> BatchParseResponse:
    """Convert each numeral independently; one bad item does not fail the batch."""
    settings = _get_settings()
    if len(request.texts) > settings.max_batch_size:
        raise HTTPException(
            status_code=413,
            detail=f"Too many numerals (max {settings.max_batch_size} per batch)",
        )
    for text in request.texts:
        _check_length(text, settings)

    results = [_build_response(parse_outcome(text, settings)) for text in request.texts]
    valid_count = sum(1 for r in results if r.is_valid)

    return BatchParseResponse(
        results=results,
        valid_count=valid_count,
        invalid_count=len(results) - valid_count,
    )


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Settings not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    settings = _get_settings()
    return HealthResponse(
        status="healthy",
        version=__version__,
        allow_incomplete_sequence=settings.allow_incomplete_sequence,
    )
