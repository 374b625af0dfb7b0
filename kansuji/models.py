"""
Pydantic models for parse results.

`parse()` itself returns a plain int and raises on bad input.  These models
are the value-or-error form of the same operation, for callers that want to
report failures as data (the HTTP API, the demo report).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ParseErrorInfo(BaseModel):
    """Why a numeral was rejected."""

    code: str  # Machine-readable, always "INVALID_NUMERAL" today
    message: str  # Human-readable explanation
    position: Optional[int] = None  # Index of the offending character
    character: Optional[str] = None


class ParseOutcome(BaseModel):
    """Result of parsing one numeral: exactly one of `value` / `error` is set."""

    text: str
    is_valid: bool
    value: Optional[int] = None
    error: Optional[ParseErrorInfo] = None
