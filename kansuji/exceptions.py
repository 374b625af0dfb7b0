"""
Exception hierarchy for kanji numeral parsing.

Every failure carries a machine-readable code plus a details dict so callers
(the API, the demo report) can explain exactly which character was rejected.
"""

from __future__ import annotations


class KansujiError(Exception):
    """Base exception for all kanji numeral failures.

    `details` is copied on construction, so the parser can add context
    (the full input text) without touching a dict the caller still holds.
    """

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details: dict = dict(details) if details else {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={str(self)!r})"


class InvalidNumeral(KansujiError, ValueError):
    """The text is not a well-formed kanji numeral.

    Raised for a character outside the numeral alphabet, for a compound-word
    character out of sequence, and (unless configured otherwise) for a
    compound word left unfinished at end of input.
    """

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMERAL", message, details)

    @property
    def position(self) -> int | None:
        return self.details.get("position")

    @property
    def character(self) -> str | None:
        return self.details.get("character")
