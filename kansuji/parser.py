"""
Convert kanji numerals to exact integers.

Supported patterns:
    "零"                     → 0
    "千百十"                 → 1,110
    "四千三百二十一"         → 4,321
    "一億五千万"             → 150,000,000
    "十二無量大数"           → 12 × 10^68

Algorithm:
    Three accumulators, all local to one call:
    - `digit`: the last bare digit, not yet placed
    - `block`: the current 4-digit group (below 10^4 in well-formed text)
    - `total`: everything already flushed by a power marker

    For each character:
    - digit      → place the previous digit as units, hold the new one
    - 十 百 千   → multiply the held digit (1 if none) into the block
    - 万 億 ...  → flush block × 10^exponent into the total
    - 恒河沙 ... → same flush, once the whole word has been read

    At the end, `total + block + digit` is the value.

Out-of-order and repeated power markers are not rejected: each flush adds
whatever block was accumulated since the previous one.
"""

from __future__ import annotations

import logging

from .classifier import CharKind, classify
from .config import ParserSettings, get_settings
from .exceptions import InvalidNumeral
from .models import ParseErrorInfo, ParseOutcome
from .sequences import CompoundTracker

logger = logging.getLogger(__name__)


# ─── Accumulator ─────────────────────────────────────────────────────


class _Accumulator:
    """Digit, block and total state for a single parse."""

    __slots__ = ("digit", "block", "total")

    def __init__(self) -> None:
        self.digit = 0
        self.block = 0
        self.total = 0

    def push_digit(self, digit: int) -> None:
        # The held digit was not followed by a multiplier: it is a units digit.
        self.block += self.digit
        self.digit = digit

    def apply_multiplier(self, factor: int) -> None:
        # "十" alone means ten, so an empty digit counts as one here.
        self.block += (self.digit or 1) * factor
        self.digit = 0

    def flush_power(self, exponent: int) -> None:
        self.block += self.digit
        self.digit = 0
        self.total += self.block * 10**exponent
        self.block = 0

    def finish(self) -> int:
        self.block += self.digit
        self.digit = 0
        self.total += self.block
        self.block = 0
        return self.total


# ─── Main Parser ─────────────────────────────────────────────────────


def parse(text: str, settings: ParserSettings | None = None) -> int:
    """Convert a kanji numeral string to an int.

    Args:
        text: e.g. "一億五千万".  The empty string is a valid numeral (0).
        settings: Parser settings; defaults to the process-wide settings.

    Returns:
        150000000

    Raises:
        InvalidNumeral: On the first character that is not a kanji numeral
            or that breaks a compound magnitude word, and on a compound word
            left unfinished at end of input (unless
            `settings.allow_incomplete_sequence` is set).
    """
    settings = settings or get_settings()
    acc = _Accumulator()
    tracker = CompoundTracker()

    try:
        for position, char in enumerate(text):
            # Mid-word, only the word's next character is acceptable.
            if tracker.in_progress:
                exponent = tracker.advance(char, position)
                if exponent is not None:
                    acc.flush_power(exponent)
                continue

            info = classify(char)
            if info is None:
                raise InvalidNumeral(
                    f"{char!r} is not a kanji numeral character",
                    details={"position": position, "character": char},
                )

            if info.kind is CharKind.DIGIT:
                acc.push_digit(info.value)
            elif info.kind is CharKind.MULTIPLIER:
                acc.apply_multiplier(info.value)
            elif info.kind is CharKind.POWER:
                acc.flush_power(info.value)
            else:
                tracker.advance(char, position)

        if tracker.in_progress and not settings.allow_incomplete_sequence:
            raise InvalidNumeral(
                f"Input ends inside the compound word {tracker.state.word!r}",
                details={
                    "position": len(text),
                    "character": None,
                    "expected": tracker.state.expected,
                    "word": tracker.state.word,
                },
            )
    except InvalidNumeral as exc:
        exc.details.setdefault("text", text)
        logger.debug("Rejected %r: %s", text, exc)
        raise

    return acc.finish()


def parse_outcome(text: str, settings: ParserSettings | None = None) -> ParseOutcome:
    """Parse `text`, reporting failure as data instead of raising.

    Returns:
        ParseOutcome with `value` set on success, or `error` set when the
        text is not a valid kanji numeral.
    """
    try:
        value = parse(text, settings)
    except InvalidNumeral as exc:
        return ParseOutcome(
            text=text,
            is_valid=False,
            error=ParseErrorInfo(
                code=exc.code,
                message=str(exc),
                position=exc.position,
                character=exc.character,
            ),
        )
    return ParseOutcome(text=text, is_valid=True, value=value)
