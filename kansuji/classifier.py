"""
Character classification for kanji numerals.

Every character the parser understands falls into exactly one class:

    DIGIT       零 一 二 ... 九            value = digit (0-9)
    MULTIPLIER  十 百 千                   value = factor (10, 100, 1000)
    POWER       万 億 兆 ... 極            value = exponent (4, 8, ..., 48)
    COMPOUND    恒 河 沙 阿 僧 ... 数       part of a multi-character word
                                           (恒河沙 = 10^52 ... 無量大数 = 10^68)

Classification is a pure lookup.  Whether a COMPOUND character is allowed at
a given point is decided by the sequence tracker, not here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class CharKind(str, Enum):
    """Class of a numeral character."""

    DIGIT = "DIGIT"
    MULTIPLIER = "MULTIPLIER"
    POWER = "POWER"
    COMPOUND = "COMPOUND"


@dataclass(frozen=True)
class Classification:
    """A classified character: its kind and the value that goes with it."""

    kind: CharKind
    value: int  # digit, multiplier factor, or power exponent (0 for COMPOUND)


# ─── Lookup Tables ───────────────────────────────────────────────────

DIGITS: Mapping[str, int] = MappingProxyType({
    "零": 0,
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
})

MULTIPLIERS: Mapping[str, int] = MappingProxyType({
    "十": 10,
    "百": 100,
    "千": 1_000,
})

# Myriad system: each marker is 10^4 times the previous one.
POWERS: Mapping[str, int] = MappingProxyType({
    "万": 4,
    "億": 8,
    "兆": 12,
    "京": 16,
    "垓": 20,
    "𥝱": 24,  # U+25771, outside the BMP
    "穣": 28,
    "溝": 32,
    "澗": 36,
    "正": 40,
    "載": 44,
    "極": 48,
})

COMPOUND_WORDS: Mapping[str, int] = MappingProxyType({
    "恒河沙": 52,
    "阿僧祇": 56,
    "那由他": 60,
    "不可思議": 64,
    "無量大数": 68,
})

COMPOUND_CHARS: frozenset[str] = frozenset(
    char for word in COMPOUND_WORDS for char in word
)


def _build_table() -> Mapping[str, Classification]:
    table: dict[str, Classification] = {}
    for char, digit in DIGITS.items():
        table[char] = Classification(CharKind.DIGIT, digit)
    for char, factor in MULTIPLIERS.items():
        table[char] = Classification(CharKind.MULTIPLIER, factor)
    for char, exponent in POWERS.items():
        table[char] = Classification(CharKind.POWER, exponent)
    for char in COMPOUND_CHARS:
        table[char] = Classification(CharKind.COMPOUND, 0)
    return MappingProxyType(table)


_TABLE: Mapping[str, Classification] = _build_table()


# ─── Public API ──────────────────────────────────────────────────────


def classify(char: str) -> Optional[Classification]:
    """Classify a single character.

    Args:
        char: One character (one code point) of the input text.

    Returns:
        The character's Classification, or None if it is not part of the
        kanji numeral alphabet.
    """
    return _TABLE.get(char)
