"""
Kansuji — exact kanji numeral parsing.

Turns Japanese kanji numerals ("四千三百二十一", "一億五千万", "十二無量大数")
into exact Python ints, however large.
"""

from .exceptions import InvalidNumeral, KansujiError
from .parser import parse, parse_outcome

__version__ = "1.0.0"

__all__ = [
    "InvalidNumeral",
    "KansujiError",
    "parse",
    "parse_outcome",
]
