"""
Compound-word tracking for the largest magnitudes.

Five magnitudes are written as multi-character words:

    恒河沙 (10^52)  阿僧祇 (10^56)  那由他 (10^60)
    不可思議 (10^64)  無量大数 (10^68)

The tracker is a small finite state machine.  From NONE only the first
character of a word is accepted; once a word has started, only its next
character is accepted.  On the last character the word's exponent is handed
back and the state returns to NONE.

No character is shared between the five words, so a single state value is
enough to know which word is in progress and where.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from .classifier import COMPOUND_WORDS
from .exceptions import InvalidNumeral


class SequenceState(Enum):
    """Position inside a compound word: (word, characters consumed)."""

    NONE = ("", 0)
    GOUGASHA_1 = ("恒河沙", 1)  # expect 河
    GOUGASHA_2 = ("恒河沙", 2)  # expect 沙
    ASOUGI_1 = ("阿僧祇", 1)  # expect 僧
    ASOUGI_2 = ("阿僧祇", 2)  # expect 祇
    NAYUTA_1 = ("那由他", 1)  # expect 由
    NAYUTA_2 = ("那由他", 2)  # expect 他
    FUKASHIGI_1 = ("不可思議", 1)  # expect 可
    FUKASHIGI_2 = ("不可思議", 2)  # expect 思
    FUKASHIGI_3 = ("不可思議", 3)  # expect 議
    MURYOUTAISUU_1 = ("無量大数", 1)  # expect 量
    MURYOUTAISUU_2 = ("無量大数", 2)  # expect 大
    MURYOUTAISUU_3 = ("無量大数", 3)  # expect 数

    @property
    def word(self) -> str:
        return self.value[0]

    @property
    def consumed(self) -> int:
        return self.value[1]

    @property
    def expected(self) -> Optional[str]:
        """The character that must come next, or None when no word is open."""
        if self is SequenceState.NONE:
            return None
        return self.word[self.consumed]


# ─── Transition Tables ───────────────────────────────────────────────
# Built from the enum so the two can never drift apart.

_STARTS: Mapping[str, SequenceState] = MappingProxyType({
    state.word[0]: state
    for state in SequenceState
    if state.consumed == 1
})


def _build_next() -> Mapping[SequenceState, Optional[SequenceState]]:
    """Map each open state to its successor (None = word completes)."""
    by_value = {state.value: state for state in SequenceState}
    table: dict[SequenceState, Optional[SequenceState]] = {}
    for state in SequenceState:
        if state is SequenceState.NONE:
            continue
        table[state] = by_value.get((state.word, state.consumed + 1))
    return MappingProxyType(table)


_NEXT: Mapping[SequenceState, Optional[SequenceState]] = _build_next()


# ─── Tracker ─────────────────────────────────────────────────────────


class CompoundTracker:
    """Follows progress through one compound word at a time.

    Usage:
        tracker = CompoundTracker()
        for char in "不可思議":
            exponent = tracker.advance(char)
        # exponent == 64, tracker.state is SequenceState.NONE
    """

    def __init__(self) -> None:
        self.state = SequenceState.NONE

    @property
    def in_progress(self) -> bool:
        return self.state is not SequenceState.NONE

    def advance(self, char: str, position: int | None = None) -> Optional[int]:
        """Feed one character to the tracker.

        Args:
            char: The next input character.
            position: Index of `char` in the input, for error reporting.

        Returns:
            The exponent of the compound word if `char` completes it,
            otherwise None.

        Raises:
            InvalidNumeral: If `char` cannot start or continue a word here.
        """
        if self.state is SequenceState.NONE:
            started = _STARTS.get(char)
            if started is None:
                raise InvalidNumeral(
                    f"{char!r} cannot start a compound magnitude word",
                    details={"position": position, "character": char},
                )
            self.state = started
            return None

        if char != self.state.expected:
            raise InvalidNumeral(
                f"{char!r} breaks the compound word {self.state.word!r} "
                f"(expected {self.state.expected!r})",
                details={
                    "position": position,
                    "character": char,
                    "expected": self.state.expected,
                    "word": self.state.word,
                },
            )

        successor = _NEXT[self.state]
        if successor is None:
            exponent = COMPOUND_WORDS[self.state.word]
            self.state = SequenceState.NONE
            return exponent

        self.state = successor
        return None
