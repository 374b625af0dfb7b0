#!/usr/bin/env python3
"""
Kansuji — Entry Point
=====================

Parses kanji numerals and prints a report.

Usage:
    python main.py                          # Parse the built-in samples
    python main.py 四千三百二十一 一億五千万   # Parse your own numerals
    KANSUJI_ALLOW_INCOMPLETE_SEQUENCE=1 python main.py 恒
"""

from __future__ import annotations

import sys

from kansuji.config import configure_logging, get_settings
from kansuji.models import ParseOutcome
from kansuji.parser import parse_outcome


# ─── Sample Numerals ─────────────────────────────────────────────────

SAMPLES = [
    "零",
    "千百十",
    "四千三百二十一",
    "五千三十",
    "一億五千万",
    "一兆五千億",
    "十二無量大数三千四百五十六不可思議",
    "数ではない",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_outcome(outcome: ParseOutcome) -> None:
    """Print one parse result."""
    print(f"  {_BOLD}{outcome.text or '(empty)'}{_RESET}")
    error = outcome.error
    if error is None:
        print(f"    {_GREEN}= {outcome.value:,}{_RESET}")
        return

    print(f"    {_RED}[{error.code}]{_RESET} {error.message}")
    if error.position is not None:
        print(f"      {_DIM}position: {error.position}{_RESET}")


def print_report(outcomes: list[ParseOutcome]) -> int:
    """Pretty-print all parse results.

    Returns:
        0 if every numeral parsed, 1 otherwise.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  KANJI NUMERAL REPORT{_RESET}")
    print(f"{'=' * _WIDTH}")

    for outcome in outcomes:
        _print_outcome(outcome)

    failures = sum(1 for o in outcomes if not o.is_valid)
    print(f"{'=' * _WIDTH}")
    if failures == 0:
        print(f"  {_GREEN}{_BOLD}ALL {len(outcomes)} NUMERAL(S) PARSED{_RESET}")
    else:
        print(f"  {_RED}{_BOLD}{failures} of {len(outcomes)} numeral(s) rejected{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 0 if failures == 0 else 1


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Parse the given numerals (or the samples) and print the report."""
    settings = get_settings()
    configure_logging(settings)

    texts = argv if argv else SAMPLES
    outcomes = [parse_outcome(text, settings) for text in texts]
    return print_report(outcomes)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
