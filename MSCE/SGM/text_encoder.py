# =============================================================================
# text_encoder.py — Character stream → Signal stream
# =============================================================================
#
# Lazily converts characters to Signals, inserting the three gap kinds.
#
# GAP RULES:
#   - Elements of one character are separated by GAP.
#   - Characters are separated by LONG_GAP.
#   - A space becomes WORD_GAP, but only if a character has been sent since
#     the last word boundary.  No leading WORD_GAP, no duplicates.
#   - WORD_GAP replaces the LONG_GAP that would otherwise precede the next
#     character; the two never appear together.
#
#   "a b"  →  DOT GAP DASH  WORD_GAP  DASH GAP DOT GAP DOT GAP DOT
#
# Unrecognized characters are sent as FALLBACK_CODE, or dropped entirely in
# skip mode.  A dropped character leaves the gap state untouched.
# =============================================================================

from __future__ import annotations
from typing import Iterable, Iterator

from MSCE.SMM.constants import Signal, WORD_SEPARATOR
from MSCE.SMM.code_table import lookup_encode


class TextEncoder:
    """
    Forward-only, single-pass iterator of Signals for a character sequence.

    Usage:
        signals = list(TextEncoder("sos"))
        signals = list(TextEncoder("a@b", skip_unrecognized=True))
    """

    def __init__(self, chars: Iterable[str], skip_unrecognized: bool = False) -> None:
        self._chars = iter(chars)
        self.skip_unrecognized = skip_unrecognized
        # True once a character has been sent in the current word
        self.has_sent_letter = False
        self.skipped = 0
        self._signals = self._generate()

    def __iter__(self) -> Iterator[Signal]:
        return self

    def __next__(self) -> Signal:
        return next(self._signals)

    def _generate(self) -> Iterator[Signal]:
        for c in self._chars:
            if c == WORD_SEPARATOR:
                if self.has_sent_letter:
                    self.has_sent_letter = False
                    yield Signal.WORD_GAP
                continue

            code, recognized = lookup_encode(c)
            if not recognized and self.skip_unrecognized:
                self.skipped += 1
                continue

            if self.has_sent_letter:
                yield Signal.LONG_GAP
            self.has_sent_letter = True
            yield from self._code_signals(code)

    @staticmethod
    def _code_signals(code: tuple[Signal, ...]) -> Iterator[Signal]:
        """Yield a code's elements with GAP between them."""
        for i, element in enumerate(code):
            if i:
                yield Signal.GAP
            yield element
