# =============================================================================
# text_decoder.py — Signal stream → character stream
# =============================================================================
#
# Inverse of TextEncoder.  Groups DOT/DASH elements into codes using the gaps:
#
#   DOT / DASH  → append to the working code
#   GAP         → absorbed (same character continues)
#   LONG_GAP    → flush the code as one character
#   WORD_GAP    → flush the code, then a literal space
#   end         → flush whatever is left
#
# Flushing an empty code yields nothing, so consecutive WORD_GAPs produce
# only their spaces and a leading LONG_GAP is harmless.
#
# A code that is not in the table raises NotFound at the point it is flushed.
# =============================================================================

from __future__ import annotations
from typing import Iterable, Iterator

from MSCE.SMM.constants import Signal, ELEMENT_SIGNALS, WORD_SEPARATOR
from MSCE.SMM.code_table import lookup_decode


class TextDecoder:
    """
    Forward-only iterator of decoded characters.

    Usage:
        text = "".join(TextDecoder(SignalReader.from_stream(f)))
    """

    def __init__(self, signals: Iterable[Signal]) -> None:
        self._signals = iter(signals)
        self.chars_decoded = 0
        self._chars = self._generate()

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return next(self._chars)

    def _generate(self) -> Iterator[str]:
        code: list[Signal] = []
        for signal in self._signals:
            if signal in ELEMENT_SIGNALS:
                code.append(signal)
            elif signal is Signal.GAP:
                continue
            else:
                if code:
                    yield self._flush(code)
                    code = []
                if signal is Signal.WORD_GAP:
                    yield WORD_SEPARATOR
        if code:
            yield self._flush(code)

    def _flush(self, code: list[Signal]) -> str:
        ch = lookup_decode(code)
        self.chars_decoded += 1
        return ch
