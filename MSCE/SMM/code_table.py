# =============================================================================
# code_table.py — Character ⇄ Signal code table
# =============================================================================
#
# 36 symbols (A–Z, 0–9) plus one fallback code.  The table is written in the
# usual dot/dash text form and converted to Signal tuples once, at import.
#
#   lookup_encode("a")                  → CodeLookup((DOT, DASH), True)
#   lookup_encode("@")                  → CodeLookup(FALLBACK_CODE, False)
#   lookup_decode((DOT, DASH))          → "a"
#   lookup_decode(FALLBACK_CODE)        → "?"
#
# Decoding is lossy: letter case is not transmitted (letters come back lower
# case) and every unrecognized input symbol comes back as "?".
# =============================================================================

from __future__ import annotations
from typing import NamedTuple, Sequence

from MSCE.SMM.constants import Signal, FALLBACK_TEXT, FALLBACK_CHAR
from MSCE.SMM.errors import NotFound


MORSE_TEXT: dict[str, str] = {
    "A": ".-",    "B": "-...",  "C": "-.-.",  "D": "-..",   "E": ".",
    "F": "..-.",  "G": "--.",   "H": "....",  "I": "..",    "J": ".---",
    "K": "-.-",   "L": ".-..",  "M": "--",    "N": "-.",    "O": "---",
    "P": ".--.",  "Q": "--.-",  "R": ".-.",   "S": "...",   "T": "-",
    "U": "..-",   "V": "...-",  "W": ".--",   "X": "-..-",  "Y": "-.--",
    "Z": "--..",
    "1": ".----", "2": "..---", "3": "...--", "4": "....-", "5": ".....",
    "6": "-....", "7": "--...", "8": "---..", "9": "----.", "0": "-----",
}

_TEXT_TO_SIGNAL = {".": Signal.DOT, "-": Signal.DASH}


def code_from_text(text: str) -> tuple[Signal, ...]:
    """Convert ".-" notation to a tuple of DOT/DASH signals."""
    try:
        return tuple(_TEXT_TO_SIGNAL[c] for c in text)
    except KeyError as e:
        raise ValueError(f"invalid code text {text!r}: unexpected {e.args[0]!r}") from None


FALLBACK_CODE: tuple[Signal, ...] = code_from_text(FALLBACK_TEXT)

# Symbol → code.  Letters are stored upper case only.
SYMBOL_TO_CODE: dict[str, tuple[Signal, ...]] = {
    symbol: code_from_text(text) for symbol, text in MORSE_TEXT.items()
}

# Code → decoded character.  Letters decode to lower case.
CODE_TO_SYMBOL: dict[tuple[Signal, ...], str] = {
    code: symbol.lower() for symbol, code in SYMBOL_TO_CODE.items()
}
CODE_TO_SYMBOL[FALLBACK_CODE] = FALLBACK_CHAR


class CodeLookup(NamedTuple):
    code:       tuple[Signal, ...]
    recognized: bool   # False = fallback code substituted


def lookup_encode(symbol: str) -> CodeLookup:
    """
    Look up the code for one input character.

    ASCII letters match case-insensitively, digits exactly.  Any other character
    returns FALLBACK_CODE with recognized=False.
    """
    # isascii: str.upper() folds "ı" → "I" and "ſ" → "S"
    if len(symbol) != 1 or not symbol.isascii():
        return CodeLookup(FALLBACK_CODE, False)
    code = SYMBOL_TO_CODE.get(symbol.upper())
    if code is None:
        return CodeLookup(FALLBACK_CODE, False)
    return CodeLookup(code, True)


def lookup_decode(code: Sequence[Signal]) -> str:
    """Return the character for an exact DOT/DASH sequence, or raise NotFound."""
    try:
        return CODE_TO_SYMBOL[tuple(code)]
    except KeyError:
        raise NotFound(code) from None
