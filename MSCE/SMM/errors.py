# =============================================================================
# errors.py — Codec error types
# =============================================================================
#
# Every malformed input is treated as a corrupt transmission: these errors
# are fatal to the decode that raised them.  I/O failures are NOT wrapped;
# OSError from the byte source/sink propagates unchanged.
# =============================================================================

from __future__ import annotations
from typing import Sequence


class MorseCodecError(ValueError):
    """Base class for all codec errors."""


class UnrecognizedRunLength(MorseCodecError):
    """A run of equal bits does not correspond to any Signal."""

    def __init__(self, polarity: bool, count: int) -> None:
        self.polarity = polarity
        self.count    = count
        kind = "active" if polarity else "inactive"
        super().__init__(f"unrecognized bit run: {kind} x {count}")


class NotFound(MorseCodecError):
    """A DOT/DASH sequence matches no entry in the code table."""

    def __init__(self, code: Sequence) -> None:
        self.code = tuple(code)
        names = ", ".join(s.name for s in self.code) or "<empty>"
        super().__init__(f"not recognized as a character: [{names}]")
