# =============================================================================
# constants.py — SMM Signal Constants and Run-Length Maps
# =============================================================================
#
# Every codec constant lives here.  The run lengths below ARE the wire format:
# changing any of them breaks every bitstream written before the change.
#
# ── WIRE FORMAT ───────────────────────────────────────────────────────────────
#   Each Signal is written as its polarity bit repeated UNIT-LENGTH times.
#   Bits are packed MSB-first into bytes.  The final byte is padded with
#   inactive (0) bits.  No header, no length field, no terminator.
#
#   "SOS" →  1 0 1 0 1 00 11 0 11 0 11 00 1 0 1 0 1  + padding
#            S          |  O              |  S
# =============================================================================

from __future__ import annotations
from enum import Enum


class Signal(Enum):
    """One timed unit of a Morse transmission."""

    DOT      = "dot"
    DASH     = "dash"
    GAP      = "gap"         # between elements of one character
    LONG_GAP = "long_gap"    # between characters
    WORD_GAP = "word_gap"    # between words

    def __repr__(self) -> str:
        return f"Signal.{self.name}"


# -----------------------------------------------------------------------------
# UNIT LENGTHS  (bits per signal)
# -----------------------------------------------------------------------------

DOT_LENGTH      = 1
DASH_LENGTH     = 2
GAP_LENGTH      = 1
LONG_GAP_LENGTH = 2
WORD_GAP_LENGTH = 3

ACTIVE   = True     # key down  → bit 1
INACTIVE = False    # key up    → bit 0

# Signal → (polarity, unit length).  Resolved by lookup, never by dispatch.
SIGNAL_RUNS: dict[Signal, tuple[bool, int]] = {
    Signal.DOT:      (ACTIVE,   DOT_LENGTH),
    Signal.DASH:     (ACTIVE,   DASH_LENGTH),
    Signal.GAP:      (INACTIVE, GAP_LENGTH),
    Signal.LONG_GAP: (INACTIVE, LONG_GAP_LENGTH),
    Signal.WORD_GAP: (INACTIVE, WORD_GAP_LENGTH),
}

# (polarity, run length) → Signal.  Any key not in here is a corrupt run.
RUN_SIGNALS: dict[tuple[bool, int], Signal] = {
    run: signal for signal, run in SIGNAL_RUNS.items()
}

ELEMENT_SIGNALS = frozenset({Signal.DOT, Signal.DASH})

# Longest legal run of each polarity
MAX_ACTIVE_RUN   = max(n for p, n in RUN_SIGNALS if p is ACTIVE)     # = 2
MAX_INACTIVE_RUN = max(n for p, n in RUN_SIGNALS if p is INACTIVE)   # = 3


def signal_run(signal: Signal) -> tuple[bool, int]:
    """Return (polarity, unit_length) for a signal."""
    return SIGNAL_RUNS[signal]


def polarity(signal: Signal) -> bool:
    return SIGNAL_RUNS[signal][0]


def unit_length(signal: Signal) -> int:
    return SIGNAL_RUNS[signal][1]


# -----------------------------------------------------------------------------
# TEXT CODES
# -----------------------------------------------------------------------------

WORD_SEPARATOR = " "     # input character that becomes WORD_GAP
FALLBACK_TEXT  = "--.--" # code sent for any symbol outside the table
FALLBACK_CHAR  = "?"     # what FALLBACK_TEXT decodes to
STOP_TOKEN     = "STOP"  # replacement for sentence ends in --stop mode


# -----------------------------------------------------------------------------
# BIT I/O
# -----------------------------------------------------------------------------

BITS_PER_BYTE   = 8
READ_CHUNK_SIZE = 4_096   # bytes pulled from the source per read() call
