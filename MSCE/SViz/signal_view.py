# =============================================================================
# signal_view.py — Text renderings of a Signal stream
# =============================================================================
#
# Two views, both one line of text:
#
#   blocks  — the key timeline, one cell per bit unit
#               ▄ = key down, space = key up
#               "sos" → "▄ ▄ ▄  ▄▄ ▄▄ ▄▄  ▄ ▄ ▄"
#
#   code    — classic dot/dash notation
#               "." / "-" per element, " " between characters,
#               " / " between words
#               "sos sos" → "... --- ... / ... --- ..."
#
# Pure functions: no I/O, usable from the CLI and the HTTP bridge alike.
# =============================================================================

from __future__ import annotations
from typing import Iterable

from MSCE.SMM.constants import Signal, signal_run, unit_length

ON_CELL  = "▄"
OFF_CELL = " "

_CODE_MARKS = {
    Signal.DOT:      ".",
    Signal.DASH:     "-",
    Signal.GAP:      "",
    Signal.LONG_GAP: " ",
    Signal.WORD_GAP: " / ",
}


def render_blocks(signals: Iterable[Signal]) -> str:
    parts = []
    for signal in signals:
        bit, length = signal_run(signal)
        parts.append((ON_CELL if bit else OFF_CELL) * length)
    return "".join(parts)


def render_code(signals: Iterable[Signal]) -> str:
    return "".join(_CODE_MARKS[s] for s in signals)


def render_summary(signals: Iterable[Signal]) -> dict:
    """
    Render both views in one pass and count what was rendered.

    Returns a plain dict (JSON-serialisable):
        {"blocks": str, "code": str, "signals": int, "bits": int}
    """
    signals = list(signals)
    return {
        "blocks":  render_blocks(signals),
        "code":    render_code(signals),
        "signals": len(signals),
        "bits":    sum(unit_length(s) for s in signals),
    }
