# =============================================================================
# Morse Signal Codec Engine (MSCE)
# =============================================================================
#
# Converts plain text to a packed run-length Morse bitstream and back.
#
# RESPONSIBLE for:
#   - The character ⇄ code table (A–Z, 0–9, one fallback code)
#   - Gap insertion and gap-aware grouping (GAP / LONG_GAP / WORD_GAP)
#   - The run-length wire format: polarity bit × unit length, MSB-first,
#     zero-padded to a byte
#   - Fail-fast decoding of corrupt transmissions
#
# NOT responsible for:
#   - Audio / timing-accurate keying (no WAV output)
#   - Morse variants beyond the Latin letter + digit table
#
# ── DATA FLOW ─────────────────────────────────────────────────────────────────
#   encode:  text → SGM.TextEncoder → SGM.SignalWriter → bytes
#   decode:  bytes → SVM.SignalReader → SVM.TextDecoder → text
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   SMM/              — Signal enum, run-length constants, code table, errors
#   SGM/              — encode side (text → signals → bits)
#   SVM/              — decode side (bits → signals → text) + validate suite
#   SViz/             — block / dot-dash renderings of a signal stream
#   pipeline.py       — stream drivers
#   cli.py            — `msce` command line
#   bridge_server.py  — Flask HTTP bridge
# =============================================================================

from MSCE.SMM import (
    Signal, lookup_encode, lookup_decode,
    MorseCodecError, UnrecognizedRunLength, NotFound,
)
from MSCE.pipeline import encode_stream, decode_stream, encode_text, decode_bytes

__version__ = "1.0.0"

__all__ = [
    "Signal", "lookup_encode", "lookup_decode",
    "MorseCodecError", "UnrecognizedRunLength", "NotFound",
    "encode_stream", "decode_stream", "encode_text", "decode_bytes",
]
