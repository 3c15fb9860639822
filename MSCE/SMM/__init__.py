# =============================================================================
# MSCE/SMM/__init__.py — Signal Mapping Module
# =============================================================================
#
# The SMM is the single source of truth for the codec's data model: the
# Signal enum, the run-length wire constants, the character ⇄ code table and
# the error types.
#
# All other MSCE sub-modules (SGM, SVM, SViz) import exclusively from here.
# Never define codec constants outside this module.
#
# Sub-modules:
#   constants.py   — Signal enum, run lengths, polarity tables
#   code_table.py  — 36-symbol table + fallback, lookup_encode/lookup_decode
#   errors.py      — MorseCodecError, UnrecognizedRunLength, NotFound
# =============================================================================

from MSCE.SMM.constants import Signal, signal_run, polarity, unit_length
from MSCE.SMM.code_table import CodeLookup, FALLBACK_CODE, lookup_encode, lookup_decode
from MSCE.SMM.errors import MorseCodecError, UnrecognizedRunLength, NotFound

__all__ = [
    "Signal", "signal_run", "polarity", "unit_length",
    "CodeLookup", "FALLBACK_CODE", "lookup_encode", "lookup_decode",
    "MorseCodecError", "UnrecognizedRunLength", "NotFound",
]
