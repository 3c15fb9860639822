# =============================================================================
# MSCE/SVM/__init__.py — Signal Verification Module
# =============================================================================
#
# The SVM turns a received bitstream back into text and verifies that the
# whole codec round-trips.
#
# Sub-modules:
#   signal_reader.py — bits → runs → Signals (UnrecognizedRunLength on corrupt runs)
#   text_decoder.py  — Signals → characters (NotFound on unknown codes)
#   validate.py      — self-validation suite for the entire MSCE stack
# =============================================================================
