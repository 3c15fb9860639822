# =============================================================================
# SGM — Signal Generation Module
# Subfolder of MSCE (Morse Signal Codec Engine)
# =============================================================================
#
# Generates the packed run-length bitstream from text.
#
# Modules:
#   text_encoder.py   — characters → Signals (table lookup + gap insertion)
#   signal_writer.py  — Signals → MSB-first bits → padded bytes
#   preprocess.py     — optional sentence-end → STOP substitution
#
# Constants live in MSCE/SMM/constants.py
# Decoding lives in MSCE/SVM/
# =============================================================================
