# =============================================================================
# preprocess.py — Optional text preprocessing before encoding
# =============================================================================
#
# Telegraph convention: sentence ends are sent as the word STOP.
#
#   "Arrived safely. Send money!"  →  "Arrived safely STOP  Send money STOP "
#
# Extra spaces are harmless: TextEncoder never emits duplicate WORD_GAPs.
# =============================================================================

from __future__ import annotations
import re
from typing import Callable

from MSCE.SMM.constants import STOP_TOKEN

Preprocessor = Callable[[str], str]

SENTENCE_END = re.compile(r"[.!?]|\r\n|\n|\r")


def stop_preprocess(text: str) -> str:
    """Replace sentence-ending punctuation and newlines with " STOP "."""
    return SENTENCE_END.sub(f" {STOP_TOKEN} ", text)
