import pytest

from MSCE.SMM.constants import Signal
from MSCE.SMM.code_table import FALLBACK_CODE
from MSCE.SMM.errors import NotFound
from MSCE.SGM.text_encoder import TextEncoder
from MSCE.SVM.text_decoder import TextDecoder

DOT, DASH = Signal.DOT, Signal.DASH
GAP, LONG_GAP, WORD_GAP = Signal.GAP, Signal.LONG_GAP, Signal.WORD_GAP


def test_sos_signals():
    assert list(TextEncoder("SOS")) == [
        DOT, GAP, DOT, GAP, DOT, LONG_GAP,
        DASH, GAP, DASH, GAP, DASH, LONG_GAP,
        DOT, GAP, DOT, GAP, DOT,
    ]


def test_word_gap_replaces_long_gap():
    assert list(TextEncoder("a b")) == [DOT, GAP, DASH, WORD_GAP, DASH, GAP, DOT, GAP, DOT, GAP, DOT]


def test_no_leading_or_duplicate_word_gaps():
    assert list(TextEncoder("   e   e")) == [DOT, WORD_GAP, DOT]


def test_trailing_space_emits_one_word_gap():
    assert list(TextEncoder("e  ")) == [DOT, WORD_GAP]


def test_empty_and_blank_input():
    assert list(TextEncoder("")) == []
    assert list(TextEncoder("    ")) == []


def test_unrecognized_character_sends_fallback():
    signals = list(TextEncoder("@"))
    assert [s for s in signals if s is not GAP] == list(FALLBACK_CODE)


def test_skip_mode_drops_character_and_its_gap():
    encoder = TextEncoder("e@e", skip_unrecognized=True)
    assert list(encoder) == [DOT, LONG_GAP, DOT]
    assert encoder.skipped == 1


def test_skip_mode_does_not_count_as_letter_for_word_gaps():
    assert list(TextEncoder("@ e", skip_unrecognized=True)) == [DOT]


def test_encoder_is_lazy_and_single_pass():
    def chars():
        yield "e"
        raise AssertionError("pulled too far")

    encoder = TextEncoder(chars())
    assert next(encoder) is DOT
    assert iter(encoder) is encoder


def test_encoder_accepts_any_iterable():
    assert list(TextEncoder(iter(["t", " ", "t"]))) == [DASH, WORD_GAP, DASH]


# ── decoder ─────────────────────────────────────────────────────────────────

def test_decode_letters_and_word():
    signals = [DOT, GAP, DASH, WORD_GAP, DASH, GAP, DOT, GAP, DOT, GAP, DOT]
    assert "".join(TextDecoder(signals)) == "a b"


def test_decode_flushes_at_end():
    assert "".join(TextDecoder([DASH, LONG_GAP, DOT])) == "te"


def test_consecutive_word_gaps_yield_only_spaces():
    assert "".join(TextDecoder([DOT, WORD_GAP, WORD_GAP, DOT])) == "e  e"


def test_leading_long_gap_is_ignored():
    assert "".join(TextDecoder([LONG_GAP, DOT, LONG_GAP])) == "e"


def test_fallback_decodes_to_question_mark():
    assert "".join(TextDecoder(TextEncoder("#"))) == "?"


def test_unknown_code_surfaces_at_its_position():
    decoder = TextDecoder([DOT, LONG_GAP] + [DOT, GAP] * 6 + [LONG_GAP, DOT])
    assert next(decoder) == "e"
    with pytest.raises(NotFound):
        next(decoder)


def test_decoder_counts_characters():
    decoder = TextDecoder(TextEncoder("hi there"))
    assert "".join(decoder) == "hi there"
    assert decoder.chars_decoded == 7
