from MSCE.SMM.constants import Signal
from MSCE.SGM.preprocess import stop_preprocess
from MSCE.SGM.text_encoder import TextEncoder
from MSCE.SViz.signal_view import render_blocks, render_code, render_summary
from MSCE.SVM import validate


def test_render_blocks_one_cell_per_unit():
    assert render_blocks([Signal.DASH, Signal.WORD_GAP, Signal.DOT]) == "▄▄   ▄"


def test_render_code_words():
    assert render_code(TextEncoder("sos sos")) == "... --- ... / ... --- ..."


def test_render_summary_empty():
    assert render_summary([]) == {"blocks": "", "code": "", "signals": 0, "bits": 0}


def test_stop_preprocess():
    assert stop_preprocess("Hi. Bye!\nOk?") == "Hi STOP  Bye STOP  STOP Ok STOP "
    assert stop_preprocess("a\r\nb") == "a STOP b"
    assert stop_preprocess("no punctuation") == "no punctuation"


def test_self_validation_suite_passes(capsys):
    assert validate.run_all() == 0
    assert "ALL TESTS PASSED" in capsys.readouterr().out
