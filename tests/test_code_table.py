import string

import pytest

from MSCE.SMM.constants import Signal
from MSCE.SMM.code_table import (
    FALLBACK_CODE, SYMBOL_TO_CODE, code_from_text, lookup_decode, lookup_encode,
)
from MSCE.SMM.errors import NotFound

DOT, DASH = Signal.DOT, Signal.DASH


@pytest.mark.parametrize("symbol", string.ascii_letters + string.digits)
def test_every_symbol_decodes_to_lower_case(symbol):
    code, recognized = lookup_encode(symbol)
    assert recognized
    assert lookup_decode(code) == symbol.lower()
    # stable across calls
    assert lookup_decode(lookup_encode(symbol).code) == lookup_decode(code)


def test_known_codes():
    assert lookup_encode("A").code == (DOT, DASH)
    assert lookup_encode("s").code == (DOT, DOT, DOT)
    assert lookup_encode("0").code == (DASH,) * 5
    assert lookup_encode("5").code == (DOT,) * 5


@pytest.mark.parametrize("symbol", ["@", ".", "\n", "é", "?", "", "ab", "ı", "ſ"])
def test_unrecognized_symbols_use_fallback(symbol):
    assert lookup_encode(symbol) == (FALLBACK_CODE, False)


def test_fallback_code_is_dash_dash_dot_dash_dash():
    assert FALLBACK_CODE == (DASH, DASH, DOT, DASH, DASH)
    assert lookup_decode(FALLBACK_CODE) == "?"


def test_lookup_decode_accepts_lists():
    assert lookup_decode([DASH, DOT, DOT, DOT]) == "b"


@pytest.mark.parametrize("code", [(), (DOT,) * 6, (DASH, DASH, DASH, DASH, DOT, DOT)])
def test_unknown_code_raises_not_found(code):
    with pytest.raises(NotFound) as info:
        lookup_decode(code)
    assert info.value.code == tuple(code)
    assert isinstance(info.value, ValueError)


def test_table_has_no_duplicates():
    codes = list(SYMBOL_TO_CODE.values())
    assert len(codes) == 36
    assert len(set(codes)) == 36


def test_code_from_text_rejects_other_marks():
    with pytest.raises(ValueError):
        code_from_text(".-x")
