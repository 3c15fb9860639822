#!/usr/bin/env python3
# =============================================================================
# validate.py — MSCE Self-Validation Suite
# =============================================================================
#
# Run directly:  python -m MSCE.SVM.validate
#
# Tests:
#   1. Constants integrity  — run tables are inverse, polarity alternation
#   2. Code table           — 36 symbols + fallback, lookups stable
#   3. Signal writer        — SOS bit pattern, padding, byte packing
#   4. Signal reader        — run decoding, corrupt runs, padding policy
#   5. Full pipeline        — text → bytes → text round-trips
# =============================================================================

import io
import itertools
import string
import sys

from MSCE.SMM.constants import (
    Signal, SIGNAL_RUNS, RUN_SIGNALS, ACTIVE, INACTIVE,
    MAX_ACTIVE_RUN, MAX_INACTIVE_RUN, BITS_PER_BYTE, polarity, unit_length,
)
from MSCE.SMM.code_table import (
    SYMBOL_TO_CODE, CODE_TO_SYMBOL, FALLBACK_CODE, lookup_encode, lookup_decode,
)
from MSCE.SMM.errors import UnrecognizedRunLength, NotFound
from MSCE.SGM.signal_writer import SignalWriter
from MSCE.SGM.text_encoder import TextEncoder
from MSCE.SVM.signal_reader import SignalReader
from MSCE.SVM.text_decoder import TextDecoder
from MSCE.pipeline import encode_text, decode_bytes

PASS = "[PASS]"
FAIL = "[FAIL]"
INFO = "[INFO]"

failures = 0


def check(label: str, condition: bool, detail: str = "") -> bool:
    global failures
    if condition:
        print(f"  {PASS} {label}")
    else:
        print(f"  {FAIL} {label}{(' -- ' + detail) if detail else ''}")
        failures += 1
    return condition


def section(title: str) -> None:
    print("\n" + "="*60)
    print(title)
    print("="*60)


def _raises(exc_type, fn, *args) -> bool:
    try:
        fn(*args)
    except exc_type:
        return True
    return False


# =============================================================================
# TEST 1 — Constants Integrity
# =============================================================================
def test_constants() -> None:
    section("TEST 1 — Constants Integrity")

    check("5 signals, 5 distinct runs", len(SIGNAL_RUNS) == 5 and len(RUN_SIGNALS) == 5)
    check("RUN_SIGNALS inverts SIGNAL_RUNS",
          all(RUN_SIGNALS[run] is sig for sig, run in SIGNAL_RUNS.items()))
    check("DOT/DASH are active",
          SIGNAL_RUNS[Signal.DOT][0] is ACTIVE and SIGNAL_RUNS[Signal.DASH][0] is ACTIVE)
    check("all gaps are inactive",
          all(SIGNAL_RUNS[s][0] is INACTIVE
              for s in (Signal.GAP, Signal.LONG_GAP, Signal.WORD_GAP)))
    check("unit lengths 1 2 1 2 3",
          [unit_length(s) for s in Signal] == [1, 2, 1, 2, 3])
    check("MAX_ACTIVE_RUN = 2",   MAX_ACTIVE_RUN == 2,   f"got {MAX_ACTIVE_RUN}")
    check("MAX_INACTIVE_RUN = 3", MAX_INACTIVE_RUN == 3, f"got {MAX_INACTIVE_RUN}")

    # Polarity must alternate in every encoded stream
    signals = list(TextEncoder("the quick brown fox 1234567890 @"))
    polarities = [polarity(s) for s in signals]
    check("encoder output alternates polarity",
          all(a != b for a, b in zip(polarities, polarities[1:])))


# =============================================================================
# TEST 2 — Code Table
# =============================================================================
def test_code_table() -> None:
    section("TEST 2 — Code Table")

    symbols = string.ascii_uppercase + string.digits
    check("36 symbols in table", len(SYMBOL_TO_CODE) == 36, f"got {len(SYMBOL_TO_CODE)}")
    check("all symbols present", set(SYMBOL_TO_CODE) == set(symbols))
    check("no duplicate codes", len(set(SYMBOL_TO_CODE.values())) == 36)
    check("codes are 1-5 elements of DOT/DASH",
          all(1 <= len(c) <= 5 and set(c) <= {Signal.DOT, Signal.DASH}
              for c in SYMBOL_TO_CODE.values()))
    check("fallback not shared with any symbol", FALLBACK_CODE not in SYMBOL_TO_CODE.values())
    check("37 decodable codes (36 + fallback)", len(CODE_TO_SYMBOL) == 37)

    check("case-insensitive letters", lookup_encode("q") == lookup_encode("Q"))
    check("'@' → fallback, unrecognized",
          lookup_encode("@") == (FALLBACK_CODE, False))
    check("'ſ' and 'ı' are not letters",
          not lookup_encode("ſ").recognized and not lookup_encode("ı").recognized)
    check("fallback decodes to '?'", lookup_decode(FALLBACK_CODE) == "?")
    check("every symbol decodes",
          all(lookup_decode(lookup_encode(c).code) == c.lower() for c in symbols))
    check("empty code → NotFound", _raises(NotFound, lookup_decode, ()))
    check("6 dots → NotFound", _raises(NotFound, lookup_decode, (Signal.DOT,) * 6))


# =============================================================================
# TEST 3 — Signal Writer
# =============================================================================
def test_signal_writer() -> None:
    section("TEST 3 — Signal Writer")

    sos = list(TextEncoder("SOS"))
    expected = [
        Signal.DOT, Signal.GAP, Signal.DOT, Signal.GAP, Signal.DOT, Signal.LONG_GAP,
        Signal.DASH, Signal.GAP, Signal.DASH, Signal.GAP, Signal.DASH, Signal.LONG_GAP,
        Signal.DOT, Signal.GAP, Signal.DOT, Signal.GAP, Signal.DOT,
    ]
    check("SOS signal sequence", sos == expected, f"got {sos}")

    bits = SignalWriter.signals_to_bits(sos)
    bit_str = "".join(str(b) for b in bits)
    check("SOS bit pattern", bit_str == "10101001101101100" "10101",
          f"got {bit_str}")

    sink = io.BytesIO()
    sw = SignalWriter(sink)
    sw.write_all(sos)
    padding = sw.finish()
    data = sink.getvalue()
    check("SOS packs to 3 bytes", len(data) == 3, f"got {len(data)}")
    check("SOS padding = 2 bits", padding == 2, f"got {padding}")
    check("SOS bytes = A9 B6 54", data == bytes([0xA9, 0xB6, 0x54]), data.hex())

    sink = io.BytesIO()
    sw = SignalWriter(sink)
    check("empty stream pads nothing", sw.finish() == 0 and sink.getvalue() == b"")


# =============================================================================
# TEST 4 — Signal Reader
# =============================================================================
def test_signal_reader() -> None:
    section("TEST 4 — Signal Reader")

    for (pol, n), sig in RUN_SIGNALS.items():
        check(f"run ({int(pol)} x {n}) → {sig.name}", SignalReader.decode_run(pol, n) is sig)

    def read(bits):
        return list(SignalReader(bits))

    check("inactive x4 mid-stream raises",
          _raises(UnrecognizedRunLength, read, [1, 0, 0, 0, 0, 1]))
    check("active x3 raises", _raises(UnrecognizedRunLength, read, [1, 1, 1, 0]))
    check("trailing inactive run is padding", read([1, 0, 0, 0, 0, 0, 0, 0]) == [Signal.DOT])
    check("trailing active run is decoded",
          read([1, 0, 1, 1]) == [Signal.DOT, Signal.GAP, Signal.DASH])
    check("all-zero input → no signals", read([0] * 16) == [])

    encoded  = encode_text("PARIS 73")
    expected = list(SignalReader.from_stream(io.BytesIO(encoded)))
    raw_bits = list(itertools.chain.from_iterable(
        ((byte >> i) & 1 for i in range(7, -1, -1)) for byte in encoded))
    for extra in range(BITS_PER_BYTE):
        padded = list(SignalReader(raw_bits + [0] * extra))
        if not check(f"+{extra} zero bits leaves signals unchanged", padded == expected):
            break


# =============================================================================
# TEST 5 — Full Pipeline
# =============================================================================
def test_pipeline() -> None:
    section("TEST 5 — Full Pipeline")

    cases = {
        "SOS":                      "sos",
        "A B":                      "a b",
        "  Hello   World  ":        "hello world",
        "PARIS 1234567890":         "paris 1234567890",
        "":                         "",
        "what@now":                 "what?now",
    }
    for text, expected in cases.items():
        got = decode_bytes(encode_text(text))
        check(f"round-trip {text!r}", got == expected, f"got {got!r}")

    check("skip mode drops '@'",
          decode_bytes(encode_text("what@now", skip_unrecognized=True)) == "whatnow")
    check("empty text → zero bytes", encode_text("") == b"")
    check("corrupt byte 0xF0 raises", _raises(UnrecognizedRunLength, decode_bytes, b"\xf0"))

    signals = [Signal.DOT] * 6
    check("6-dot code raises NotFound",
          _raises(NotFound, lambda: "".join(TextDecoder(signals))))

    long_text = "the quick brown fox jumps over the lazy dog " * 50
    data = encode_text(long_text)
    print(f"  {INFO} {len(long_text)} chars → {len(data)} bytes "
          f"({8 * len(data) / len(long_text):.2f} bits/char)")
    check("long text round-trips", decode_bytes(data) == long_text.strip())


def run_all() -> int:
    """Run every section.  Returns the number of failed checks."""
    global failures
    failures = 0
    test_constants()
    test_code_table()
    test_signal_writer()
    test_signal_reader()
    test_pipeline()

    print("\n" + "="*60)
    if failures == 0:
        print(f"  ALL TESTS PASSED")
    else:
        print(f"  {failures} TEST(S) FAILED")
    print("="*60 + "\n")
    return failures


if __name__ == "__main__":
    sys.exit(0 if run_all() == 0 else 1)
