import io

import pytest

from MSCE.SMM.constants import Signal, polarity, signal_run, unit_length
from MSCE.SMM.errors import UnrecognizedRunLength
from MSCE.SGM.signal_writer import BitWriter, SignalWriter, pack_bits
from MSCE.SVM.signal_reader import BitReader, SignalReader

DOT, DASH = Signal.DOT, Signal.DASH
GAP, LONG_GAP, WORD_GAP = Signal.GAP, Signal.LONG_GAP, Signal.WORD_GAP


def bits_of(data: bytes) -> list[int]:
    return [(byte >> i) & 1 for byte in data for i in range(7, -1, -1)]


def test_pack_bits_is_msb_first_and_zero_padded():
    assert pack_bits([1, 0, 1]) == b"\xa0"
    assert pack_bits([1] * 9) == b"\xff\x80"
    assert pack_bits([]) == b""


def test_bit_writer_emits_whole_bytes_only():
    sink = io.BytesIO()
    w = BitWriter(sink)
    w.write_bits(True, 7)
    assert sink.getvalue() == b""
    w.write_bit(False)
    assert sink.getvalue() == b"\xfe"
    w.write_bit(True)
    assert w.byte_align() == 7
    assert sink.getvalue() == b"\xfe\x80"
    assert w.bits_written == 9


@pytest.mark.parametrize("signal,active,length", [
    (Signal.DOT, True, 1), (Signal.DASH, True, 2),
    (Signal.GAP, False, 1), (Signal.LONG_GAP, False, 2), (Signal.WORD_GAP, False, 3),
])
def test_signal_polarity_and_unit_length(signal, active, length):
    assert polarity(signal) is active
    assert unit_length(signal) == length
    assert signal_run(signal) == (active, length)


def test_bit_writer_multi_byte_matches_pack_bits():
    bits = [1, 0, 0, 1, 1, 0, 1, 0] * 2 + [1, 1, 0, 1]
    sink = io.BytesIO()
    w = BitWriter(sink)
    for b in bits:
        w.write_bit(bool(b))
    assert sink.getvalue() == b"\x9a\x9a"
    assert w.byte_align() == 4
    assert sink.getvalue() == pack_bits(bits) == b"\x9a\x9a\xd0"
    assert w.byte_align() == 0


def test_signal_writer_unit_lengths():
    assert SignalWriter.signals_to_bits([DOT, GAP, DASH, LONG_GAP, DOT, WORD_GAP]) == [
        1, 0, 1, 1, 0, 0, 1, 0, 0, 0,
    ]


def test_signal_writer_pads_final_byte():
    sink = io.BytesIO()
    sw = SignalWriter(sink)
    sw.write_all([DASH, GAP, DOT])
    assert sw.finish() == 4
    assert sink.getvalue() == bytes([0b11010000])
    assert sw.signals_written == 3
    assert sw.bits_written == 4


@pytest.mark.parametrize("bits,signal", [
    ([1, 0], DOT),
    ([1, 1, 0], DASH),
    ([0, 1], GAP),
    ([0, 0, 1], LONG_GAP),
    ([0, 0, 0, 1], WORD_GAP),
])
def test_reader_maps_runs(bits, signal):
    assert next(SignalReader(bits)) is signal


@pytest.mark.parametrize("bits,polarity,count", [
    ([1, 0, 0, 0, 0, 1], False, 4),
    ([1, 1, 1, 0], True, 3),
    ([1, 1, 1], True, 3),
    ([0, 0, 0, 0, 0, 1], False, 5),
])
def test_reader_rejects_unknown_runs(bits, polarity, count):
    with pytest.raises(UnrecognizedRunLength) as info:
        list(SignalReader(bits))
    assert info.value.polarity is polarity
    assert info.value.count == count


def test_reader_yields_signals_before_error():
    reader = SignalReader([1, 0, 1, 1, 1, 0])
    assert next(reader) is DOT
    assert next(reader) is GAP
    with pytest.raises(UnrecognizedRunLength):
        next(reader)


def test_reader_drops_trailing_inactive_run():
    assert list(SignalReader([1, 0, 0])) == [DOT]
    assert list(SignalReader([1, 0, 0, 0, 0, 0, 0, 0, 0, 0])) == [DOT]


def test_reader_keeps_trailing_active_run():
    # "TE" ends exactly on a byte boundary: 11 00 1 + padding, here unpadded
    assert list(SignalReader([1, 1, 0, 0, 1])) == [DASH, LONG_GAP, DOT]


def test_reader_counts_runs():
    reader = SignalReader([1, 0, 1, 1, 0, 0, 0])
    assert list(reader) == [DOT, GAP, DASH]
    # the trailing inactive run is consumed as padding, not counted
    assert reader.runs_read == 3


def test_reader_empty_source():
    assert list(SignalReader([])) == []
    assert list(SignalReader.from_stream(io.BytesIO(b""))) == []


def test_bit_reader_reads_across_chunks():
    reader = BitReader(io.BytesIO(b"\xa9\xb6"), chunk_size=1)
    assert [int(b) for b in reader] == bits_of(b"\xa9\xb6")
    assert reader.bits_read == 16


def test_bit_reader_rejects_bad_chunk_size():
    with pytest.raises(ValueError):
        BitReader(io.BytesIO(b""), chunk_size=0)


def test_bit_reader_propagates_io_errors():
    class Broken(io.RawIOBase):
        def read(self, n=-1):
            raise OSError("device gone")

    with pytest.raises(OSError, match="device gone"):
        list(SignalReader.from_stream(Broken()))


def test_writer_reader_round_trip():
    signals = [DASH, GAP, DOT, LONG_GAP, DOT, WORD_GAP, DASH, GAP, DASH]
    sink = io.BytesIO()
    sw = SignalWriter(sink)
    sw.write_all(signals)
    sw.finish()
    assert list(SignalReader.from_stream(io.BytesIO(sink.getvalue()))) == signals
