# =============================================================================
# signal_writer.py — Signal → bit run-length encoder
# =============================================================================
#
# Serialises a Signal stream into the packed bitstream described in
# SMM/constants.py.
#
# ENCODING RULES:
#   - Each Signal becomes its polarity bit repeated unit-length times.
#       DOT → 1      DASH → 11
#       GAP → 0      LONG_GAP → 00      WORD_GAP → 000
#   - Bits are packed MSB-first.  Bit 7 of the first byte is the first bit.
#   - finish() pads the last byte with 0 bits.  Padding is never a Signal.
#
# The writer holds at most 7 pending bits; every completed byte is written to
# the sink immediately.
# =============================================================================

from __future__ import annotations
from typing import BinaryIO, Iterable

import numpy as np

from MSCE.SMM.constants import Signal, BITS_PER_BYTE, signal_run


def pack_bits(bits: Iterable[int]) -> bytes:
    """
    Pack 0/1 values MSB-first into bytes, zero-padding the last byte.

    Example:
        pack_bits([1, 0, 1])  → b"\\xa0"
    """
    arr = np.fromiter((1 if b else 0 for b in bits), dtype=np.uint8)
    return np.packbits(arr, bitorder="big").tobytes()


class BitWriter:
    """
    MSB-first bit sink over a binary stream.

    Usage:
        w = BitWriter(sink)
        w.write_bits(True, 2)
        w.byte_align()
        w.flush()
    """

    def __init__(self, sink: BinaryIO) -> None:
        self._sink    = sink
        self._acc     = 0    # pending bits, oldest in the high position
        self._nbits   = 0    # 0-7
        self.bits_written = 0

    def write_bit(self, bit: bool) -> None:
        self._acc = (self._acc << 1) | (1 if bit else 0)
        self._nbits += 1
        self.bits_written += 1
        if self._nbits == BITS_PER_BYTE:
            self._sink.write(bytes((self._acc,)))
            self._acc   = 0
            self._nbits = 0

    def write_bits(self, bit: bool, count: int) -> None:
        """Append `count` copies of `bit`."""
        for _ in range(count):
            self.write_bit(bit)

    def byte_align(self) -> int:
        """
        Pad the current byte with 0 bits and write it out.

        Returns:
            Number of padding bits added (0-7).
        """
        if not self._nbits:
            return 0
        padding = BITS_PER_BYTE - self._nbits
        pending = ((self._acc >> i) & 1 for i in range(self._nbits - 1, -1, -1))
        self._sink.write(pack_bits(pending))
        self._acc   = 0
        self._nbits = 0
        return padding

    def flush(self) -> None:
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()


class SignalWriter:
    """
    Writes Signals to a binary sink as run-length bits.

    Usage:
        sw = SignalWriter(sys.stdout.buffer)
        sw.write_all(TextEncoder("sos"))
        sw.finish()
    """

    def __init__(self, sink: BinaryIO) -> None:
        self._bits = BitWriter(sink)
        self.signals_written = 0

    @property
    def bits_written(self) -> int:
        return self._bits.bits_written

    # ── Core encoder ────────────────────────────────────────────────────────

    def write(self, signal: Signal) -> None:
        """Append one signal: its polarity bit, unit-length times."""
        bit, length = signal_run(signal)
        self._bits.write_bits(bit, length)
        self.signals_written += 1

    def write_all(self, signals: Iterable[Signal]) -> None:
        for signal in signals:
            self.write(signal)

    def finish(self) -> int:
        """Pad to the byte boundary and flush the sink.  Returns padding bits."""
        padding = self._bits.byte_align()
        self._bits.flush()
        return padding

    # ── Output helpers ───────────────────────────────────────────────────────

    @staticmethod
    def signals_to_bits(signals: Iterable[Signal]) -> list[int]:
        """Expand signals to their unpadded 0/1 bit list (no packing)."""
        bits: list[int] = []
        for signal in signals:
            bit, length = signal_run(signal)
            bits.extend([1 if bit else 0] * length)
        return bits
