# =============================================================================
# signal_reader.py — Bit run-length decoder
# =============================================================================
#
# Inverse of SignalWriter.  Pulls bits from a byte source, groups equal bits
# into runs, and maps each (polarity, run length) back to a Signal:
#
#   (1, 1) → DOT        (0, 1) → GAP
#   (1, 2) → DASH       (0, 2) → LONG_GAP
#                       (0, 3) → WORD_GAP
#
# Any other run raises UnrecognizedRunLength(polarity, count).
#
# Single forward pass.  A run ends when the next bit differs, so exactly one
# bit of lookahead is held at any time.  No backtracking.
#
# End-of-stream policy (the bitstream has no length field):
#   - An INACTIVE run that reaches end of input is padding.  It is dropped,
#     whatever its length, so appending 0 bits never changes the result.
#   - An ACTIVE run that reaches end of input is a real element and is
#     decoded (and validated) like any other run.
# =============================================================================

from __future__ import annotations
from typing import BinaryIO, Iterable, Iterator

import numpy as np

from MSCE.SMM.constants import Signal, RUN_SIGNALS, READ_CHUNK_SIZE
from MSCE.SMM.errors import UnrecognizedRunLength


class BitReader:
    """
    MSB-first bit source over a binary stream.

    Reads `chunk_size` bytes at a time and yields one bool per bit.
    OSError from the stream propagates unchanged.
    """

    def __init__(self, source: BinaryIO, chunk_size: int = READ_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        self._source    = source
        self.chunk_size = chunk_size
        self.bits_read  = 0

    def __iter__(self) -> Iterator[bool]:
        while True:
            chunk = self._source.read(self.chunk_size)
            if not chunk:
                return
            for bit in np.unpackbits(np.frombuffer(chunk, dtype=np.uint8), bitorder="big"):
                self.bits_read += 1
                yield bool(bit)


class SignalReader:
    """
    Forward-only iterator of Signals decoded from a bit sequence.

    Parameters
    ----------
    bits : Iterable[bool]
        Bit source, e.g. a BitReader or a plain list of 0/1 values.

    Usage:
        for signal in SignalReader.from_stream(sys.stdin.buffer):
            ...
    """

    def __init__(self, bits: Iterable[bool]) -> None:
        self._bits    = iter(bits)
        self.runs_read = 0
        self._signals = self._generate()

    @classmethod
    def from_stream(cls, source: BinaryIO, chunk_size: int = READ_CHUNK_SIZE) -> SignalReader:
        return cls(BitReader(source, chunk_size))

    def __iter__(self) -> Iterator[Signal]:
        return self

    def __next__(self) -> Signal:
        return next(self._signals)

    @staticmethod
    def decode_run(polarity: bool, count: int) -> Signal:
        """Map one (polarity, run length) pair to its Signal."""
        try:
            return RUN_SIGNALS[(bool(polarity), count)]
        except KeyError:
            raise UnrecognizedRunLength(bool(polarity), count) from None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _generate(self) -> Iterator[Signal]:
        current = self._next_bit()
        while current is not None:
            count = 1
            peek = self._next_bit()
            while peek is not None and peek == current:
                count += 1
                peek = self._next_bit()

            if peek is None and not current:
                # trailing padding
                return

            self.runs_read += 1
            yield self.decode_run(current, count)
            current = peek

    def _next_bit(self) -> bool | None:
        bit = next(self._bits, None)
        return None if bit is None else bool(bit)
