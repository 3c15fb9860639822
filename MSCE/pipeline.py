# =============================================================================
# pipeline.py — Stream drivers
# =============================================================================
#
# Encode:  text ─▶ [preprocess] ─▶ TextEncoder ─▶ SignalWriter ─▶ bytes
# Decode:  bytes ─▶ BitReader ─▶ SignalReader ─▶ TextDecoder ─▶ text
#
# Both chains are pulled one item at a time; nothing is buffered beyond one
# character's signals or one run's bits.  Decoding is fail-fast: the first
# codec error propagates and no partial text is returned.
# =============================================================================

from __future__ import annotations
import io
from typing import BinaryIO, NamedTuple

from MSCE.SMM.constants import READ_CHUNK_SIZE
from MSCE.SGM.preprocess import Preprocessor
from MSCE.SGM.signal_writer import SignalWriter
from MSCE.SGM.text_encoder import TextEncoder
from MSCE.SVM.signal_reader import SignalReader
from MSCE.SVM.text_decoder import TextDecoder


class EncodeStats(NamedTuple):
    chars_in: int   # characters after preprocessing
    skipped:  int   # unrecognized characters dropped (skip mode)
    signals:  int
    bits:     int   # payload bits, excluding padding
    padding:  int   # 0-7


def read_text(source: BinaryIO | io.TextIOBase, encoding: str = "utf-8") -> str:
    """Read all of `source`, decoding bytes as `encoding` when needed."""
    data = source.read()
    if isinstance(data, bytes):
        return data.decode(encoding)
    return data


def encode_stream(
    source: BinaryIO | io.TextIOBase,
    sink: BinaryIO,
    skip_unrecognized: bool = False,
    preprocess: Preprocessor | None = None,
) -> EncodeStats:
    """
    Encode all text from `source` into the bitstream on `sink`.

    Args:
        source:            Binary or text stream.  Read eagerly.
        sink:              Binary stream receiving the packed bits.
        skip_unrecognized: Drop characters outside the table instead of
                           sending the fallback code.
        preprocess:        Optional text → text callable applied first.

    Returns:
        EncodeStats for the run.
    """
    text = read_text(source)
    if preprocess is not None:
        text = preprocess(text)

    encoder = TextEncoder(text, skip_unrecognized=skip_unrecognized)
    writer  = SignalWriter(sink)
    writer.write_all(encoder)
    padding = writer.finish()

    return EncodeStats(
        chars_in=len(text),
        skipped=encoder.skipped,
        signals=writer.signals_written,
        bits=writer.bits_written,
        padding=padding,
    )


def decode_stream(source: BinaryIO, chunk_size: int = READ_CHUNK_SIZE) -> str:
    """
    Decode the bitstream on `source` to text.

    Raises:
        UnrecognizedRunLength, NotFound: corrupt transmission.  Any text
        decoded before the error is discarded.
    """
    signals = SignalReader.from_stream(source, chunk_size)
    return "".join(TextDecoder(signals))


# ── In-memory convenience wrappers ──────────────────────────────────────────

def encode_text(
    text: str,
    skip_unrecognized: bool = False,
    preprocess: Preprocessor | None = None,
) -> bytes:
    sink = io.BytesIO()
    encode_stream(io.StringIO(text), sink, skip_unrecognized, preprocess)
    return sink.getvalue()


def decode_bytes(data: bytes) -> str:
    return decode_stream(io.BytesIO(data))
