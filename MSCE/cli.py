#!/usr/bin/env python3
# =============================================================================
# cli.py — msce command line
# =============================================================================
#
# Usage:
#   echo "SOS" | python -m MSCE.cli > sos.bin
#   python -m MSCE.cli --decode sos.bin
#   python -m MSCE.cli --skip-unrecognized --stop letter.txt > letter.bin
#   echo "SOS" | python -m MSCE.cli --render
#
# Modes:
#   (default)   encode text → bitstream on stdout
#   --decode    decode bitstream → UTF-8 text + newline on stdout
#   --render    print the block timeline and dot/dash notation for the text
#
# Exit status: 0 on success, 1 on any codec error (diagnostic on stderr).
# =============================================================================

from __future__ import annotations
import sys, os, argparse
from typing import BinaryIO, TextIO

from MSCE.SMM.errors import MorseCodecError
from MSCE.SGM.preprocess import stop_preprocess
from MSCE.SGM.text_encoder import TextEncoder
from MSCE.SViz.signal_view import render_summary
from MSCE.pipeline import encode_stream, decode_stream, read_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="msce",
        description="Morse run-length bitstream encoder / decoder",
    )
    parser.add_argument(
        "input", nargs="?", default="-",
        help="Input file, default '-' (stdin)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-d", "--decode", action="store_true",
        help="Decode a bitstream to text (default is encode)",
    )
    mode.add_argument(
        "--render", action="store_true",
        help="Print block and dot/dash renderings instead of the bitstream",
    )
    parser.add_argument(
        "-s", "--skip-unrecognized", action="store_true",
        help="Drop characters outside A-Z/0-9 instead of sending '?'",
    )
    parser.add_argument(
        "--stop", action="store_true",
        help="Replace . ! ? and newlines with the word STOP before encoding",
    )
    return parser


def run(
    argv: list[str] | None,
    stdin: BinaryIO,
    stdout: BinaryIO,
    stderr: TextIO,
) -> int:
    """Run the CLI against explicit streams.  Returns the exit status."""
    args = build_parser().parse_args(argv)
    preprocess = stop_preprocess if args.stop else None

    if args.input != "-" and not os.path.exists(args.input):
        print(f"[!!] File not found: {args.input}", file=stderr)
        return 1

    try:
        source = stdin if args.input == "-" else open(args.input, "rb")
    except OSError as e:
        print(f"[!!] {e}", file=stderr)
        return 1
    try:
        if args.decode:
            text = decode_stream(source)
            stdout.write((text + "\n").encode("utf-8"))
        elif args.render:
            text = read_text(source)
            if preprocess is not None:
                text = preprocess(text)
            view = render_summary(TextEncoder(text, skip_unrecognized=args.skip_unrecognized))
            report = (
                f"{view['blocks']}\n"
                f"{view['code']}\n"
                f"[INFO] {view['signals']} signals, {view['bits']} bits\n"
            )
            stdout.write(report.encode("utf-8"))
        else:
            encode_stream(source, stdout, args.skip_unrecognized, preprocess)
    except MorseCodecError as e:
        print(f"[!!] {e}", file=stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"[!!] input is not valid UTF-8: {e}", file=stderr)
        return 1
    finally:
        if source is not stdin:
            source.close()

    stdout.flush()
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------
def main() -> None:
    sys.exit(run(None, sys.stdin.buffer, sys.stdout.buffer, sys.stderr))


if __name__ == "__main__":
    main()
