#!/usr/bin/env python3
"""CLI for inspecting COBS encodings."""

import argparse
import logging
import sys
from typing import List, Optional

from .cobs import decode, encode, max_encoded_length
from .errors import CobsError

log = logging.getLogger(__name__)


def read_input(args: argparse.Namespace) -> bytes:
    """Input bytes from hex arguments, or the raw contents of --input."""
    if args.input is not None:
        if args.hex:
            raise ValueError("give either hex bytes or --input, not both")
        if args.input == "-":
            return sys.stdin.buffer.read()
        with open(args.input, "rb") as f:
            return f.read()
    return bytes.fromhex(" ".join(args.hex))


def write_output(data: bytes, args: argparse.Namespace) -> None:
    if args.raw:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        print(data.hex(" "), flush=True)


def cmd_encode(args: argparse.Namespace) -> None:
    data = read_input(args)
    encoded = encode(data)
    log.debug("encoded %d bytes -> %d bytes", len(data), len(encoded))
    write_output(encoded, args)


def cmd_decode(args: argparse.Namespace) -> None:
    data = read_input(args)
    decoded = decode(data)
    log.debug("decoded %d bytes -> %d bytes", len(data), len(decoded))
    write_output(decoded, args)


def cmd_bound(args: argparse.Namespace) -> None:
    print(max_encoded_length(args.length))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m cobs_codec",
        description="COBS encode/decode tool",
        usage="""python -m cobs_codec <command> [options]
        python -m cobs_codec encode 11 22 00 33
        python -m cobs_codec decode 03 11 22 02 33
        python -m cobs_codec encode -i payload.bin --raw > payload.cobs
        python -m cobs_codec bound 1000""",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("encode", "COBS-encode bytes (no delimiter appended)"),
        ("decode", "COBS-decode bytes (stops at a zero byte)"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("hex", nargs="*", help="Input bytes as hex (e.g. 11 22 00)")
        p.add_argument(
            "-i",
            "--input",
            default=None,
            help="Read raw input bytes from file ('-' for stdin)",
        )
        p.add_argument(
            "--raw", action="store_true", help="Write raw bytes instead of hex"
        )

    p_bound = sub.add_parser("bound", help="Worst-case encoded length")
    p_bound.add_argument("length", type=int, help="Unencoded length in bytes")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "encode":
            cmd_encode(args)
        elif args.command == "decode":
            cmd_decode(args)
        elif args.command == "bound":
            cmd_bound(args)
    except (CobsError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
