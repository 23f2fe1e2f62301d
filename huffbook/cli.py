"""
Command line entry point: encodes a message into a container file,
then reads the container back and shows or saves the decoded data.

Usage:
    huffbook -m AAAABCCCDDE
    huffbook -i input.txt -s
"""

import argparse
import io
import sys
from typing import Optional, Sequence

from huffbook.errors import HuffbookError
from huffbook.huffman_compressor import HuffmanCompressor


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="huffbook", description="Huffman encode a message and decode it back"
    )
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("-i", "--input", type=str, help="Input file to encode")
    source.add_argument("-m", "--message", type=str, help="Message to encode")
    ap.add_argument("-s", "--save", action="store_true",
                    help="Save the decoded data to a file instead of printing it")
    ap.add_argument("-o", "--output", type=str, default="out.bin",
                    help="Container file to write")
    ap.add_argument("--decoded", type=str, default="out.txt",
                    help="File receiving the decoded data with --save")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Print the frequency table, codebook and statistics")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.input:
        print(f"[Info]\tReading '{args.input}'")
        try:
            with open(args.input, "rb") as f:
                data = f.read()
        except OSError as e:
            print(f"[Error]\tCannot read '{args.input}': {e}", file=sys.stderr)
            return 1
    else:
        print("[Info]\tReading message")
        data = args.message.encode("utf-8")

    compressor = HuffmanCompressor(verbose=args.verbose)
    decoded_buffer = io.BytesIO()
    try:
        with open(args.output, "wb") as f:
            log_info = compressor.compress(io.BytesIO(data), f)
        if not args.verbose:
            print(log_info)

        print(f"[Info]\tReading '{args.output}'")
        with open(args.output, "rb") as f:
            compressor.decompress(f, decoded_buffer)
    except HuffbookError as e:
        print(f"[Error]\t{e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"[Error]\tCannot write or read '{args.output}': {e}", file=sys.stderr)
        return 1
    decoded = decoded_buffer.getvalue()

    if args.save:
        print(f"[Info]\tWriting to '{args.decoded}'")
        try:
            with open(args.decoded, "wb") as f:
                f.write(decoded)
        except OSError as e:
            print(f"[Error]\tCannot write '{args.decoded}': {e}", file=sys.stderr)
            return 1
    else:
        print(f"\n>>> {decoded.decode('utf-8', errors='replace')}")
    return 0
