"""Interactive command that Huffman-encodes or decodes a file."""

from __future__ import annotations

import argparse
import os
import sys
from collections import Counter
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence, TextIO

from .bitstream import BitReader, BitWriter
from .tree import HuffmanTree

Ask = Callable[[str], str]


def count_bytes(data: bytes) -> dict[int, int]:
    """Return how many times each byte value occurs in ``data``."""
    return dict(sorted(Counter(data).items()))


def write_encodings(stream: TextIO, codes: Mapping[int, str]) -> None:
    """Write each key on its own line followed by its code on the next."""
    for key, code in sorted(codes.items()):
        stream.write(f"{key}\n{code}\n")


def save_encodings(path: str | os.PathLike, codes: Mapping[int, str]) -> None:
    """Write the code table to the file at ``path``."""
    with open(path, "w", encoding="ascii", newline="\n") as stream:
        write_encodings(stream, codes)


def open_output(path: str, prefix: str = "") -> BitWriter:
    """Open a bit writer to ``prefix``/``path``, or to the console when ``path`` is blank."""
    if path:
        return BitWriter.to_file(os.path.join(prefix, path))
    return BitWriter.to_console()


def _file_names(kind: str, ask: Ask) -> tuple[str, str, str]:
    in_name = ask(f"{kind} file name? ")
    code_name = ask("code file name? ")
    out_name = ask("output file name (blank for console)? ")
    return in_name, code_name, out_name


def encode(prefix: str = "", ask: Optional[Ask] = None) -> None:
    """Ask for three file names and compress the first, saving its code table."""
    ask = ask or input
    in_name, code_name, out_name = _file_names("input", ask)
    data = Path(os.path.join(prefix, in_name)).read_bytes()
    tree = HuffmanTree.from_counts(count_bytes(data))
    save_encodings(os.path.join(prefix, code_name), tree.encodings())
    output = open_output(out_name, prefix)
    tree.compress(data, output)
    print("Compression succeeded.")


def decode(prefix: str = "", ask: Optional[Ask] = None) -> None:
    """Ask for three file names and decompress the first with the saved code table."""
    ask = ask or input
    in_name, code_name, out_name = _file_names("encoded", ask)
    with open(os.path.join(prefix, code_name), encoding="ascii") as stream:
        tree = HuffmanTree.from_code_lines(stream)
    with BitReader.open(os.path.join(prefix, in_name)) as reader:
        output = open_output(out_name, prefix)
        tree.decompress(reader, output)
        output.close()
    print("Decompression succeeded.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the encode/decode dialogue; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="huffpress", description="Encode or decode a file with a Huffman code."
    )
    parser.add_argument("operation", nargs="?", help="e to encode, anything else to decode")
    parser.add_argument("--prefix", default="", help="directory holding all files")
    args = parser.parse_args(argv)

    print(
        "This program can encode a file with a Huffman code "
        "or decode a file with a Huffman code."
    )
    operation = args.operation
    if operation is None:
        operation = input("(e)ncode or (d)ecode? ")
        print()
    try:
        if operation[:1] in ("e", "E"):
            encode(args.prefix)
        else:
            decode(args.prefix)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0