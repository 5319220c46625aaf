# huffpress

Compress and decompress files with Huffman coding.

When you compress a file, you get two outputs:

- a **code file**: a plain-text table with two lines for each symbol. The
  first line holds the symbol's byte value, and `-1` stands for the
  end-of-data marker. The second line holds the symbol's code as a string of
  `0` and `1` characters.
- a **compressed file**: the packed bits of every input byte's code, followed
  by the code of the end-of-data marker. The last byte is padded with zeros.

To decompress, you need both the compressed file and its code file.

## Installation

```
pip install .
```

For development and tests:

```
pip install .[test]
pytest
```

## Command line

```
huffpress [OPERATION] [--prefix DIR]
```

`OPERATION` is `e` or `E` to encode. Any other value decodes. If you leave it
out, the program asks `(e)ncode or (d)ecode?`. `--prefix` names a directory,
and every file name you enter is taken relative to it.

The program then asks for three file names:

| Mode   | First prompt                | Second prompt     | Third prompt                                 |
|--------|-----------------------------|-------------------|----------------------------------------------|
| encode | `input file name?`          | `code file name?` | `output file name (blank for console)?`      |
| decode | `encoded file name?`        | `code file name?` | `output file name (blank for console)?`      |

If you leave the output name blank, the result goes to standard output. Encoded
output sent to the console appears as readable `0` and `1` characters, not
packed bits.

If something goes wrong, such as a missing file, an empty input file or an
invalid code file, the program prints `error: ...` to standard error and exits
with status 1.

## Library use

```python
from huffpress.bitstream import BitReader, BitWriter
from huffpress.tree import HuffmanTree
from huffpress.cli import count_bytes

data = b"abracadabra"

tree = HuffmanTree.from_counts(count_bytes(data))
codes = tree.encodings()          # {-1 or byte value: "0101..."}

writer = BitWriter.in_memory()
tree.compress(data, writer)
packed = writer.getvalue()

# Rebuild the tree from the code table and decode.
lines = []
for symbol, code in codes.items():
    lines += [str(symbol), code]
decoder = HuffmanTree.from_code_lines(lines)

out = BitWriter.in_memory()
decoder.decompress(BitReader(packed), out)
assert out.getvalue() == data
```

### `huffpress.tree`

- `HuffmanTree.from_counts(counts)` builds a tree from a mapping of byte
  values to frequencies. The end-of-data marker is always included. An empty
  mapping raises `ValueError`.
- `HuffmanTree.from_code_lines(lines)` rebuilds a tree from alternating key
  and code lines, such as the lines of an open code file. It raises
  `ValueError` for bad keys, a missing code line or conflicting codes.
- `encodings()` returns a dict, sorted by key, that maps each byte value to
  its code. The end-of-data marker appears under key `-1`.
- `compress(data, output)` takes bytes or a binary file object. It writes the
  codes and the end-of-data marker, then closes `output`.
- `decompress(bits, output)` takes any iterable of bits, such as a
  `BitReader`. It writes decoded bytes until it reaches the end-of-data
  marker.

### `huffpress.bitstream`

- `BitReader(data)` or `BitReader.open(path)`: `read_bit()` returns `0` or
  `1`, and returns `-1` once the input is exhausted. `good()` tells you
  whether bits remain. Iterating over a reader yields its bits.
- `BitWriter.to_file(path)`, `BitWriter.to_console()` and
  `BitWriter.in_memory()`:
  - `write_bits("0110")` packs bits and skips any character other than `0`
    and `1`.
  - `write(byte)` writes a whole byte, after first padding any partly filled
    byte.
  - `close()` flushes a partly filled byte, padding it with zeros.
  - `getvalue()` returns what an in-memory writer holds.

### `huffpress.cli`

- `count_bytes(data)` counts how often each byte value occurs.
- `write_encodings(stream, codes)` and `save_encodings(path, codes)` write the
  code table format.
- `open_output(path, prefix)` opens a file writer, or a console writer when
  `path` is blank.
- `encode(prefix, ask)` and `decode(prefix, ask)` run one dialogue. `ask` is a
  prompt function and defaults to `input`.

Both bit stream classes work as context managers.

## Limitations

- The code table is always stored in a separate file. No single
  self-contained archive format is produced.
- Whole files are read into memory. Input is not processed as a stream.
- Encoding an empty file fails, because there are no byte counts to build a
  tree from.