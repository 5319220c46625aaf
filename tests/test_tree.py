import io
from collections import Counter

import pytest

from huffpress.bitstream import BitReader, BitWriter
from huffpress.node import FILE_END
from huffpress.tree import HuffmanTree


def round_trip(data):
    tree = HuffmanTree.from_counts(Counter(data))
    out = BitWriter.in_memory()
    tree.compress(data, out)
    packed = out.getvalue()
    result = BitWriter.in_memory()
    tree.decompress(BitReader(packed), result)
    return tree, packed, result.getvalue()


def table_lines(codes):
    lines = []
    for key, code in codes.items():
        lines += [str(key), code]
    return lines


def test_empty_counts_rejected():
    with pytest.raises(ValueError):
        HuffmanTree.from_counts({})


def test_out_of_range_count_key_rejected():
    with pytest.raises(ValueError):
        HuffmanTree.from_counts({300: 1})


def test_single_symbol_codes_eof_is_right_child():
    tree = HuffmanTree.from_counts({97: 1})
    assert tree.encodings() == {-1: "1", 97: "0"}


@pytest.mark.parametrize(
    "data",
    [b"a", b"abracadabra", bytes(range(256)), b"\xff" * 5, b"\x00\xff\x00\n\r"],
)
def test_round_trip(data):
    _, packed, result = round_trip(data)
    assert result == data


def test_packed_length_matches_code_lengths():
    data = b"mississippi river"
    tree, packed, _ = round_trip(data)
    codes = tree.encodings()
    total = sum(len(codes[b]) for b in data) + len(codes[FILE_END])
    assert len(packed) == (total + 7) // 8


def test_codes_are_prefix_free_and_cover_symbols():
    counts = Counter(b"the quick brown fox jumps over the lazy dog")
    codes = HuffmanTree.from_counts(counts).encodings()
    assert set(codes) == set(counts) | {FILE_END}
    values = list(codes.values())
    for i, first in enumerate(values):
        for j, second in enumerate(values):
            if i != j:
                assert not second.startswith(first)


def test_frequent_symbols_get_shorter_codes():
    codes = HuffmanTree.from_counts({97: 50, 98: 20, 99: 5, 100: 2}).encodings()
    assert len(codes[97]) <= len(codes[98]) <= len(codes[99]) <= len(codes[100])


def test_code_lines_rebuild_same_codes_and_decode():
    data = b"abracadabra alakazam"
    tree, packed, _ = round_trip(data)
    codes = tree.encodings()
    rebuilt = HuffmanTree.from_code_lines(table_lines(codes))
    assert rebuilt.encodings() == codes
    out = BitWriter.in_memory()
    rebuilt.decompress(BitReader(packed), out)
    assert out.getvalue() == data


def test_code_lines_with_newlines():
    tree = HuffmanTree.from_code_lines(["97\n", "0\n", "-1\n", "1\n"])
    assert tree.encodings() == {-1: "1", 97: "0"}


def test_negative_keys_map_to_high_bytes():
    tree = HuffmanTree.from_code_lines(["-2", "0", "-1", "1"])
    assert tree.encodings() == {-1: "1", 254: "0"}


@pytest.mark.parametrize(
    "lines",
    [
        ["x", "0"],
        ["97"],
        ["97", "0", "98", "0"],
        ["97", "0", "98", "01"],
        ["97", "01", "98", "0"],
        ["300", "0"],
    ],
)
def test_bad_code_lines_rejected(lines):
    with pytest.raises(ValueError):
        HuffmanTree.from_code_lines(lines)


def test_empty_tree_has_no_encodings():
    tree = HuffmanTree.from_code_lines([])
    with pytest.raises(ValueError):
        tree.encodings()
    with pytest.raises(ValueError):
        tree.decompress([0, 1], BitWriter.in_memory())


def test_decompress_stops_at_end_marker():
    tree = HuffmanTree.from_counts({97: 1})
    out = BitWriter.in_memory()
    tree.decompress([0, 1, 0, 0, 0], out)
    assert out.getvalue() == b"a"


def test_decompress_without_end_marker_keeps_output_open():
    tree = HuffmanTree.from_counts({97: 1})
    out = BitWriter.in_memory()
    tree.decompress([0, 0], out)
    out.write(98)
    assert out.getvalue() == b"aab"


def test_decompress_unknown_path_raises():
    tree = HuffmanTree.from_code_lines(["97", "00", "-1", "1"])
    with pytest.raises(ValueError):
        tree.decompress([0, 1], BitWriter.in_memory())


def test_single_leaf_tree_writes_symbol_per_bit():
    tree = HuffmanTree.from_code_lines(["65", ""])
    out = BitWriter.in_memory()
    tree.decompress(BitReader(b"\x00"), out)
    assert out.getvalue() == b"A" * 8


def test_single_eof_leaf_writes_nothing():
    tree = HuffmanTree.from_code_lines(["-1", ""])
    out = BitWriter.in_memory()
    tree.decompress([1, 0, 1], out)
    assert out.getvalue() == b""


def test_compress_unknown_byte_raises():
    tree = HuffmanTree.from_counts({97: 1})
    with pytest.raises(ValueError):
        tree.compress(b"b", BitWriter.in_memory())


def test_compress_accepts_stream_and_closes_output(tmp_path):
    data = b"stream input"
    tree = HuffmanTree.from_counts(Counter(data))
    writer = BitWriter.to_file(tmp_path / "packed.bin")
    tree.compress(io.BytesIO(data), writer)
    with pytest.raises(ValueError):
        writer.write_bits("1")
    out = BitWriter.in_memory()
    tree.decompress(BitReader.open(tmp_path / "packed.bin"), out)
    assert out.getvalue() == data