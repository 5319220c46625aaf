"""Huffman code construction, compression and decompression."""

from __future__ import annotations

import heapq
from typing import IO, Iterable, Mapping, Optional, Union

from .bitstream import BitWriter
from .node import EOF_SYMBOL, FILE_END, MERGED_SYMBOL, HuffmanNode


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"not a byte value: {value}")
    return value


def _parse_key(text: str) -> int:
    try:
        key = int(text.strip())
    except ValueError:
        raise ValueError(f"invalid key in code table: {text!r}") from None
    if key == FILE_END:
        return EOF_SYMBOL
    if -128 <= key < 0:
        # keys written from signed characters
        return key + 256
    return _check_byte(key)


def _is_symbol(node: HuffmanNode) -> bool:
    return node.data != MERGED_SYMBOL


def _insert(root: Optional[HuffmanNode], symbol: int, code: str) -> HuffmanNode:
    leaf = HuffmanNode(symbol, -1)
    if not code:
        if root is not None:
            raise ValueError(f"conflicting code for symbol {symbol}")
        return leaf
    if root is None:
        root = HuffmanNode(MERGED_SYMBOL, -1)
    elif _is_symbol(root):
        raise ValueError(f"conflicting code for symbol {symbol}")
    node = root
    *path, last = code
    for ch in path:
        side = "left" if ch == "0" else "right"
        child = getattr(node, side)
        if child is None:
            child = HuffmanNode(MERGED_SYMBOL, -1)
            setattr(node, side, child)
        elif _is_symbol(child):
            raise ValueError(f"conflicting code for symbol {symbol}")
        node = child
    side = "left" if last == "0" else "right"
    if getattr(node, side) is not None:
        raise ValueError(f"conflicting code for symbol {symbol}")
    setattr(node, side, leaf)
    return root


class HuffmanTree:
    """A Huffman code over byte values plus an end-of-file marker."""

    def __init__(self, root: Optional[HuffmanNode]) -> None:
        self.root = root

    @classmethod
    def from_counts(cls, counts: Mapping[int, int]) -> "HuffmanTree":
        """Build the optimal tree for the given byte frequencies."""
        if not counts:
            raise ValueError("Character counts is empty.")
        heap = [HuffmanNode(EOF_SYMBOL, 1)]
        heap.extend(
            HuffmanNode(_check_byte(byte), freq) for byte, freq in sorted(counts.items())
        )
        heapq.heapify(heap)
        while len(heap) > 1:
            first = heapq.heappop(heap)
            second = heapq.heappop(heap)
            heapq.heappush(
                heap,
                HuffmanNode(
                    MERGED_SYMBOL, first.frequency + second.frequency, first, second
                ),
            )
        return cls(heap[0])

    @classmethod
    def from_code_lines(cls, lines: Iterable[str]) -> "HuffmanTree":
        """Rebuild a tree from alternating key and code lines of a saved code table."""
        root: Optional[HuffmanNode] = None
        it = iter(lines)
        for key_line in it:
            key_text = key_line.rstrip("\r\n")
            try:
                code_line = next(it)
            except StopIteration:
                raise ValueError(f"missing code for key {key_text!r}") from None
            root = _insert(root, _parse_key(key_text), code_line.rstrip("\r\n"))
        return cls(root)

    def _require_root(self) -> HuffmanNode:
        if self.root is None:
            raise ValueError("Cannot create encodings from an empty tree.")
        return self.root

    def encodings(self) -> dict[int, str]:
        """Map each byte, and ``FILE_END`` for the end marker, to its bit string."""
        stack = [(self._require_root(), "")]
        codes: dict[int, str] = {}
        while stack:
            node, code = stack.pop()
            if node.is_leaf():
                codes[FILE_END if node.data == EOF_SYMBOL else node.data] = code
                continue
            if node.right is not None:
                stack.append((node.right, code + "1"))
            if node.left is not None:
                stack.append((node.left, code + "0"))
        return dict(sorted(codes.items()))

    def compress(self, data: Union[bytes, bytearray, IO[bytes]], output: BitWriter) -> None:
        """Write the codes of ``data`` followed by the end marker, then close ``output``."""
        codes = self.encodings()
        if hasattr(data, "read"):
            data = data.read()
        if FILE_END not in codes:
            raise ValueError("code table has no end-of-file code")
        for byte in data:
            try:
                output.write_bits(codes[byte])
            except KeyError:
                raise ValueError(f"byte {byte} has no code") from None
        output.write_bits(codes[FILE_END])
        output.close()

    def decompress(self, bits: Iterable[int], output: BitWriter) -> None:
        """Decode ``bits`` into ``output`` until the end marker; close it when found."""
        root = self._require_root()
        if root.is_leaf():
            for _ in bits:
                if root.data == EOF_SYMBOL:
                    break
                output.write(root.data)
            output.close()
            return
        node = root
        for bit in bits:
            node = node.left if bit == 0 else node.right
            if node is None:
                raise ValueError("bit sequence matches no code")
            if node.is_leaf():
                if node.data == EOF_SYMBOL:
                    output.close()
                    return
                output.write(node.data)
                node = root