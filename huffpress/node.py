"""Huffman tree nodes and shared constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

FILE_END = -1
"""Key used for the end-of-file marker in a saved code table."""

DEBUG = False
"""Whether console output writes ASCII 0s and 1s."""

EOF_SYMBOL = 256
"""Symbol of the end-of-file marker inside the tree; loses ties to every byte."""

MERGED_SYMBOL = 257
"""Symbol given to internal nodes; loses ties to every leaf."""


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree: a symbol, its frequency and two children."""

    data: int
    frequency: int
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def __lt__(self, other: "HuffmanNode") -> bool:
        """Lower frequency comes first; equal frequencies fall back to the smaller symbol."""
        if not isinstance(other, HuffmanNode):
            return NotImplemented
        return (self.frequency, self.data) < (other.frequency, other.data)