"""Huffman coding compression with bit streams and a plain-text code table."""

__version__ = "0.1.0"