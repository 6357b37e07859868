"""Huffman coding compression and decompression of byte strings and files."""

__version__ = "0.1.0"
__all__ = ["bitcode", "frequency", "tree", "compressor", "decompressor", "cli"]