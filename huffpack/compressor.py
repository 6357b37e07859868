"""Huffman compression of byte strings and files.

The output is the serialised tree (``b'1'`` plus the byte for a leaf,
``b'0'`` followed by both subtrees for an inner node), a ``b'\\n'``
separator, then the code bits packed most significant bit first with
the last byte padded by zero bits.
"""

from __future__ import annotations

import io
import os
from typing import BinaryIO

from huffpack.frequency import FrequencyTable, Node
from huffpack.tree import build_tree, generate_codes


class CompressionError(Exception):
    """Raised when data cannot be compressed."""


def save_tree(stream: BinaryIO, root: Node | None) -> None:
    """Write the tree in pre-order to a binary stream."""
    if root is None:
        return
    if root.is_leaf():
        stream.write(b"1")
        stream.write(bytes([root.byte]))
    else:
        stream.write(b"0")
        save_tree(stream, root.left)
        save_tree(stream, root.right)


def compress(data: bytes) -> bytes:
    """Compress a byte string; empty input cannot be compressed."""
    root = build_tree(FrequencyTable.from_bytes(data))
    if root is None:
        raise CompressionError("nothing to compress: input is empty")
    codes = generate_codes(root)

    out = io.BytesIO()
    save_tree(out, root)
    out.write(b"\n")

    packed = bytearray()
    buffer = 0
    count = 0
    for byte in data:
        for bit in codes[byte]:
            buffer = (buffer << 1) | bit
            count += 1
            if count == 8:
                packed.append(buffer)
                buffer = 0
                count = 0
    if count:
        packed.append(buffer << (8 - count))
    out.write(packed)
    return out.getvalue()


def compress_file(original: str | os.PathLike, compressed: str | os.PathLike) -> None:
    """Compress the file ``original`` into ``compressed``."""
    try:
        with open(original, "rb") as source:
            data = source.read()
    except OSError as exc:
        raise CompressionError(f"cannot read {os.fspath(original)}: {exc}") from exc
    result = compress(data)
    try:
        with open(compressed, "wb") as target:
            target.write(result)
    except OSError as exc:
        raise CompressionError(f"cannot write {os.fspath(compressed)}: {exc}") from exc