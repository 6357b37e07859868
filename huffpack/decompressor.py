"""Huffman decompression of data written by :mod:`huffpack.compressor`.

Every bit after the separator is decoded, the padding bits of the last
byte included, so padding may add a few trailing symbols.
"""

from __future__ import annotations

import io
import os
from typing import BinaryIO

from huffpack.frequency import Node


class DecompressionError(Exception):
    """Raised when compressed data is malformed."""


def read_tree(stream: BinaryIO) -> Node:
    """Read a pre-order serialised tree from a binary stream."""
    marker = stream.read(1)
    if marker == b"1":
        value = stream.read(1)
        if not value:
            raise DecompressionError("truncated tree: leaf without a byte")
        return Node(byte=value[0])
    if marker == b"0":
        left = read_tree(stream)
        right = read_tree(stream)
        return Node(left=left, right=right)
    if not marker:
        raise DecompressionError("truncated tree")
    raise DecompressionError(f"invalid tree marker {marker!r}")


def decompress(data: bytes) -> bytes:
    """Decompress a byte string produced by ``compress``."""
    stream = io.BytesIO(data)
    root = read_tree(stream)
    if stream.read(1) != b"\n":
        raise DecompressionError("missing separator after tree")

    payload = stream.read()
    if root.is_leaf():
        if payload:
            raise DecompressionError("payload present for a one-leaf tree")
        return b""

    out = bytearray()
    node = root
    for byte in payload:
        for shift in range(7, -1, -1):
            node = node.right if (byte >> shift) & 1 else node.left
            if node.is_leaf():
                out.append(node.byte)
                node = root
    return bytes(out)


def decompress_file(compressed: str | os.PathLike, output: str | os.PathLike) -> None:
    """Decompress the file ``compressed`` into ``output``."""
    try:
        with open(compressed, "rb") as source:
            data = source.read()
    except OSError as exc:
        raise DecompressionError(f"cannot read {os.fspath(compressed)}: {exc}") from exc
    result = decompress(data)
    try:
        with open(output, "wb") as target:
            target.write(result)
    except OSError as exc:
        raise DecompressionError(f"cannot write {os.fspath(output)}: {exc}") from exc