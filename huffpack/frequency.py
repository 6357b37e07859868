"""Byte frequency table and Huffman tree nodes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A Huffman tree node; leaves carry a byte value."""

    frequency: int = 0
    byte: int | None = None
    left: Node | None = None
    right: Node | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class FrequencyTable:
    """Leaf nodes for each byte value seen, in order of first appearance."""

    def __init__(self) -> None:
        self.nodes: list[Node | None] = []

    @classmethod
    def from_bytes(cls, data: bytes) -> FrequencyTable:
        table = cls()
        for byte in data:
            table.include_byte(byte)
        return table

    def include_byte(self, byte: int) -> Node:
        """Count one occurrence of a byte, creating its leaf if needed."""
        if not 0 <= byte <= 255:
            raise ValueError(f"not a byte value: {byte}")
        for node in self.nodes:
            if node is not None and node.byte == byte:
                node.frequency += 1
                return node
        node = Node(frequency=1, byte=byte)
        self.nodes.append(node)
        return node

    def compact(self) -> int:
        """Drop empty slots, keeping order; return the number of nodes."""
        self.nodes = [node for node in self.nodes if node is not None]
        return len(self.nodes)

    def sort_by_frequency(self) -> None:
        """Order nodes by ascending frequency; ties keep their order."""
        self.compact()
        self.nodes.sort(key=lambda node: node.frequency)

    def frequency_of(self, byte: int) -> int:
        for node in self.nodes:
            if node is not None and node.byte == byte:
                return node.frequency
        return 0

    def __len__(self) -> int:
        return sum(node is not None for node in self.nodes)