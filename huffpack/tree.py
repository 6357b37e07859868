"""Huffman tree construction and code generation."""

from __future__ import annotations

from huffpack.bitcode import Code
from huffpack.frequency import FrequencyTable, Node


def build_tree(table: FrequencyTable) -> Node | None:
    """Build the Huffman tree from a table; None if the table is empty.

    The two lightest nodes are joined (lighter on the left) and the new node
    goes in front of the first remaining node whose frequency is not smaller.
    The table is left holding the root alone.
    """
    table.sort_by_frequency()
    nodes = table.nodes
    while len(nodes) > 1:
        first, second = nodes[0], nodes[1]
        merged = Node(
            frequency=first.frequency + second.frequency,
            left=first,
            right=second,
        )
        del nodes[:2]
        position = next(
            (i for i, node in enumerate(nodes) if node.frequency >= merged.frequency),
            len(nodes),
        )
        nodes.insert(position, merged)
    return nodes[0] if nodes else None


def generate_codes(root: Node | None) -> dict[int, Code]:
    """Map each leaf byte to its path: 0 for left, 1 for right."""
    codes: dict[int, Code] = {}
    current = Code()

    def walk(node: Node | None) -> None:
        if node is None:
            return
        if node.is_leaf():
            codes[node.byte] = current.copy()
            return
        current.add_bit(0)
        walk(node.left)
        current.drop_bit()
        current.add_bit(1)
        walk(node.right)
        current.drop_bit()

    walk(root)
    return codes