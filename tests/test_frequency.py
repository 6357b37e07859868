import pytest

from huffpack.frequency import FrequencyTable, Node


def test_from_bytes_counts_each_value():
    table = FrequencyTable.from_bytes(b"banana")
    assert table.frequency_of(ord("a")) == 3
    assert table.frequency_of(ord("n")) == 2
    assert table.frequency_of(ord("b")) == 1
    assert table.frequency_of(ord("z")) == 0
    assert len(table) == 3


def test_nodes_kept_in_first_appearance_order():
    table = FrequencyTable.from_bytes(b"banana")
    assert [node.byte for node in table.nodes] == [ord("b"), ord("a"), ord("n")]


def test_include_byte_increments_existing():
    table = FrequencyTable()
    first = table.include_byte(7)
    second = table.include_byte(7)
    assert first is second
    assert first.frequency == 2


def test_include_byte_rejects_out_of_range():
    with pytest.raises(ValueError):
        FrequencyTable().include_byte(256)


def test_compact_removes_empty_slots():
    table = FrequencyTable.from_bytes(b"abc")
    table.nodes.insert(1, None)
    table.nodes.append(None)
    assert table.compact() == 3
    assert [node.byte for node in table.nodes] == [ord("a"), ord("b"), ord("c")]


def test_sort_is_stable_ascending():
    table = FrequencyTable.from_bytes(b"aaabbcdd")
    table.sort_by_frequency()
    freqs = [node.frequency for node in table.nodes]
    assert freqs == sorted(freqs)
    assert [node.byte for node in table.nodes] == [ord("c"), ord("b"), ord("d"), ord("a")]


def test_node_leaf_detection():
    leaf = Node(frequency=1, byte=65)
    inner = Node(frequency=1, left=leaf, right=Node(byte=66))
    assert leaf.is_leaf()
    assert not inner.is_leaf()