"""Variable-length bit codes assigned to byte values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Code:
    """A growable sequence of bits, first bit first."""

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[int] = ()) -> None:
        self._bits: list[int] = []
        for bit in bits:
            self.add_bit(bit)

    def add_bit(self, value: int) -> None:
        """Append a bit; only the value 1 counts as a set bit."""
        self._bits.append(1 if value == 1 else 0)

    def drop_bit(self) -> int:
        """Remove and return the last bit."""
        if not self._bits:
            raise IndexError("cannot drop a bit from an empty code")
        return self._bits.pop()

    def copy(self) -> Code:
        """Return an independent copy of this code."""
        return Code(self._bits)

    @property
    def bits(self) -> tuple[int, ...]:
        return tuple(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Code):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(tuple(self._bits))

    def __str__(self) -> str:
        return "".join(map(str, self._bits))

    def __repr__(self) -> str:
        return f"Code('{self}')"