"""
Symbol frequency analysis for byte input
"""

from collections import Counter
from typing import Iterable, Iterator


class FrequencyTable:
    """
    Occurrence counts of every distinct byte symbol in a message.

    Entries are kept ascending by symbol value so that tree building
    downstream is reproducible.
    """

    def __init__(self, pairs: Iterable[tuple[int, int]] = ()) -> None:
        """
        Build a table from explicit (symbol, count) pairs.

        :param pairs: iterable of (symbol, count) tuples
        """
        counts = {}
        for symbol, count in pairs:
            if not 0 <= symbol <= 0xFF:
                raise ValueError(f"Symbol {symbol} is not a byte value")
            if count < 1:
                raise ValueError(f"Count for symbol {symbol:#x} must be positive")
            if symbol in counts:
                raise ValueError(f"Duplicate symbol {symbol:#x}")
            counts[symbol] = count
        self.entries = sorted(counts.items())

    @classmethod
    def from_bytes(cls, data: bytes) -> "FrequencyTable":
        """
        Count occurrences of each symbol over the whole message.

        :param data: bytes to analyse
        :return: FrequencyTable with one entry per distinct symbol
        """
        return cls(Counter(data).items())

    @property
    def total(self) -> int:
        return sum(count for _, count in self.entries)

    @property
    def symbols(self) -> list[int]:
        return [symbol for symbol, _ in self.entries]

    def is_empty(self) -> bool:
        return not self.entries

    def as_dict(self) -> dict[int, int]:
        return dict(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self.entries)

    def __repr__(self) -> str:
        occurs = " ".join(f"{{{s:#x}: {c} times}}" for s, c in self.entries)
        return f"FrequencyTable({occurs})"
