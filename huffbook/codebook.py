"""
Codebook derived from a Huffman tree: bijection between symbols
and prefix-free (code, length) pairs.
"""

from typing import Iterable, Iterator, NamedTuple, Optional

from huffbook.errors import CodeTooLongError, InvalidCodeBookError
from huffbook.huffman_coding import HuffmanTree, Node

# Codes are stored in a 32-bit field on disk
MAX_CODE_LENGTH = 32


class CodeEntry(NamedTuple):
    symbol: int
    code: int
    num_bits: int

    def bitstr(self) -> str:
        """Binary representation of the code, zero padded to num_bits."""
        return format(self.code, f"0{self.num_bits}b")

    def __str__(self) -> str:
        return (
            f"CodeTable(symbol={self.symbol:#x}, code={self.bitstr()}, "
            f"num_bits={self.num_bits})"
        )


class CodeBook:
    """
    Symbol <-> code table with lookups in both directions.

    Entries keep the order they were added in (depth-first order
    when derived from a tree).
    """

    def __init__(
        self,
        entries: Iterable[CodeEntry] = (),
        max_code_length: int = MAX_CODE_LENGTH,
    ) -> None:
        self.max_code_length = max_code_length
        self.table: list[CodeEntry] = []
        self._by_symbol: dict[int, CodeEntry] = {}
        self._by_code: dict[tuple[int, int], CodeEntry] = {}

        for entry in entries:
            self._add(CodeEntry(*entry))

        if not self.is_prefix_free():
            raise InvalidCodeBookError("Codes are not prefix-free")

    def _add(self, entry: CodeEntry) -> None:
        if not 0 <= entry.symbol <= 0xFF:
            raise InvalidCodeBookError(f"Symbol {entry.symbol} is not a byte value")
        if entry.num_bits < 1:
            raise InvalidCodeBookError(
                f"Symbol {entry.symbol:#x} has an empty code"
            )
        if entry.num_bits > self.max_code_length:
            raise CodeTooLongError(entry.symbol, entry.num_bits, self.max_code_length)
        if not 0 <= entry.code < (1 << entry.num_bits):
            raise InvalidCodeBookError(
                f"Code {entry.code:#x} does not fit in {entry.num_bits} bits"
            )
        if entry.symbol in self._by_symbol:
            raise InvalidCodeBookError(f"Duplicate symbol {entry.symbol:#x}")
        if (entry.code, entry.num_bits) in self._by_code:
            raise InvalidCodeBookError(f"Duplicate code {entry.bitstr()}")

        self.table.append(entry)
        self._by_symbol[entry.symbol] = entry
        self._by_code[(entry.code, entry.num_bits)] = entry

    @classmethod
    def from_tree(
        cls, tree: HuffmanTree, max_code_length: int = MAX_CODE_LENGTH
    ) -> "CodeBook":
        """
        Derives codes by depth-first traversal of the tree: going left
        appends bit 0, going right appends bit 1.

        :param tree: built HuffmanTree, possibly empty
        :param max_code_length: longest code allowed
        :return: CodeBook with one entry per leaf
        """
        entries: list[CodeEntry] = []
        if tree.root is None:
            return cls(entries, max_code_length)

        if tree.root.is_leaf():
            # a lone symbol still needs one bit to mark its boundaries
            entries.append(CodeEntry(tree.root.symbol, 0, 1))
            return cls(entries, max_code_length)

        cls._dfs(tree.root, 0, 0, entries, max_code_length)
        return cls(entries, max_code_length)

    @classmethod
    def _dfs(
        cls,
        node: Node,
        code: int,
        length: int,
        entries: list[CodeEntry],
        max_code_length: int,
    ) -> None:
        if node.is_leaf():
            entries.append(CodeEntry(node.symbol, code, length))
            return

        length += 1
        if length > max_code_length:
            leaf = node
            while not leaf.is_leaf():
                leaf = leaf.left
            raise CodeTooLongError(leaf.symbol, length, max_code_length)

        code <<= 1
        cls._dfs(node.left, code, length, entries, max_code_length)
        cls._dfs(node.right, code | 1, length, entries, max_code_length)

    def search_symbol(self, symbol: int) -> Optional[CodeEntry]:
        return self._by_symbol.get(symbol)

    def search_code(self, code: int, num_bits: int) -> Optional[CodeEntry]:
        # code 1 and code 01 are equal as numbers, so the length is part of the key
        return self._by_code.get((code, num_bits))

    def encode_symbol(self, symbol: int) -> CodeEntry:
        entry = self._by_symbol.get(symbol)
        if entry is None:
            raise KeyError(f"Symbol {symbol:#x} not found in codebook")
        return entry

    @property
    def max_length(self) -> int:
        return max((entry.num_bits for entry in self.table), default=0)

    @property
    def num_symbols(self) -> int:
        return len(self.table)

    def is_prefix_free(self) -> bool:
        """
        Checks that no code is a bit-prefix of another one.

        After sorting the bit strings, a prefix always sorts right
        before one of its extensions, so adjacent pairs are enough.
        """
        codes = sorted(entry.bitstr() for entry in self.table)
        return not any(b.startswith(a) for a, b in zip(codes, codes[1:]))

    def weighted_length(self, freqs) -> int:
        """
        Total number of bits needed to encode a message.

        :param freqs: FrequencyTable, dict or (symbol, frequency) pairs
        :return: sum of frequency * code length
        """
        if isinstance(freqs, dict):
            freqs = freqs.items()
        return sum(count * self.encode_symbol(symbol).num_bits for symbol, count in freqs)

    def format_table(self) -> str:
        return "\n".join(f"[Info]\t{entry}" for entry in self.table)

    def __len__(self) -> int:
        return len(self.table)

    def __iter__(self) -> Iterator[CodeEntry]:
        return iter(self.table)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CodeBook):
            return NotImplemented
        return self.table == other.table

    def __repr__(self) -> str:
        return f"CodeBook({self.table!r})"
