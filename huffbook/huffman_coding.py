"""
Huffman coding algorithm -
tree construction from symbol frequencies
"""

import heapq
from typing import Iterable, Optional, Union

from huffbook.frequency_table import FrequencyTable


class Node:
    """
    Class object for Node in Huffman's Tree
    """

    def __init__(self, symbol: Optional[int], val_freq: int, order: int):
        """
        Function initializes the structure of a node.

        :param symbol: byte held by a leaf, None for internal nodes
        :param val_freq: int, the frequency in our data for this symbol
        :param order: int, insertion order used to break frequency ties
        """
        self.left = None
        self.right = None
        self.symbol = symbol
        self.val_freq = val_freq
        self.order = order

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __lt__(self, other):
        return (self.val_freq, self.order) < (other.val_freq, other.order)

    def __repr__(self):
        if self.is_leaf():
            return f"Node({self.symbol:#x}:{self.val_freq})"
        return f"Node(*:{self.val_freq}, {self.left!r}, {self.right!r})"


class HuffmanTree:
    """
    Class object for Huffman Tree - binary tree whose leaves are
    symbols, built by merging the two least frequent nodes.
    """

    def __init__(self, freq_table: FrequencyTable):
        """
        Function initializes the leaves of Huffman Tree.

        :param freq_table: FrequencyTable with the symbols to encode
        """
        self.root = None
        self.num_symbols = len(freq_table)
        self.nodes = [
            Node(symbol, val_freq, order)
            for order, (symbol, val_freq) in enumerate(freq_table)
        ]

    @classmethod
    def build_from_freq(
        cls, freqs: Union[FrequencyTable, Iterable[tuple[int, int]], dict]
    ) -> "HuffmanTree":
        """
        Builds Huffman tree from a frequency table or (symbol, frequency) pairs.

        :param freqs: FrequencyTable, dict {symbol: frequency} or pairs
        :return: HuffmanTree with its root set
        """
        if isinstance(freqs, dict):
            freqs = freqs.items()
        if not isinstance(freqs, FrequencyTable):
            freqs = FrequencyTable(freqs)

        tree = cls(freqs)
        tree.tree()
        return tree

    def tree(self):
        """
        Function builds Huffman Tree.

        Ties between equal frequencies go to the node inserted first,
        merged nodes are inserted after every node that already exists.
        """
        nodes = self.nodes[:]
        if not nodes:
            self.root = None
            return

        heapq.heapify(nodes)
        next_order = len(nodes)
        while len(nodes) > 1:
            # left smallest node
            l = heapq.heappop(nodes)
            # right smallest node
            r = heapq.heappop(nodes)

            new_merged_node = Node(None, l.val_freq + r.val_freq, next_order)
            new_merged_node.left, new_merged_node.right = l, r
            next_order += 1
            heapq.heappush(nodes, new_merged_node)

        self.root = nodes[0]

    def _walk(self):
        stack = [(self.root, 0)] if self.root else []
        while stack:
            node, depth = stack.pop()
            yield node, depth
            if not node.is_leaf():
                stack.append((node.right, depth + 1))
                stack.append((node.left, depth + 1))

    def node_count(self) -> int:
        return sum(1 for _ in self._walk())

    def leaf_count(self) -> int:
        return sum(1 for node, _ in self._walk() if node.is_leaf())

    def depth(self) -> int:
        """
        Maximum depth of a leaf, 0 for a single-leaf or empty tree.
        """
        return max((depth for _, depth in self._walk()), default=0)
