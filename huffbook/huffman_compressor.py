"""
Huffman compressor tying the frequency table, tree, codebook and
container together.
"""

import io
from typing import BinaryIO

from huffbook.codebook import MAX_CODE_LENGTH, CodeBook
from huffbook.compressor_ABC import Compressor
from huffbook.container import read_container, write_container
from huffbook.frequency_table import FrequencyTable
from huffbook.huffman_coding import HuffmanTree


class HuffmanCompressor(Compressor):
    """Byte-oriented static Huffman compressor writing huffbook containers."""

    def __init__(self, max_code_length: int = MAX_CODE_LENGTH, verbose: bool = False):
        """
        Args:
            max_code_length: Longest code accepted when building or reading a codebook
            verbose: Whether to print progress information
        """
        self.max_code_length = max_code_length
        self.verbose = verbose
        self.log = []

    def _info(self, message: str) -> None:
        self.log.append(message)
        if self.verbose:
            print(f"[Info]\t{message}")

    def build_codebook(self, data: bytes) -> CodeBook:
        """
        Count symbols, build the Huffman tree and derive its codebook.
        The tree is dropped as soon as the codebook exists.
        """
        freq_table = FrequencyTable.from_bytes(data)
        self._info(
            f"Unique symbols({len(freq_table)}): "
            + " ".join(f"{symbol:#x}" for symbol in freq_table.symbols)
        )
        self._info(
            "Occurrences: "
            + " ".join(f"{{{s:#x}: {c} times}}" for s, c in freq_table)
        )

        tree = HuffmanTree.build_from_freq(freq_table)
        book = CodeBook.from_tree(tree, self.max_code_length)
        if self.verbose and book:
            print(book.format_table())
        return book

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        self.log.clear()
        data = input_stream.read()
        self._info(f"Initialized with {len(data)} octets")

        book = self.build_codebook(data)
        total_bits = write_container(output_stream, data, book)

        self._info(f"Wrote {total_bits} bits of codes")
        if data:
            avg = total_bits / len(data)
            self._info(f"Average: {avg:.2f} [bits/symbol]")
            self._info(
                f"Compression ratio: {100 * avg / 8.0:.1f}% "
                "(In case all inputs are 8-bit)"
            )
        return "\n".join(self.log)

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        self.log.clear()
        container = read_container(input_stream, self.max_code_length)
        if self.verbose and container.book:
            print(container.book.format_table())

        output_stream.write(container.data)
        self._info(
            f"Decoded {container.original_length} symbols "
            f"from {container.total_bits} bits"
        )
        return "\n".join(self.log)

    def encode(self, data: bytes) -> bytes:
        """Encode data into an in-memory container."""
        out_buffer = io.BytesIO()
        self.compress(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue()

    def decode(self, blob: bytes) -> bytes:
        """Decode an in-memory container back to the original bytes."""
        return read_container(io.BytesIO(blob), self.max_code_length).data
