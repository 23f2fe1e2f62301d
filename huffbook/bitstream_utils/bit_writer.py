from typing import BinaryIO

from bitarray import bitarray

from huffbook.codebook import CodeEntry


class BitWriter:
    """
    A class for writing variable-length codes to a binary stream.
    Bits are packed MSB first and every completed byte is written out
    immediately, so only a partial byte is ever held in memory.
    """

    def __init__(self, output_stream: BinaryIO) -> None:
        """
        Initialize a new BitWriter with an empty accumulator.

        Args:
            output_stream: Writable binary stream receiving the packed bytes
        """
        self.output_stream = output_stream
        self.bits = bitarray(endian="big")
        self.bits_written = 0
        self.bytes_written = 0

    def write_bit(self, bit: int) -> None:
        self.bits.append(bit)
        self.bits_written += 1
        if len(self.bits) == 8:
            self._emit()

    def write_bits_msb(self, value: int, length: int) -> None:
        """
        Write bits in MSB-first order (most significant bit first).
        Used for Huffman codes.

        Args:
            value: Integer value to write
            length: Number of bits to write

        Raises:
            ValueError: If length is negative
        """
        if length < 0:
            raise ValueError("Length cannot be negative")
        for i in range(length - 1, -1, -1):
            self.write_bit((value >> i) & 1)

    def write_code(self, entry: CodeEntry) -> None:
        self.write_bits_msb(entry.code, entry.num_bits)

    def flush(self) -> int:
        """
        Write the pending partial byte, zero padded on the low end.

        Returns:
            Number of meaningful bits written, padding excluded
        """
        if self.bits:
            self.bits.fill()
            self._emit()
        return self.bits_written

    def _emit(self) -> None:
        self.output_stream.write(self.bits.tobytes())
        self.bytes_written += 1
        self.bits.clear()

    @property
    def pending_bits(self) -> int:
        return len(self.bits)
