from typing import BinaryIO

from bitarray import bitarray

from huffbook.codebook import CodeBook
from huffbook.errors import MalformedContainerError


class BitReader:
    """
    A class for reading bits MSB first from a binary stream.
    Bytes are pulled from the stream one at a time, only when all
    bits of the previous byte have been consumed.
    """

    def __init__(self, input_stream: BinaryIO) -> None:
        """
        Initialize BitReader over an opened binary stream.

        Args:
            input_stream: Readable binary stream positioned at the bitstream
        """
        self.input_stream = input_stream
        self.bits = bitarray(endian="big")
        self.pos = 0
        self.bytes_consumed = 0
        self.bits_consumed = 0

    def read_bit(self) -> int:
        """
        Read one bit from the stream.

        Returns:
            The bit value (0 or 1)

        Raises:
            EOFError: If the stream is exhausted
        """
        if self.pos >= len(self.bits):
            byte = self.input_stream.read(1)
            if not byte:
                raise EOFError("Bit stream length exceeded")
            self.bits.clear()
            self.bits.frombytes(byte)
            self.pos = 0
            self.bytes_consumed += 1
        val = self.bits[self.pos]
        self.pos += 1
        self.bits_consumed += 1
        return val

    def read_bits_msb(self, n: int) -> int:
        """
        Read n bits in MSB-first order and return as an integer.

        Args:
            n: Number of bits to read

        Returns:
            The value as an integer
        """
        val = 0
        for _ in range(n):
            val = (val << 1) | self.read_bit()
        return val


def decode_symbols(reader: BitReader, book: CodeBook, count: int) -> bytearray:
    """
    Decode exactly count symbols by matching accumulated bits against
    the codebook, one bit at a time.

    Args:
        reader: BitReader positioned at the start of the bitstream
        book: CodeBook the stream was encoded with
        count: Number of symbols to produce

    Returns:
        The decoded symbols

    Raises:
        MalformedContainerError: If the bits match no code or the stream ends early
    """
    decoded = bytearray()
    max_bits = book.max_length
    bits = 0
    bit_count = 0

    while len(decoded) < count:
        try:
            bit = reader.read_bit()
        except EOFError as e:
            raise MalformedContainerError(
                f"Bitstream ended after {len(decoded)} of {count} symbols"
            ) from e

        bits = (bits << 1) | bit
        bit_count += 1

        entry = book.search_code(bits, bit_count)
        if entry is not None:
            decoded.append(entry.symbol)
            bits = 0
            bit_count = 0
        elif bit_count >= max_bits:
            raise MalformedContainerError(
                f"No matching code after {bit_count} bits "
                f"(symbol {len(decoded)} of {count})"
            )

    return decoded
