"""
Huffbook container format.

Layout (integers are unsigned 64-bit little-endian):

    signature      8 bytes, b"HUFFBOOK"
    symbol count   N
    N entries      symbol (1 byte), code length in bits (1 byte),
                   code value (ceil(length / 8) bytes, little-endian)
    separator      1 byte
    original len   number of symbols to decode
    separator      1 byte
    bitstream      codes packed MSB first, zero padded to a byte boundary
    separator      1 byte
    total bits     meaningful bits in the bitstream, padding excluded
"""

import struct
from typing import BinaryIO, NamedTuple

from huffbook.bitstream_utils.bit_reader import BitReader, decode_symbols
from huffbook.bitstream_utils.bit_writer import BitWriter
from huffbook.codebook import MAX_CODE_LENGTH, CodeBook, CodeEntry
from huffbook.errors import (
    HuffbookError,
    InvalidSignatureError,
    MalformedContainerError,
)

FILE_SIGN = b"HUFFBOOK"
FILE_SIGN_LEN = len(FILE_SIGN)

# Framing marker between sections, never parsed as a symbol
GROUP_SEPARATOR = 0x29

MAX_SYMBOLS = 256

U64 = struct.Struct("<Q")


class ContainerHeader(NamedTuple):
    book: CodeBook
    original_length: int


class Container(NamedTuple):
    book: CodeBook
    original_length: int
    total_bits: int
    data: bytes


def code_bytes(num_bits: int) -> int:
    return (num_bits + 7) // 8


def write_container(output_stream: BinaryIO, data: bytes, book: CodeBook) -> int:
    """
    Write data encoded with book as a complete container.

    :param output_stream: writable binary stream
    :param data: message to encode, every symbol must be in book
    :param book: CodeBook derived from data
    :return: number of meaningful bits in the bitstream
    """
    sep = bytes([GROUP_SEPARATOR])

    output_stream.write(FILE_SIGN)
    output_stream.write(U64.pack(len(book)))
    for entry in book:
        output_stream.write(bytes([entry.symbol, entry.num_bits]))
        output_stream.write(entry.code.to_bytes(code_bytes(entry.num_bits), "little"))
    output_stream.write(sep)  # end of codebook

    output_stream.write(U64.pack(len(data)))
    output_stream.write(sep)  # end of header

    writer = BitWriter(output_stream)
    for symbol in data:
        writer.write_code(book.encode_symbol(symbol))
    total_bits = writer.flush()

    output_stream.write(sep)  # end of data
    output_stream.write(U64.pack(total_bits))
    return total_bits


def _read_exact(input_stream: BinaryIO, size: int, field: str) -> bytes:
    chunk = input_stream.read(size)
    if len(chunk) != size:
        raise MalformedContainerError(
            f"Truncated {field}: expected {size} bytes, got {len(chunk)}"
        )
    return chunk


def _read_u64(input_stream: BinaryIO, field: str) -> int:
    return U64.unpack(_read_exact(input_stream, U64.size, field))[0]


def _expect_separator(input_stream: BinaryIO, section: str) -> None:
    byte = _read_exact(input_stream, 1, f"separator after {section}")
    if byte[0] != GROUP_SEPARATOR:
        raise MalformedContainerError(
            f"Invalid separator after {section}: "
            f"expected {GROUP_SEPARATOR:#04x}, got {byte[0]:#04x}"
        )


def read_header(
    input_stream: BinaryIO, max_code_length: int = MAX_CODE_LENGTH
) -> ContainerHeader:
    """
    Read and validate the signature, codebook and original length.

    :param input_stream: readable binary stream positioned at the signature
    :param max_code_length: longest code accepted in the codebook
    :return: ContainerHeader, the stream is left at the start of the bitstream
    """
    sign = input_stream.read(FILE_SIGN_LEN)
    if sign != FILE_SIGN:
        raise InvalidSignatureError(f"Invalid signature: {sign!r}")

    num_symbols = _read_u64(input_stream, "symbol count")
    if num_symbols > MAX_SYMBOLS:
        raise MalformedContainerError(f"Too many symbols in codebook: {num_symbols}")

    entries = []
    for _ in range(num_symbols):
        symbol, num_bits = _read_exact(input_stream, 2, "codebook entry")
        raw = _read_exact(input_stream, code_bytes(num_bits), "code value")
        entries.append(CodeEntry(symbol, int.from_bytes(raw, "little"), num_bits))

    try:
        book = CodeBook(entries, max_code_length)
    except HuffbookError as e:
        raise MalformedContainerError(f"Invalid codebook: {e}") from e

    _expect_separator(input_stream, "codebook")
    original_length = _read_u64(input_stream, "original length")
    _expect_separator(input_stream, "header")

    if original_length and not book:
        raise MalformedContainerError(
            f"Empty codebook cannot produce {original_length} symbols"
        )

    return ContainerHeader(book, original_length)


def read_container(
    input_stream: BinaryIO, max_code_length: int = MAX_CODE_LENGTH
) -> Container:
    """
    Read a complete container and decode its bitstream.

    :param input_stream: readable binary stream positioned at the signature
    :param max_code_length: longest code accepted in the codebook
    :return: Container with the codebook and decoded data
    """
    book, original_length = read_header(input_stream, max_code_length)

    reader = BitReader(input_stream)
    data = decode_symbols(reader, book, original_length)

    _expect_separator(input_stream, "bitstream")
    total_bits = _read_u64(input_stream, "total bits")
    if total_bits != reader.bits_consumed:
        raise MalformedContainerError(
            f"Bit count mismatch: recorded {total_bits}, "
            f"decoded {reader.bits_consumed}"
        )

    return Container(book, original_length, total_bits, bytes(data))
