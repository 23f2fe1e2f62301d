import io

import pytest

from huffbook.bitstream_utils.bit_reader import BitReader, decode_symbols
from huffbook.bitstream_utils.bit_writer import BitWriter
from huffbook.codebook import CodeBook, CodeEntry
from huffbook.errors import MalformedContainerError

BOOK = CodeBook([
    CodeEntry(ord("D"), 0b00, 2),
    CodeEntry(ord("B"), 0b010, 3),
    CodeEntry(ord("E"), 0b011, 3),
    CodeEntry(ord("C"), 0b10, 2),
    CodeEntry(ord("A"), 0b11, 2),
])


def test_partial_byte_is_zero_padded():
    out = io.BytesIO()
    writer = BitWriter(out)
    writer.write_bits_msb(0b101, 3)
    assert out.getvalue() == b""
    assert writer.pending_bits == 3
    assert writer.flush() == 3
    assert out.getvalue() == b"\xa0"


def test_full_bytes_are_emitted_immediately():
    out = io.BytesIO()
    writer = BitWriter(out)
    writer.write_bits_msb(0xFF, 8)
    assert out.getvalue() == b"\xff"
    assert writer.pending_bits == 0
    writer.write_bits_msb(0x1, 1)
    assert writer.flush() == 9
    assert out.getvalue() == b"\xff\x80"


def test_flush_without_pending_bits_writes_nothing():
    out = io.BytesIO()
    writer = BitWriter(out)
    assert writer.flush() == 0
    assert out.getvalue() == b""


def test_negative_length():
    with pytest.raises(ValueError):
        BitWriter(io.BytesIO()).write_bits_msb(1, -1)


def test_writers_do_not_share_state():
    out_a, out_b = io.BytesIO(), io.BytesIO()
    writer_a, writer_b = BitWriter(out_a), BitWriter(out_b)
    writer_a.write_bits_msb(0b1, 1)
    writer_b.write_bits_msb(0b0000, 4)
    writer_a.write_bits_msb(0b1, 1)
    writer_a.flush()
    writer_b.flush()
    assert out_a.getvalue() == b"\xc0"
    assert out_b.getvalue() == b"\x00"


def test_code_stream():
    out = io.BytesIO()
    writer = BitWriter(out)
    for symbol in b"AAAABCCCDDE":
        writer.write_code(BOOK.encode_symbol(symbol))
    assert writer.flush() == 24
    assert out.getvalue() == b"\xff\x55\x03"


def test_reader_msb_first():
    reader = BitReader(io.BytesIO(b"\xa0\x01"))
    assert reader.read_bits_msb(3) == 0b101
    assert reader.bytes_consumed == 1
    assert reader.read_bits_msb(13) == 1
    assert reader.bytes_consumed == 2
    assert reader.bits_consumed == 16
    with pytest.raises(EOFError):
        reader.read_bit()


def test_reader_pulls_bytes_lazily():
    stream = io.BytesIO(b"\x80\x29")
    reader = BitReader(stream)
    assert reader.read_bit() == 1
    assert stream.tell() == 1


def test_decode_symbols_stops_at_count():
    stream = io.BytesIO(b"\xff\x55\x03\x29")
    reader = BitReader(stream)
    assert decode_symbols(reader, BOOK, 11) == bytearray(b"AAAABCCCDDE")
    assert reader.bits_consumed == 24
    assert stream.read() == b"\x29"


def test_decode_symbols_single_symbol_book():
    book = CodeBook([CodeEntry(ord("A"), 0, 1)])
    reader = BitReader(io.BytesIO(b"\x00\x00"))
    assert decode_symbols(reader, book, 10) == bytearray(b"A" * 10)
    assert reader.bits_consumed == 10


def test_decode_symbols_truncated_stream():
    reader = BitReader(io.BytesIO(b"\xff"))
    with pytest.raises(MalformedContainerError):
        decode_symbols(reader, BOOK, 11)


def test_decode_symbols_unmatched_bits():
    book = CodeBook([CodeEntry(ord("A"), 0b00, 2), CodeEntry(ord("B"), 0b01, 2)])
    reader = BitReader(io.BytesIO(b"\xc0"))
    with pytest.raises(MalformedContainerError):
        decode_symbols(reader, book, 1)
