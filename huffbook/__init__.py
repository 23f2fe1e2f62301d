"""
huffbook - byte-oriented Huffman compressor with a self-describing
container format.
"""

from huffbook.codebook import MAX_CODE_LENGTH, CodeBook, CodeEntry
from huffbook.container import FILE_SIGN, GROUP_SEPARATOR, read_container, write_container
from huffbook.errors import (
    CodeTooLongError,
    HuffbookError,
    HuffbookIOError,
    InvalidCodeBookError,
    InvalidSignatureError,
    MalformedContainerError,
)
from huffbook.frequency_table import FrequencyTable
from huffbook.huffman_coding import HuffmanTree
from huffbook.huffman_compressor import HuffmanCompressor

__version__ = "0.1.0"


def encode(data: bytes) -> bytes:
    return HuffmanCompressor().encode(data)


def decode(blob: bytes) -> bytes:
    return HuffmanCompressor().decode(blob)
