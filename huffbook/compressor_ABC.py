from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Tuple

from huffbook.errors import HuffbookIOError


class Compressor(ABC):
    """
    Interface describing compression and decompression of byte streams.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads the whole input stream, compresses its bytes and writes
        the result to the output stream.

        Args:
            input_stream: Stream with the data to compress
            output_stream: Stream receiving the compressed data

        Returns:
            Log information about the operation
        """

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads compressed data from the input stream and writes the
        restored bytes to the output stream.

        Args:
            input_stream: Stream with the compressed data
            output_stream: Stream receiving the decompressed data

        Returns:
            Log information about the operation
        """

    @classmethod
    def compress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper for compressing a file.

        Args:
            input_file: Path to the input file
            output_file: Path to the output file

        Returns:
            Log information about the compression
        """
        compressor = cls(**kwargs)
        try:
            with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
                return compressor.compress(in_file, out_file)
        except OSError as e:
            raise HuffbookIOError(f"Cannot compress '{input_file}': {e}") from e

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Helper for decompressing a file.

        Args:
            input_file: Path to the compressed file
            output_file: Path to the output file

        Returns:
            Log information about the decompression
        """
        compressor = cls(**kwargs)
        try:
            with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
                return compressor.decompress(in_file, out_file)
        except OSError as e:
            raise HuffbookIOError(f"Cannot decompress '{input_file}': {e}") from e

    @classmethod
    def compress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper for compressing bytes in memory.

        Args:
            data: Data to compress

        Returns:
            Tuple (compressed data, log information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Helper for decompressing bytes in memory.

        Args:
            data: Compressed data

        Returns:
            Tuple (decompressed data, log information)
        """
        compressor = cls(**kwargs)
        in_buffer = io.BytesIO(data)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(in_buffer, out_buffer)
        return out_buffer.getvalue(), log_info
