"""
Errors raised while building codebooks and reading or writing
huffbook containers.
"""


class HuffbookError(ValueError):
    """Base class for every huffbook failure."""


class InvalidSignatureError(HuffbookError):
    """The container does not start with the huffbook signature."""


class MalformedContainerError(HuffbookError):
    """
    The container is corrupted or desynchronized: a separator byte does not
    match, a field is truncated or the recorded values are inconsistent.
    """


class CodeTooLongError(HuffbookError):
    """A derived code does not fit into the maximum code width."""

    def __init__(self, symbol: int, num_bits: int, max_bits: int) -> None:
        super().__init__(
            f"Code for symbol {symbol:#x} needs {num_bits} bits, "
            f"maximum is {max_bits}"
        )
        self.symbol = symbol
        self.num_bits = num_bits
        self.max_bits = max_bits


class InvalidCodeBookError(HuffbookError):
    """The codebook entries do not form a valid prefix-free code."""


class HuffbookIOError(HuffbookError):
    """Opening, reading or writing the underlying stream failed."""
