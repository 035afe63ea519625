"""Custom exception hierarchy for the PNG steganography toolkit."""
from __future__ import annotations

from dataclasses import dataclass


class PngStegoError(Exception):
    """Base class for all pngstego errors."""


class ConfigurationError(PngStegoError):
    """Raised when user-supplied configuration is invalid."""


class ChunkTypeError(PngStegoError):
    """Raised when a chunk type code cannot be constructed."""


@dataclass
class InvalidLengthError(ChunkTypeError):
    length: int

    def __str__(self) -> str:
        return f"chunk type code is of length {self.length} but it must be of length 4"


@dataclass
class InvalidByteError(ChunkTypeError):
    byte: int

    def __str__(self) -> str:
        return f"value {self.byte} is not a valid ascii letter"


class ChunkError(PngStegoError):
    """Raised when a chunk record cannot be parsed or decoded."""


class NoDataLengthProvidedError(ChunkError):
    def __str__(self) -> str:
        return "could not find chunk data length"


class NoChunkTypeProvidedError(ChunkError):
    def __str__(self) -> str:
        return "could not find chunk type"


@dataclass
class NonMatchingDataLengthError(ChunkError):
    declared: int
    available: int

    def __str__(self) -> str:
        return (
            f"chunk data length provided {self.declared} is larger than the "
            f"{self.available} bytes available"
        )


class NoCrcProvidedError(ChunkError):
    def __str__(self) -> str:
        return "could not find chunk crc"


@dataclass
class InvalidCrcError(ChunkError):
    provided: int
    computed: int

    def __str__(self) -> str:
        return f"the crc provided {self.provided} is not equal to the calculated value {self.computed}"


@dataclass
class PayloadDecodeError(ChunkError):
    """Raised when chunk data is not valid UTF-8 text."""

    reason: str

    def __str__(self) -> str:
        return f"chunk data is not valid utf-8: {self.reason}"


class PngError(PngStegoError):
    """Raised for document level failures."""


@dataclass
class InvalidSignatureError(PngError):
    found: bytes

    def __str__(self) -> str:
        return f"invalid png signature {self.found.hex(' ') or '(empty)'}"


@dataclass
class ChunkNotFoundError(PngError):
    code: str

    def __str__(self) -> str:
        return f"could not find chunk with code {self.code}"


__all__ = [
    "ChunkError",
    "ChunkNotFoundError",
    "ChunkTypeError",
    "ConfigurationError",
    "InvalidByteError",
    "InvalidCrcError",
    "InvalidLengthError",
    "InvalidSignatureError",
    "NoChunkTypeProvidedError",
    "NoCrcProvidedError",
    "NoDataLengthProvidedError",
    "NonMatchingDataLengthError",
    "PayloadDecodeError",
    "PngError",
    "PngStegoError",
]
