"""Hide and recover messages in PNG chunks."""

__version__ = "1.0.0"

from .exceptions import (
    ChunkError,
    ChunkNotFoundError,
    ChunkTypeError,
    ConfigurationError,
    InvalidCrcError,
    InvalidSignatureError,
    PngError,
    PngStegoError,
)
from .png import Chunk, ChunkType, Png

__all__ = [
    "Chunk",
    "ChunkError",
    "ChunkNotFoundError",
    "ChunkType",
    "ChunkTypeError",
    "ConfigurationError",
    "InvalidCrcError",
    "InvalidSignatureError",
    "Png",
    "PngError",
    "PngStegoError",
    "__version__",
]
