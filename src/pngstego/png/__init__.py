"""PNG chunk codec: type codes, chunk records and the document model."""

from .chunk import MAX_DATA_LENGTH, Chunk
from .chunk_type import CODE_LENGTH, ChunkType
from .crc import crc32
from .document import SIGNATURE, Png

__all__ = [
    "CODE_LENGTH",
    "MAX_DATA_LENGTH",
    "SIGNATURE",
    "Chunk",
    "ChunkType",
    "Png",
    "crc32",
]
