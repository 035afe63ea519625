"""PNG document model: signature plus an ordered list of chunks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..exceptions import ChunkNotFoundError, InvalidSignatureError
from .chunk import Chunk

logger = logging.getLogger(__name__)

SIGNATURE = bytes([137, 80, 78, 71, 13, 10, 26, 10])


class Png:
    """In-memory view of a PNG file's chunk structure.

    The document owns its chunks.  Parsing either yields a fully validated
    document or raises; partially parsed documents are never returned.
    """

    SIGNATURE = SIGNATURE

    def __init__(self, chunks: Optional[Iterable[Chunk]] = None) -> None:
        self._chunks: List[Chunk] = list(chunks or [])

    @classmethod
    def from_chunks(cls, chunks: Iterable[Chunk]) -> "Png":
        return cls(chunks)

    @classmethod
    def parse(cls, buffer: bytes) -> "Png":
        """Parse a complete PNG file held in *buffer*."""

        header = bytes(buffer[: len(SIGNATURE)])
        if header != SIGNATURE:
            raise InvalidSignatureError(header)

        chunks: List[Chunk] = []
        offset = len(SIGNATURE)
        while offset < len(buffer):
            chunk, consumed = Chunk.parse_prefix(buffer, offset)
            chunks.append(chunk)
            offset += consumed

        logger.debug("parsed png document with %d chunks", len(chunks))
        return cls(chunks)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Png":
        data = Path(path).read_bytes()
        logger.info("read %d bytes from %s", len(data), path)
        return cls.parse(data)

    @property
    def header(self) -> bytes:
        return SIGNATURE

    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def append_chunk(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)
        logger.debug("appended %s chunk at position %d", chunk.chunk_type, len(self._chunks) - 1)

    def _index_of(self, code: str) -> Optional[int]:
        for index, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == code:
                return index
        return None

    def chunk_by_type(self, code: str) -> Optional[Chunk]:
        """Return the first chunk whose type renders as *code*, if any."""

        index = self._index_of(code)
        if index is None:
            return None
        return self._chunks[index]

    def remove_chunk(self, code: str) -> Chunk:
        """Detach and return the first chunk of type *code*."""

        index = self._index_of(code)
        if index is None:
            raise ChunkNotFoundError(code)
        chunk = self._chunks.pop(index)
        logger.debug("removed %s chunk from position %d", code, index)
        return chunk

    def as_bytes(self) -> bytes:
        return b"".join([SIGNATURE, *(chunk.as_bytes() for chunk in self._chunks)])

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self._chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def __str__(self) -> str:
        lines = ["Png {"]
        for chunk in self._chunks:
            lines.extend(f"  {line}" for line in str(chunk).splitlines())
        lines.append("}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        types = ", ".join(str(chunk.chunk_type) for chunk in self._chunks)
        return f"Png([{types}])"


__all__ = ["Png", "SIGNATURE"]
