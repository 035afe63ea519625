"""Length-prefixed, checksummed chunk records."""

from __future__ import annotations

import logging
import struct
from typing import Tuple

from ..exceptions import (
    InvalidCrcError,
    NoChunkTypeProvidedError,
    NoCrcProvidedError,
    NoDataLengthProvidedError,
    NonMatchingDataLengthError,
    PayloadDecodeError,
)
from .chunk_type import ChunkType
from .crc import crc32

logger = logging.getLogger(__name__)

_U32 = struct.Struct(">I")
MAX_DATA_LENGTH = 0xFFFFFFFF


class Chunk:
    """A single PNG chunk: ``length | type | data | crc``.

    Chunks are immutable.  Fresh chunks compute their own length and CRC;
    parsed chunks have their CRC verified against the stored value.
    """

    LENGTH_LENGTH = 4
    TYPE_LENGTH = 4
    CRC_LENGTH = 4
    METADATA_LENGTH = LENGTH_LENGTH + TYPE_LENGTH + CRC_LENGTH

    __slots__ = ("_length", "_chunk_type", "_data", "_crc")

    def __init__(self, chunk_type: ChunkType, data: bytes) -> None:
        data = bytes(data)
        if len(data) > MAX_DATA_LENGTH:
            raise ValueError("Invalid data size for chunk creation")
        self._length = len(data)
        self._chunk_type = chunk_type
        self._data = data
        self._crc = self.calculate_crc(chunk_type, data)

    @staticmethod
    def calculate_crc(chunk_type: ChunkType, data: bytes) -> int:
        return crc32(chunk_type.code, data)

    @classmethod
    def parse(cls, buffer: bytes) -> "Chunk":
        """Parse the chunk at the start of *buffer*.

        Bytes following the CRC are ignored; use :meth:`parse_prefix` to learn
        how many bytes the record occupied.
        """

        chunk, _ = cls.parse_prefix(buffer)
        return chunk

    @classmethod
    def parse_prefix(cls, buffer: bytes, offset: int = 0) -> Tuple["Chunk", int]:
        """Parse the chunk starting at *offset* and return it with its size."""

        view = memoryview(buffer)[offset:]

        if len(view) < cls.LENGTH_LENGTH:
            raise NoDataLengthProvidedError()
        (length,) = _U32.unpack(view[: cls.LENGTH_LENGTH])
        view = view[cls.LENGTH_LENGTH :]

        if len(view) < cls.TYPE_LENGTH:
            raise NoChunkTypeProvidedError()
        chunk_type = ChunkType(view[: cls.TYPE_LENGTH])
        view = view[cls.TYPE_LENGTH :]

        if len(view) < length:
            raise NonMatchingDataLengthError(length, len(view))
        data = bytes(view[:length])
        view = view[length:]

        if len(view) < cls.CRC_LENGTH:
            raise NoCrcProvidedError()
        (crc,) = _U32.unpack(view[: cls.CRC_LENGTH])

        actual_crc = cls.calculate_crc(chunk_type, data)
        if crc != actual_crc:
            raise InvalidCrcError(crc, actual_crc)

        chunk = cls.__new__(cls)
        chunk._length = length
        chunk._chunk_type = chunk_type
        chunk._data = data
        chunk._crc = crc
        logger.debug("parsed %s chunk with %d data bytes", chunk_type, length)
        return chunk, cls.METADATA_LENGTH + length

    @property
    def length(self) -> int:
        return self._length

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    def as_bytes(self) -> bytes:
        return b"".join(
            (
                _U32.pack(self._length),
                self._chunk_type.code,
                self._data,
                _U32.pack(self._crc),
            )
        )

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def data_as_string(self) -> str:
        """Return the payload decoded as UTF-8 text."""

        try:
            return self._data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PayloadDecodeError(str(exc)) from exc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return (
            self._chunk_type == other._chunk_type
            and self._data == other._data
            and self._crc == other._crc
        )

    def __hash__(self) -> int:
        return hash((self._chunk_type, self._data))

    def __str__(self) -> str:
        return "\n".join(
            [
                "Chunk {",
                f"  Length: {self._length}",
                f"  Type: {self._chunk_type}",
                f"  Data: {len(self._data)} bytes",
                f"  Crc: {self._crc}",
                "}",
            ]
        )

    def __repr__(self) -> str:
        return f"Chunk(type={str(self._chunk_type)!r}, length={self._length}, crc={self._crc})"


__all__ = ["Chunk", "MAX_DATA_LENGTH"]
