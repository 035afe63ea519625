"""High level operations for hiding messages in PNG chunks.

The byte-level functions are pure transformations over a complete file
buffer.  The ``*_file`` helpers load the document with
:meth:`~pngstego.png.Png.from_file` and write results back so the CLI stays a
thin layer.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from .png import Chunk, ChunkType, Png

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _append_message(png: Png, code: str, message: str) -> None:
    png.append_chunk(Chunk(ChunkType.from_str(code), message.encode("utf-8")))


def _find_message(png: Png, code: str) -> Optional[str]:
    chunk = png.chunk_by_type(code)
    if chunk is None:
        return None
    return chunk.data_as_string()


def _detach_message(png: Png, code: str) -> str:
    # Decoded before anything is written, so an undecodable payload leaves the file alone.
    return png.remove_chunk(code).data_as_string()


def encode_message(png_bytes: bytes, code: str, message: str) -> bytes:
    """Append *message* as a chunk of type *code* and return the new file bytes."""

    png = Png.parse(png_bytes)
    _append_message(png, code, message)
    return png.as_bytes()


def decode_message(png_bytes: bytes, code: str) -> Optional[str]:
    """Return the message stored under *code*, or ``None`` when absent."""

    return _find_message(Png.parse(png_bytes), code)


def remove_message(png_bytes: bytes, code: str) -> Tuple[bytes, str]:
    """Remove the first chunk of type *code*.

    Returns the rewritten file bytes together with the removed message.
    Raises :class:`~pngstego.exceptions.ChunkNotFoundError` when no chunk of
    that type exists.
    """

    png = Png.parse(png_bytes)
    message = _detach_message(png, code)
    return png.as_bytes(), message


def list_chunks(png_bytes: bytes) -> str:
    return str(Png.parse(png_bytes))


def _write(path: PathLike, png: Png) -> None:
    data = png.as_bytes()
    Path(path).write_bytes(data)
    logger.info("wrote %d bytes to %s", len(data), path)


def encode_file(path: PathLike, code: str, message: str, output: Optional[PathLike] = None) -> Path:
    """Encode *message* into the PNG at *path*; write to *output* or in place."""

    png = Png.from_file(path)
    _append_message(png, code, message)
    out_path = Path(output) if output is not None else Path(path)
    _write(out_path, png)
    return out_path


def decode_file(path: PathLike, code: str) -> Optional[str]:
    return _find_message(Png.from_file(path), code)


def remove_file(path: PathLike, code: str) -> str:
    """Remove the message stored under *code* from *path*, rewriting it in place."""

    png = Png.from_file(path)
    message = _detach_message(png, code)
    _write(path, png)
    return message


def print_file(path: PathLike) -> str:
    return str(Png.from_file(path))


__all__ = [
    "decode_file",
    "decode_message",
    "encode_file",
    "encode_message",
    "list_chunks",
    "print_file",
    "remove_file",
    "remove_message",
]
