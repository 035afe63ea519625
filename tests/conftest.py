import struct
from pathlib import Path

import pytest

from pngstego.png import SIGNATURE, Chunk, ChunkType, Png


def _ihdr() -> Chunk:
    # 1x1 pixel, 8-bit greyscale
    data = struct.pack(">IIBBBBB", 1, 1, 8, 0, 0, 0, 0)
    return Chunk(ChunkType.from_str("IHDR"), data)


@pytest.fixture
def testing_png() -> Png:
    return Png.from_chunks(
        [
            _ihdr(),
            Chunk(ChunkType.from_str("IDAT"), b"\x78\x9c\x63\x60\x00\x00\x00\x02\x00\x01"),
            Chunk(ChunkType.from_str("IEND"), b""),
        ]
    )


@pytest.fixture
def png_bytes(testing_png: Png) -> bytes:
    return testing_png.as_bytes()


@pytest.fixture
def png_path(tmp_path: Path, png_bytes: bytes) -> Path:
    path = tmp_path / "image.png"
    path.write_bytes(png_bytes)
    return path


@pytest.fixture
def empty_png_bytes() -> bytes:
    return SIGNATURE
