"""CRC helper functions."""

from __future__ import annotations

import zlib

CRC32_INITIAL = 0


def crc32(*parts: bytes) -> int:
    """Compute the CRC-32/ISO-HDLC checksum over the concatenation of *parts*.

    The checksum uses the same polynomial as :func:`zlib.crc32`, which is the
    one PNG framing specifies, and returns an unsigned 32-bit integer.
    """

    checksum = CRC32_INITIAL
    for part in parts:
        checksum = zlib.crc32(part, checksum)
    return checksum & 0xFFFFFFFF
