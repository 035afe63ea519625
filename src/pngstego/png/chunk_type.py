"""Four byte chunk type codes and their property bits."""

from __future__ import annotations

from typing import Iterable, Tuple

from ..exceptions import InvalidByteError, InvalidLengthError

CODE_LENGTH = 4
PROPERTY_BIT = 1 << 5


def _is_ascii_letter(value: int) -> bool:
    return 65 <= value <= 90 or 97 <= value <= 122


class ChunkType:
    """Validated chunk type code such as ``IHDR`` or ``ruSt``.

    Each of the four bytes must be an ASCII letter.  Bit 5 of every byte
    carries one property flag; the letter case makes them readable at a
    glance (lowercase means the bit is set).
    """

    __slots__ = ("_code",)

    def __init__(self, code: Iterable[int]) -> None:
        raw = bytes(code)
        if len(raw) != CODE_LENGTH:
            raise InvalidLengthError(len(raw))
        for value in raw:
            if not _is_ascii_letter(value):
                raise InvalidByteError(value)
        self._code = raw

    @classmethod
    def from_bytes(cls, code: bytes) -> "ChunkType":
        return cls(code)

    @classmethod
    def from_str(cls, text: str) -> "ChunkType":
        """Build a chunk type from its textual form, e.g. ``"RuSt"``."""

        raw = text.encode("utf-8")
        if len(raw) != CODE_LENGTH:
            raise InvalidLengthError(len(raw))
        return cls(raw)

    @property
    def code(self) -> bytes:
        """The four raw bytes of the type code."""

        return self._code

    def __bytes__(self) -> bytes:
        return self._code

    def _is_property_bit_on(self, position: int) -> bool:
        return bool(self._code[position] & PROPERTY_BIT)

    @property
    def is_critical(self) -> bool:
        return not self._is_property_bit_on(0)

    @property
    def is_ancillary(self) -> bool:
        return self._is_property_bit_on(0)

    @property
    def is_public(self) -> bool:
        return not self._is_property_bit_on(1)

    @property
    def is_private(self) -> bool:
        return self._is_property_bit_on(1)

    @property
    def is_reserved_bit_valid(self) -> bool:
        return not self._is_property_bit_on(2)

    @property
    def is_safe_to_copy(self) -> bool:
        return self._is_property_bit_on(3)

    @property
    def is_valid(self) -> bool:
        # Only the reserved bit decides validity; the other flags are informational.
        return self.is_reserved_bit_valid

    def flags(self) -> Tuple[bool, bool, bool, bool]:
        """Return ``(critical, public, reserved_valid, safe_to_copy)``."""

        return (
            self.is_critical,
            self.is_public,
            self.is_reserved_bit_valid,
            self.is_safe_to_copy,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._code == other._code

    def __hash__(self) -> int:
        return hash(self._code)

    def __str__(self) -> str:
        # Construction guarantees ASCII letters.
        return self._code.decode("ascii")

    def __repr__(self) -> str:
        return f"ChunkType({str(self)!r})"


__all__ = ["CODE_LENGTH", "ChunkType"]
