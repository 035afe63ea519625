import pytest

from pngstego.api import (
    decode_file,
    decode_message,
    encode_file,
    encode_message,
    list_chunks,
    print_file,
    remove_file,
    remove_message,
)
from pngstego.exceptions import (
    ChunkNotFoundError,
    InvalidByteError,
    InvalidLengthError,
    InvalidSignatureError,
    PayloadDecodeError,
)
from pngstego.png import Chunk, ChunkType, Png


def test_encode_decode_roundtrip(png_bytes):
    encoded = encode_message(png_bytes, "ruSt", "meet at noon")
    assert encoded.startswith(png_bytes)
    assert decode_message(encoded, "ruSt") == "meet at noon"


def test_encode_appends_after_existing_chunks(png_bytes):
    encoded = encode_message(png_bytes, "ruSt", "hi")
    types = [str(chunk.chunk_type) for chunk in Png.parse(encoded)]
    assert types == ["IHDR", "IDAT", "IEND", "ruSt"]


def test_encode_unicode_message(png_bytes):
    encoded = encode_message(png_bytes, "ruSt", "پیام محرمانه ✓")
    assert decode_message(encoded, "ruSt") == "پیام محرمانه ✓"


def test_encode_rejects_bad_codes(png_bytes):
    with pytest.raises(InvalidLengthError):
        encode_message(png_bytes, "rust!", "x")
    with pytest.raises(InvalidByteError):
        encode_message(png_bytes, "ru5t", "x")


def test_decode_missing_returns_none(png_bytes):
    assert decode_message(png_bytes, "ruSt") is None


def test_decode_binary_payload_fails(png_bytes):
    png = Png.parse(png_bytes)
    png.append_chunk(Chunk(ChunkType.from_str("ruSt"), b"\xc3\x28"))
    with pytest.raises(PayloadDecodeError):
        decode_message(png.as_bytes(), "ruSt")


def test_remove_message(png_bytes):
    encoded = encode_message(png_bytes, "ruSt", "bye")
    stripped, message = remove_message(encoded, "ruSt")
    assert message == "bye"
    assert stripped == png_bytes


def test_remove_missing_message(png_bytes):
    with pytest.raises(ChunkNotFoundError):
        remove_message(png_bytes, "ruSt")


def test_list_chunks(png_bytes):
    listing = list_chunks(png_bytes)
    assert "Type: IHDR" in listing
    assert "Type: IEND" in listing


def test_operations_reject_non_png():
    with pytest.raises(InvalidSignatureError):
        decode_message(b"not a png file", "ruSt")


def test_encode_file_in_place(png_path, png_bytes):
    out_path = encode_file(png_path, "ruSt", "in place")
    assert out_path == png_path
    assert decode_file(png_path, "ruSt") == "in place"


def test_encode_file_to_output(tmp_path, png_path, png_bytes):
    output = tmp_path / "out.png"
    encode_file(png_path, "ruSt", "elsewhere", output)
    assert png_path.read_bytes() == png_bytes
    assert decode_file(output, "ruSt") == "elsewhere"


def test_remove_file(png_path, png_bytes):
    encode_file(png_path, "ruSt", "temporary")
    assert remove_file(png_path, "ruSt") == "temporary"
    assert png_path.read_bytes() == png_bytes


def test_print_file(png_path):
    assert print_file(png_path).startswith("Png {")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        decode_file(tmp_path / "missing.png", "ruSt")


def test_remove_file_keeps_file_when_payload_is_not_text(png_path):
    png = Png.from_file(png_path)
    png.append_chunk(Chunk(ChunkType.from_str("ruSt"), b"\xc3\x28"))
    original = png.as_bytes()
    png_path.write_bytes(original)

    with pytest.raises(PayloadDecodeError):
        remove_file(png_path, "ruSt")
    assert png_path.read_bytes() == original


def test_file_helpers_go_through_png_from_file(monkeypatch, png_path):
    calls = []
    from_file = Png.from_file.__func__

    def recording_from_file(cls, path):
        calls.append(path)
        return from_file(cls, path)

    monkeypatch.setattr(Png, "from_file", classmethod(recording_from_file))
    assert decode_file(png_path, "ruSt") is None
    assert print_file(png_path).startswith("Png {")
    encode_file(png_path, "ruSt", "x")
    assert remove_file(png_path, "ruSt") == "x"
    assert calls == [png_path] * 4
