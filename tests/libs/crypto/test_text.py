import pytest

from rc4kit.libs.crypto.errors import DecodingError
from rc4kit.libs.crypto.text import decode_text, encode_text, normalize_encoding


def test_encode_decode_default_utf8():
    text = "Привет, Мир!"
    data = encode_text(text)
    assert data == text.encode("utf-8")
    assert decode_text(data) == text


def test_decode_accepts_bytearray():
    assert decode_text(bytearray(b"abc")) == "abc"


def test_decode_invalid_bytes_raises():
    with pytest.raises(DecodingError) as exc:
        decode_text(b"\xff\xfe\xfd", "utf-8")

    assert exc.value.encoding == "utf-8"
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
    assert isinstance(exc.value, ValueError)


def test_mismatched_encoding_does_not_round_trip():
    data = encode_text("Привет", "cp1251")
    with pytest.raises(DecodingError):
        decode_text(data, "utf-8")


@pytest.mark.parametrize(
    "name, expected",
    [("UTF8", "utf-8"), ("utf_8", "utf-8"), ("latin-1", "iso8859-1")],
)
def test_normalize_encoding(name, expected):
    assert normalize_encoding(name) == expected


def test_normalize_unknown_encoding():
    with pytest.raises(LookupError):
        normalize_encoding("no-such-codec")
