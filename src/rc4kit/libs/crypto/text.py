from __future__ import annotations

import codecs

from .errors import DecodingError

DEFAULT_ENCODING = "utf-8"


def normalize_encoding(name: str) -> str:
    """Return the canonical codec name for ``name``.

    Args:
        name: Encoding name such as ``"UTF8"`` or ``"latin-1"``.

    Returns:
        The codec registry's canonical name (for example ``"utf-8"``).

    Raises:
        LookupError: If the encoding is unknown.
    """
    return codecs.lookup(name).name


def encode_text(text: str, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Encode text to bytes before it is fed to the cipher.

    Args:
        text: Message text.
        encoding: Character encoding. Must match the one used to decode.

    Returns:
        Encoded bytes.
    """
    return text.encode(encoding)


def decode_text(data: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode cipher output back to text.

    Args:
        data: Decrypted bytes.
        encoding: Character encoding used when the message was encrypted.

    Returns:
        The decoded text.

    Raises:
        DecodingError: If ``data`` is not valid under ``encoding``.
    """
    try:
        return bytes(data).decode(encoding)
    except UnicodeDecodeError as e:
        raise DecodingError(encoding, e.reason) from e
