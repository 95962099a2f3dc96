"""
RC4 stream cipher and its text adapter.
"""

__all__ = [
    "RC4",
    "ksa",
    "KeyLengthError",
    "DecodingError",
    "encode_text",
    "decode_text",
    "normalize_encoding",
]

from .errors import DecodingError, KeyLengthError
from .rc4 import RC4, ksa
from .text import decode_text, encode_text, normalize_encoding
