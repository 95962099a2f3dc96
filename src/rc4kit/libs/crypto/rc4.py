"""
RC4 stream cipher engine.

RC4 is cryptographically broken and provides confidentiality only: there is
no integrity check and no nonce. Never encrypt two messages with the same key.
"""

from __future__ import annotations

import logging
import types
from collections.abc import Sequence
from typing import Self

from .errors import KeyLengthError
from .text import DEFAULT_ENCODING, decode_text, encode_text

logger = logging.getLogger(__name__)

SBOX_LENGTH = 256
KEY_MIN_LENGTH = 5
KEY_MAX_LENGTH = SBOX_LENGTH - 1

KeyLike = bytes | bytearray | memoryview | str


def ksa(key: Sequence[int]) -> list[int]:
    """Perform the RC4 Key-Scheduling Algorithm (KSA).

    Args:
        key: Key bytes, each in ``[0, 255]``. Must not be empty.

    Returns:
        A permutation of ``0..255``.
    """
    S = list(range(SBOX_LENGTH))
    j = 0
    klen = len(key)
    for i in range(SBOX_LENGTH):
        j = (j + S[i] + key[i % klen]) & 0xFF
        S[i], S[j] = S[j], S[i]
    return S


class RC4:
    """RC4 cipher with explicit key lifecycle.

    The key lives in a fixed-size buffer and the S-box in a fixed-size list;
    both are overwritten in place and never reallocated, so :meth:`reset`
    clears the only copy the engine holds. The S-box is rebuilt from the key
    at the start of every :meth:`crypt` call.

    An instance is not thread-safe. Give each thread its own engine or
    serialize access.

    Example::

        with RC4("This is pretty long key") as rc4:
            ct = rc4.crypt(b"Hello, World!")
    """

    def __init__(
        self,
        key: KeyLike | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """
        Args:
            key: Optional key to install right away, see :meth:`set_key`.
            encoding: Encoding used when ``key`` is text.

        Raises:
            KeyLengthError: If ``key`` is given and its length is invalid.
        """
        self._key = bytearray(KEY_MAX_LENGTH)
        self._key_len = KEY_MAX_LENGTH
        self._sbox = [0] * SBOX_LENGTH
        if key is not None:
            self.set_key(key, encoding)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        self.reset()

    @property
    def key(self) -> bytes:
        """Copy of the active key bytes."""
        return bytes(self._key[: self._key_len])

    @property
    def sbox(self) -> list[int]:
        """Copy of the current S-box."""
        return list(self._sbox)

    def set_key(self, key: KeyLike, encoding: str = DEFAULT_ENCODING) -> None:
        """Validate and install a key.

        Args:
            key: Key bytes, or text that is encoded with ``encoding``.
            encoding: Encoding used when ``key`` is text.

        Raises:
            TypeError: If the key is neither text nor bytes-like.
            KeyLengthError: If the key is shorter than 5 or longer than
                255 bytes. The previous key is kept.
        """
        if isinstance(key, str):
            data = encode_text(key, encoding)
        elif isinstance(key, (bytes, bytearray, memoryview)):
            data = bytes(key)
        else:
            raise TypeError(
                f"Key must be str or bytes-like, not {type(key).__name__}"
            )
        klen = len(data)
        if not (KEY_MIN_LENGTH <= klen < SBOX_LENGTH):
            raise KeyLengthError(KEY_MIN_LENGTH, KEY_MAX_LENGTH, klen)

        self._key[:klen] = data
        self._key[klen:] = bytes(KEY_MAX_LENGTH - klen)
        self._key_len = klen
        logger.debug("RC4 key installed (%d bytes)", klen)

    def reset(self) -> None:
        """Zero the key buffer and the S-box in place."""
        for i in range(KEY_MAX_LENGTH):
            self._key[i] = 0
        for i in range(SBOX_LENGTH):
            self._sbox[i] = 0
        logger.debug("RC4 state cleared")

    def crypt(self, data: bytes) -> bytes:
        """Encrypts/Decrypts data

        This is the RC4 Pseudo-Random Generation Algorithm (PRGA). The
        S-box is rebuilt from the current key first, so the same key always
        yields the same keystream. Install a key before calling this; on a
        fresh engine the all-zero key is used.

        Args:
            data: Input bytes, either plaintext or ciphertext.

        Returns:
            Output bytes after XOR with the RC4 keystream.
        """
        S = self._sbox
        S[:] = ksa(memoryview(self._key)[: self._key_len])
        if not data:
            return b""

        i = 0
        j = 0
        out = bytearray(len(data))
        for idx, ch in enumerate(data):
            i = (i + 1) & 0xFF
            j = (j + S[i]) & 0xFF
            S[i], S[j] = S[j], S[i]
            t = (S[i] + S[j]) & 0xFF
            out[idx] = ch ^ S[t]
        return bytes(out)

    def encrypt_message(
        self,
        message: str,
        key: KeyLike,
        encoding: str = DEFAULT_ENCODING,
    ) -> bytes:
        """Encrypt text with a one-off key and clear the state afterwards.

        Args:
            message: Plaintext.
            key: Key, see :meth:`set_key`.
            encoding: Encoding of the message (and of ``key`` if it is text).

        Returns:
            Ciphertext bytes.

        Raises:
            KeyLengthError: If the key length is invalid.
        """
        self.reset()
        try:
            self.set_key(key, encoding)
            return self.crypt(encode_text(message, encoding))
        finally:
            self.reset()

    def decrypt_message(
        self,
        data: bytes,
        key: KeyLike,
        encoding: str = DEFAULT_ENCODING,
    ) -> str:
        """Decrypt ciphertext with a one-off key and clear the state afterwards.

        Args:
            data: Ciphertext bytes.
            key: Key, see :meth:`set_key`.
            encoding: Encoding the plaintext was encrypted with.

        Returns:
            The plaintext.

        Raises:
            KeyLengthError: If the key length is invalid.
            DecodingError: If the result is not valid text in ``encoding``.
        """
        self.reset()
        try:
            self.set_key(key, encoding)
            plain = self.crypt(data)
        finally:
            self.reset()
        return decode_text(plain, encoding)
