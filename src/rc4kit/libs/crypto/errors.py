class KeyLengthError(ValueError):
    """Raised when an RC4 key length falls outside the permitted range.

    Attributes:
        min_length: Smallest accepted key length in bytes.
        max_length: Largest accepted key length in bytes.
        actual: Length of the rejected key in bytes.
    """

    def __init__(self, min_length: int, max_length: int, actual: int) -> None:
        self.min_length = min_length
        self.max_length = max_length
        self.actual = actual
        super().__init__(
            f"Key length has to be between {min_length} and {max_length}, "
            f"got {actual}"
        )


class DecodingError(ValueError):
    """Decrypted bytes are not valid text in the requested encoding.

    Usually means the key was wrong or the ciphertext was corrupted.
    """

    def __init__(self, encoding: str, reason: str = "") -> None:
        self.encoding = encoding
        msg = f"Cannot decode decrypted data as {encoding}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
