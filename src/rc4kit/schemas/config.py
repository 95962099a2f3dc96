"""
Defines structured configuration models using dataclasses.
"""

from dataclasses import dataclass


@dataclass
class CipherConfig:
    """Configuration for the cipher front end.

    Attributes:
        encoding: Character encoding used for both plaintext and text keys.
        output_format: How ciphertext is rendered as text ("base64" or "hex").
        log_level: Name of the root logging level.
    """

    encoding: str = "utf-8"
    output_format: str = "base64"
    log_level: str = "WARNING"
