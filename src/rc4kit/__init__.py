from .version import __version__ as __version__

__title__ = "rc4kit"
__description__ = "RC4 stream cipher engine with text and command line adapters."
__license__ = "Apache-2.0"

from .libs.crypto import DecodingError, KeyLengthError, RC4

__all__ = ["RC4", "KeyLengthError", "DecodingError"]
