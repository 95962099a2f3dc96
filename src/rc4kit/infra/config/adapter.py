from __future__ import annotations

import logging
from typing import Any

from rc4kit.libs.crypto.text import normalize_encoding
from rc4kit.schemas import CipherConfig

OUTPUT_FORMATS = ("base64", "hex")


class ConfigAdapter:
    """Typed accessor over a loaded configuration mapping.

    Settings are read from the ``general`` block and fall back to the
    built-in defaults of :class:`CipherConfig`.

    Args:
        config (dict[str, Any]): Loaded configuration mapping.
    """

    def __init__(self, config: dict[str, Any]) -> None:
        self._config: dict[str, Any] = dict(config)

    def get_cipher_config(self) -> CipherConfig:
        """Build a validated CipherConfig from the general settings.

        Returns:
            CipherConfig: Resolved cipher configuration.

        Raises:
            ValueError: If the encoding is unknown or the output format
                is not supported.
        """
        general_cfg = self._gen_cfg()
        defaults = CipherConfig()

        encoding = general_cfg.get("encoding", defaults.encoding)
        try:
            encoding = normalize_encoding(str(encoding))
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {encoding}") from e

        output_format = str(
            general_cfg.get("output_format", defaults.output_format)
        ).lower()
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output_format: {output_format} "
                f"(expected one of {', '.join(OUTPUT_FORMATS)})"
            )

        log_level = str(general_cfg.get("log_level", defaults.log_level)).upper()
        if log_level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log_level: {log_level}")

        return CipherConfig(
            encoding=encoding,
            output_format=output_format,
            log_level=log_level,
        )

    def _gen_cfg(self) -> dict[str, Any]:
        general = self._config.get("general")
        return general if isinstance(general, dict) else {}
