from __future__ import annotations

import logging
import tomllib
from importlib.resources import files
from pathlib import Path
from typing import Any

from platformdirs import user_config_path

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.toml"

# e.g. ~/.config/rc4kit/settings.toml
USER_SETTINGS_PATH = user_config_path("rc4kit", appauthor=False) / SETTINGS_FILENAME

SAMPLE_SETTINGS = files("rc4kit.resources").joinpath("config", "settings.sample.toml")


def find_settings(explicit: Path | None = None) -> Path | None:
    """Locate the settings file to use.

    An explicit path wins and must exist. Otherwise ``./settings.toml`` is
    tried, then the per-user file.

    Args:
        explicit: Path given on the command line, if any.

    Returns:
        The settings path, or None when no file is present.

    Raises:
        FileNotFoundError: If ``explicit`` does not point to a file.
    """
    if explicit is not None:
        path = explicit.expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"Settings file not found: {path}")
        return path

    for candidate in (Path.cwd() / SETTINGS_FILENAME, USER_SETTINGS_PATH):
        if candidate.is_file():
            return candidate
    return None


def load_settings(explicit: Path | None = None) -> dict[str, Any]:
    """Read settings as a mapping; an empty one if no file is found.

    Raises:
        FileNotFoundError: If ``explicit`` does not point to a file.
        ValueError: If the file is not valid TOML.
    """
    path = find_settings(explicit)
    if path is None:
        logger.debug("No settings file found, using defaults")
        return {}

    logger.debug("Loading settings from: %s", path)
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e


def write_sample_settings(target: Path, force: bool = False) -> bool:
    """Copy the bundled sample settings to ``target``.

    Returns:
        False if ``target`` exists and ``force`` is not set, True otherwise.
    """
    if target.exists() and not force:
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(SAMPLE_SETTINGS.read_bytes())
    return True
