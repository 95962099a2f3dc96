"""
Command line front end for the RC4 engine.

Usage:
    rc4kit encrypt -k "This is pretty long key" "Hello, World!"
    rc4kit decrypt -k "This is pretty long key" <base64 ciphertext>
    echo "Hello" | rc4kit encrypt -k secret-key -f hex
    rc4kit config init
"""

from __future__ import annotations

import argparse
import base64
import binascii
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rc4kit import __version__
from rc4kit.infra.config import ConfigAdapter, load_settings, write_sample_settings
from rc4kit.infra.config.adapter import OUTPUT_FORMATS
from rc4kit.infra.config.loader import SETTINGS_FILENAME
from rc4kit.libs.crypto import RC4, DecodingError, KeyLengthError
from rc4kit.schemas import CipherConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rc4kit",
        description="Encrypt and decrypt text with the RC4 stream cipher.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--config", type=Path, help="Path to a settings file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, target in (("encrypt", "text"), ("decrypt", "ciphertext")):
        p = sub.add_parser(name, help=f"{name.capitalize()} a message")
        p.add_argument("-k", "--key", required=True, help="Key (5 to 255 bytes)")
        p.add_argument("-e", "--encoding", help="Text encoding (default: utf-8)")
        p.add_argument(
            "-f",
            "--format",
            choices=OUTPUT_FORMATS,
            help="Ciphertext representation (default: base64)",
        )
        p.add_argument(target, nargs="?", help="Input; read from stdin if omitted")

    cfg = sub.add_parser("config", help="Manage settings files")
    cfg_sub = cfg.add_subparsers(dest="config_command", required=True)
    init = cfg_sub.add_parser("init", help="Write the sample settings.toml")
    init.add_argument(
        "--path",
        type=Path,
        default=Path.cwd() / SETTINGS_FILENAME,
        help="Destination file",
    )
    init.add_argument("--force", action="store_true", help="Overwrite existing")

    return parser


def _load_cipher_config(config_path: Path | None) -> CipherConfig:
    return ConfigAdapter(load_settings(config_path)).get_cipher_config()


def _read_input(value: str | None) -> str:
    """Return the argument, or stdin exactly as read."""
    if value is not None:
        return value
    return sys.stdin.read()


def _render(data: bytes, fmt: str) -> str:
    if fmt == "hex":
        return data.hex()
    return base64.b64encode(data).decode("ascii")


def _parse(text: str, fmt: str) -> bytes:
    text = "".join(text.split())
    try:
        if fmt == "hex":
            return bytes.fromhex(text)
        return base64.b64decode(text, validate=True)
    except (ValueError, binascii.Error) as e:
        raise ValueError(f"Invalid {fmt} ciphertext: {e}") from e


def _run_crypt(args: argparse.Namespace, cfg: CipherConfig) -> int:
    encoding = args.encoding or cfg.encoding
    fmt = args.format or cfg.output_format
    rc4 = RC4()

    if args.command == "encrypt":
        ct = rc4.encrypt_message(_read_input(args.text), args.key, encoding)
        print(_render(ct, fmt))
    else:
        data = _parse(_read_input(args.ciphertext), fmt)
        sys.stdout.write(rc4.decrypt_message(data, args.key, encoding))
    return 0


def _run_config(args: argparse.Namespace) -> int:
    target: Path = args.path
    if not write_sample_settings(target, force=args.force):
        logger.error("%s already exists (use --force to overwrite)", target)
        return 1
    logger.info("Sample settings written to %s", target)
    print(target)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "config":
        logging.basicConfig(level=logging.INFO)
        return _run_config(args)

    try:
        cfg = _load_cipher_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.WARNING)
        logger.error("Invalid configuration: %s", e)
        return 1

    level = logging.DEBUG if args.verbose else cfg.log_level
    logging.basicConfig(level=level)

    try:
        return _run_crypt(args, cfg)
    except KeyLengthError as e:
        logger.error("%s", e)
    except DecodingError as e:
        logger.error("%s (wrong key or corrupted ciphertext?)", e)
    except LookupError as e:
        logger.error("Unknown encoding: %s", e)
    except ValueError as e:
        logger.error("%s", e)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
