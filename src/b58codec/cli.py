import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import CliConfig, resolve_config
from .encoding import b58decode, b58encode
from .exceptions import Base58Error

logger = logging.getLogger("b58codec")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="b58codec", description="Encode and decode base58 strings."
    )
    parser.add_argument(
        "--config", help="JSON config file (defaults to $B58CODEC_CONFIG when set)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="encode bytes as base58")
    encode_parser.add_argument("input", nargs="?", help="text to encode; stdin when omitted")
    encode_parser.add_argument(
        "--hex", action="store_true", help="treat the input as a hex string"
    )

    decode_parser = subparsers.add_parser("decode", help="decode a base58 string")
    decode_parser.add_argument("input", nargs="?", help="base58 string; stdin when omitted")
    decode_parser.add_argument(
        "--hex", action="store_true", help="write the decoded bytes as hex"
    )
    return parser


def _read_input_bytes(value: Optional[str]) -> bytes:
    if value is not None:
        return os.fsencode(value)
    return sys.stdin.buffer.read()


def _encode(args: argparse.Namespace, config: CliConfig) -> None:
    data = _read_input_bytes(args.input)
    if args.hex or config.input_format == "hex":
        data = bytes.fromhex(data.decode("ascii").strip())
    sys.stdout.write(b58encode(data) + "\n")


def _decode(args: argparse.Namespace, config: CliConfig) -> None:
    value = _read_input_bytes(args.input).decode("utf-8").strip()
    decoded = b58decode(value)
    if args.hex or config.output_format == "hex":
        sys.stdout.write(decoded.hex() + "\n")
        return
    sys.stdout.flush()
    sys.stdout.buffer.write(decoded)
    sys.stdout.buffer.flush()


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = resolve_config(args.config)
    except (OSError, ValueError) as exc:
        logging.basicConfig(level=logging.WARNING)
        logger.error("Failed to load config: %s", exc)
        return 1

    logging.basicConfig(level=config.log_level)

    try:
        if args.command == "encode":
            _encode(args, config)
        else:
            _decode(args, config)
    except Base58Error as exc:
        logger.error("%s", exc)
        return 1
    except ValueError as exc:
        logger.error("Malformed input: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
