import argparse
import logging
import sys
from typing import List, Optional

from errors import Uuid45Error
from identifier import format_identifier, parse_identifier
from qr_capacity import ErrorCorrection, alnum_bits, minimal_version
from settings import Settings, load_settings
from uuid45 import decode_to_bytes, encode_bytes, generate_v4

logger = logging.getLogger(__name__)

STDIN_SENTINEL = "@-"
EXIT_INVALID = 2


class InputError(Exception):
    pass


def build_argparser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-q", "--quiet", action="store_true", default=argparse.SUPPRESS,
                        help="only print the primary output")

    ap = argparse.ArgumentParser(
        prog="qr-url-uuid4", parents=[common],
        description="Compact Base45 codec for UUID v4 (strips the 6 fixed version/variant bits).",
        epilog="examples:\n"
               "  qr-url-uuid4 gen\n"
               "  qr-url-uuid4 encode 550e8400-e29b-41d4-a716-446655440000\n"
               "  qr-url-uuid4 decode @- < code.txt",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("-c", "--config", help="INI configuration file (default: ./config.ini)")
    sub = ap.add_subparsers(dest="command")

    sub.add_parser("gen", parents=[common],
                   help="generate a random UUID v4 and print its Base45 form")
    pe = sub.add_parser("encode", parents=[common], help="encode a UUID into Base45")
    pe.add_argument("input", help="canonical UUID string, 32 hex digits, "
                                  f"or {STDIN_SENTINEL} to read 16 raw bytes from stdin")
    pd = sub.add_parser("decode", parents=[common], help="decode Base45 back to the UUID")
    pd.add_argument("input", help=f"Base45 string (after -- if it starts with '-'), "
                                  f"or {STDIN_SENTINEL} to read it from stdin")
    return ap


def read_identifier(arg: str) -> bytes:
    if arg == STDIN_SENTINEL:
        data = sys.stdin.buffer.read()
        if len(data) != 16:
            raise InputError(f"stdin must be 16 bytes, got {len(data)}")
        return data
    return parse_identifier(arg).bytes


def read_compact_text(arg: str) -> str:
    if arg == STDIN_SENTINEL:
        try:
            return sys.stdin.read().strip("\r\n")
        except UnicodeDecodeError as e:
            raise InputError(f"stdin is not valid text: {e}") from e
    return arg


def qr_line(text: str, level: ErrorCorrection) -> str:
    version = minimal_version(len(text), level)
    if version is None:
        return f"QR:     too long for {level.value} ({len(text)} chars)"
    return (f"QR:     version {version}-{level.value} "
            f"({len(text)} alphanumeric chars, {alnum_bits(len(text), version)} data bits)")


def cmd_gen(settings: Settings, quiet: bool) -> None:
    identifier = generate_v4()
    text = encode_bytes(identifier.bytes, policy=settings.fixed_bit_policy)
    logger.info("generated %s", identifier)
    if quiet:
        print(text)
        return
    print(f"Base45: {text}")
    print(f"UUID:   {identifier}")
    print(f"Bytes:  {identifier.bytes.hex()}")
    print(qr_line(text, settings.qr_error_correction))


def cmd_encode(settings: Settings, quiet: bool, arg: str) -> None:
    identifier = read_identifier(arg)
    text = encode_bytes(identifier, policy=settings.fixed_bit_policy)
    logger.info("encoded %s -> %s", identifier.hex(), text)
    if quiet:
        print(text)
        return
    print(f"Base45: {text}")
    print(qr_line(text, settings.qr_error_correction))


def cmd_decode(settings: Settings, quiet: bool, arg: str) -> None:
    text = read_compact_text(arg)
    identifier = decode_to_bytes(text)
    logger.info("decoded %s -> %s", text, identifier.hex())
    if quiet:
        print(format_identifier(identifier))
        return
    print(f"UUID:   {format_identifier(identifier)}")
    print(f"Bytes:  {identifier.hex()}")


def configure_logging(settings: Settings) -> None:
    if settings.log_file:
        logging.basicConfig(filename=settings.log_file, filemode="w", level=settings.log_level)
    else:
        logging.basicConfig(level=settings.log_level)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    if args.command is None:
        ap.print_help()
        return 0
    quiet = getattr(args, "quiet", False)

    try:
        settings = load_settings(args.config)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID
    configure_logging(settings)

    try:
        if args.command == "gen":
            cmd_gen(settings, quiet)
        elif args.command == "encode":
            cmd_encode(settings, quiet, args.input)
        elif args.command == "decode":
            cmd_decode(settings, quiet, args.input)
    except (Uuid45Error, InputError, OSError) as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID
    return 0


if __name__ == "__main__":
    sys.exit(main())
