"""Command line entry point: print ids, passwords and encodings."""

from __future__ import annotations

import argparse
import hashlib
import logging
import sys

from idkit import __version__
from idkit.alphabets import ID_VALID_NONSTART_CHARS, ID_VALID_START_CHARS
from idkit.config import settings
from idkit.encoding import make_id_from_hash, make_random_base64_id
from idkit.errors import InvalidArgument
from idkit.identifiers import is_valid_token, make_random_id, make_random_lowercase_id
from idkit.passwords import make_random_password

logger = logging.getLogger("idkit.cli")


def text_hash(text: str) -> int:
    """Stable signed 64-bit hash of a string (first 8 bytes of its SHA-256)."""
    return int.from_bytes(hashlib.sha256(text.encode()).digest()[:8], "big", signed=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="idkit", description="Generate random ids, passwords and compact encodings")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("id", help="Random id starting with a letter")
    p.add_argument("length", type=int, nargs="?", default=settings.id_length)
    p.add_argument("--lowercase", action="store_true", help="Only lowercase letters and digits")
    p.add_argument("--count", type=int, default=1)

    p = sub.add_parser("password", help="Random password with upper, lower, digit and symbol")
    p.add_argument("length", type=int, nargs="?", default=settings.password_length)
    p.add_argument("--count", type=int, default=1)

    p = sub.add_parser("hash", help="Short id for a hash value")
    p.add_argument("value")
    p.add_argument("--text", action="store_true", help="Hash VALUE as text instead of parsing an integer")

    p = sub.add_parser("base64", help="Random base64 token")
    p.add_argument("length", type=int)

    p = sub.add_parser("validate", help="Exit 0 if TOKEN uses only the given alphabets")
    p.add_argument("token")
    p.add_argument("--start", default=ID_VALID_START_CHARS)
    p.add_argument("--nonstart", default=ID_VALID_NONSTART_CHARS)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    try:
        if args.command == "id":
            make = make_random_lowercase_id if args.lowercase else make_random_id
            for _ in range(args.count):
                print(make(args.length))
        elif args.command == "password":
            for _ in range(args.count):
                print(make_random_password(args.length))
        elif args.command == "hash":
            if args.text:
                value = text_hash(args.value)
            else:
                try:
                    value = int(args.value)
                except ValueError:
                    raise InvalidArgument(f"Not an integer: {args.value!r} (use --text to hash a string)") from None
            print(make_id_from_hash(value))
        elif args.command == "base64":
            print(make_random_base64_id(args.length))
        elif args.command == "validate":
            valid = is_valid_token(args.token, args.start, args.nonstart)
            logger.debug("Token %r valid=%s", args.token, valid)
            return 0 if valid else 1
    except InvalidArgument as e:
        print(f"idkit: error: {e}", file=sys.stderr)
        return 2
    return 0
