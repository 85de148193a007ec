"""Command-line front end: encrypt, decrypt or hash a piece of text.

Examples::

    encrypto encrypt "meet at noon" --password hunter2
    echo "AhV0..." | encrypto decrypt --copy
    encrypto hash abc --algorithm SHA-1

The password comes from ``--password``, then ``ENCRYPTO_PASSWORD``, then an
interactive prompt.
"""

from __future__ import annotations

import argparse
import getpass
import logging
import os
import sys
from enum import Enum
from typing import List, Optional, TextIO

from encrypto.core.exceptions import EncryptoError, InvalidInputError
from encrypto.core.hashing import DEFAULT_ALGORITHM, hash_text
from encrypto.security.crypto import decrypt, encrypt
from .clipboard import copy_to_clipboard
from .logging_config import configure_logging

logger = logging.getLogger(__name__)

PASSWORD_ENV = "ENCRYPTO_PASSWORD"


class Operation(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"
    HASH = "hash"

    @property
    def needs_password(self) -> bool:
        return self is not Operation.HASH


def run_operation(
    operation: Operation,
    text: str,
    password: Optional[str] = None,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Dispatch one operation; core errors propagate to the caller."""
    if operation is Operation.ENCRYPT:
        return encrypt(text, password)
    if operation is Operation.DECRYPT:
        return decrypt(text, password)
    return hash_text(text, algorithm)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="encrypto",
        description="Password-based encryption of text messages.",
    )
    parser.add_argument(
        "operation",
        choices=[op.value for op in Operation],
        help="What to do with the input text",
    )
    parser.add_argument(
        "text",
        nargs="?",
        default="-",
        help="Input text; '-' or omitted reads standard input",
    )
    parser.add_argument(
        "--password",
        default=None,
        help=f"Password (default: ${PASSWORD_ENV}, else prompt)",
    )
    parser.add_argument(
        "--algorithm",
        default=DEFAULT_ALGORITHM,
        help=f"Digest for 'hash' (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--copy",
        action="store_true",
        help="Also copy the result to the clipboard",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def _read_input(text: str, stdin: TextIO) -> str:
    if text == "-":
        text = stdin.read()
    text = text.strip()
    if not text:
        raise InvalidInputError("Please enter input text")
    return text


def _resolve_password(explicit: Optional[str]) -> str:
    password = explicit
    if password is None:
        password = os.environ.get(PASSWORD_ENV)
    if password is None:
        password = getpass.getpass("Password: ")
    if not password:
        raise InvalidInputError("Please enter a password")
    return password


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)

    operation = Operation(args.operation)
    try:
        text = _read_input(args.text, sys.stdin)
        password = _resolve_password(args.password) if operation.needs_password else None
        logger.debug("Running %s on %d characters", operation.value, len(text))
        result = run_operation(operation, text, password, args.algorithm)
    except EncryptoError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(result)
    if args.copy and copy_to_clipboard(result):
        print("Copied to clipboard", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
