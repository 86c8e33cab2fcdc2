"""
Command-Line Front End

Collects the message and key, enforces the minimum key length before
calling the engine, and turns engine errors into user-facing messages.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .. import __version__
from ..alphabet.symbol_table import InvalidSymbol
from ..analysis.keystream_stats import evaluate_keystream
from ..cipher_core.stream_cipher import SymbolCipher

logger = logging.getLogger(__name__)

DEFAULT_MIN_KEY_LENGTH = 4
MIN_KEY_LENGTH_ENV = 'SYMCIPHER_MIN_KEY_LENGTH'


class RequestError(ValueError):
    """A request rejected before or during encryption."""

    def __init__(self, title: str, message: str):
        self.title = title
        super().__init__(message)


def _min_key_length_from_env() -> int:
    value = os.environ.get(MIN_KEY_LENGTH_ENV)
    if value is None or value == '':
        return DEFAULT_MIN_KEY_LENGTH
    try:
        length = int(value)
    except ValueError:
        raise ValueError(f"{MIN_KEY_LENGTH_ENV} must be an integer, got {value!r}") from None
    if length < 1:
        raise ValueError(f"{MIN_KEY_LENGTH_ENV} must be at least 1")
    return length


def resolve_min_key_length(min_key_length: Optional[int] = None) -> int:
    """
    Determine the minimum key length for a request.

    Args:
        min_key_length: Explicit minimum, or None to read SYMCIPHER_MIN_KEY_LENGTH
            (default: 4 when the variable is unset)

    Returns:
        The minimum key length, at least 1

    Raises:
        RequestError: If the explicit or configured minimum is invalid
    """
    if min_key_length is None:
        try:
            return _min_key_length_from_env()
        except ValueError as e:
            raise RequestError("Configuration Error", str(e)) from e

    if min_key_length < 1:
        raise RequestError("Configuration Error",
                           f"Minimum key length must be at least 1, got {min_key_length}")
    return min_key_length


def key_information(min_key_length: int) -> str:
    """Return the key guidance text for a minimum key length."""
    return (
        "The key must be alphabet and/or number,\n"
        f"The length of key must be at least {min_key_length} characters!\n"
        "For more secure encryption try to write a long key!"
    )


def validate_request(message: str, key: str, min_key_length: Optional[int] = None) -> None:
    """
    Apply the caller-side policy before encrypting.

    Args:
        message: The message text
        key: The key text
        min_key_length: Minimum accepted key length (default: resolve_min_key_length())

    Raises:
        RequestError: If both fields are empty, the key is too short or the
            minimum itself is invalid
    """
    min_key_length = resolve_min_key_length(min_key_length)

    if not message and not key:
        raise RequestError("Empty Field!", "Please, write something to process the encryption.")

    if len(key) < min_key_length:
        raise RequestError(
            "Key Error",
            f"Please, the key must be {min_key_length} characters or longer,\n"
            "And it must be only alphabet/number!"
        )


def run_encrypt(message: str, key: str, min_key_length: Optional[int] = None) -> str:
    """
    Validate a request and encrypt the message.

    Args:
        message: The message text
        key: The key text
        min_key_length: Minimum accepted key length (default: resolve_min_key_length())

    Returns:
        The encrypted text
    """
    validate_request(message, key, min_key_length)

    try:
        return SymbolCipher().transform(message, key)
    except InvalidSymbol as e:
        logger.debug("Engine rejected input: %s", e)
        raise RequestError(
            "Input Error",
            "Please, the key and plaintext must be either alphabet or number."
        ) from e


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with the encrypt, info and analyze sub-commands.

    Returns:
        The configured parser
    """
    ap = argparse.ArgumentParser(
        prog="symcipher",
        description="Encrypt lowercase/digit/space text with the SymbolCipher stream cipher",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = ap.add_subparsers(dest="cmd", required=True)
    min_key_help = (f"Minimum key length (default: {MIN_KEY_LENGTH_ENV} "
                    f"or {DEFAULT_MIN_KEY_LENGTH})")

    p_enc = sub.add_parser("encrypt", help="Encrypt a message")
    p_enc.add_argument("-m", "--message", default=None, help="Message text (prompted if omitted)")
    p_enc.add_argument("-k", "--key", default=None, help="Key text (prompted if omitted)")
    p_enc.add_argument("--min-key-length", type=int, default=None, help=min_key_help)

    p_info = sub.add_parser("info", help="Show key guidance")
    p_info.add_argument("--min-key-length", type=int, default=None, help=min_key_help)

    p_an = sub.add_parser("analyze", help="Print keystream statistics for a key")
    p_an.add_argument("-k", "--key", required=True)
    p_an.add_argument("--length", type=int, default=1024, help="Keystream values to sample (default 1024)")

    return ap


def _inp(prompt: str) -> str:
    """Read a line from stdin, treating end of input as empty."""
    try:
        return input(prompt)
    except EOFError:
        return ""


def _reject(e: RequestError) -> int:
    logger.warning("Request rejected: %s", e.title)
    print(f"{e.title}: {e}", file=sys.stderr)
    return 2


def cmd_encrypt(args: argparse.Namespace) -> int:
    """
    Encrypt the message and print the result.

    Args:
        args: Parsed arguments with message, key and min_key_length

    Returns:
        0 on success, 2 if the request is rejected
    """
    message = args.message if args.message is not None else _inp("Message: ")
    key = args.key if args.key is not None else _inp("Key: ")

    try:
        result = run_encrypt(message, key, args.min_key_length)
    except RequestError as e:
        return _reject(e)

    print(result)
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Print the key guidance for the effective minimum key length."""
    try:
        min_key_length = resolve_min_key_length(args.min_key_length)
    except RequestError as e:
        return _reject(e)

    print(key_information(min_key_length))
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    """
    Print keystream statistics for a key.

    Args:
        args: Parsed arguments with key and length

    Returns:
        0 on success, 2 if the key or length is rejected
    """
    try:
        metrics = evaluate_keystream(args.key, args.length)
    except ValueError as e:
        logger.warning("Analysis rejected: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"Chi-square: {metrics['chi_square']:.2f}")
    print(f"Entropy: {metrics['entropy']:.4f} / {metrics['max_entropy']:.4f} bits")
    print(f"Unique values: {metrics['unique_values']}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        The process exit code
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.cmd == "encrypt":
        return cmd_encrypt(args)
    if args.cmd == "info":
        return cmd_info(args)
    return cmd_analyze(args)


if __name__ == "__main__":
    sys.exit(main())
