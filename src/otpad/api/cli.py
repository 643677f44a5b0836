"""
Command-line interface for the one-time pad.

Commands:
    normalize <text>          Show the normalized token stream
    keygen <length>           Generate a random key
    encrypt <text>            Encrypt under a fresh key, print key and cipher
    decrypt [--cipher] [--key]
                              Decrypt; missing values are read from stdin
    validate <text> [--key]   Check the encrypt/decrypt roundtrip
    interactive               Menu-driven session (default)

Environment:
    OTPAD_VERBOSE             Verbose output when set to 1 (default: 0)
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from typing import TextIO

from ..core.errors import InsufficientKeyLength, ParseError
from ..core.groups import format_codes, parse_codes
from ..engine import pipeline
from ..engine.keygen import generate_key
from ..engine.normalizer import normalize
from ..engine.validate import validate_roundtrip


DEFAULT_VERBOSE = os.environ.get("OTPAD_VERBOSE", "0") == "1"


def error(msg: str) -> None:
    print(f"ERROR: {msg}", file=sys.stderr)


def info(args: argparse.Namespace, msg: str) -> None:
    """Print a diagnostic line to stderr in verbose mode."""
    if args.verbose:
        print(msg, file=sys.stderr)


def read_multiline(stream: TextIO) -> str:
    """Read lines until a blank line or EOF, joined with single spaces."""
    parts = []
    while True:
        line = stream.readline()
        if not line.strip():
            break
        parts.append(line.strip())
    return " ".join(parts)


# ---- Commands ----

def cmd_normalize(args: argparse.Namespace) -> int:
    """Show normalized text."""
    print(normalize(args.text))
    return 0


def cmd_keygen(args: argparse.Namespace) -> int:
    """Generate and print a key."""
    if args.length < 0:
        error(f"Key length must be non-negative, got {args.length}")
        return 1
    print(format_codes(generate_key(args.length)))
    return 0


def cmd_encrypt(args: argparse.Namespace) -> int:
    """Encrypt text under a freshly generated key."""
    if not args.text.strip():
        error("Message is empty")
        return 1

    _print_sealed(args, args.text, args.json)
    return 0


def _print_sealed(args: argparse.Namespace, message: str, as_json: bool) -> None:
    sealed = pipeline.seal(message)
    info(args, f"Codes: {len(sealed.codes)}")

    if as_json:
        print(json.dumps({
            "normalized": sealed.normalized,
            "key": format_codes(sealed.key),
            "cipher": format_codes(sealed.cipher),
        }, indent=2, ensure_ascii=False))
        return

    print(f"Normalized:\n{sealed.normalized}\n")
    print("KEY (keep it secret, use it once):")
    print(format_codes(sealed.key))
    print("\nCIPHERTEXT (safe to send):")
    print(format_codes(sealed.cipher))


def cmd_decrypt(args: argparse.Namespace) -> int:
    """Decrypt a ciphertext with its key."""
    cipher_text = args.cipher
    if cipher_text is None:
        print("Ciphertext (groups, blank line to finish):", file=sys.stderr)
        cipher_text = read_multiline(sys.stdin)
    key_text = args.key
    if key_text is None:
        print("Key (groups, blank line to finish):", file=sys.stderr)
        key_text = read_multiline(sys.stdin)

    try:
        text = _decrypt_groups(args, cipher_text, key_text)
    except (ParseError, InsufficientKeyLength) as exc:
        error(str(exc))
        return 1

    print(text)
    return 0


def _decrypt_groups(args: argparse.Namespace, cipher_text: str, key_text: str) -> str:
    cipher = parse_codes(cipher_text)
    key = parse_codes(key_text)
    info(args, f"Cipher groups: {len(cipher)}, key groups: {len(key)}")
    return pipeline.decrypt(cipher, key)


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate the encrypt/decrypt roundtrip for text."""
    key = None
    if args.key is not None:
        try:
            key = parse_codes(args.key)
        except ParseError as exc:
            error(str(exc))
            return 1

    result = validate_roundtrip(args.text, key)
    print(f"Text:       {args.text}")
    print(f"Normalized: {result['normalized']}")
    print(f"Recovered:  {result['recovered']}")
    print(f"Codes:      {result['code_count']}, key: {result['key_length']}")
    print(f"Result:     {'PASS' if result['passed'] else 'FAIL'}")
    for line in result["errors"]:
        print(line)
    return 0 if result["passed"] else 1


def cmd_interactive(args: argparse.Namespace) -> int:
    """Menu loop: encrypt, decrypt or quit."""
    stdin = sys.stdin
    print("ONE-TIME PAD\n")

    while True:
        print("1 - Encrypt a message")
        print("2 - Decrypt with a key")
        print("3 - Quit\n")

        line = stdin.readline()
        if not line:
            break
        choice = line.strip()

        if choice == "3":
            break
        if choice == "1":
            print("Message: ", end="", flush=True)
            message = stdin.readline()
            if not message.strip():
                print("Message is empty.")
            else:
                _print_sealed(args, message.strip(), as_json=False)
        elif choice == "2":
            print("Ciphertext (groups, blank line to finish):")
            cipher_text = read_multiline(stdin)
            if not cipher_text:
                print("No ciphertext given.")
                continue
            print("Key (groups, blank line to finish):")
            key_text = read_multiline(stdin)
            if not key_text:
                print("No key given.")
                continue
            try:
                text = _decrypt_groups(args, cipher_text, key_text)
            except (ParseError, InsufficientKeyLength) as exc:
                error(str(exc))
                continue
            print(f"\nDecrypted:\n{text}")
        else:
            print("Choose 1, 2 or 3.")
        print()

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="otpad",
        description="One-time pad over Latin and Cyrillic letters with spelled-out digits and punctuation",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=DEFAULT_VERBOSE,
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    normalize_parser = subparsers.add_parser("normalize", help="Show normalized text")
    normalize_parser.add_argument("text", help="Text to normalize")
    normalize_parser.set_defaults(func=cmd_normalize)

    keygen_parser = subparsers.add_parser("keygen", help="Generate a random key")
    keygen_parser.add_argument("length", type=int, help="Number of key values")
    keygen_parser.set_defaults(func=cmd_keygen)

    encrypt_parser = subparsers.add_parser("encrypt", help="Encrypt under a fresh key")
    encrypt_parser.add_argument("text", help="Message to encrypt")
    encrypt_parser.add_argument("--json", action="store_true", help="Print JSON output")
    encrypt_parser.set_defaults(func=cmd_encrypt)

    decrypt_parser = subparsers.add_parser("decrypt", help="Decrypt with a key")
    decrypt_parser.add_argument("--cipher", help="Ciphertext groups (default: read stdin)")
    decrypt_parser.add_argument("--key", help="Key groups (default: read stdin)")
    decrypt_parser.set_defaults(func=cmd_decrypt)

    validate_parser = subparsers.add_parser("validate", help="Validate roundtrip")
    validate_parser.add_argument("text", help="Text to validate")
    validate_parser.add_argument("--key", help="Key groups (default: generate one)")
    validate_parser.set_defaults(func=cmd_validate)

    interactive_parser = subparsers.add_parser("interactive", help="Menu-driven session")
    interactive_parser.set_defaults(func=cmd_interactive)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        return cmd_interactive(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
