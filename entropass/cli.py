"""
Command-line interface.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .config import (
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_ENTROPY_BITS,
    MIN_LENGTH,
    SALT_DEFAULT_LENGTH,
    GenerationOptions,
)
from .entropy import get_entropy_percentage, get_strength_label, meets_minimum_entropy
from .generator import generate_password
from .random_source import DEFAULT_SOURCE, RandomSource, SeededRandomSource
from .salt import SALT_DISCLOSURE, apply_salt, generate_salt, validate_salt

logger = logging.getLogger(__name__)

EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entropass",
        description="Generate random passwords and rate their entropy.",
    )
    parser.add_argument(
        "-l", "--length", type=int, default=DEFAULT_LENGTH,
        help=f"password length ({MIN_LENGTH}-{MAX_LENGTH}, default {DEFAULT_LENGTH})",
    )
    parser.add_argument("--no-uppercase", action="store_true", help="exclude A-Z")
    parser.add_argument("--no-lowercase", action="store_true", help="exclude a-z")
    parser.add_argument("--no-numbers", action="store_true", help="exclude 0-9")
    parser.add_argument("--no-symbols", action="store_true", help="exclude punctuation")
    parser.add_argument("-n", "--count", type=int, default=1, help="passwords to print")

    salt = parser.add_mutually_exclusive_group()
    salt.add_argument("-s", "--salt", default="", help="append this salt to each password")
    salt.add_argument(
        "--generate-salt", nargs="?", type=int, const=SALT_DEFAULT_LENGTH,
        metavar="LENGTH", help=f"append a random salt (default {SALT_DEFAULT_LENGTH} chars)",
    )

    parser.add_argument(
        "--source", choices=("system", "seeded", "quantum"), default="system",
        help="randomness provider (default: system CSPRNG)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for --source seeded")
    parser.add_argument("--gui", action="store_true", help="open the desktop window")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def make_source(name: str, seed: Optional[int] = None) -> RandomSource:
    if name == "seeded":
        return SeededRandomSource(seed)
    if name == "quantum":
        # qiskit is slow to import; only pay for it when asked.
        from .quantum_engine import QuantumRandomSource

        return QuantumRandomSource()
    return DEFAULT_SOURCE


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Entry point for `python -m entropass`, the `entropass` script and
    `run_entropass.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.source != "seeded" and args.seed is not None:
        parser.error("--seed only applies to --source seeded")

    if args.gui:
        from .gui_qt import main as gui_main

        return gui_main(make_source(args.source, args.seed))

    if args.count < 1:
        parser.error("--count must be at least 1")

    options = GenerationOptions.from_flags(
        length=args.length,
        uppercase=not args.no_uppercase,
        lowercase=not args.no_lowercase,
        numbers=not args.no_numbers,
        symbols=not args.no_symbols,
    )
    source = make_source(args.source, args.seed)
    logger.debug("using %s randomness source", args.source)

    if args.generate_salt is not None:
        if args.generate_salt < 0:
            parser.error("--generate-salt length cannot be negative")
        salt = generate_salt(args.generate_salt, source)
    else:
        salt = args.salt

    checked_salt = validate_salt(salt)
    if checked_salt.is_err():
        print(f"error: {checked_salt.error}", file=sys.stderr)
        return EXIT_INVALID

    entropy_bits = 0.0
    for _ in range(args.count):
        result = generate_password(options, source)
        if result.is_err():
            print(f"error: {result.error}", file=sys.stderr)
            return EXIT_INVALID
        generated = result.unwrap()
        entropy_bits = generated.entropy_bits
        print(apply_salt(generated.password, salt))

    label = get_strength_label(entropy_bits)
    percentage = get_entropy_percentage(entropy_bits)
    print(
        f"Entropy: {entropy_bits:.1f} bits ({label}, {percentage:.0f}% of scale)",
        file=sys.stderr,
    )
    if not meets_minimum_entropy(entropy_bits):
        print(
            f"Warning: below the recommended {MIN_ENTROPY_BITS} bits; "
            "increase the length or enable more character types.",
            file=sys.stderr,
        )
    if salt:
        print(SALT_DISCLOSURE, file=sys.stderr)
    return 0
