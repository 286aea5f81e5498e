"""
Command-line interface.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

import shtab

from . import __version__
from .config import (
    Classifier,
    PasswordSpec,
    UPPERCASE_CANDIDATES,
    LOWERCASE_CANDIDATES,
    NUMBER_CANDIDATES,
    SYMBOL_CANDIDATES,
    DEFAULT_LENGTH,
    DEFAULT_MINIMUM_COUNT,
)
from .errors import PasswordMakerError
from .generator import generate_many
from .logger import CTX, configure, get_logger, notify_user
from .pool import candidates
from .random_source import RandomSource, SystemRandomSource
from .text import decode, encode, graphemes

log = get_logger(CTX.CLI)

NAMED_CLASSIFIERS = (
    ("uppercase", UPPERCASE_CANDIDATES),
    ("lowercase", LOWERCASE_CANDIDATES),
    ("number", NUMBER_CANDIDATES),
    ("symbol", SYMBOL_CANDIDATES),
)


class WideHelpFormatter(argparse.HelpFormatter):
    def __init__(self, prog):
        super().__init__(prog, max_help_position=40, width=100)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mkpw",
        description="Highly customizable password generation tool.",
        formatter_class=WideHelpFormatter,
    )
    parser.add_argument("--length", type=_non_negative_int, default=DEFAULT_LENGTH,
                        help="Password length in user-perceived characters")
    parser.add_argument("--count", type=_non_negative_int, default=1,
                        help="Number of passwords to generate")

    for name, default in NAMED_CLASSIFIERS:
        parser.add_argument(f"--{name}-candidates", default=default,
                            help=f"Candidate {name} characters")
        parser.add_argument(f"--{name}-minimum-count", type=_non_negative_int,
                            default=DEFAULT_MINIMUM_COUNT,
                            help=f"Minimum number of {name} characters")

    parser.add_argument("--other-candidates", action="append", default=None,
                        help="Extra candidate characters (repeatable)")
    parser.add_argument("--other-minimum-count", action="append", default=None,
                        type=_non_negative_int,
                        help="Minimum count for the matching --other-candidates (repeatable)")

    parser.add_argument("--exclude-similar", action="store_true",
                        help="Exclude similar characters (i, l, 1, o, 0, O)")
    parser.add_argument("--include-whitespace", action="store_true",
                        help="Add a space to the candidates")
    parser.add_argument("--null", action="store_true",
                        help="Separate passwords with NUL instead of newline")
    parser.add_argument("--clipboard", action="store_true",
                        help="Copy the passwords to the clipboard instead of printing them")
    parser.add_argument("--encoding", default="utf-8",
                        help="Encoding of candidate arguments and of the output")
    parser.add_argument("--random-source", choices=("system", "quantum"), default="system",
                        help="Where randomness comes from")
    parser.add_argument("--show-candidates", action="store_true",
                        help="Print the merged candidate pool and exit")
    parser.add_argument("--completion", choices=shtab.SUPPORTED_SHELLS, default=None,
                        help="Print a shell completion script to stdout and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _decode_argument(value: str, encoding: str) -> str:
    # argv arrives as str with undecodable bytes smuggled through as
    # surrogates; recover the raw bytes before applying --encoding.
    return decode(os.fsencode(value), encoding)


def build_spec(args: argparse.Namespace) -> PasswordSpec:
    """
    Translate parsed arguments into a PasswordSpec.

    A named classifier left with no candidates gets a minimum count of 0.
    Other candidates and other minimum counts are paired by position, the
    shorter list padded with "" or 0.
    """
    spec = PasswordSpec(
        length=args.length,
        exclude_similar=args.exclude_similar,
        include_whitespace=args.include_whitespace,
    )

    for name, _default in NAMED_CLASSIFIERS:
        pool = graphemes(_decode_argument(getattr(args, f"{name}_candidates"), args.encoding))
        minimum = getattr(args, f"{name}_minimum_count") if pool else 0
        setattr(spec, name, Classifier(candidates=pool, minimum_count=minimum))

    other_texts = [_decode_argument(v, args.encoding) for v in args.other_candidates or []]
    other_minimums = list(args.other_minimum_count or [])
    while len(other_texts) < len(other_minimums):
        other_texts.append("")
    while len(other_minimums) < len(other_texts):
        other_minimums.append(0)

    spec.others = [
        Classifier.from_text(text, minimum)
        for text, minimum in zip(other_texts, other_minimums)
    ]
    return spec


def make_random_source(name: str) -> RandomSource:
    if name == "quantum":
        from .quantum_engine import QuantumRandomSource

        return QuantumRandomSource()
    return SystemRandomSource()


def format_passwords(passwords: list[str], null_separator: bool = False) -> str:
    separator = "\0" if null_separator else "\n"
    return "".join(password + separator for password in passwords)


def output_passwords(text: str, args: argparse.Namespace) -> None:
    if args.clipboard:
        from . import clipboard

        clipboard.copy_to_clipboard(text)
        return

    data = encode(text, args.encoding)
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def run(args: argparse.Namespace) -> None:
    spec = build_spec(args)

    if args.show_candidates:
        output_passwords(format_passwords(["".join(candidates(spec))], args.null), args)
        return

    rng = make_random_source(args.random_source)
    passwords = generate_many(spec, args.count, rng)
    log.info("Generated %d password(s)", len(passwords))
    output_passwords(format_passwords(passwords, args.null), args)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the `mkpw` console script and `run_mkpw.py`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.completion:
        # Completion scripts always go to stdout, even with --clipboard.
        print(shtab.complete(parser, shell=args.completion))
        return 0

    if args.verbose:
        configure(logging.DEBUG)

    try:
        run(args)
    except PasswordMakerError as exc:
        log.debug("Failed: %s", type(exc).__name__)
        notify_user(str(exc))
        return 1
    return 0
