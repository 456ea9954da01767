"""Command-line front end for the Owl lexer.

Usage:
    owl -i page.owl                  # write page.tokens.json
    owl -i page.owl -o out.json      # choose the output file
    owl -i page.owl --stdout         # print the token stream
    owl -i page.owl --validate       # only check that page.owl tokenizes
    owl -i page.owl -v Debug         # log every token (bare -v works too)

The exit status is 0 on success, 1 for usage or file errors, and the
ErrorCode value when the scan fails.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from owl import __version__
from owl.config import ScanConfig, Verbosity
from owl.errors import OwlError
from owl.lexer import Lexer
from owl.serialization import tokens_to_json
from owl.source import load_source
from owl.utils.logger import get_logger, level_for

logger = get_logger(__name__)

VERBOSITY_NAMES = ("ErrorOnly", "Basic", "Debug")


def _verbosity(value: str) -> Verbosity:
    try:
        return Verbosity.parse(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid verbosity {value!r} (choose from {', '.join(VERBOSITY_NAMES)})"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="owl",
        description="Tokenize Owl markup into a JSON token stream",
    )
    parser.add_argument("-i", "--input", required=True, help="Owl source file")
    parser.add_argument(
        "-o",
        "--output",
        help="Token stream output file (default: <input name>.tokens.json)",
    )
    parser.add_argument(
        "-v",
        "--verb",
        "--verbosity",
        dest="verbosity",
        type=_verbosity,
        nargs="?",
        const=Verbosity.DEBUG,
        default=Verbosity.BASIC,
        help="ErrorOnly, Basic or Debug (bare -v means Debug)",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Only check that the input tokenizes",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the token stream instead of writing a file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbosity: Verbosity) -> None:
    """Send Owl log records to stderr at the level matching ``verbosity``.

    Only the ``owl`` logger is configured; the root logger is left alone.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(f"[{verbosity.name}] %(message)s"))
    owl_logger = get_logger("owl")
    owl_logger.handlers[:] = [handler]
    owl_logger.setLevel(level_for(verbosity))
    owl_logger.propagate = False


def default_output(input_path: str) -> Path:
    """``<input name without extension>.tokens.json`` in the working directory."""
    return Path(f"{Path(input_path).stem}.tokens.json")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbosity)

    try:
        source = load_source(args.input)
    except OwlError as exc:
        logger.error("%s", exc)
        return 1

    config = ScanConfig(verbosity=args.verbosity)

    result = Lexer(source, config=config).scan()

    if not result.ok:
        if args.validate:
            print(f"The owl code doesn't seem to be valid. Reason: {result.code.name}")
        else:
            # At Debug the lexer's LoggingObserver has already reported it
            if args.verbosity is not Verbosity.DEBUG:
                logger.error("%s", result.error)
            logger.error("The compilation didn't finish. Error: %s", result.code.name)
        return int(result.code)

    if args.validate:
        print("Woop! Your owl code seems to be valid!")
        return 0

    payload = tokens_to_json(result.tokens, indent=2)
    if args.stdout:
        print(payload)
    else:
        output = Path(args.output) if args.output else default_output(args.input)
        try:
            output.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write '%s': %s", output, exc.strerror or exc)
            return 1
        logger.info("Wrote %d tokens to '%s'", len(result.tokens), output)

    logger.info("Done!")
    return 0
