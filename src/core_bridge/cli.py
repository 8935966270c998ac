"""
CLI entry points for the core-bridge subcommands.

  jwt    — decode and inspect a JWT (interactive, argument, or stdin)
  calc   — run a sequence of calculator operations
  hello  — print the greeting
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .calculator import INT32_MAX, INT32_MIN, OPERATIONS, Calculator
from .config import ConfigError, load_config, AppConfig
from .decoder import DecodedToken, decode_token
from .errors import CalculatorError, JwtError
from .greeting import say_hi
from .logging_setup import setup_logging

__all__ = ["jwt_main", "calc_main", "hello_main"]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", "-c", default=None,
                        help="Path to YAML config file (default: config/config.yaml if present)")
    parser.add_argument("--verbose", "-v", action="store_true", default=False,
                        help="Enable verbose (debug) logging")


def _init(args: argparse.Namespace) -> AppConfig:
    """Load config and configure logging, or exit with an error."""
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        setup_logging(verbose=args.verbose)
        logger.error("%s", e)
        sys.exit(1)

    log_path = setup_logging(
        verbose=args.verbose or cfg.logging.verbose,
        log_dir=cfg.logging.log_dir,
    )
    if log_path:
        logger.debug("Logging to %s", log_path)
    return cfg


# ---------------------------------------------------------------------------
# jwt
# ---------------------------------------------------------------------------

def _print_json(label: str, text: str, raw: bool) -> None:
    """Print a labelled JSON section."""
    print(f"\n{label}:")
    print(text if raw else json.dumps(json.loads(text), indent=4))


def _print_result(result: DecodedToken, raw: bool = False) -> None:
    """Pretty-print the decoded token parts."""
    _print_json("Header", result.header, raw)
    _print_json("Payload", result.payload, raw)
    print(f"\nSignature (base64url encoded):\n{result.signature}")


def _parse_jwt_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="core-bridge jwt",
        description="Decode and inspect a JWT token without signature verification.",
        epilog="Examples:\n"
               "  %(prog)s                          # interactive prompt\n"
               "  %(prog)s <token>                   # pass token as argument\n"
               "  echo '<token>' | %(prog)s --stdin  # read from stdin\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "token",
        nargs="?",
        default=None,
        help="JWT token string (optional — prompts interactively if omitted)",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        default=False,
        help="Read token from stdin (for piping)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        default=False,
        help="Print header and payload exactly as encoded instead of pretty-printed",
    )
    _add_common_args(parser)
    return parser.parse_args(argv)


def jwt_main(argv: list[str] | None = None) -> None:
    args = _parse_jwt_args(argv)
    _init(args)

    # --- Resolve token input -----------------------------------------------
    if args.stdin:
        token = sys.stdin.read().strip()
        if not token:
            print("Error: No token received on stdin.")
            sys.exit(1)
    elif args.token:
        token = args.token.strip()
    else:
        print("JWT Token Decoder")
        print("=================")
        try:
            token = input("Please enter your JWT token: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            sys.exit(130)

    # --- Decode -------------------------------------------------------------
    try:
        result = decode_token(token)
    except JwtError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    _print_result(result, raw=args.raw)


# ---------------------------------------------------------------------------
# calc
# ---------------------------------------------------------------------------

def _parse_steps(parser: argparse.ArgumentParser, steps: list[str]) -> list[tuple[str, int]]:
    """Turn ``[op, value, op, value, ...]`` into validated pairs."""
    if len(steps) % 2:
        parser.error("operations must be given as OP VALUE pairs")

    pairs: list[tuple[str, int]] = []
    for op, raw_value in zip(steps[::2], steps[1::2]):
        if op not in OPERATIONS:
            parser.error(f"unknown operation {op!r} (choose from {', '.join(OPERATIONS)})")
        try:
            value = int(raw_value)
        except ValueError:
            parser.error(f"{op}: {raw_value!r} is not an integer")
        if not INT32_MIN <= value <= INT32_MAX:
            parser.error(f"{op}: {value} is outside the 32-bit signed range")
        pairs.append((op, value))
    return pairs


def calc_main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="core-bridge calc",
        description="Apply a sequence of checked 32-bit operations and print the result.",
        epilog="Example:\n"
               "  %(prog)s --initial 10 add 5 multiply 2 subtract 10 divide 4\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--initial", "-i", type=int, default=None,
                        help="Initial register value (overrides config; default: 0)")
    parser.add_argument("steps", nargs="*", metavar="STEP",
                        help=f"Operation/operand pairs (OP VALUE ...); OP is one of: {', '.join(OPERATIONS)}")
    _add_common_args(parser)
    args = parser.parse_args(argv)

    pairs = _parse_steps(parser, args.steps)
    cfg = _init(args)

    initial = args.initial if args.initial is not None else cfg.calculator.initial_value
    if not INT32_MIN <= initial <= INT32_MAX:
        parser.error(f"--initial {initial} is outside the 32-bit signed range")

    calc = Calculator(initial)
    for op, value in pairs:
        try:
            calc.apply(op, value)
        except CalculatorError as exc:
            print(f"Error: {op} {value}: {exc}")
            print(f"Value unchanged: {calc.get_value()}")
            sys.exit(1)

    print(calc.get_value())


# ---------------------------------------------------------------------------
# hello
# ---------------------------------------------------------------------------

def hello_main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="core-bridge hello", description="Print the greeting.")
    _add_common_args(parser)
    _init(parser.parse_args(argv))
    print(say_hi())
