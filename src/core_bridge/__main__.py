"""
Top-level entry point: python -m core_bridge <subcommand>

Subcommands:
    jwt    — decode a JWT without signature verification
    calc   — run checked 32-bit calculator operations
    hello  — print the greeting
"""

from __future__ import annotations

import sys


USAGE = """\
usage: python -m core_bridge <command> [options]

commands:
  jwt       Decode and inspect a JWT token (no signature verification)
  calc      Apply calculator operations, e.g.: calc --initial 10 add 5 divide 3
  hello     Print the greeting

Run 'python -m core_bridge <command> --help' for command-specific options.
"""


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] in ("-h", "--help"):
        print(USAGE)
        sys.exit(0)

    command, rest = argv[0], argv[1:]

    if command == "jwt":
        from .cli import jwt_main
        jwt_main(rest)
    elif command == "calc":
        from .cli import calc_main
        calc_main(rest)
    elif command == "hello":
        from .cli import hello_main
        hello_main(rest)
    else:
        print(f"Unknown command: {command}\n")
        print(USAGE)
        sys.exit(1)


if __name__ == "__main__":
    main()
