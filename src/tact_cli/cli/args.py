"""Argument parsing — argv to :class:`~tact_cli.core.models.ParsedInvocation`.

The schema is fail-closed: unknown flags and abbreviations are rejected
by argparse (exit status 2).  ``--help`` and ``--version`` are plain
boolean flags rather than argparse actions, because deciding what they
do (and in which order) belongs to the mode resolver.
"""

from __future__ import annotations

import argparse

from tact_cli.core.models import ParsedInvocation

PROG: str = "tact"

USAGE: str = "tact [...flags] (--config CONFIG | FILE)"

EPILOG: str = """\
Examples
  $ tact --version
  {version}

Learn more about Tact:        https://docs.tact-lang.org
Join Telegram group:          https://t.me/tactlang
Follow X/Twitter account:     https://twitter.com/tact_language"""


def build_parser(version: str, description: str) -> argparse.ArgumentParser:
    """Construct the ``tact`` argument parser.

    Parameters
    ----------
    version:
        Shown in the help epilog example.
    description:
        Package description appended to the help header.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=USAGE,
        description=f"Command-line utility for the Tact compiler:\n{description}",
        epilog=EPILOG.format(version=version),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "input",
        nargs="*",
        metavar="FILE",
        help="Tact source file to compile",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="CONFIG",
        default=None,
        help="Specify path to config file (tact.config.json)",
    )
    parser.add_argument(
        "-p",
        "--project",
        dest="projects",
        metavar="NAME",
        action="append",
        default=None,
        help="Build only the specified project name(s) from the config file",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress compiler log output",
    )
    parser.add_argument(
        "--with-decompilation",
        action="store_true",
        help="Full compilation followed by decompilation of produced binary code",
    )
    parser.add_argument(
        "--func",
        action="store_true",
        help="Output intermediate FunC code and exit",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Perform syntax and type checking, then exit",
    )
    parser.add_argument(
        "-e",
        "--eval",
        metavar="EXPRESSION",
        default=None,
        help="Evaluate a Tact expression and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="store_true",
        help="Print Tact compiler version and exit",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Display this text and exit",
    )
    return parser


def to_invocation(args: argparse.Namespace) -> ParsedInvocation:
    """Freeze a parsed namespace into a :class:`ParsedInvocation`."""
    return ParsedInvocation(
        config=args.config,
        projects=tuple(args.projects or ()),
        quiet=args.quiet,
        with_decompilation=args.with_decompilation,
        func=args.func,
        check=args.check,
        eval=args.eval,
        version=args.version,
        help=args.help,
        input=tuple(args.input or ()),
    )


def parse_invocation(
    parser: argparse.ArgumentParser,
    argv: list[str] | None = None,
) -> ParsedInvocation:
    """Parse *argv* (default ``sys.argv[1:]``) into a :class:`ParsedInvocation`.

    ``--config`` becomes required once a ``--project`` name is given,
    unless ``--help``, ``--version`` or a non-empty ``--eval`` short-circuits
    the run.

    Raises
    ------
    SystemExit
        With status 2 when argparse rejects the command line.
    """
    args = parser.parse_intermixed_args(argv)
    invocation = to_invocation(args)

    if (
        invocation.projects
        and invocation.config is None
        and not (invocation.help or invocation.version or invocation.eval)
    ):
        parser.error("the following arguments are required: -c/--config")

    return invocation
