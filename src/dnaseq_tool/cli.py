#!/usr/bin/env python
"""dnaseq - batch DNA sequence reverse/complement CLI."""

import argparse
import logging
import sys


def main(argv=None):
    """Main entry point for the dnaseq CLI."""
    parser = argparse.ArgumentParser(
        prog="dnaseq",
        description="Reverse, complement or reverse-complement DNA sequences (IUPAC codes)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dnaseq reverse-complement --text ATCGATCGATCG
  pbpaste | dnaseq complement --copy
  dnaseq transform --op reverse --paired < sequences.txt
  dnaseq codes

For more information on a specific command:
  dnaseq <command> --help
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available subcommands",
        metavar="<command>",
    )

    # Import and register subcommands
    from dnaseq_tool.commands import transform, codes

    transform.register(subparsers)
    codes.register(subparsers)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    # Execute the subcommand
    args.func(args)


if __name__ == "__main__":
    main()
