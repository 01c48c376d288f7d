"""Reverse, complement or reverse-complement pasted DNA sequences."""

import logging
import subprocess
import sys

import pandas as pd

from dnaseq_tool.utils import (
    Operation,
    EmptyInputError,
    parse_params,
    get_transform_params,
    run_transform,
)
from dnaseq_tool.external import copy_to_clipboard

logger = logging.getLogger(__name__)

EXAMPLES = {
    Operation.REVERSE: "ATCG -> GCTA",
    Operation.COMPLEMENT: "ATCG -> TAGC",
    Operation.REVERSE_COMPLEMENT: "ATCG -> CGAT",
}


def _add_common_arguments(parser):
    parser.add_argument("--text", help="Sequences to transform, one per line (default: read stdin)")
    parser.add_argument("--params", help="Parameters file (params.txt)")
    parser.add_argument(
        "--paired",
        dest="output_format",
        action="store_const",
        const="paired",
        help="Write a tab-separated input/output table instead of plain lines",
    )
    parser.add_argument(
        "--copy",
        nargs="?",
        const="output",
        choices=["output", "input"],
        help="Copy the result (default) or the input to the clipboard",
    )
    parser.add_argument("--clipboard-cmd", help="Clipboard command, e.g. 'xclip -selection clipboard'")
    parser.set_defaults(func=run)


def register(subparsers):
    """Register the transform subcommand and its per-operation shortcuts."""
    parser = subparsers.add_parser(
        "transform",
        help="Transform DNA sequences line by line",
        description="""
Apply reverse, complement or reverse-complement (IUPAC codes, case
preserved) to every non-blank line. Lines without any nucleotide code,
such as headers or labels, are passed through unchanged.
""",
    )
    parser.add_argument(
        "--op",
        choices=[op.value for op in Operation],
        help="Operation (default: OPERATION from --params, else reverse-complement)",
    )
    _add_common_arguments(parser)

    for op in Operation:
        shortcut = subparsers.add_parser(
            op.value,
            help=f"{op.value.capitalize()} each sequence ({EXAMPLES[op]})",
            description=f"Shortcut for 'transform --op {op.value}'.",
        )
        _add_common_arguments(shortcut)
        shortcut.set_defaults(op=op.value)


def _resolve_settings(args) -> dict:
    """Merge params file settings with command-line overrides."""
    params = parse_params(args.params) if args.params else {}
    settings = get_transform_params(params)
    if args.op is not None:
        settings["operation"] = Operation(args.op)
    if args.output_format is not None:
        settings["output_format"] = args.output_format
    if args.copy is not None:
        settings["copy"] = args.copy
    if args.clipboard_cmd is not None:
        settings["clipboard_cmd"] = args.clipboard_cmd
    return settings


def run(args):
    """Run the transform command."""
    try:
        settings = _resolve_settings(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    text = args.text if args.text is not None else sys.stdin.read()

    try:
        result = run_transform(text, settings["operation"])
    except EmptyInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if settings["output_format"] == "paired":
        table = pd.DataFrame(list(result.pairs), columns=["input", "output"])
        rendered = table.to_csv(sep="\t", index=False)
        sys.stdout.write(rendered)
    else:
        rendered = result.output_text
        print(rendered)

    num_lines = len(result.output_text.split("\n"))
    print(f"{result.label}: {num_lines} line(s)", file=sys.stderr)

    if settings["copy"] == "none":
        return

    target = "input" if settings["copy"] == "input" else "output"
    try:
        copy_to_clipboard(text if target == "input" else rendered, settings["clipboard_cmd"])
    except (FileNotFoundError, subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
        logger.warning("Could not copy %s to clipboard: %s", target, e)
    else:
        print(f"Copied {target} to clipboard", file=sys.stderr)
