"""Show the IUPAC nucleotide complement table."""

import pandas as pd
from Bio.Data.IUPACData import ambiguous_dna_values

from dnaseq_tool.utils import COMPLEMENT_MAP, NUCLEOTIDE_CODES


def register(subparsers):
    """Register the codes subcommand."""
    parser = subparsers.add_parser(
        "codes",
        help="List supported IUPAC codes and their complements",
        description="""
List every nucleotide code recognized by the transform commands, the
bases it stands for, and its complement. Lowercase codes complement to
lowercase.
""",
    )
    parser.set_defaults(func=run)


def complement_table() -> pd.DataFrame:
    """Build a table of code, represented bases and complement."""
    rows = [
        {
            "code": code,
            "bases": "/".join(ambiguous_dna_values[code]),
            "complement": COMPLEMENT_MAP[code],
        }
        for code in NUCLEOTIDE_CODES
    ]
    return pd.DataFrame(rows, columns=["code", "bases", "complement"])


def run(args):
    """Run the codes command."""
    print(complement_table().to_string(index=False))
