"""Sequence manipulation utilities."""

import re
from types import MappingProxyType


_UPPER_COMPLEMENTS = {
    "A": "T", "T": "A", "C": "G", "G": "C",
    "K": "M", "M": "K",  # G/T <-> A/C
    "R": "Y", "Y": "R",  # A/G <-> C/T
    "B": "V", "V": "B",  # C/G/T <-> A/C/G
    "D": "H", "H": "D",  # A/G/T <-> A/C/T
    "S": "S", "W": "W", "N": "N",
}

# IUPAC complement table, both cases
COMPLEMENT_MAP = MappingProxyType({
    **_UPPER_COMPLEMENTS,
    **{k.lower(): v.lower() for k, v in _UPPER_COMPLEMENTS.items()},
})

NUCLEOTIDE_CODES = "ATCGKMRYSWBDHVN"

# Characters outside the table are left alone by str.translate
COMPLEMENT_TABLE = str.maketrans(dict(COMPLEMENT_MAP))

# ASCII codes only, both cases
_NUCLEOTIDE_PATTERN = re.compile(f"[{NUCLEOTIDE_CODES}{NUCLEOTIDE_CODES.lower()}]")


def complement_base(base: str) -> str:
    """Return the IUPAC complement of a single character, or the character itself."""
    return COMPLEMENT_MAP.get(base, base)


def reverse_sequence(seq: str) -> str:
    """Return the sequence with its characters in reverse order."""
    return seq[::-1]


def complement_sequence(seq: str) -> str:
    """
    Complement every character of a sequence, keeping order and case.

    Unrecognized characters (digits, gaps, whitespace, ...) are copied
    through unchanged, so this never fails.

    Args:
        seq: Sequence line

    Returns:
        String of the same length as ``seq``
    """
    return seq.translate(COMPLEMENT_TABLE)


def reverse_complement_sequence(seq: str) -> str:
    """Return reverse-complement of a sequence (IUPAC aware, case preserving)."""
    return reverse_sequence(complement_sequence(seq))


def is_sequence_line(line: str) -> bool:
    """Check whether a line holds at least one recognized nucleotide code."""
    return _NUCLEOTIDE_PATTERN.search(line) is not None
