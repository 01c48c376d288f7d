"""Line-by-line transformation of pasted sequence blocks."""

import re
from dataclasses import dataclass, field
from enum import Enum

from .sequences import (
    reverse_sequence,
    complement_sequence,
    reverse_complement_sequence,
    is_sequence_line,
)


class Operation(str, Enum):
    """Transformation selector."""

    REVERSE = "reverse"
    COMPLEMENT = "complement"
    REVERSE_COMPLEMENT = "reverse-complement"


OPERATIONS = {
    Operation.REVERSE: reverse_sequence,
    Operation.COMPLEMENT: complement_sequence,
    Operation.REVERSE_COMPLEMENT: reverse_complement_sequence,
}

OPERATION_LABELS = {
    Operation.REVERSE: "Reverse",
    Operation.COMPLEMENT: "Complement",
    Operation.REVERSE_COMPLEMENT: "Reverse complement",
}


# Surrounding whitespace and byte-order marks
_TRIM_PATTERN = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


class EmptyInputError(ValueError):
    """Raised when a blank block is submitted for transformation."""


@dataclass(frozen=True)
class TransformResult:
    """Before/after text of one transformation request."""

    input_text: str
    output_text: str
    operation: Operation
    pairs: tuple[tuple[str, str], ...] = field(default=(), compare=False)

    @property
    def label(self) -> str:
        return operation_label(self.operation)


def _trim(line: str) -> str:
    return _TRIM_PATTERN.sub("", line)


def operation_label(operation: Operation | str) -> str:
    """Return the display name of an operation."""
    return OPERATION_LABELS[Operation(operation)]


def transform_pairs(lines: str, operation: Operation | str) -> list[tuple[str, str]]:
    """
    Transform each non-blank line of a text block.

    Lines are trimmed first (whitespace and byte-order marks). A line
    without any recognized nucleotide code (e.g. a header or label) is
    passed through unchanged; any other line is transformed as a whole,
    including characters outside the IUPAC alphabet.

    Args:
        lines: Multi-line text block
        operation: Operation or its name

    Returns:
        List of (input line, output line) tuples in input order

    Raises:
        ValueError: If operation is not a known operation name
    """
    func = OPERATIONS[Operation(operation)]

    pairs = []
    for line in lines.split("\n"):
        line = _trim(line)
        if not line:
            continue
        pairs.append((line, func(line) if is_sequence_line(line) else line))
    return pairs


def transform(lines: str, operation: Operation | str) -> str:
    """Transform a multi-line block, dropping blank lines and keeping order."""
    return "\n".join(out for _, out in transform_pairs(lines, operation))


def run_transform(text: str, operation: Operation | str) -> TransformResult:
    """
    Run one transformation request.

    Raises:
        EmptyInputError: If ``text`` is blank
        ValueError: If operation is not a known operation name
    """
    operation = Operation(operation)
    if not _trim(text):
        raise EmptyInputError("Input is empty; enter at least one DNA sequence")
    pairs = transform_pairs(text, operation)
    output = "\n".join(out for _, out in pairs)
    return TransformResult(text, output, operation, tuple(pairs))
