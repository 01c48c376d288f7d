"""Shared utility functions."""

from .sequences import (
    COMPLEMENT_MAP,
    NUCLEOTIDE_CODES,
    complement_base,
    reverse_sequence,
    complement_sequence,
    reverse_complement_sequence,
    is_sequence_line,
)
from .batch import (
    Operation,
    EmptyInputError,
    TransformResult,
    operation_label,
    transform,
    transform_pairs,
    run_transform,
)
from .params import parse_params, get_transform_params

__all__ = [
    "COMPLEMENT_MAP",
    "NUCLEOTIDE_CODES",
    "complement_base",
    "reverse_sequence",
    "complement_sequence",
    "reverse_complement_sequence",
    "is_sequence_line",
    "Operation",
    "EmptyInputError",
    "TransformResult",
    "operation_label",
    "transform",
    "transform_pairs",
    "run_transform",
    "parse_params",
    "get_transform_params",
]
