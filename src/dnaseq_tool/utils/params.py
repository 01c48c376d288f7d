"""Parameter file parsing utilities."""

from pathlib import Path
from typing import Any

from .batch import Operation

OUTPUT_FORMATS = ("lines", "paired")
COPY_TARGETS = ("none", "output", "input")


def parse_params(param_file: str | Path) -> dict[str, Any]:
    """
    Parse params.txt file.

    Numeric values are parsed as float. Lines starting with ``#`` are
    comments.

    Args:
        param_file: Path to the parameters file

    Returns:
        Dictionary of parameter name -> value
    """
    params = {}
    with open(param_file) as f:
        for line in f:
            if line.lstrip().startswith("#"):
                continue
            if "=" in line:
                name, value = line.split("=", 1)
                name = name.strip()
                value = value.strip()
                try:
                    params[name] = float(value)
                except ValueError:
                    params[name] = value
    return params


def get_transform_params(params: dict) -> dict:
    """
    Extract transformation settings from parsed params dict.

    Raises:
        ValueError: If OPERATION, OUTPUT_FORMAT or COPY holds an unknown value
    """
    operation = str(params.get("OPERATION", Operation.REVERSE_COMPLEMENT.value)).lower()
    output_format = str(params.get("OUTPUT_FORMAT", "lines")).lower()
    copy = str(params.get("COPY", "none")).lower()

    try:
        operation = Operation(operation)
    except ValueError:
        choices = ", ".join(op.value for op in Operation)
        raise ValueError(f"Unknown OPERATION {operation!r} (choose from: {choices})") from None
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown OUTPUT_FORMAT {output_format!r} (choose from: {', '.join(OUTPUT_FORMATS)})")
    if copy not in COPY_TARGETS:
        raise ValueError(f"Unknown COPY {copy!r} (choose from: {', '.join(COPY_TARGETS)})")

    clipboard_cmd = params.get("CLIPBOARD_CMD")
    return {
        "operation": operation,
        "output_format": output_format,
        "copy": copy,
        "clipboard_cmd": str(clipboard_cmd) if clipboard_cmd else None,
    }
