"""System clipboard wrapper (pbcopy, wl-copy, xclip, xsel, clip)."""

import logging
import shlex
import shutil
import subprocess

logger = logging.getLogger(__name__)

# Tried in order; first one found in PATH wins
CLIPBOARD_COMMANDS = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


def find_clipboard_tool(preferred: str | None = None) -> list[str]:
    """
    Find a clipboard writer in PATH.

    Args:
        preferred: Optional command line to use instead of auto-detection,
            e.g. ``"xclip -selection clipboard"``

    Returns:
        Command as an argument list, with the executable resolved to its path

    Raises:
        FileNotFoundError: If no clipboard tool is found in PATH
    """
    candidates = [shlex.split(preferred)] if preferred else CLIPBOARD_COMMANDS
    for cmd in candidates:
        if not cmd:
            continue
        path = shutil.which(cmd[0])
        if path is not None:
            return [path, *cmd[1:]]

    if preferred:
        raise FileNotFoundError(f"Clipboard command not found in PATH: {preferred}")
    raise FileNotFoundError(
        "No clipboard tool found in PATH. "
        "Install one of: pbcopy, wl-copy, xclip, xsel"
    )


def copy_to_clipboard(text: str, command: str | None = None) -> None:
    """
    Copy text to the system clipboard.

    Args:
        text: Text to copy
        command: Optional clipboard command line (see find_clipboard_tool)

    Raises:
        FileNotFoundError: If no clipboard tool is found
        subprocess.CalledProcessError: If the clipboard tool fails
        subprocess.TimeoutExpired: If the clipboard tool hangs
    """
    cmd = find_clipboard_tool(command)
    logger.debug("Copying %d characters with %s", len(text), cmd[0])
    subprocess.run(
        cmd,
        input=text,
        capture_output=True,
        text=True,
        check=True,
        timeout=10,
    )
