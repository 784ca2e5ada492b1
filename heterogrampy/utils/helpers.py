"""Path handling and file writing shared by the loaders and report writers."""

from pathlib import Path
from typing import Callable, TextIO

from loguru import logger


def expand_file_path(filepath: str | None) -> str | None:
    """Resolve a leading ``~`` in a user-supplied path.

    Returns None for an empty or missing path so callers can fall back to
    their own default.
    """
    if not filepath:
        return None
    return str(Path(filepath).expanduser())


def write_file_safely(
    file_path: str | Path,
    content_writer: Callable[[TextIO], None],
    operation_name: str = "writing file",
) -> None:
    """Open ``file_path`` for writing, creating missing parent directories.

    Args:
        file_path: Destination file
        content_writer: Called with the open UTF-8 text handle
        operation_name: Short description used in error messages

    Raises:
        PermissionError: The file or one of its directories is not writable
        OSError: Any other failure while creating or writing the file
    """
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            content_writer(f)
    except PermissionError:
        logger.error(f"✗ No write access while {operation_name}: {path}")
        raise
    except OSError as e:
        logger.error(f"✗ Failed {operation_name} to {path}: {e}")
        raise
