#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/utils/io_utils.py
"""I/O utilities for reading sources and writing exported pages.

The exporter and loaders never touch the filesystem directly; they go through
these helpers so that every ``OSError`` surfaces as one of the library's own
exceptions carrying the underlying message.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

from apidocs2html.exceptions import FileAccessError, FileNotFoundError, OutputWriteError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_text(path: PathLike, encoding: str = "utf-8") -> str:
    """Read a whole text file.

    Parameters
    ----------
    path : str or Path
        File to read
    encoding : str, default "utf-8"
        Text encoding

    Returns
    -------
    str
        File contents

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file exists but cannot be read or decoded

    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(str(file_path))
    try:
        return file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(str(file_path), message=f"Cannot read file {file_path}: {e}", original_error=e) from e


def read_lines(path: PathLike, encoding: str = "utf-8") -> list[str]:
    """Read all lines of a text file without their line terminators.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line; form feeds and Unicode
    line separators stay part of the line text. A final terminator does not
    produce a trailing empty line.
    """
    # read_text opens in universal newline mode, so every terminator is "\n" here
    lines = read_text(path, encoding=encoding).split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def write_text(path: PathLike, content: str, encoding: str = "utf-8") -> None:
    """Write text to a file, replacing any existing content.

    Raises
    ------
    OutputWriteError
        If the file cannot be written; the message is the OS error text

    """
    output_path = Path(path)
    try:
        # newline="" keeps separators exactly as produced by the renderer
        with open(output_path, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
    except OSError as e:
        raise OutputWriteError(str(output_path), message=str(e), original_error=e) from e
    logger.debug("Wrote %s", output_path)


def write_lines(path: PathLike, lines: Iterable[str], encoding: str = "utf-8") -> None:
    """Write lines to a file, each followed by a newline."""
    write_text(path, "".join(f"{line}\n" for line in lines), encoding=encoding)


__all__ = ["read_text", "read_lines", "write_text", "write_lines"]
