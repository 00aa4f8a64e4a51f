"""
Reading log files.

Lines are read one at a time so memory stays bounded by the longest
line. Any failure to open or read the file is raised as a LogFileError.
"""

import os
from pathlib import Path
from typing import Iterator, Optional, Union

from lazylog.config import get_settings
from lazylog.utils.errors import LogFileNotFoundError, LogFileReadError
from lazylog.utils.logging import get_logger

logger = get_logger(__name__)


def check_log_file(filepath: Union[str, Path]) -> Path:
    """
    Make sure ``filepath`` names a readable regular file.

    Raises:
        LogFileNotFoundError: If nothing exists at the path
        LogFileReadError: If the path is a directory or not readable
    """
    path = Path(filepath)
    if not path.exists():
        raise LogFileNotFoundError(str(filepath))
    if not path.is_file():
        raise LogFileReadError("Log file is not a regular file", {"filepath": str(filepath)})
    if not os.access(path, os.R_OK):
        raise LogFileReadError("Log file is not readable", {"filepath": str(filepath)})
    return path


def iter_lines(filepath: Union[str, Path], encoding: Optional[str] = None) -> Iterator[str]:
    """
    Yield the lines of a file without their line terminator.

    Lines are split on ``\\n`` only; a ``\\r`` right before it is dropped.
    Bytes that do not decode are replaced.
    """
    encoding = encoding or get_settings().encoding
    try:
        with open(filepath, "rb") as handle:
            logger.debug(f"Reading lines from {filepath}")
            for raw in handle:
                if raw.endswith(b"\n"):
                    raw = raw[:-1]
                    if raw.endswith(b"\r"):
                        raw = raw[:-1]
                yield raw.decode(encoding, errors="replace")
    except FileNotFoundError as e:
        raise LogFileNotFoundError(str(filepath)) from e
    except OSError as e:
        raise LogFileReadError(f"Failed to read log file: {e}", {"filepath": str(filepath)}) from e


def load_whole_file(filepath: Union[str, Path], encoding: Optional[str] = None) -> str:
    """Read a whole log file into memory."""
    encoding = encoding or get_settings().encoding
    try:
        return Path(filepath).read_text(encoding=encoding, errors="replace")
    except FileNotFoundError as e:
        raise LogFileNotFoundError(str(filepath)) from e
    except OSError as e:
        raise LogFileReadError(f"Failed to read log file: {e}", {"filepath": str(filepath)}) from e


def iter_chunks(
    filepath: Union[str, Path],
    chunk_size: Optional[int] = None,
    encoding: Optional[str] = None,
) -> Iterator[str]:
    """
    Yield a log file in pieces of at most ``chunk_size`` characters.

    Usage:
        for chunk in iter_chunks("app.log", 100):
            print(">>>>>>>> Chunk:", chunk)
    """
    settings = get_settings()
    chunk_size = settings.chunk_size if chunk_size is None else chunk_size
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    encoding = encoding or settings.encoding
    try:
        with open(filepath, "r", encoding=encoding, errors="replace", newline="") as handle:
            while True:
                chunk = handle.read(chunk_size)
                if not chunk:
                    break
                yield chunk
    except FileNotFoundError as e:
        raise LogFileNotFoundError(str(filepath)) from e
    except OSError as e:
        raise LogFileReadError(f"Failed to read log file: {e}", {"filepath": str(filepath)}) from e
