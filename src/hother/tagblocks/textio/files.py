"""
Reading and writing whole UTF-8 text files as line sequences.
"""

import os
from pathlib import Path

from hother.tagblocks.core.config import TagFormat, resolve_format
from hother.tagblocks.core.extractor import extract_block
from hother.tagblocks.utils.logging import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"

PathLike = str | os.PathLike[str]


def decode_lines(data: bytes) -> list[str]:
    """
    Decode file bytes into lines.

    ``\\n``, ``\\r\\n`` and ``\\r`` all end a line. A final line ending does not
    produce an extra empty line, and an empty file has no lines. Invalid UTF-8
    bytes become U+FFFD.
    """
    if not data:
        return []

    text = data.decode(ENCODING, errors="replace").replace("\r\n", "\n").replace("\r", "\n")
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def load_lines(path: PathLike) -> list[str]:
    """Load a text file line by line."""
    lines = decode_lines(Path(path).read_bytes())
    logger.debug("Loaded lines", path=str(path), line_count=len(lines))
    return lines


def load_text(path: PathLike, *, fmt: TagFormat | None = None) -> str:
    """Load a text file with its line endings replaced by the format's separator."""
    return resolve_format(fmt).separator.join(load_lines(path))


def save_text(path: PathLike, text: str) -> None:
    """Write text to a file verbatim, as UTF-8."""
    Path(path).write_bytes(text.encode(ENCODING))
    logger.info("Saved text", path=str(path), size=len(text))


def save_if_different(path: PathLike, text: str) -> bool:
    """
    Write text to a file unless the file already holds exactly that text.

    Returns:
        True if the file was written, False if the write was skipped
    """
    target = Path(path)
    if target.is_file() and target.read_bytes() == text.encode(ENCODING):
        logger.debug("Skipped identical write", path=str(path))
        return False

    save_text(target, text)
    return True


def load_block(path: PathLike, opening_label: str, closing_label: str | None = None, *, fmt: TagFormat | None = None) -> list[str] | None:
    """Load a text file and extract one block from it."""
    if closing_label is None:
        closing_label = opening_label
    return extract_block(opening_label, closing_label, load_lines(path), fmt=fmt)
