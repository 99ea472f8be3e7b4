"""
Async counterparts of the text file helpers, built on anyio.
"""

import anyio

from hother.tagblocks.core.config import TagFormat, resolve_format
from hother.tagblocks.core.extractor import extract_block
from hother.tagblocks.utils.logging import get_logger

from .files import ENCODING, PathLike, decode_lines

logger = get_logger(__name__)


async def aload_lines(path: PathLike) -> list[str]:
    """Load a text file line by line."""
    lines = decode_lines(await anyio.Path(path).read_bytes())
    logger.debug("Loaded lines", path=str(path), line_count=len(lines))
    return lines


async def aload_text(path: PathLike, *, fmt: TagFormat | None = None) -> str:
    """Load a text file with its line endings replaced by the format's separator."""
    return resolve_format(fmt).separator.join(await aload_lines(path))


async def asave_text(path: PathLike, text: str) -> None:
    """Write text to a file verbatim, as UTF-8."""
    await anyio.Path(path).write_bytes(text.encode(ENCODING))
    logger.info("Saved text", path=str(path), size=len(text))


async def asave_if_different(path: PathLike, text: str) -> bool:
    """
    Write text to a file unless the file already holds exactly that text.

    Returns:
        True if the file was written, False if the write was skipped
    """
    target = anyio.Path(path)
    if await target.is_file() and await target.read_bytes() == text.encode(ENCODING):
        logger.debug("Skipped identical write", path=str(path))
        return False

    await asave_text(path, text)
    return True


async def aload_block(path: PathLike, opening_label: str, closing_label: str | None = None, *, fmt: TagFormat | None = None) -> list[str] | None:
    """Load a text file and extract one block from it."""
    if closing_label is None:
        closing_label = opening_label
    return extract_block(opening_label, closing_label, await aload_lines(path), fmt=fmt)
