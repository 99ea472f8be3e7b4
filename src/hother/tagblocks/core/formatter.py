"""
Formatting of content between opening and closing markers.
"""

from collections.abc import Iterable
from typing import Any

from hother.tagblocks.textio.lines import join_lines
from hother.tagblocks.utils.logging import get_logger

from .config import TagFormat, resolve_format
from .models import Marker

logger = get_logger(__name__)


def format_block(
    opening_label: str | None,
    closing_label: str | None,
    content: str | None,
    *,
    fmt: TagFormat | None = None,
) -> str | None:
    """
    Wrap content between an opening and a closing marker::

        <opening_label>
        content
        </closing_label>

    Args:
        opening_label: Label of the opening marker, without brackets
        closing_label: Label of the closing marker, without brackets
        content: Text to place between the markers
        fmt: Marker rendering rules (library default if None)

    Returns:
        The formatted block, or None if any argument is missing
    """
    for argument, value in (("opening_label", opening_label), ("closing_label", closing_label), ("content", content)):
        if value is None:
            logger.warning("Block format rejected", missing_argument=argument)
            return None

    fmt = resolve_format(fmt)
    marker = Marker.of(opening_label, closing_label)

    return marker.opening(fmt) + fmt.separator + content + fmt.separator + marker.closing(fmt)


def format_tagged(label: str | None, content: str | None, *, fmt: TagFormat | None = None) -> str | None:
    """Wrap content between ``<label>`` and ``</label>``."""
    return format_block(label, label, content, fmt=fmt)


def format_lines(label: str | None, items: Iterable[Any] | None, *, fmt: TagFormat | None = None) -> str | None:
    """Join items with the format's separator and wrap them in ``<label>`` markers."""
    if items is None:
        logger.warning("Block format rejected", missing_argument="items")
        return None

    fmt = resolve_format(fmt)
    return format_tagged(label, join_lines(items, fmt.separator), fmt=fmt)
