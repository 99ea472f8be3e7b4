"""
Extraction of marker-delimited blocks from line sequences.

A block looks like::

    <items>
    a
    b
    </items>

or, when the closing marker was never written, runs from the opening marker
to the first blank line (or to the end of input)::

    <items>
    a
    b

Only the first opening marker starts a scan. Markers do not nest, so an
opening marker inside an open block is ordinary content.
"""

from collections.abc import Iterable

from hother.tagblocks.utils.logging import get_logger

from .config import TagFormat, resolve_format
from .models import BlockExtraction, Marker

logger = get_logger(__name__)


def scan_block(
    opening_label: str | None,
    closing_label: str | None,
    lines: Iterable[str] | None,
    *,
    fmt: TagFormat | None = None,
) -> BlockExtraction:
    """
    Scan lines for a block and report the detailed outcome.

    Args:
        opening_label: Label of the opening marker, without brackets
        closing_label: Label of the closing marker, without brackets
        lines: Lines to scan; consumed once and never modified
        fmt: Marker rendering rules (library default if None)

    Returns:
        BlockExtraction describing whether and how the block was found
    """
    for argument, value in (("opening_label", opening_label), ("closing_label", closing_label), ("lines", lines)):
        if value is None:
            logger.warning("Block scan rejected", missing_argument=argument)
            return BlockExtraction.invalid(argument)

    fmt = resolve_format(fmt)
    marker = Marker.of(opening_label, closing_label)

    block, terminated = _scan(lines, marker.opening(fmt), marker.closing(fmt))
    if block is None:
        result = BlockExtraction.not_found(marker)
    else:
        result = BlockExtraction.found(marker, block, terminated=terminated)

    logger.debug("Block scanned", **result.log_context())
    return result


def _scan(lines: Iterable[str], opening: str, closing: str) -> tuple[list[str] | None, bool]:
    """Single pass over lines; returns (block or None, terminated)."""
    full: list[str] = []
    pre_blank: list[str] = []

    iterator = iter(lines)
    for line in iterator:
        if line != opening:
            continue

        # Consumes the rest of the input, so a later opener never starts a second scan.
        seen_blank = False
        for line in iterator:
            if line == closing:
                return full, True

            if line == "":
                seen_blank = True
            if not seen_blank:
                pre_blank.append(line)
            full.append(line)

    if pre_blank:
        return pre_blank, False
    return None, False


def extract_block(
    opening_label: str | None,
    closing_label: str | None,
    lines: Iterable[str] | None,
    *,
    fmt: TagFormat | None = None,
) -> list[str] | None:
    """
    Get the lines between ``<opening_label>`` and ``</closing_label>``.

    Without a closing marker the block ends at the first blank line.

    Returns:
        The enclosed lines (possibly empty), or None when the block is absent
        or a required argument is missing
    """
    result = scan_block(opening_label, closing_label, lines, fmt=fmt)
    return result.lines if result.is_found else None


def extract_tagged(label: str | None, lines: Iterable[str] | None, *, fmt: TagFormat | None = None) -> list[str] | None:
    """Get the lines between ``<label>`` and ``</label>``."""
    return extract_block(label, label, lines, fmt=fmt)
