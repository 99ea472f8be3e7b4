"""
Typed decoding of extracted blocks.
"""

from collections.abc import Iterable

from .config import TagFormat, resolve_format
from .extractor import extract_tagged
from .formatter import format_lines


def decode_booleans(label: str | None, lines: Iterable[str] | None, *, fmt: TagFormat | None = None) -> list[bool] | None:
    """
    Get a boolean list from a ``<label>`` block.

    Each line decodes to True only if it is exactly the truth token
    (``"true"``). Any other line, including ``"True"``, ``" true"`` or an
    empty line, decodes to False. Malformed lines never raise.

    Returns:
        One boolean per extracted line, or None when the block is absent
    """
    fmt = resolve_format(fmt)

    block = extract_tagged(label, lines, fmt=fmt)
    if block is None:
        return None

    return [line == fmt.truth_token for line in block]


def encode_booleans(label: str | None, values: Iterable[bool] | None, *, fmt: TagFormat | None = None) -> str | None:
    """
    Format booleans as a ``<label>`` block that decode_booleans reads back.

    An empty list is written as the two markers with nothing between them,
    which decodes to an empty list.
    """
    if values is None:
        return format_lines(label, None, fmt=fmt)

    fmt = resolve_format(fmt)
    tokens = [fmt.truth_token if value else fmt.false_token for value in values]
    if not tokens and label is not None:
        return fmt.opening_marker(label) + fmt.separator + fmt.closing_marker(label)
    return format_lines(label, tokens, fmt=fmt)
