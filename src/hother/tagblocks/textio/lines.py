"""
Conversion between strings and line sequences.
"""

import os
from collections.abc import Iterable
from typing import Any


def split_lines(text: str | None, separator: str = os.linesep) -> list[str] | None:
    """
    Split text into lines on an exact separator.

    Trailing empty entries are dropped, so ``"a\\nb\\n"`` gives ``["a", "b"]``
    while blank lines in the middle are kept.

    Returns:
        The lines, or None if text is None
    """
    if text is None:
        return None
    if not separator:
        raise ValueError("separator must not be empty")

    lines = text.split(separator)
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def join_lines(items: Iterable[Any] | None, separator: str = os.linesep) -> str | None:
    """
    Join items into one string, separated by the separator.

    Separators left at the end (from trailing empty items) are trimmed.

    Returns:
        The joined string, or None if items is None
    """
    if items is None:
        return None
    if not separator:
        raise ValueError("separator must not be empty")

    text = separator.join(str(item) for item in items)
    while text.endswith(separator):
        text = text[: -len(separator)]
    return text
