"""
Tagblocks - marker-delimited text blocks for line-oriented files

Extract the lines between ``<tag>`` and ``</tag>`` markers (falling back to
the first blank line when the closing marker is missing), format content back
into that shape, and decode blocks into typed lists.
"""

import importlib.metadata

from .core.config import DEFAULT_FORMAT, TagFormat
from .core.decoder import decode_booleans, encode_booleans
from .core.exceptions import BlockNotFoundError, InvalidArgumentError, TagBlockError
from .core.extractor import extract_block, extract_tagged, scan_block
from .core.formatter import format_block, format_lines, format_tagged
from .core.models import BlockExtraction, ExtractionStatus, Marker
from .textio.async_files import aload_block, aload_lines, aload_text, asave_if_different, asave_text
from .textio.files import load_block, load_lines, load_text, save_if_different, save_text
from .textio.lines import join_lines, split_lines
from .utils.logging import configure_logging, get_logger

try:
    __version__ = importlib.metadata.version("hother-tagblocks")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0+dev"

__all__ = [
    # Models
    "Marker",
    "BlockExtraction",
    "ExtractionStatus",
    # Config
    "TagFormat",
    "DEFAULT_FORMAT",
    # Core
    "scan_block",
    "extract_block",
    "extract_tagged",
    "format_block",
    "format_tagged",
    "format_lines",
    "decode_booleans",
    "encode_booleans",
    # Exceptions
    "TagBlockError",
    "BlockNotFoundError",
    "InvalidArgumentError",
    # Text sources and sinks
    "split_lines",
    "join_lines",
    "load_lines",
    "load_text",
    "load_block",
    "save_text",
    "save_if_different",
    "aload_lines",
    "aload_text",
    "aload_block",
    "asave_text",
    "asave_if_different",
    # Utilities
    "configure_logging",
    "get_logger",
]
