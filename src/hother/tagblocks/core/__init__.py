"""Tagged-block extraction, formatting and decoding."""

from .config import DEFAULT_FORMAT, TagFormat
from .exceptions import BlockNotFoundError, InvalidArgumentError, TagBlockError
from .extractor import extract_block, extract_tagged, scan_block
from .formatter import format_block, format_lines, format_tagged
from .decoder import decode_booleans, encode_booleans
from .models import BlockExtraction, ExtractionStatus, Marker

__all__ = [
    "DEFAULT_FORMAT",
    "TagFormat",
    "TagBlockError",
    "BlockNotFoundError",
    "InvalidArgumentError",
    "BlockExtraction",
    "ExtractionStatus",
    "Marker",
    "scan_block",
    "extract_block",
    "extract_tagged",
    "format_block",
    "format_tagged",
    "format_lines",
    "decode_booleans",
    "encode_booleans",
]
