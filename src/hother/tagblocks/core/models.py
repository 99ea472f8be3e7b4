"""
Core models for the tagged-block format.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .config import TagFormat, resolve_format
from .exceptions import BlockNotFoundError, InvalidArgumentError


class ExtractionStatus(str, Enum):
    """Outcome of a single block scan."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"


class Marker(BaseModel):
    """An opening/closing label pair. The labels may differ."""

    model_config = ConfigDict(frozen=True)

    opening_label: str = Field(..., description="Label of the opening marker")
    closing_label: str = Field(..., description="Label of the closing marker")

    @classmethod
    def of(cls, opening_label: str, closing_label: str | None = None) -> "Marker":
        """Create a marker pair, symmetric when no closing label is given."""
        if closing_label is None:
            closing_label = opening_label
        return cls(opening_label=opening_label, closing_label=closing_label)

    @property
    def is_symmetric(self) -> bool:
        return self.opening_label == self.closing_label

    def opening(self, fmt: TagFormat | None = None) -> str:
        """Rendered opening marker line, e.g. ``<items>``."""
        return resolve_format(fmt).opening_marker(self.opening_label)

    def closing(self, fmt: TagFormat | None = None) -> str:
        """Rendered closing marker line, e.g. ``</items>``."""
        return resolve_format(fmt).closing_marker(self.closing_label)

    def __str__(self) -> str:
        return f"{self.opening()}...{self.closing()}"


class BlockExtraction(BaseModel):
    """Detailed result of scanning a line sequence for one block."""

    model_config = ConfigDict(frozen=True)

    status: ExtractionStatus = Field(..., description="Scan outcome")
    marker: Marker | None = Field(default=None, description="Marker pair that was scanned for")
    lines: list[str] | None = Field(default=None, description="Enclosed lines when found")
    terminated: bool = Field(default=False, description="True when a closing marker ended the block")
    missing_argument: str | None = Field(default=None, description="Name of the missing input on invalid argument")

    @classmethod
    def found(cls, marker: Marker, lines: list[str], terminated: bool) -> "BlockExtraction":
        return cls(status=ExtractionStatus.FOUND, marker=marker, lines=lines, terminated=terminated)

    @classmethod
    def not_found(cls, marker: Marker) -> "BlockExtraction":
        return cls(status=ExtractionStatus.NOT_FOUND, marker=marker)

    @classmethod
    def invalid(cls, argument: str, marker: Marker | None = None) -> "BlockExtraction":
        return cls(status=ExtractionStatus.INVALID_ARGUMENT, marker=marker, missing_argument=argument)

    @property
    def is_found(self) -> bool:
        return self.status == ExtractionStatus.FOUND

    def unwrap(self) -> list[str]:
        """
        Return the extracted lines or raise.

        Raises:
            InvalidArgumentError: if the scan was rejected for a missing input
            BlockNotFoundError: if the block is absent
        """
        opening_label = self.marker.opening_label if self.marker else None
        closing_label = self.marker.closing_label if self.marker else None

        if self.status == ExtractionStatus.INVALID_ARGUMENT:
            raise InvalidArgumentError(self.missing_argument or "unknown", opening_label, closing_label)
        if self.status == ExtractionStatus.NOT_FOUND:
            raise BlockNotFoundError(opening_label, closing_label)
        return list(self.lines or [])

    def log_context(self) -> dict[str, Any]:
        """Get context dict for structured logging."""
        context: dict[str, Any] = {"status": self.status.value}
        if self.marker:
            context["opening_label"] = self.marker.opening_label
            context["closing_label"] = self.marker.closing_label
        if self.lines is not None:
            context["line_count"] = len(self.lines)
            context["terminated"] = self.terminated
        if self.missing_argument:
            context["missing_argument"] = self.missing_argument
        return context
