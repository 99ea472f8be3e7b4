"""
Configuration for the tagged-block text format.
"""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TagFormat(BaseModel):
    """Rendering rules shared by the extractor, formatter and decoder."""

    model_config = ConfigDict(frozen=True)

    open_prefix: str = Field(default="<", description="Prefix of an opening marker")
    close_prefix: str = Field(default="</", description="Prefix of a closing marker")
    suffix: str = Field(default=">", description="Suffix of both markers")
    separator: str = Field(default=os.linesep, description="Line break used when formatting")
    truth_token: str = Field(default="true", description="Line that decodes to True")
    false_token: str = Field(default="false", description="Line written for False values")

    @field_validator("open_prefix", "close_prefix", "suffix", "separator", "truth_token")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    def opening_marker(self, label: str) -> str:
        """Render the opening marker line for a label."""
        return f"{self.open_prefix}{label}{self.suffix}"

    def closing_marker(self, label: str) -> str:
        """Render the closing marker line for a label."""
        return f"{self.close_prefix}{label}{self.suffix}"


DEFAULT_FORMAT = TagFormat()


def resolve_format(fmt: TagFormat | None) -> TagFormat:
    """Return the given format or the library default."""
    return fmt if fmt is not None else DEFAULT_FORMAT
