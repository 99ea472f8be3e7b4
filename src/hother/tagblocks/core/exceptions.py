"""
Custom exceptions for the tagged-block format.
"""


class TagBlockError(Exception):
    """
    Base exception for tagged-block errors.

    Attributes:
        message: Error message
        opening_label: Label of the opening marker involved, if any
        closing_label: Label of the closing marker involved, if any
    """

    def __init__(
        self,
        message: str,
        opening_label: str | None = None,
        closing_label: str | None = None,
    ):
        self.message = message
        self.opening_label = opening_label
        self.closing_label = closing_label
        super().__init__(self.message)


class BlockNotFoundError(TagBlockError):
    """The requested marker pair could not be located."""

    def __init__(
        self,
        opening_label: str | None,
        closing_label: str | None = None,
        message: str | None = None,
    ):
        closing_label = closing_label if closing_label is not None else opening_label
        default_message = f"Block not found (opening label '{opening_label}', closing label '{closing_label}')"
        super().__init__(message or default_message, opening_label, closing_label)


class InvalidArgumentError(TagBlockError):
    """A required input (label, content or line sequence) was missing."""

    def __init__(
        self,
        argument: str,
        opening_label: str | None = None,
        closing_label: str | None = None,
        message: str | None = None,
    ):
        self.argument = argument
        default_message = f"Required argument '{argument}' is missing"
        super().__init__(message or default_message, opening_label, closing_label)
