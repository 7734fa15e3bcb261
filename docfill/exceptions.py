# docfill/exceptions.py
"""Errors raised by the layers around the template engine.

The tokenizer and substitution engine never raise; everything here belongs to
extraction, request parsing, configuration and delivery.
"""


class DocfillError(Exception):
    """Base class for all docfill errors."""


class UnsupportedFileTypeError(DocfillError, ValueError):
    """Raised when an upload is not a .doc, .docx or .txt file."""

    def __init__(self, filename: str = ""):
        self.filename = filename
        super().__init__("Unsupported file type. Please upload .doc, .docx, or .txt")


class DocumentReadError(DocfillError, ValueError):
    """Raised when a .docx upload cannot be opened as a Word document."""


class InvalidValuesError(DocfillError):
    """Raised when the value mapping is not a JSON object."""

    def __init__(self, message: str = "Invalid values JSON"):
        super().__init__(message)


class MissingRecipientError(DocfillError):
    """Raised when no destination address is supplied."""

    def __init__(self, message: str = "Recipient email is required"):
        super().__init__(message)


class ConfigurationError(DocfillError):
    """Raised when required SMTP settings are absent or malformed."""


class DeliveryError(DocfillError):
    """Raised when the email transport rejects or fails to send a message."""
