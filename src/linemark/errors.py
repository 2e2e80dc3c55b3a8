"""Exception classes for linemark.

Malformed markup never raises: the parser falls back to plain text for any
construct it cannot recognize. The exceptions below cover reading the source
and programming errors in the renderer.
"""

from __future__ import annotations


class LinemarkError(Exception):
    """Base exception for all linemark errors."""

    pass


class SourceReadError(LinemarkError, OSError):
    """The character source could not be read or decoded.

    Raised for missing or unreadable files, unknown encodings and byte
    sequences that are invalid for the selected encoding. Subclasses
    ``OSError`` so callers handling I/O failures generically still catch it.
    The underlying exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        """Initialize read error.

        Args:
            message: Description of the failure
            source: Path or description of the source (optional)
        """
        self.message = message
        self.source = source

        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")


class RenderError(LinemarkError):
    """Error during HTML rendering.

    Raised when the renderer meets a block kind it cannot emit.
    """

    def __init__(self, message: str, block_type: str | None = None) -> None:
        self.block_type = block_type
        suffix = f" ({block_type})" if block_type else ""
        super().__init__(f"{message}{suffix}")
