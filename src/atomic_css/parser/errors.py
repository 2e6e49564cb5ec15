"""Error types raised while processing authored CSS."""

from __future__ import annotations


class AtomicCSSError(Exception):
    """Base class for every error raised by atomic_css."""


class StructuralParseError(AtomicCSSError):
    """Raised when a block is malformed (missing ``{`` or never closed)."""

    def __init__(
        self, message: str, filename: str | None = None, token: str | None = None
    ):
        self.filename = filename
        self.token = token
        if filename:
            message = f"{filename}: {message}"
        super().__init__(message)


class ValidationError(AtomicCSSError):
    """Raised when an ``@layer utilities`` entry is not a class selector."""

    def __init__(self, selector: str, filename: str | None = None):
        self.selector = selector
        self.filename = filename
        message = (
            f'Invalid @layer utilities class: "{selector}". '
            'Class names should start with a "."'
        )
        if filename:
            message = f"{filename}: {message}"
        super().__init__(message)
