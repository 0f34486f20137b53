from __future__ import annotations


class InvalidInput(ValueError):
    """Raised by `disassemble()` when no text is given."""


class InvalidUnitRecord(ValueError):
    """Raised when a persisted unit record cannot be decoded."""
