from __future__ import annotations


class DocumentParseError(ValueError):
    """Raised when an input document cannot be treated as markup at all."""


class BlockParseError(ValueError):
    """Raised inside the field parsers when a single result block is unusable."""
