"""
Load failures. Each one aborts the whole load; row-level problems never
surface here (the normalizer drops those rows instead).
"""
from __future__ import annotations


class MenuLoadError(ValueError):
    """Base class for anything that aborts a menu load."""


class TransportError(MenuLoadError):
    """Source unreachable or answered with a non-success status."""


class FormatError(MenuLoadError):
    """The delimited-text parser rejected the input."""


class SchemaError(MenuLoadError):
    """Required header columns are missing."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing required columns: {', '.join(self.missing)}")


class UnsupportedFileError(MenuLoadError):
    """Upload rejected before parsing (not a CSV)."""
