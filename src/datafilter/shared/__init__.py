"""Cross-layer value types and errors."""

from .errors import ArgumentError, DataFilterError, DataIOError, FilesystemSetupError

__all__ = ["ArgumentError", "DataFilterError", "DataIOError", "FilesystemSetupError"]
