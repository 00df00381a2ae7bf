"""Concrete adapters for classification ports."""

from .local_text_source import LocalTextSource

__all__ = ["LocalTextSource"]
