"""
Summary: Export classification feature domain, use case and adapter symbols.
Why: Provide a stable import surface for the application layer and tests.
"""

from .adapters import LocalTextSource
from .domain.classifier import Classifier
from .domain.models import (
    Category,
    ClassificationResult,
    ClassifiedLine,
    FloatLine,
    IntegerLine,
    TextLine,
)
from .usecases import FilterPipeline, TextSourcePort, split_lines

__all__ = [
    "Category",
    "ClassificationResult",
    "ClassifiedLine",
    "Classifier",
    "FilterPipeline",
    "FloatLine",
    "IntegerLine",
    "LocalTextSource",
    "TextLine",
    "TextSourcePort",
    "split_lines",
]
