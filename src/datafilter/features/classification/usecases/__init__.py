"""
Summary: Use cases that drive classification over input documents.
Why: Expose the pipeline and its ports from one import path.
"""

from .filter_pipeline import FilterPipeline, split_lines
from .ports import TextSourcePort

__all__ = ["FilterPipeline", "TextSourcePort", "split_lines"]
