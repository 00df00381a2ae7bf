"""Export output planning and writing symbols."""

from .domain.output_files import OutputFiles
from .usecases import OutputWriter, PathPlanner

__all__ = ["OutputFiles", "OutputWriter", "PathPlanner"]
